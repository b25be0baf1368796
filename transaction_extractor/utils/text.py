"""Line tokenization for raw OCR / PDF text."""
from typing import List, Optional


def tokenize_lines(text: Optional[str]) -> List[str]:
    """
    Split raw text into trimmed, non-empty lines.

    Order is preserved; the position of a line in the returned list is what
    parsers report as its line number.

    Args:
        text: Raw text from the OCR engine or PDF text layer

    Returns:
        List of stripped lines with blank lines removed
    """
    if not text:
        return []

    return [line.strip() for line in text.splitlines() if line.strip()]
