"""Text sources for different document types."""
from pathlib import Path
from typing import Iterable

from .base_extractor import (
    BaseExtractor,
    ExtractionError,
    NoTransactionsFoundError,
    SourceUnavailableError,
    UnsupportedFormatError,
)
from .text_extractor import PlainTextExtractor
from .pdf_extractor import PDFExtractor
from .ocr_extractor import OCRExtractor

EXTRACTOR_CLASSES = (PlainTextExtractor, PDFExtractor, OCRExtractor)


def get_extractor(file_path: Path, allowed_suffixes: Iterable[str]) -> BaseExtractor:
    """
    Pick the extractor for a file.

    Args:
        file_path: Path to the document
        allowed_suffixes: Suffixes accepted for this kind of document

    Returns:
        Extractor instance

    Raises:
        UnsupportedFormatError: If the suffix is not allowed or not handled
    """
    suffix = Path(file_path).suffix.lower()
    allowed = {s.lower() for s in allowed_suffixes}

    if suffix in allowed:
        for extractor_class in EXTRACTOR_CLASSES:
            if suffix in extractor_class.suffixes:
                return extractor_class()

    supported = ', '.join(sorted(allowed))
    raise UnsupportedFormatError(
        f"Unsupported file type '{suffix or Path(file_path).name}'. Supported: {supported}"
    )


__all__ = [
    'BaseExtractor',
    'ExtractionError',
    'NoTransactionsFoundError',
    'SourceUnavailableError',
    'UnsupportedFormatError',
    'PlainTextExtractor',
    'PDFExtractor',
    'OCRExtractor',
    'get_extractor',
]
