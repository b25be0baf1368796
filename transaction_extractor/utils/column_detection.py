"""Column splitting and header detection for plain-text tables.

Text-layer tables arrive as lines in which columns are separated by a tab
or by a run of two or more spaces. These helpers find the header row and
map column roles (date, description, amount) to positions.
"""

import re
from typing import Dict, List, Optional, Sequence, Tuple

# A tab, or two or more whitespace characters
COLUMN_SEPARATOR = re.compile(r'\s{2,}|\t')

# Role -> keywords that mark a header token as that column
DEFAULT_COLUMN_ROLES: Dict[str, Tuple[str, ...]] = {
    'date': ('date',),
    'description': ('description', 'memo'),
    'amount': ('amount', 'total'),
}


def split_columns(line: str) -> List[str]:
    """
    Split a table line into column tokens.

    Example:
        >>> split_columns("01/02/2024    Coffee    -4.50")
        ['01/02/2024', 'Coffee', '-4.50']
    """
    return COLUMN_SEPARATOR.split(line)


def find_header_line(
    lines: Sequence[str],
    required_words: Sequence[str] = ('date', 'amount'),
    max_lines: int = 10
) -> Optional[int]:
    """
    Find the first header row within the first max_lines lines.

    A header is a line whose lower-cased text contains every required word.

    Args:
        lines: Tokenized document lines
        required_words: Lower-case words that must all appear
        max_lines: Size of the scan window from the top of the document

    Returns:
        Index of the header line, or None if the window has no header
    """
    for index, line in enumerate(lines[:max_lines]):
        lowered = line.lower()
        if all(word in lowered for word in required_words):
            return index
    return None


def detect_column_indices(
    header_columns: Sequence[str],
    roles: Optional[Dict[str, Tuple[str, ...]]] = None
) -> Dict[str, Optional[int]]:
    """
    Map column roles to their index in a split header.

    A token may satisfy several roles. When several tokens satisfy the same
    role, the last one wins.

    Example:
        >>> detect_column_indices(['Date', 'Memo', 'Amount'])
        {'date': 0, 'description': 1, 'amount': 2}

    Returns:
        Dictionary of role -> index (None when no token matched the role)
    """
    roles = roles or DEFAULT_COLUMN_ROLES
    indices: Dict[str, Optional[int]] = {role: None for role in roles}

    for index, column in enumerate(header_columns):
        lowered = column.lower()
        for role, keywords in roles.items():
            if any(keyword in lowered for keyword in keywords):
                indices[role] = index

    return indices


def column_value(columns: Sequence[str], index: Optional[int]) -> Optional[str]:
    """
    Return the column at index, or None when the index is unset,
    out of range, or the cell is empty.
    """
    if index is None or index < 0 or index >= len(columns):
        return None
    return columns[index] or None
