"""Date parsing for statement and receipt text."""
import re
from datetime import date, datetime
from typing import Optional, Union

from dateutil import parser as dateutil_parser

# Everything that cannot be part of a numeric date
_NON_DATE_CHARS = re.compile(r'[^0-9/\-]')

# Fills the fields a partial cell leaves out ("01/02" -> 2001-01-02)
PARTIAL_DATE_DEFAULT = datetime(2001, 1, 1)

# Two-digit years below this pivot belong to the 2000s
TWO_DIGIT_YEAR_PIVOT = 50


def parse_date(date_string: Optional[str]) -> Optional[date]:
    """
    Parse a numeric date from a table cell.

    Everything except digits, '/' and '-' is removed first, then the
    remainder goes through dateutil. Ambiguous dates are read month-first
    (01/02/2024 is 2 January 2024). Missing fields come from
    PARTIAL_DATE_DEFAULT, never from the current date.

    Args:
        date_string: Raw column text

    Returns:
        date object or None if parsing fails
    """
    if not date_string or not isinstance(date_string, str):
        return None

    cleaned = _NON_DATE_CHARS.sub('', date_string)
    if not cleaned:
        return None

    try:
        return dateutil_parser.parse(cleaned, dayfirst=False, default=PARTIAL_DATE_DEFAULT).date()
    except (ValueError, OverflowError):
        return None


def expand_year(year: Union[str, int]) -> int:
    """
    Expand a two-digit year.

    Example:
        >>> expand_year("24")
        2024
        >>> expand_year("87")
        1987
    """
    year_str = str(year)
    value = int(year_str)
    if len(year_str) <= 2:
        return 2000 + value if value < TWO_DIGIT_YEAR_PIVOT else 1900 + value
    return value


def build_date(
    year: Union[str, int],
    month: Union[str, int],
    day: Union[str, int]
) -> Optional[date]:
    """
    Build a calendar date from captured groups.

    Returns None for impossible dates (month 13, 31 February, year 0).
    """
    try:
        return date(expand_year(year), int(month), int(day))
    except ValueError:
        return None
