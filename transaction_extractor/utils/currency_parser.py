"""Parse and format currency amounts."""
import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..config.settings import CURRENCY_SYMBOLS, DEFAULT_CURRENCY

# Everything that is not part of a signed decimal number
_NON_NUMERIC = re.compile(r'[^0-9.\-+]')

# Longest leading signed decimal: "12", "-4.50", "+3.", ".75"
_LEADING_NUMBER = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)')


def parse_amount(amount_string: Optional[str]) -> Optional[Decimal]:
    """
    Parse a signed amount from a table cell.

    Currency symbols, thousands separators, letters and spaces are discarded;
    the longest leading signed decimal of what remains is the amount.

    Handles:
    - -4.50
    - $1,234.56 -> 1234.56
    - USD -12.00 -> -12.00
    - 4.50- -> 4.50 (trailing sign is ignored)

    Args:
        amount_string: Raw column text

    Returns:
        Decimal amount (sign preserved) or None if no number is present
    """
    if not amount_string or not isinstance(amount_string, str):
        return None

    cleaned = _NON_NUMERIC.sub('', amount_string)
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return None

    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return None


def format_currency(amount: Union[Decimal, float], currency: str = DEFAULT_CURRENCY) -> str:
    """
    Format amount as currency string.

    Args:
        amount: Numeric amount
        currency: Currency code (GBP, USD, EUR)

    Returns:
        Formatted currency string
    """
    symbol = CURRENCY_SYMBOLS.get(currency, "$")

    # Format with thousands separator and 2 decimal places
    formatted = f"{abs(amount):,.2f}"

    if amount < 0:
        return f"-{symbol}{formatted}"
    else:
        return f"{symbol}{formatted}"
