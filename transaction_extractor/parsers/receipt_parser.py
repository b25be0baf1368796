"""Receipt field extraction from OCR text.

Pulls merchant, total, date and line items out of a single receipt. Each
field has its own heuristic and its own default, so extraction never fails;
missing fields only lower the confidence score.
"""

import logging
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple

from ..categorizer import classify
from ..models import DEFAULT_CATEGORY, ReceiptExtraction, ReceiptItem, UNKNOWN_MERCHANT
from ..utils import build_date, tokenize_lines
from ..validators import score_receipt

logger = logging.getLogger(__name__)

MERCHANT_SCAN_LINES = 3
MIN_MERCHANT_LENGTH = 3
MIN_ITEM_NAME_LENGTH = 2

PRICE_PATTERN = re.compile(r'\$?[0-9]+\.?[0-9]*')
DATE_LIKE_PATTERN = re.compile(r'[0-9]{1,2}[/-][0-9]{1,2}[/-][0-9]{2,4}')

# Tried in order; the first one yielding a positive amount wins
LABELLED_TOTAL_PATTERNS = [
    re.compile(r'total[:\s]*\$?([0-9]+\.?[0-9]*)', re.IGNORECASE),
    re.compile(r'amount[:\s]*\$?([0-9]+\.?[0-9]*)', re.IGNORECASE),
]
DOLLAR_AMOUNT_PATTERN = re.compile(r'\$([0-9]+\.[0-9]{2})')

# (pattern, order of the year/month/day groups)
DATE_PATTERNS: List[Tuple[re.Pattern, Tuple[str, str, str]]] = [
    (re.compile(r'([0-9]{1,2})/([0-9]{1,2})/([0-9]{2,4})'), ('month', 'day', 'year')),
    (re.compile(r'([0-9]{1,2})-([0-9]{1,2})-([0-9]{2,4})'), ('month', 'day', 'year')),
    (re.compile(r'([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})'), ('year', 'month', 'day')),
]

ITEM_PATTERN = re.compile(r'(.+?)\s+\$?([0-9]+\.?[0-9]*)')


def extract_receipt(text: Optional[str]) -> ReceiptExtraction:
    """
    Extract structured fields from one receipt's text.

    Args:
        text: Raw OCR / PDF text of the receipt

    Returns:
        ReceiptExtraction; raw_text is the input, unmodified
    """
    raw_text = text or ""
    lines = tokenize_lines(raw_text)

    merchant = extract_merchant(lines)
    total = extract_total(raw_text)
    receipt_date = extract_date(raw_text)
    items = extract_items(lines)

    merchant_detected = merchant is not None
    confidence = score_receipt(
        merchant_detected=merchant_detected,
        total_detected=total > 0,
        date_detected=receipt_date is not None,
        has_items=bool(items),
    )

    logger.debug(
        f"Receipt: merchant={merchant!r}, total={total}, date={receipt_date}, "
        f"items={len(items)}, confidence={confidence:.2f}"
    )

    return ReceiptExtraction(
        merchant=merchant if merchant_detected else UNKNOWN_MERCHANT,
        total=total,
        date=receipt_date if receipt_date is not None else date.today(),
        items=items,
        confidence=confidence,
        raw_text=raw_text,
        date_detected=receipt_date is not None,
        category=classify(merchant) if merchant_detected else DEFAULT_CATEGORY,
    )


def extract_merchant(lines: List[str]) -> Optional[str]:
    """
    Find the merchant name among the first lines of the receipt.

    The first line longer than 3 characters that contains no number and no
    date wins. Any digit counts as a number, so "STORE #42" is rejected.
    """
    for line in lines[:MERCHANT_SCAN_LINES]:
        if len(line) <= MIN_MERCHANT_LENGTH:
            continue
        if PRICE_PATTERN.search(line) or DATE_LIKE_PATTERN.search(line):
            continue
        return line
    return None


def extract_total(text: str) -> Decimal:
    """
    Find the receipt total.

    Tries a "total" label, then an "amount" label, then the largest $xx.xx
    token anywhere in the text (the grand total is normally the largest
    figure). Returns 0 when nothing positive is found.
    """
    for pattern in LABELLED_TOTAL_PATTERNS:
        match = pattern.search(text)
        if match:
            value = _to_decimal(match.group(1))
            if value > 0:
                return value

    amounts = [_to_decimal(value) for value in DOLLAR_AMOUNT_PATTERN.findall(text)]
    if amounts and max(amounts) > 0:
        return max(amounts)

    return Decimal("0")


def extract_date(text: str) -> Optional[date]:
    """
    Find the purchase date.

    Tries MM/DD/YYYY, MM-DD-YYYY and YYYY-MM-DD in that order. Only the
    first occurrence of each shape is considered; the first one that is a
    real calendar date wins.
    """
    for pattern, order in DATE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        parts = dict(zip(order, match.groups()))
        parsed = build_date(parts['year'], parts['month'], parts['day'])
        if parsed is not None:
            return parsed
    return None


def extract_items(lines: List[str]) -> List[ReceiptItem]:
    """
    Collect "<name> <price>" lines as purchased items.

    Lines mentioning "total" are skipped. Quantity is not detected.
    """
    items: List[ReceiptItem] = []

    for line in lines:
        if 'total' in line.lower():
            continue

        match = ITEM_PATTERN.search(line)
        if not match:
            continue

        name = match.group(1).strip()
        price = _to_decimal(match.group(2))
        if len(name) > MIN_ITEM_NAME_LENGTH and price > 0:
            items.append(ReceiptItem(name=name, price=price))

    return items


def _to_decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        return Decimal("0")
