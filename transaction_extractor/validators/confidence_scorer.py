"""
Confidence scoring for extraction results.

Each strategy family has its own heuristic. Scores are in [0, 1] and tell
callers how far an extraction can be trusted (e.g. to auto-fill fields).
"""
from typing import Sequence

from ..models import TransactionDraft

# Statement strategy
MATCH_RATIO_WEIGHT = 2.0
QUALITY_BONUS = 0.1
MIN_DESCRIPTION_LENGTH = 3

# Tabular fallback
TABLE_HEADER_FOUND_CONFIDENCE = 0.8
TABLE_NO_HEADER_CONFIDENCE = 0.3

# Receipt strategy, in tenths so the sums stay exact
RECEIPT_BASE_TENTHS = 5
RECEIPT_MERCHANT_TENTHS = 2
RECEIPT_TOTAL_TENTHS = 2
RECEIPT_DATE_TENTHS = 1
RECEIPT_ITEMS_TENTHS = 1


def score_statement(transactions: Sequence[TransactionDraft], total_lines: int) -> float:
    """
    Score the strict line matcher's output.

    The share of lines that matched (doubled, capped at 1.0) plus 0.1 for each
    data-quality check passed by every record:
    - every record has a date
    - every amount is greater than zero
    - every description is longer than 3 characters

    Args:
        transactions: Matched records
        total_lines: Number of tokenized lines in the document

    Returns:
        Confidence between 0.0 and 1.0
    """
    if not transactions or total_lines <= 0:
        return 0.0

    confidence = min((len(transactions) / total_lines) * MATCH_RATIO_WEIGHT, 1.0)

    if all(t.date is not None for t in transactions):
        confidence += QUALITY_BONUS
    if all(t.amount > 0 for t in transactions):
        confidence += QUALITY_BONUS
    if all(len(t.description) > MIN_DESCRIPTION_LENGTH for t in transactions):
        confidence += QUALITY_BONUS

    return min(confidence, 1.0)


def score_table(header_found: bool) -> float:
    """Fixed score for the tabular fallback; rows are not validated individually."""
    return TABLE_HEADER_FOUND_CONFIDENCE if header_found else TABLE_NO_HEADER_CONFIDENCE


def score_receipt(
    merchant_detected: bool,
    total_detected: bool,
    date_detected: bool,
    has_items: bool
) -> float:
    """
    Score a receipt extraction.

    Base 0.5, +0.2 merchant, +0.2 total, +0.1 date, +0.1 items, capped at 1.0.
    """
    tenths = RECEIPT_BASE_TENTHS
    if merchant_detected:
        tenths += RECEIPT_MERCHANT_TENTHS
    if total_detected:
        tenths += RECEIPT_TOTAL_TENTHS
    if date_detected:
        tenths += RECEIPT_DATE_TENTHS
    if has_items:
        tenths += RECEIPT_ITEMS_TENTHS

    return min(tenths, 10) / 10
