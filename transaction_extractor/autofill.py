"""Fill a user-entered transaction from its receipt.

Receipt fields only override what the user typed when the extraction is
trusted (confidence strictly above the threshold):

- merchant -> description, if the user left the description empty
- total -> amount, if it is within 1 unit of the user's amount
- date -> date, if the user gave no date and the receipt had one
"""
import logging
from dataclasses import replace
from decimal import Decimal
from typing import Optional

from .config.settings import RECEIPT_TRUST_THRESHOLD
from .models import ReceiptExtraction, TransactionDraft

logger = logging.getLogger(__name__)

AMOUNT_MATCH_TOLERANCE = Decimal("1")


def apply_receipt_autofill(
    draft: TransactionDraft,
    extraction: Optional[ReceiptExtraction],
    *,
    description_provided: bool,
    date_provided: bool,
    threshold: float = RECEIPT_TRUST_THRESHOLD
) -> TransactionDraft:
    """
    Return a copy of draft with trusted receipt fields applied.

    Args:
        draft: Transaction as entered by the user
        extraction: Receipt extraction (None when the receipt could not be read)
        description_provided: Whether the user typed a description
        date_provided: Whether the user picked a date
        threshold: Confidence the extraction must exceed

    Returns:
        Updated draft, or draft unchanged when the receipt is not trusted
    """
    if extraction is None or not extraction.is_trusted(threshold):
        return draft

    changes = {}

    if not description_provided and extraction.merchant_detected:
        changes['description'] = extraction.merchant

    if extraction.total > 0 and abs(extraction.total - draft.amount) < AMOUNT_MATCH_TOLERANCE:
        changes['amount'] = extraction.total

    if extraction.date_detected and not date_provided:
        changes['date'] = extraction.date

    if changes:
        logger.debug(f"Receipt auto-fill applied: {sorted(changes)}")

    return replace(draft, **changes)
