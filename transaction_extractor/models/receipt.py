"""Receipt extraction models."""
from dataclasses import dataclass, field
import datetime
from decimal import Decimal
from typing import List

from .transaction import (
    DEFAULT_CATEGORY,
    TransactionDraft,
    TransactionSource,
    TransactionType,
)

UNKNOWN_MERCHANT = "Unknown Merchant"


@dataclass(frozen=True)
class ReceiptItem:
    """A single purchased line item. Quantity is never detected, so it is always 1."""
    name: str
    price: Decimal
    quantity: int = 1

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'price': round(float(self.price), 2),
            'quantity': self.quantity,
        }


@dataclass(frozen=True)
class ReceiptExtraction:
    """
    Structured data pulled out of one receipt's text.

    Attributes:
        merchant: Merchant name, or UNKNOWN_MERCHANT if none was found
        total: Grand total (0 if undetected)
        date: Purchase date, or the extraction day if none was found
        items: Line items in document order
        confidence: Heuristic quality score (0-1)
        raw_text: Input text, unmodified
        date_detected: Whether date came from the text
        category: Merchant category label
    """
    merchant: str = UNKNOWN_MERCHANT
    total: Decimal = Decimal("0")
    date: datetime.date = field(default_factory=datetime.date.today)
    items: List[ReceiptItem] = field(default_factory=list)
    confidence: float = 0.0
    raw_text: str = ""
    date_detected: bool = False
    category: str = DEFAULT_CATEGORY

    def __post_init__(self):
        if self.total < 0:
            raise ValueError("total cannot be negative")
        if self.confidence < 0 or self.confidence > 1:
            raise ValueError("confidence must be between 0 and 1")

    @property
    def merchant_detected(self) -> bool:
        return self.merchant != UNKNOWN_MERCHANT

    def is_trusted(self, threshold: float) -> bool:
        """Whether confidence is high enough to override user-entered values."""
        return self.confidence > threshold

    def to_transaction_draft(self) -> TransactionDraft:
        """Build an expense draft from this receipt."""
        return TransactionDraft(
            date=self.date,
            description=self.merchant if self.merchant_detected else "",
            amount=self.total,
            type=TransactionType.EXPENSE,
            category=self.category,
            source=TransactionSource.RECEIPT,
        )

    def to_dict(self) -> dict:
        return {
            'merchant': self.merchant,
            'total': round(float(self.total), 2),
            'date': self.date.isoformat(),
            'items': [item.to_dict() for item in self.items],
            'confidence': self.confidence,
            'rawText': self.raw_text,
            'dateDetected': self.date_detected,
            'category': self.category,
        }
