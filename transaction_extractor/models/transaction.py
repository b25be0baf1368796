"""Transaction draft data model."""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(Enum):
    """Transaction type enumeration."""
    INCOME = "income"
    EXPENSE = "expense"


class TransactionSource:
    """Tags identifying which strategy produced a record."""
    PDF_IMPORT = "pdf_import"
    RECEIPT = "receipt"
    MANUAL = "manual"


DEFAULT_CATEGORY = "Other"


@dataclass(frozen=True)
class TransactionDraft:
    """
    Represents a single extracted transaction, ready for persistence.

    Attributes:
        date: Transaction date
        description: Trimmed free-text description (may be empty)
        amount: Magnitude of the transaction (sign is carried by type)
        type: Income or expense
        category: Category label (see categorizer)
        source: Tag of the strategy that produced the record
        line_number: 1-based origin line (strict line matcher only)
    """
    date: date
    description: str
    amount: Decimal
    type: TransactionType
    category: str = DEFAULT_CATEGORY
    source: str = TransactionSource.PDF_IMPORT
    line_number: Optional[int] = None

    def __post_init__(self):
        """Validate transaction data."""
        if self.amount < 0:
            raise ValueError("amount cannot be negative")
        if self.line_number is not None and self.line_number < 1:
            raise ValueError("line_number is 1-based")

    def to_dict(self) -> dict:
        """Convert transaction to dictionary."""
        result = {
            'date': self.date.isoformat(),
            'description': self.description,
            'amount': round(float(self.amount), 2),
            'type': self.type.value,
            'category': self.category,
            'source': self.source,
        }
        if self.line_number is not None:
            result['lineNumber'] = self.line_number
        return result
