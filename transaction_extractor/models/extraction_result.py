"""Statement parse result model."""
from dataclasses import dataclass, field
from typing import List, Optional

from .transaction import TransactionDraft


class ParseStrategy:
    """Names of the statement parsing strategies."""
    LINE_MATCH = "line_match"
    TABLE = "table"


@dataclass(frozen=True)
class StatementParseResult:
    """
    Complete result of parsing one transaction history document.

    Attributes:
        transactions: Extracted drafts in document order
        confidence: Overall confidence score (0-1)
        strategy: Strategy that produced the result
        header_found: Whether a table header was located (table strategy only)
    """
    transactions: List[TransactionDraft] = field(default_factory=list)
    confidence: float = 0.0
    strategy: str = ParseStrategy.LINE_MATCH
    header_found: Optional[bool] = None

    def __post_init__(self):
        if self.confidence < 0 or self.confidence > 1:
            raise ValueError("confidence must be between 0 and 1")

    @property
    def total_found(self) -> int:
        """Get number of transactions."""
        return len(self.transactions)

    @property
    def is_empty(self) -> bool:
        return not self.transactions

    def to_dict(self) -> dict:
        """Convert parse result to dictionary."""
        return {
            'transactions': [t.to_dict() for t in self.transactions],
            'totalFound': self.total_found,
            'confidence': self.confidence,
            'strategy': self.strategy,
        }
