"""Data models for transaction extraction."""
from .transaction import TransactionDraft, TransactionType, TransactionSource, DEFAULT_CATEGORY
from .receipt import ReceiptExtraction, ReceiptItem, UNKNOWN_MERCHANT
from .extraction_result import StatementParseResult, ParseStrategy

__all__ = [
    'TransactionDraft',
    'TransactionType',
    'TransactionSource',
    'DEFAULT_CATEGORY',
    'ReceiptExtraction',
    'ReceiptItem',
    'UNKNOWN_MERCHANT',
    'StatementParseResult',
    'ParseStrategy',
]
