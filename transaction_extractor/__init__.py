"""Extract transactions from statement text and receipt OCR output."""
from .categorizer import classify, CategoryClassifier
from .autofill import apply_receipt_autofill
from .models import (
    TransactionDraft,
    TransactionType,
    ReceiptExtraction,
    ReceiptItem,
    StatementParseResult,
)
from .parsers import parse_transaction_history, match_lines, parse_table, extract_receipt

__version__ = "0.1.0"

__all__ = [
    'classify',
    'CategoryClassifier',
    'apply_receipt_autofill',
    'TransactionDraft',
    'TransactionType',
    'ReceiptExtraction',
    'ReceiptItem',
    'StatementParseResult',
    'parse_transaction_history',
    'match_lines',
    'parse_table',
    'extract_receipt',
]
