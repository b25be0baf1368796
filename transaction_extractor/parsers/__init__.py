"""Transaction and receipt parsing modules."""
from .statement_parser import parse_transaction_history, match_lines, STATEMENT_LINE_PATTERN
from .table_parser import parse_table
from .receipt_parser import (
    extract_receipt,
    extract_merchant,
    extract_total,
    extract_date,
    extract_items,
)

__all__ = [
    'parse_transaction_history',
    'match_lines',
    'STATEMENT_LINE_PATTERN',
    'parse_table',
    'extract_receipt',
    'extract_merchant',
    'extract_total',
    'extract_date',
    'extract_items',
]
