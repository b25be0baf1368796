"""Utility functions."""
from .logger import setup_logger, log_extraction_audit
from .text import tokenize_lines
from .currency_parser import parse_amount, format_currency
from .date_parser import parse_date, build_date, expand_year
from .column_detection import (
    split_columns,
    find_header_line,
    detect_column_indices,
    column_value
)

__all__ = [
    'setup_logger',
    'log_extraction_audit',
    'tokenize_lines',
    'parse_amount',
    'format_currency',
    'parse_date',
    'build_date',
    'expand_year',
    'split_columns',
    'find_header_line',
    'detect_column_indices',
    'column_value'
]
