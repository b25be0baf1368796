"""Tabular fallback parser for transaction history text.

Used when no line of a document has the strict statement shape. Looks for
a header row near the top of the document, works out which columns hold the
date, description and amount, and reads every later row against those
positions:

    Date          Description        Amount
    01/02/2024    Coffee             -4.50
    01/03/2024    Payroll ACME       2500.00

Rows that do not parse are skipped without error. Confidence does not look
at the rows at all: 0.8 when a header was found, 0.3 otherwise.
"""

import logging
from typing import List, Optional, Sequence

from ..categorizer import classify
from ..models import (
    ParseStrategy,
    StatementParseResult,
    TransactionDraft,
    TransactionSource,
    TransactionType,
)
from ..utils import (
    column_value,
    detect_column_indices,
    find_header_line,
    parse_amount,
    parse_date,
    split_columns,
)
from ..validators import score_table

logger = logging.getLogger(__name__)

HEADER_SCAN_LINES = 10
MIN_ROW_COLUMNS = 3
UNKNOWN_DESCRIPTION = "Unknown"


def parse_table(lines: Sequence[str]) -> StatementParseResult:
    """
    Parse tokenized lines as a whitespace-aligned table.

    Args:
        lines: Tokenized document lines

    Returns:
        StatementParseResult with strategy "table"
    """
    header_index = find_header_line(lines, ('date', 'amount'), HEADER_SCAN_LINES)

    if header_index is None:
        logger.debug(f"No table header in first {HEADER_SCAN_LINES} lines")
        return StatementParseResult(
            transactions=[],
            confidence=score_table(header_found=False),
            strategy=ParseStrategy.TABLE,
            header_found=False,
        )

    columns = detect_column_indices(split_columns(lines[header_index]))
    logger.debug(f"Table header at line {header_index + 1}: {columns}")

    transactions: List[TransactionDraft] = []
    for line in lines[header_index + 1:]:
        transaction = _parse_row(split_columns(line), columns)
        if transaction is not None:
            transactions.append(transaction)

    logger.debug(f"Table parser extracted {len(transactions)} rows")

    return StatementParseResult(
        transactions=transactions,
        confidence=score_table(header_found=True),
        strategy=ParseStrategy.TABLE,
        header_found=True,
    )


def _parse_row(row: List[str], columns: dict) -> Optional[TransactionDraft]:
    """Parse one data row; None when the row is too short or unparseable."""
    if len(row) < MIN_ROW_COLUMNS:
        return None

    date_text = column_value(row, columns['date']) or row[0]
    amount_text = column_value(row, columns['amount']) or row[-1]
    description = (
        column_value(row, columns['description'])
        or column_value(row, 1)
        or UNKNOWN_DESCRIPTION
    )

    date = parse_date(date_text)
    amount = parse_amount(amount_text)
    if date is None or amount is None:
        return None

    description = description.strip()
    return TransactionDraft(
        date=date,
        description=description,
        amount=abs(amount),
        type=TransactionType.EXPENSE if amount < 0 else TransactionType.INCOME,
        category=classify(description),
        source=TransactionSource.PDF_IMPORT,
    )
