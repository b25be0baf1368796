"""Transaction history parsing.

Two strategies, composed by parse_transaction_history():

1. match_lines(): a strict single pattern applied to every line. The
   fields are glued together with no separator:

       15-01-2024Grocery Store85.50expense

2. parse_table(): header-driven column parsing, used only when not a
   single line matched the strict pattern. Its result is returned as-is.

The strict pattern tolerates no delimiters between fields. Documents that
put commas, tabs or spaces between date, description and amount always go
to the table parser.
"""

import logging
import re
from decimal import Decimal
from typing import List, Optional, Sequence

from ..categorizer import classify
from ..models import (
    ParseStrategy,
    StatementParseResult,
    TransactionDraft,
    TransactionSource,
    TransactionType,
)
from ..utils import build_date, tokenize_lines
from ..validators import score_statement
from .table_parser import parse_table

logger = logging.getLogger(__name__)

# DD-MM-YYYY, description (letters/spaces, non-greedy), signed number, type.
# Digits are ASCII only; other scripts' numerals never form a record.
STATEMENT_LINE_PATTERN = re.compile(
    r'([0-9]{2})-([0-9]{2})-([0-9]{4})([A-Za-z\s]+?)(-?[0-9]+(?:\.[0-9]+)?)(income|expense)'
)


def parse_transaction_history(text: Optional[str]) -> StatementParseResult:
    """
    Parse a transaction history document.

    Args:
        text: Raw text from the PDF text layer or OCR

    Returns:
        StatementParseResult from the strict matcher, or from the table
        parser when nothing matched
    """
    return match_lines(tokenize_lines(text))


def match_lines(lines: Sequence[str]) -> StatementParseResult:
    """
    Apply the strict statement pattern to every line.

    Falls back to parse_table() with the same lines when no line matches.

    Args:
        lines: Tokenized document lines

    Returns:
        StatementParseResult with strategy "line_match", or the table result
    """
    transactions: List[TransactionDraft] = []

    for line_number, line in enumerate(lines, start=1):
        transaction = _match_line(line, line_number)
        if transaction is not None:
            transactions.append(transaction)

    if not transactions:
        logger.debug("No strict statement lines matched, trying table layout")
        return parse_table(lines)

    logger.debug(f"Matched {len(transactions)}/{len(lines)} statement lines")

    return StatementParseResult(
        transactions=transactions,
        confidence=score_statement(transactions, len(lines)),
        strategy=ParseStrategy.LINE_MATCH,
    )


def _match_line(line: str, line_number: int) -> Optional[TransactionDraft]:
    """Build a draft from one line; None when the line does not match."""
    match = STATEMENT_LINE_PATTERN.fullmatch(line)
    if not match:
        return None

    day, month, year, raw_description, amount_text, type_text = match.groups()

    date = build_date(year, month, day)
    if date is None:
        return None

    description = raw_description.strip()
    return TransactionDraft(
        date=date,
        description=description,
        amount=abs(Decimal(amount_text)),
        type=TransactionType(type_text),
        category=classify(description),
        source=TransactionSource.PDF_IMPORT,
        line_number=line_number,
    )
