"""Pytest configuration and fixtures."""
import pytest
from datetime import date
from decimal import Decimal

from transaction_extractor.models import TransactionDraft, TransactionType, TransactionSource


@pytest.fixture
def strict_statement_text():
    """History dump in the strict glued-together format."""
    return "\n".join([
        "Transaction History",
        "15-01-2024Grocery Store85.50expense",
        "16-01-2024Monthly Salary3200.00income",
        "",
        "17-01-2024Pizza Palace-23.75expense",
        "Page 1 of 1",
    ])


@pytest.fixture
def table_statement_text():
    """History dump laid out as a whitespace-aligned table."""
    return "\n".join([
        "ACME BANK - Account Activity",
        "Date          Description          Amount",
        "01/02/2024    Coffee               -4.50",
        "01/03/2024    Payroll ACME Corp    2500.00",
        "01/04/2024    Uber Trip            -18.20",
    ])


@pytest.fixture
def receipt_text():
    """Typical store receipt as returned by OCR."""
    return "\n".join([
        "Joe's Pizza Restaurant",
        "Main Street Plaza",
        "03/14/2024",
        "Margherita Pizza $14.50",
        "Garlic Knots $5.25",
        "",
        "Total: $19.75",
        "Thank you!",
    ])


@pytest.fixture
def sample_draft():
    """A user-entered expense draft."""
    return TransactionDraft(
        date=date(2024, 3, 1),
        description="",
        amount=Decimal("21.00"),
        type=TransactionType.EXPENSE,
        category="Food & Dining",
        source=TransactionSource.MANUAL,
    )


@pytest.fixture
def write_text(tmp_path):
    """Write text to a file in tmp_path and return its path."""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
