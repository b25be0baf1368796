"""Tests for transaction export."""
from datetime import date
from decimal import Decimal

import pandas as pd
import pytest

from transaction_extractor.exporters import export_transactions, transactions_to_dataframe
from transaction_extractor.models import TransactionDraft, TransactionType


@pytest.fixture
def transactions():
    return [
        TransactionDraft(
            date=date(2024, 1, 15),
            description="Grocery Store",
            amount=Decimal("85.50"),
            type=TransactionType.EXPENSE,
            line_number=2,
        ),
        TransactionDraft(
            date=date(2024, 1, 16),
            description="Monthly Salary",
            amount=Decimal("3200.00"),
            type=TransactionType.INCOME,
        ),
    ]


class TestTransactionsToDataframe:
    """Test DataFrame conversion."""

    def test_columns_and_order(self, transactions):
        df = transactions_to_dataframe(transactions)

        assert list(df.columns) == ['date', 'description', 'amount', 'type', 'category', 'source', 'line_number']
        assert list(df['description']) == ["Grocery Store", "Monthly Salary"]
        assert df['line_number'].iloc[0] == 2
        assert pd.isna(df['line_number'].iloc[1])

    def test_empty(self):
        assert transactions_to_dataframe([]).empty


class TestExportTransactions:
    """Test file export."""

    def test_csv(self, tmp_path, transactions):
        path = export_transactions(transactions, tmp_path / "out.csv")

        df = pd.read_csv(path)
        assert len(df) == 2
        assert df['amount'].tolist() == [85.5, 3200.0]
        assert df['type'].tolist() == ['expense', 'income']

    def test_xlsx(self, tmp_path, transactions):
        path = export_transactions(transactions, tmp_path / "out.xlsx")

        df = pd.read_excel(path, sheet_name='Transactions')
        assert df['description'].tolist() == ["Grocery Store", "Monthly Salary"]

    def test_unsupported_suffix(self, tmp_path, transactions):
        with pytest.raises(ValueError, match="Unsupported export format"):
            export_transactions(transactions, tmp_path / "out.json")
