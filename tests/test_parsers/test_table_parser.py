"""Tests for the tabular fallback parser."""
from datetime import date
from decimal import Decimal

import pytest

from transaction_extractor.models import ParseStrategy, TransactionType
from transaction_extractor.parsers import parse_table
from transaction_extractor.utils import tokenize_lines


class TestHeaderDetection:
    """Test header search and confidence."""

    def test_coffee_row(self):
        """Test the canonical header + expense row."""
        result = parse_table([
            "Date    Description    Amount",
            "01/02/2024    Coffee    -4.50",
        ])

        assert result.total_found == 1
        txn = result.transactions[0]
        assert txn.amount == Decimal("4.50")
        assert txn.type == TransactionType.EXPENSE
        assert txn.description == "Coffee"
        assert txn.source == "pdf_import"
        assert txn.line_number is None
        assert result.confidence == pytest.approx(0.8)
        assert result.strategy == ParseStrategy.TABLE
        assert result.header_found is True

    def test_no_header(self):
        """Test documents without a header get 0.3 and no rows."""
        result = parse_table(["01/02/2024    Coffee    -4.50"])

        assert result.transactions == []
        assert result.confidence == pytest.approx(0.3)
        assert result.header_found is False

    def test_header_outside_scan_window(self):
        """Test a header on line 11 is not found."""
        lines = [f"Preamble line {i}" for i in range(10)] + [
            "Date    Description    Amount",
            "01/02/2024    Coffee    -4.50",
        ]
        result = parse_table(lines)

        assert result.transactions == []
        assert result.confidence == pytest.approx(0.3)

    def test_header_on_tenth_line(self):
        """Test the last line of the scan window still counts."""
        lines = [f"Preamble line {i}" for i in range(9)] + [
            "Date    Description    Amount",
            "01/02/2024    Coffee    -4.50",
        ]

        assert parse_table(lines).total_found == 1

    def test_header_found_but_no_rows(self):
        """Test the header bonus applies even when every row fails."""
        result = parse_table([
            "Date    Description    Amount",
            "Pending    Coffee    -4.50",
            "01/05/2024    Tea    n/a",
        ])

        assert result.transactions == []
        assert result.confidence == pytest.approx(0.8)
        assert result.header_found is True

    def test_header_match_is_case_insensitive(self):
        """Test upper-case headers."""
        result = parse_table([
            "DATE\tDESCRIPTION\tAMOUNT",
            "01/02/2024\tCOFFEE\t-4.50",
        ])

        assert result.total_found == 1


class TestRows:
    """Test row parsing."""

    def test_multi_row_table(self, table_statement_text):
        """Test a realistic table with income and expenses."""
        result = parse_table(tokenize_lines(table_statement_text))

        assert [t.description for t in result.transactions] == [
            "Coffee", "Payroll ACME Corp", "Uber Trip"
        ]
        assert [t.type for t in result.transactions] == [
            TransactionType.EXPENSE, TransactionType.INCOME, TransactionType.EXPENSE
        ]
        assert [t.category for t in result.transactions] == [
            "Other", "Income", "Transportation"
        ]
        assert result.transactions[1].amount == Decimal("2500.00")

    def test_dates_are_month_first(self):
        """Test ambiguous numeric dates read as MM/DD/YYYY."""
        result = parse_table([
            "Date    Description    Amount",
            "01/02/2024    Coffee    -4.50",
        ])

        assert result.transactions[0].date == date(2024, 1, 2)

    def test_partial_date_cell_is_stable(self):
        """Test a date without a year never takes the current year."""
        lines = [
            "Date    Description    Amount",
            "01/02    Coffee    -4.50",
        ]

        first = parse_table(lines)
        second = parse_table(lines)

        assert first.transactions[0].date == date(2001, 1, 2)
        assert first == second

    def test_iso_dates(self):
        """Test ISO dates in the date column."""
        result = parse_table([
            "Date    Description    Amount",
            "2024-03-15    Coffee    -4.50",
        ])

        assert result.transactions[0].date == date(2024, 3, 15)

    def test_currency_symbols_and_separators_stripped(self):
        """Test amount cleanup before parsing."""
        result = parse_table([
            "Date    Description    Amount",
            "03/01/2024    Rent Refund    $1,234.56",
        ])

        txn = result.transactions[0]
        assert txn.amount == Decimal("1234.56")
        assert txn.type == TransactionType.INCOME
        assert txn.category == "Income"

    def test_short_rows_skipped(self):
        """Test rows with fewer than three columns are ignored."""
        result = parse_table([
            "Date    Description    Amount",
            "01/06/2024    -3.00",
            "01/07/2024    Lunch    -9.00",
        ])

        assert [t.description for t in result.transactions] == ["Lunch"]

    def test_memo_column_and_total_column(self):
        """Test alternative column names."""
        result = parse_table([
            "Date    Memo    Amount    Total",
            "02/10/2024    Netflix    0.00    -15.99",
        ])

        txn = result.transactions[0]
        assert txn.description == "Netflix"
        assert txn.amount == Decimal("15.99")
        assert txn.category == "Entertainment"

    def test_columns_reordered(self):
        """Test columns are read by header position, not by convention."""
        result = parse_table([
            "Amount    Description    Date",
            "-60.00    Electric Company    02/11/2024",
        ])

        txn = result.transactions[0]
        assert txn.date == date(2024, 2, 11)
        assert txn.amount == Decimal("60.00")
        assert txn.category == "Bills & Utilities"

    def test_description_defaults_to_second_column(self):
        """Test a header without a description column."""
        result = parse_table([
            "Posted Date    Payee    Amount",
            "02/12/2024    City Parking    -7.00",
        ])

        assert result.transactions[0].description == "City Parking"

    def test_last_matching_header_column_wins(self):
        """Test repeated roles resolve to the right-most column."""
        result = parse_table([
            "Transaction Date    Value Date    Description    Amount",
            "02/01/2024    02/03/2024    Coffee    -4.50",
        ])

        assert result.transactions[0].date == date(2024, 2, 3)

    def test_only_first_header_used(self):
        """Test a repeated header later in the document is just an unparseable row."""
        result = parse_table([
            "Date    Description    Amount",
            "01/02/2024    Coffee    -4.50",
            "Date    Description    Amount",
            "01/03/2024    Tea    -3.00",
        ])

        assert [t.description for t in result.transactions] == ["Coffee", "Tea"]

    def test_zero_amount_is_income(self):
        """Test non-negative amounts are income."""
        result = parse_table([
            "Date    Description    Amount",
            "01/02/2024    Adjustment    0.00",
        ])

        assert result.transactions[0].type == TransactionType.INCOME
        assert result.transactions[0].amount == Decimal("0")
