"""Tests for the command-line interface."""
import json

import pytest
from click.testing import CliRunner

from transaction_extractor import categorizer
from transaction_extractor.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestHistoryCommand:
    """Test the history command."""

    def test_strict_statement(self, runner, write_text, strict_statement_text):
        path = write_text("history.txt", strict_statement_text)

        result = runner.invoke(cli, ['history', str(path)])

        assert result.exit_code == 0
        assert "3 transactions" in result.output
        assert "line_match" in result.output

    def test_json_output(self, runner, tmp_path, write_text, table_statement_text):
        path = write_text("history.txt", table_statement_text)
        json_path = tmp_path / "result.json"

        result = runner.invoke(cli, ['history', str(path), '--json', str(json_path)])

        assert result.exit_code == 0
        data = json.loads(json_path.read_text(encoding="utf-8"))
        assert data['totalFound'] == 3
        assert data['strategy'] == 'table'
        assert data['transactions'][0]['amount'] == 4.5

    def test_export_csv(self, runner, tmp_path, write_text, strict_statement_text):
        path = write_text("history.txt", strict_statement_text)
        output = tmp_path / "out.csv"

        result = runner.invoke(cli, ['history', str(path), '-o', str(output)])

        assert result.exit_code == 0
        assert output.exists()

    def test_no_transactions(self, runner, write_text):
        result = runner.invoke(cli, ['history', str(write_text("notes.txt", "hello world"))])

        assert result.exit_code == 1
        assert "No transactions found" in result.output

    def test_unsupported_format(self, runner, write_text):
        result = runner.invoke(cli, ['history', str(write_text("notes.md", "hello"))])

        assert result.exit_code == 1
        assert "Unsupported file type" in result.output


class TestReceiptCommand:
    """Test the receipt command."""

    def test_receipt(self, runner, write_text, receipt_text):
        result = runner.invoke(cli, ['receipt', str(write_text("receipt.txt", receipt_text))])

        assert result.exit_code == 0
        assert "Joe's Pizza Restaurant" in result.output
        assert "trusted for auto-fill" in result.output

    def test_json_output(self, runner, tmp_path, write_text, receipt_text):
        json_path = tmp_path / "receipt.json"

        result = runner.invoke(
            cli, ['receipt', str(write_text("receipt.txt", receipt_text)), '--json', str(json_path)]
        )

        assert result.exit_code == 0
        data = json.loads(json_path.read_text(encoding="utf-8"))
        assert data['total'] == 19.75
        assert data['date'] == '2024-03-14'


class TestCategorizeCommand:
    """Test the categorize command."""

    def test_categorize(self, runner):
        result = runner.invoke(cli, ['categorize', 'Pizza night', 'random text'])

        assert result.exit_code == 0
        assert "Food & Dining" in result.output
        assert "Other" in result.output

    def test_requires_description(self, runner):
        result = runner.invoke(cli, ['categorize'])

        assert result.exit_code != 0


class TestStartup:
    """Test configuration is checked before any command runs."""

    def test_broken_rules_file(self, runner, monkeypatch, write_text, strict_statement_text):
        rules = write_text("rules.yaml", "categories: [unclosed")
        monkeypatch.setattr(categorizer, "CATEGORY_RULES_FILE", str(rules))
        monkeypatch.setattr(categorizer, "_classifier", None)

        result = runner.invoke(cli, ['history', str(write_text("history.txt", strict_statement_text))])

        assert result.exit_code == 1
        assert "Configuration error" in result.output
