"""Command-line interface for the transaction extractor."""
import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .categorizer import classify, get_classifier
from .config import ConfigurationError
from .config.settings import RECEIPT_TRUST_THRESHOLD
from .extractors import ExtractionError
from .utils import format_currency, setup_logger

console = Console()
logger = setup_logger()


def _write_json(payload: dict, json_path: str) -> None:
    Path(json_path).write_text(json.dumps(payload, indent=2), encoding='utf-8')
    console.print(f"[green]JSON result saved to {json_path}[/green]")


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """Transaction Extractor - turn statements and receipts into transactions."""
    try:
        get_classifier()
    except ConfigurationError as e:
        console.print(f"[red]✗ Configuration error: {escape(str(e))}[/red]")
        sys.exit(1)


@cli.command()
@click.argument('file_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Export transactions to .xlsx or .csv')
@click.option('--json', 'json_path', type=click.Path(dir_okay=False), help='Optional path to write result JSON')
def history(file_path, output, json_path):
    """
    Extract transactions from a transaction history document.

    FILE_PATH: Path to the statement (PDF or text)
    """
    from .pipeline import ExtractionPipeline

    file_path = Path(file_path)
    console.print(f"[cyan]Processing:[/cyan] {file_path.name}")

    try:
        result = ExtractionPipeline().parse_transaction_history(file_path)
    except ExtractionError as e:
        console.print(f"\n[red]✗ Error: {e}[/red]")
        sys.exit(1)

    if json_path:
        _write_json(result.to_dict(), json_path)

    if result.is_empty:
        console.print("\n[red]✗ No transactions found in document[/red]")
        console.print(f"  Confidence: {result.confidence:.2f}")
        sys.exit(1)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Line", justify="right")
    table.add_column("Date", style="cyan")
    table.add_column("Description")
    table.add_column("Amount", justify="right")
    table.add_column("Type")
    table.add_column("Category", style="green")

    for t in result.transactions:
        table.add_row(
            str(t.line_number) if t.line_number else "",
            t.date.isoformat(),
            t.description,
            format_currency(t.amount),
            t.type.value,
            t.category,
        )

    console.print(table)
    console.print(f"\n[green]✓ {result.total_found} transactions[/green] via {result.strategy}")
    console.print(f"  Confidence: {result.confidence:.2f}")

    if output:
        from .exporters import export_transactions

        try:
            export_transactions(result.transactions, Path(output))
        except ValueError as e:
            console.print(f"[red]✗ {e}[/red]")
            sys.exit(1)
        console.print(f"[green]Transactions exported to {output}[/green]")


@cli.command()
@click.argument('file_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--json', 'json_path', type=click.Path(dir_okay=False), help='Optional path to write result JSON')
def receipt(file_path, json_path):
    """
    Extract merchant, total, date and items from a receipt.

    FILE_PATH: Path to the receipt (image, PDF or text)
    """
    from .pipeline import ExtractionPipeline

    file_path = Path(file_path)
    console.print(f"[cyan]Processing:[/cyan] {file_path.name}")

    try:
        extraction = ExtractionPipeline().parse_receipt(file_path)
    except ExtractionError as e:
        console.print(f"\n[red]✗ Error: {e}[/red]")
        sys.exit(1)

    if json_path:
        _write_json(extraction.to_dict(), json_path)

    console.print(f"  Merchant: {extraction.merchant}")
    console.print(f"  Category: {extraction.category}")
    console.print(f"  Total: {format_currency(extraction.total)}")
    date_note = "" if extraction.date_detected else " (not found, using today)"
    console.print(f"  Date: {extraction.date.isoformat()}{date_note}")

    if extraction.items:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Item")
        table.add_column("Price", justify="right")
        table.add_column("Qty", justify="right")
        for item in extraction.items:
            table.add_row(item.name, format_currency(item.price), str(item.quantity))
        console.print(table)

    trusted = extraction.is_trusted(RECEIPT_TRUST_THRESHOLD)
    console.print(
        f"  Confidence: {extraction.confidence:.2f} "
        f"({'trusted for auto-fill' if trusted else 'review before use'})"
    )


@cli.command()
@click.argument('descriptions', nargs=-1, required=True)
def categorize(descriptions):
    """Show the category assigned to each DESCRIPTION."""
    for description in descriptions:
        console.print(f"{description} -> [green]{classify(description)}[/green]")


def main():
    """Main entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"\n[red]Error: {e}[/red]")
        logger.exception("Unhandled exception")
        sys.exit(1)


if __name__ == '__main__':
    main()
