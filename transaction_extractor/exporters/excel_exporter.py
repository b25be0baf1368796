"""
Export extracted transactions to Excel or CSV.

One row per transaction, in document order.
"""
import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from ..models import TransactionDraft

logger = logging.getLogger(__name__)

COLUMNS = ['date', 'description', 'amount', 'type', 'category', 'source', 'line_number']


def transactions_to_dataframe(transactions: Sequence[TransactionDraft]) -> pd.DataFrame:
    """Convert transactions to a pandas DataFrame."""
    rows = [
        {
            'date': t.date,
            'description': t.description,
            'amount': float(t.amount),
            'type': t.type.value,
            'category': t.category,
            'source': t.source,
            'line_number': t.line_number,
        }
        for t in transactions
    ]
    df = pd.DataFrame(rows, columns=COLUMNS)
    df['line_number'] = df['line_number'].astype('Int64')
    return df


def export_transactions(transactions: Sequence[TransactionDraft], output_path: Path) -> Path:
    """
    Write transactions to .xlsx or .csv depending on the suffix.

    Args:
        transactions: Transactions to export
        output_path: Destination file

    Returns:
        Path to created file

    Raises:
        ValueError: If the suffix is neither .xlsx nor .csv
    """
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()
    df = transactions_to_dataframe(transactions)

    if suffix == '.xlsx':
        df.to_excel(output_path, index=False, sheet_name='Transactions', engine='openpyxl')
    elif suffix == '.csv':
        df.to_csv(output_path, index=False)
    else:
        raise ValueError(f"Unsupported export format: {suffix or output_path.name}")

    logger.info(f"Exported {len(df)} transactions to {output_path}")
    return output_path
