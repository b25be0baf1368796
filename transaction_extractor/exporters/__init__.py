"""Exporters for extracted transactions."""
from .excel_exporter import export_transactions, transactions_to_dataframe

__all__ = ['export_transactions', 'transactions_to_dataframe']
