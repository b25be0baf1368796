"""Extraction quality scoring."""
from .confidence_scorer import score_statement, score_table, score_receipt

__all__ = ['score_statement', 'score_table', 'score_receipt']
