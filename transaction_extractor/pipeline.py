"""
Extraction pipeline.

Coordinates reading a document (PDF text layer, OCR or plain text) and
running the matching parser. Parsers never raise for bad data; errors that
reach the caller are upstream failures (SourceUnavailableError,
UnsupportedFormatError) or, for bulk imports, NoTransactionsFoundError.
"""
import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from .categorizer import get_classifier
from .config.settings import HISTORY_SUFFIXES, RECEIPT_SUFFIXES
from .extractors import (
    BaseExtractor,
    ExtractionError,
    NoTransactionsFoundError,
    get_extractor,
)
from .models import ReceiptExtraction, StatementParseResult
from .parsers import extract_receipt, parse_transaction_history
from .utils import log_extraction_audit

logger = logging.getLogger(__name__)

ExtractorFactory = Callable[[Path, Iterable[str]], BaseExtractor]


class ExtractionPipeline:
    """
    Main pipeline for document-to-transaction extraction.

    Phases:
    1. Extract - Get text from the document
    2. Transform - Parse statement lines or receipt fields
    """

    def __init__(self, extractor_factory: Optional[ExtractorFactory] = None):
        """
        Initialize pipeline.

        Args:
            extractor_factory: Callable returning an extractor for a path and
                its allowed suffixes (defaults to get_extractor)

        Raises:
            ConfigurationError: If the category rules file cannot be loaded
        """
        self.extractor_factory = extractor_factory or get_extractor
        self.classifier = get_classifier()

    def parse_transaction_history(self, file_path: Path) -> StatementParseResult:
        """
        Parse a transaction history document (PDF or text).

        An empty result is a valid outcome here; see import_transaction_history
        for the all-or-nothing variant.

        Raises:
            SourceUnavailableError: If the document text cannot be obtained
            UnsupportedFormatError: If the file type is not accepted
        """
        file_path = Path(file_path)
        text = self._read_text(file_path, HISTORY_SUFFIXES, "history")

        result = parse_transaction_history(text)

        logger.info(
            f"{file_path.name}: {result.total_found} transactions "
            f"via {result.strategy} (confidence {result.confidence:.2f})"
        )
        log_extraction_audit(
            file_path,
            "history",
            success=not result.is_empty,
            strategy=result.strategy,
            transaction_count=result.total_found,
            confidence=result.confidence
        )
        return result

    def import_transaction_history(self, file_path: Path) -> StatementParseResult:
        """
        Parse a history document for bulk import.

        Raises:
            NoTransactionsFoundError: If the document yields no transactions
        """
        result = self.parse_transaction_history(file_path)
        if result.is_empty:
            raise NoTransactionsFoundError(
                f"No transactions found in document: {Path(file_path).name}"
            )
        return result

    def parse_receipt(self, file_path: Path) -> ReceiptExtraction:
        """
        Extract fields from a receipt (image, PDF or text).

        Raises:
            SourceUnavailableError: If the document text cannot be obtained
            UnsupportedFormatError: If the file type is not accepted
        """
        file_path = Path(file_path)
        text = self._read_text(file_path, RECEIPT_SUFFIXES, "receipt")

        extraction = extract_receipt(text)

        logger.info(
            f"{file_path.name}: merchant={extraction.merchant!r}, "
            f"total={extraction.total}, confidence {extraction.confidence:.2f}"
        )
        log_extraction_audit(
            file_path,
            "receipt",
            success=True,
            transaction_count=1,
            confidence=extraction.confidence
        )
        return extraction

    def _read_text(self, file_path: Path, allowed_suffixes: Iterable[str], kind: str) -> str:
        """Obtain document text, auditing upstream failures before re-raising."""
        try:
            extractor = self.extractor_factory(file_path, allowed_suffixes)
            logger.debug(f"Using {extractor.name} for {file_path.name}")
            return extractor.extract(file_path)
        except ExtractionError as e:
            log_extraction_audit(file_path, kind, success=False, error=str(e))
            raise
