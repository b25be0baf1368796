"""Logging configuration for the application."""
import logging
import sys
from pathlib import Path
from typing import Optional

from ..config.settings import AUDIT_LOG_FILE, LOG_FILE, LOG_LEVEL

AUDIT_LOGGER_NAME = "transaction_extractor.audit"


def _add_file_handler(logger: logging.Logger, path: Path, formatter: logging.Formatter) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding='utf-8')
    except OSError as e:
        logger.warning(f"Could not set up file logging at {path}: {e}")
        return

    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logger(name: str = "transaction_extractor") -> logging.Logger:
    """
    Set up the package logger.

    - stderr: INFO and above, short format (stdout is left to CLI output)
    - LOG_FILE: DEBUG and above, with source locations
    - AUDIT_LOG_FILE: one line per processed document, from the audit logger

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    _add_file_handler(
        logger,
        LOG_FILE,
        logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ),
    )

    audit_logger = logging.getLogger(AUDIT_LOGGER_NAME)
    if not audit_logger.handlers:
        _add_file_handler(
            audit_logger,
            AUDIT_LOG_FILE,
            logging.Formatter('%(asctime)s %(message)s', datefmt='%Y-%m-%dT%H:%M:%S'),
        )

    return logger


def log_extraction_audit(
    file_path: Path,
    document_kind: str,
    success: bool,
    strategy: Optional[str] = None,
    transaction_count: int = 0,
    confidence: float = 0.0,
    error: Optional[str] = None
) -> None:
    """
    Record the outcome of one document on the audit logger.

    The line always carries the same fields in the same order, so the audit
    file can be grepped or split on spaces:

        AUDIT history statement.pdf ok strategy=line_match records=3 confidence=0.80
        AUDIT receipt scan.png failed strategy=- records=0 confidence=0.00 error='OCR extraction failed: ...'

    Args:
        file_path: Path to processed file
        document_kind: "history" or "receipt"
        success: Whether records were extracted
        strategy: Statement strategy that produced the records ("-" when none)
        transaction_count: Number of records extracted
        confidence: Confidence score (0-1)
        error: Upstream failure message, if any
    """
    message = (
        f"AUDIT {document_kind} {Path(file_path).name} "
        f"{'ok' if success else 'failed'} "
        f"strategy={strategy or '-'} "
        f"records={transaction_count} "
        f"confidence={confidence:.2f}"
    )
    if error:
        message += f" error={error!r}"

    logging.getLogger(AUDIT_LOGGER_NAME).info(message)
