"""Tests for audit logging."""
import logging
from pathlib import Path

from transaction_extractor.utils import log_extraction_audit
from transaction_extractor.utils.logger import AUDIT_LOGGER_NAME


class TestLogExtractionAudit:
    """Test the audit line format."""

    def test_history_success(self, caplog):
        caplog.set_level(logging.INFO, logger=AUDIT_LOGGER_NAME)

        log_extraction_audit(
            Path("/tmp/in/statement.pdf"),
            "history",
            success=True,
            strategy="line_match",
            transaction_count=3,
            confidence=0.8,
        )

        assert caplog.messages[-1] == (
            "AUDIT history statement.pdf ok strategy=line_match records=3 confidence=0.80"
        )

    def test_failure_carries_error(self, caplog):
        caplog.set_level(logging.INFO, logger=AUDIT_LOGGER_NAME)

        log_extraction_audit("scan.png", "receipt", success=False, error="OCR extraction failed")

        assert caplog.messages[-1] == (
            "AUDIT receipt scan.png failed strategy=- records=0 confidence=0.00 "
            "error='OCR extraction failed'"
        )

    def test_pipeline_writes_one_line_per_document(self, caplog, write_text, strict_statement_text):
        from transaction_extractor.pipeline import ExtractionPipeline

        caplog.set_level(logging.INFO, logger=AUDIT_LOGGER_NAME)

        ExtractionPipeline().parse_transaction_history(write_text("history.txt", strict_statement_text))

        audit = [r.getMessage() for r in caplog.records if r.name == AUDIT_LOGGER_NAME]
        assert audit == ["AUDIT history history.txt ok strategy=line_match records=3 confidence=1.00"]
