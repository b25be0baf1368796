"""PDF text extraction using pdfplumber."""
import logging
from pathlib import Path

try:
    import pdfplumber
except ImportError:
    pdfplumber = None

from ..config.settings import PDF_SUFFIXES
from .base_extractor import BaseExtractor, SourceUnavailableError

logger = logging.getLogger(__name__)


class PDFExtractor(BaseExtractor):
    """
    Extract the text layer of native PDF files using pdfplumber.

    Scanned PDFs without a text layer yield an empty string; they are not
    sent to OCR.
    """

    suffixes = frozenset(PDF_SUFFIXES)

    def __init__(self, **kwargs):
        """Initialize PDF extractor."""
        super().__init__(**kwargs)
        if pdfplumber is None:
            raise ImportError(
                "pdfplumber is required for PDF extraction. "
                "Install it with: pip install pdfplumber"
            )

    def extract(self, file_path: Path) -> str:
        """
        Extract text from PDF using pdfplumber.

        Args:
            file_path: Path to PDF file

        Returns:
            Text of all pages joined by newlines

        Raises:
            SourceUnavailableError: If the PDF cannot be read
        """
        file_path = Path(file_path)
        self.validate_file(file_path)

        try:
            logger.info(f"Extracting text from PDF: {file_path.name}")

            pages_text = []
            with pdfplumber.open(file_path) as pdf:
                total_pages = len(pdf.pages)
                for page_num, page in enumerate(pdf.pages, start=1):
                    text = page.extract_text()
                    if text and text.strip():
                        pages_text.append(text)
                        logger.debug(f"Extracted {len(text)} chars from page {page_num}")
                    else:
                        logger.warning(f"No text found on page {page_num}")

            extracted_text = "\n".join(pages_text)

            if not extracted_text.strip():
                logger.warning("No text extracted from PDF - likely scanned")

            logger.info(
                f"Extracted {len(extracted_text)} characters "
                f"from {len(pages_text)}/{total_pages} pages"
            )
            return extracted_text

        except Exception as e:
            logger.error(f"Failed to extract text from PDF: {e}")
            raise SourceUnavailableError(f"PDF extraction failed: {e}") from e
