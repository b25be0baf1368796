"""Image text extraction using Tesseract OCR."""
import logging
from pathlib import Path

try:
    import pytesseract
    from PIL import Image
except ImportError:
    pytesseract = None
    Image = None

from ..config.settings import IMAGE_SUFFIXES, OCR_LANGUAGE, TESSERACT_PATH
from .base_extractor import BaseExtractor, SourceUnavailableError

logger = logging.getLogger(__name__)


class OCRExtractor(BaseExtractor):
    """
    Extract text from receipt photos and scans with pytesseract.

    Requires the tesseract binary; set TESSERACT_PATH when it is not on PATH.
    """

    suffixes = frozenset(IMAGE_SUFFIXES)

    def __init__(self, language: str = OCR_LANGUAGE, tesseract_cmd: str = TESSERACT_PATH, **kwargs):
        """
        Initialize OCR extractor.

        Args:
            language: Tesseract language code
            tesseract_cmd: Path to the tesseract binary (empty to use PATH)
        """
        super().__init__(**kwargs)
        if pytesseract is None:
            raise ImportError(
                "pytesseract and Pillow are required for OCR. "
                "Install them with: pip install pytesseract Pillow"
            )

        self.language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def extract(self, file_path: Path) -> str:
        """
        Run OCR over an image.

        Args:
            file_path: Path to image file

        Returns:
            Recognized text

        Raises:
            SourceUnavailableError: If the image cannot be opened or OCR fails
        """
        file_path = Path(file_path)
        self.validate_file(file_path)

        try:
            logger.info(f"Running OCR on image: {file_path.name}")

            with Image.open(file_path) as image:
                text = pytesseract.image_to_string(image.convert("RGB"), lang=self.language)

            logger.info(f"OCR recognized {len(text)} characters")
            return text

        except Exception as e:
            logger.error(f"OCR failed for {file_path.name}: {e}")
            raise SourceUnavailableError(f"OCR extraction failed: {e}") from e
