"""Base extractor abstract class and extraction errors."""
from abc import ABC, abstractmethod
from pathlib import Path

from ..config.settings import MAX_FILE_SIZE_MB


class ExtractionError(Exception):
    """Base exception for extraction errors."""
    pass


class SourceUnavailableError(ExtractionError):
    """The text source could not be read (missing file, PDF or OCR failure)."""
    pass


class UnsupportedFormatError(ExtractionError):
    """The file type is not accepted for this kind of document."""
    pass


class NoTransactionsFoundError(ExtractionError):
    """A bulk import found nothing to import."""
    pass


class BaseExtractor(ABC):
    """
    Abstract base class for all text sources.

    Extractors turn a document file into a raw text string. They are the
    only place where files are read; parsers work on text alone.
    """

    #: Lower-case file suffixes this extractor accepts
    suffixes: frozenset = frozenset()

    def __init__(self, max_file_size_mb: int = MAX_FILE_SIZE_MB):
        """Initialize the extractor."""
        self.name = self.__class__.__name__
        self.max_file_size_mb = max_file_size_mb

    @abstractmethod
    def extract(self, file_path: Path) -> str:
        """
        Extract text from a document.

        Args:
            file_path: Path to the document file

        Returns:
            Extracted text (may be empty)

        Raises:
            SourceUnavailableError: If the document cannot be read
        """
        pass

    def can_handle(self, file_path: Path) -> bool:
        """
        Check if this extractor can handle the given file.

        Args:
            file_path: Path to the document file

        Returns:
            True if this extractor can process the file
        """
        return Path(file_path).suffix.lower() in self.suffixes

    def validate_file(self, file_path: Path) -> None:
        """
        Validate that the file exists, is readable and is not too large.

        Args:
            file_path: Path to the document file

        Raises:
            SourceUnavailableError: If the file is missing, empty or too large
        """
        if not file_path.exists():
            raise SourceUnavailableError(f"File not found: {file_path}")

        if not file_path.is_file():
            raise SourceUnavailableError(f"Not a file: {file_path}")

        size = file_path.stat().st_size
        if size == 0:
            raise SourceUnavailableError(f"File is empty: {file_path}")

        if size > self.max_file_size_mb * 1024 * 1024:
            raise SourceUnavailableError(
                f"File exceeds {self.max_file_size_mb} MB limit: {file_path}"
            )
