"""Plain text source for documents already converted to text."""
import logging
from pathlib import Path

from ..config.settings import TEXT_SUFFIXES
from .base_extractor import BaseExtractor, SourceUnavailableError

logger = logging.getLogger(__name__)


class PlainTextExtractor(BaseExtractor):
    """Read a UTF-8 text file, e.g. a text dump saved by another tool."""

    suffixes = frozenset(TEXT_SUFFIXES)

    def extract(self, file_path: Path) -> str:
        """
        Read text file contents.

        Raises:
            SourceUnavailableError: If the file cannot be read or decoded
        """
        file_path = Path(file_path)
        self.validate_file(file_path)

        try:
            text = file_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read text file {file_path.name}: {e}")
            raise SourceUnavailableError(f"Cannot read {file_path}: {e}") from e

        logger.debug(f"Read {len(text)} characters from {file_path.name}")
        return text
