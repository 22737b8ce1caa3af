"""Reader for files in the vcal text format."""

import logging
from pathlib import Path

from vcal.exceptions import IngestionError
from vcal.ingestion.base import read_text
from vcal.models.calendar import VCalendar

logger = logging.getLogger(__name__)


class TextReader:
    """Reader for vcal text files (.vcs, .txt)."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, path: Path) -> VCalendar:
        """Read calendar from a vcal text file.

        A missing or blank file gives an empty calendar.
        """
        logger.info(f"Reading vcal file: {path}")
        try:
            content = read_text(path, self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise IngestionError(f"Failed to read vcal file: {e}") from e

        if content is None:
            logger.warning(f"vcal file is missing or empty: {path}")
            return VCalendar()

        calendar = VCalendar(content)
        logger.info(f"Loaded {len(calendar.children())} events from vcal file")
        return calendar
