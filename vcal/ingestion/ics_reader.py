"""ICS file reader for RFC 5545 calendar files."""

import logging
from pathlib import Path

from icalendar import Calendar

from vcal.exceptions import IngestionError
from vcal.ingestion.base import read_text
from vcal.interop import from_icalendar
from vcal.models.calendar import VCalendar

logger = logging.getLogger(__name__)


class ICSReader:
    """Reader for ICS calendar files, parsed with ``icalendar``."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, path: Path) -> VCalendar:
        """Read calendar from ICS file."""
        logger.info(f"Reading ICS file: {path}")
        try:
            content = read_text(path, self.encoding)
            if content is None:
                logger.warning(f"ICS file is missing or empty: {path}")
                return VCalendar()
            cal = Calendar.from_ical(content)
        except Exception as e:
            raise IngestionError(f"Failed to read ICS file: {e}") from e

        if cal.name != "VCALENDAR":
            raise IngestionError(f"ICS file does not hold a VCALENDAR: {cal.name}")

        calendar = from_icalendar(cal)
        logger.info(f"Created {len(calendar.children())} events from ICS file")
        return calendar
