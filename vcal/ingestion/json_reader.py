"""JSON file reader for calendar files."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from vcal.exceptions import CalendarError, IngestionError
from vcal.ingestion.base import read_text
from vcal.models.calendar import VCalendar
from vcal.models.registry import from_data

logger = logging.getLogger(__name__)


class JSONReader:
    """Reader for JSON calendar files written by ``JSONWriter``."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, path: Path) -> VCalendar:
        """Read calendar from JSON file.

        The file holds one component tree: ``{type, properties, children}``.
        """
        logger.info(f"Reading JSON file: {path}")
        try:
            content = read_text(path, self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise IngestionError(f"Failed to read JSON file: {e}") from e

        if content is None:
            logger.warning(f"JSON file is missing or empty: {path}")
            return VCalendar()

        try:
            component = from_data(json.loads(content))
        except (json.JSONDecodeError, ValidationError, CalendarError) as e:
            raise IngestionError(f"Failed to parse JSON calendar: {e}") from e

        if not isinstance(component, VCalendar):
            raise IngestionError(
                f"JSON file holds a {component.type()}, expected VCALENDAR"
            )
        return component
