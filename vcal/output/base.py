"""Base classes for calendar writers."""

import logging
from pathlib import Path
from typing import Protocol

from vcal.exceptions import ExportError
from vcal.models.component import VObject

logger = logging.getLogger(__name__)


class CalendarWriter(Protocol):
    """Protocol for calendar writers."""

    def write(self, calendar: VObject, path: Path) -> None:
        """Write calendar to file path."""
        ...

    def get_extension(self) -> str:
        """Returns file extension (e.g., 'ics', 'json')."""
        ...


def write_bytes(content: bytes, path: Path) -> None:
    """Write content to path, never leaving an empty file behind.

    Raises:
        ExportError: content is empty or the file could not be written
    """
    if not content:
        raise ExportError(f"Refusing to write empty calendar to {path}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(content)
    except OSError as e:
        # Remove empty file if it was created
        if path.exists() and path.stat().st_size == 0:
            try:
                path.unlink()
            except OSError:
                pass
        raise ExportError(f"Failed to write {path}: {e}") from e

    logger.info(f"Wrote {len(content)} bytes to {path}")
