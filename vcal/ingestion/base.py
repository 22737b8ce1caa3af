"""Base classes for calendar readers."""

from pathlib import Path
from typing import Dict, List, Protocol

from vcal.exceptions import UnsupportedFormatError
from vcal.models.calendar import VCalendar


class CalendarReader(Protocol):
    """Protocol for calendar readers."""

    def read(self, path: Path) -> VCalendar:
        """Read calendar from file path."""
        ...


class ReaderRegistry:
    """Registry for calendar readers by file extension."""

    def __init__(self):
        """Initialize registry."""
        self._readers: Dict[str, CalendarReader] = {}

    def register(self, reader: CalendarReader, extensions: List[str]) -> None:
        """Register reader for file extensions."""
        for ext in extensions:
            # Normalize extension (remove leading dot, lowercase)
            normalized_ext = ext.lstrip(".").lower()
            self._readers[normalized_ext] = reader

    def get_reader(self, path: Path) -> CalendarReader:
        """Get reader by file extension."""
        ext = path.suffix.lstrip(".").lower()
        if ext not in self._readers:
            supported = ", ".join(sorted(self._readers))
            raise UnsupportedFormatError(
                f"Unsupported file format: .{ext}. Supported formats: {supported}"
            )
        return self._readers[ext]

    def read(self, path: Path) -> VCalendar:
        """Read a calendar with the reader registered for its extension."""
        return self.get_reader(path).read(path)


def read_text(path: Path, encoding: str = "utf-8") -> str | None:
    """Read a file's text, or None if it is missing or blank."""
    if not path.exists() or path.stat().st_size == 0:
        return None
    content = path.read_text(encoding=encoding)
    if not content.strip():
        return None
    return content
