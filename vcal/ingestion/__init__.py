"""Input layer for calendar files."""

from vcal.ingestion.base import CalendarReader, ReaderRegistry
from vcal.ingestion.ics_reader import ICSReader
from vcal.ingestion.json_reader import JSONReader
from vcal.ingestion.text_reader import TextReader


def setup_reader_registry(encoding: str = "utf-8") -> ReaderRegistry:
    """Set up reader registry with all readers."""
    registry = ReaderRegistry()
    registry.register(TextReader(encoding), [".vcs", ".txt"])
    registry.register(ICSReader(encoding), [".ics"])
    registry.register(JSONReader(encoding), [".json"])
    return registry


__all__ = [
    "CalendarReader",
    "ReaderRegistry",
    "TextReader",
    "ICSReader",
    "JSONReader",
    "setup_reader_registry",
]
