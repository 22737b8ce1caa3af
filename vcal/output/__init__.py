"""Output layer for calendar files."""

from vcal.exceptions import UnsupportedFormatError
from vcal.output.base import CalendarWriter
from vcal.output.ics_writer import ICSWriter
from vcal.output.json_writer import JSONWriter
from vcal.output.text_writer import TextWriter


def get_writer(format: str, encoding: str = "utf-8") -> CalendarWriter:
    """Get writer for format."""
    if format == "vcs":
        return TextWriter(encoding)
    elif format == "ics":
        return ICSWriter()
    elif format == "json":
        return JSONWriter(encoding)
    else:
        raise UnsupportedFormatError(f"Unsupported output format: {format}")


__all__ = [
    "CalendarWriter",
    "ICSWriter",
    "JSONWriter",
    "TextWriter",
    "get_writer",
]
