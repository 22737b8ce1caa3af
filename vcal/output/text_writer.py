"""Writer for the vcal text format."""

from pathlib import Path

from vcal.models.component import VObject
from vcal.output.base import write_bytes


class TextWriter:
    """Writer for vcal text files (values written verbatim, CRLF lines)."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def write(self, calendar: VObject, path: Path) -> None:
        """Write calendar to a vcal text file."""
        write_bytes(calendar.serialize().encode(self.encoding), path)

    def get_extension(self) -> str:
        """Returns file extension."""
        return "vcs"
