"""ICS file writer producing RFC 5545 output via ``icalendar``."""

from pathlib import Path

from vcal.interop import to_icalendar
from vcal.models.component import VObject
from vcal.output.base import write_bytes


class ICSWriter:
    """Writer for ICS calendar files.

    ``icalendar`` takes care of line folding and text escaping, which the
    plain vcal format leaves out.
    """

    def write(self, calendar: VObject, path: Path) -> None:
        """Write calendar to ICS file."""
        write_bytes(to_icalendar(calendar).to_ical(), path)

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"
