"""Event component."""

from datetime import datetime

from vcal.models.component import VObject
from vcal.tools import format_date


class VEvent(VObject):
    """A single calendar event. Events cannot hold child components."""

    def type(self) -> str:
        return "VEVENT"

    def defaults(self) -> dict[str, str | None]:
        return {
            "DTSTART": None,
            "DURATION": None,
            "DTSTAMP": format_date(datetime.now()),
            "UID": None,
            "DESCRIPTION": None,
            "LOCATION": None,
            "SEQUENCE": "0",
            "SUMMARY": None,
            "TRANSP": "OPAQUE",
        }
