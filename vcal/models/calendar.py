"""Calendar component: the root of a calendar document."""

import logging

from vcal.models.component import VObject
from vcal.models.event import VEvent
from vcal.serialization import Block

logger = logging.getLogger(__name__)

CALENDAR_DEFAULTS: dict[str, str | None] = {
    "PRODID": "-//Copernica BV//Copernica Calendar //NL",
    "VERSION": "2.0",
    "CALSCALE": "GREGORIAN",
    "METHOD": "PUBLISH",
}


class VCalendar(VObject):
    """Root calendar component holding events."""

    container = True

    def type(self) -> str:
        return "VCALENDAR"

    def defaults(self) -> dict[str, str | None]:
        return dict(CALENDAR_DEFAULTS)

    def events(self) -> list[VEvent]:
        """Child events in insertion order."""
        return [child for child in self._children if isinstance(child, VEvent)]

    def _make_child(self, block: Block) -> VObject:
        # only events can be embedded for now; other blocks load as events
        if block.type != "VEVENT":
            logger.warning(f"Loading embedded {block.type} block as VEVENT")
        event = VEvent()
        event._load_block(block)
        return event
