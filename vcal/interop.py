"""Conversion between vcal components and the ``icalendar`` library.

The core text format writes values verbatim. Going through ``icalendar``
gives RFC 5545 output instead (line folding, text escaping), and lets
standard ``.ics`` files be read back into components.
"""

import logging

from icalendar import Calendar as ICalendar
from icalendar import Component as IComponent
from icalendar import Event as IEvent
from icalendar import vText

from vcal.exceptions import UnsupportedComponentError
from vcal.models.calendar import VCalendar
from vcal.models.component import VObject
from vcal.models.event import VEvent

logger = logging.getLogger(__name__)


def to_icalendar(component: VObject) -> IComponent:
    """Build an ``icalendar`` component tree from a vcal component.

    Values are added as text so ``icalendar`` does not try to interpret
    them (e.g. a DTSTART of ``20240101T090000`` is written as is).
    """
    if isinstance(component, VCalendar):
        target = ICalendar()
    elif isinstance(component, VEvent):
        target = IEvent()
    else:
        raise UnsupportedComponentError(
            f"Unsupported component type: {component.type()!r}"
        )

    for name, value in component.properties().items():
        if value is not None:
            target.add(name, vText(value))

    for child in component.children():
        target.add_component(to_icalendar(child))

    return target


def from_icalendar(source: IComponent) -> VObject:
    """Build a vcal component from an ``icalendar`` component.

    Only whitelisted properties are copied. For a calendar, direct VEVENT
    subcomponents become events; other subcomponents are skipped.
    """
    if source.name == "VCALENDAR":
        component = VCalendar()
    elif source.name == "VEVENT":
        component = VEvent()
    else:
        raise UnsupportedComponentError(
            f"Unsupported component type: {source.name!r}"
        )

    for name in component.defaults():
        if name in source:
            component.set(name, _to_text(source[name]))

    if isinstance(component, VCalendar):
        for sub in source.subcomponents:
            if sub.name == "VEVENT":
                component.add(from_icalendar(sub))
            else:
                logger.debug(f"Skipping {sub.name} subcomponent")

    return component


def _to_text(prop) -> str:
    """Text value of an ``icalendar`` property."""
    # repeated properties come back as a list; keep the first
    if isinstance(prop, list):
        prop = prop[0]
    if isinstance(prop, str):
        return str(prop)
    value = prop.to_ical()
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)
