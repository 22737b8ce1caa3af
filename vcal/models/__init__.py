"""Calendar component models."""

from vcal.models.calendar import VCalendar
from vcal.models.component import VObject
from vcal.models.data import ComponentData
from vcal.models.event import VEvent
from vcal.models.registry import COMPONENT_TYPES, component_class, from_data, parse

__all__ = [
    "VObject",
    "VCalendar",
    "VEvent",
    "ComponentData",
    "COMPONENT_TYPES",
    "component_class",
    "from_data",
    "parse",
]
