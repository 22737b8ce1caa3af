"""Lookup of component variants by type name."""

from vcal import serialization
from vcal.exceptions import UnsupportedComponentError
from vcal.models.calendar import VCalendar
from vcal.models.component import VObject
from vcal.models.data import ComponentData
from vcal.models.event import VEvent

COMPONENT_TYPES: dict[str, type[VObject]] = {
    "VCALENDAR": VCalendar,
    "VEVENT": VEvent,
}


def component_class(type_name: str | None) -> type[VObject]:
    """Get the component class for a type name."""
    if type_name not in COMPONENT_TYPES:
        supported = ", ".join(COMPONENT_TYPES)
        raise UnsupportedComponentError(
            f"Unsupported component type: {type_name!r}. Supported types: {supported}"
        )
    return COMPONENT_TYPES[type_name]


def parse(text: str) -> VObject:
    """Parse serialized text into a component of the type it declares.

    Raises:
        UnsupportedComponentError: the first BEGIN line is missing or names
            an unknown type
    """
    block = serialization.scan(text)
    component = component_class(block.type)()
    component._load_block(block)
    return component


def from_data(data: ComponentData | dict) -> VObject:
    """Build a component tree from its structured form.

    Property names go through ``set``, so unsupported names raise
    ``UnsupportedPropertyError``; children of a leaf component raise
    ``InvalidParameterTypeError``.
    """
    if not isinstance(data, ComponentData):
        data = ComponentData.model_validate(data)

    component = component_class(data.type)()
    for name, value in data.properties.items():
        if value is None:
            component.remove(name)
        else:
            component.set(name, value)

    for child in data.children:
        component.add(from_data(child))

    return component
