"""Tests for calendar component models."""

from datetime import datetime

import pytest

from vcal.exceptions import (
    InvalidParameterTypeError,
    MissingParametersError,
    UnsupportedComponentError,
    UnsupportedPropertyError,
)
from vcal.models import ComponentData, VCalendar, VEvent, component_class, from_data

CALENDAR_KEYS = ["PRODID", "VERSION", "CALSCALE", "METHOD"]
EVENT_KEYS = [
    "DTSTART",
    "DURATION",
    "DTSTAMP",
    "UID",
    "DESCRIPTION",
    "LOCATION",
    "SEQUENCE",
    "SUMMARY",
    "TRANSP",
]


def test_component_types():
    """Each variant reports its fixed type."""
    assert VCalendar().type() == "VCALENDAR"
    assert VEvent().type() == "VEVENT"


def test_calendar_defaults():
    """Calendar starts with its four defaults and no children."""
    calendar = VCalendar()
    assert calendar.properties() == {
        "PRODID": "-//Copernica BV//Copernica Calendar //NL",
        "VERSION": "2.0",
        "CALSCALE": "GREGORIAN",
        "METHOD": "PUBLISH",
    }
    assert list(calendar.defaults()) == CALENDAR_KEYS
    assert calendar.children() == []


def test_event_defaults():
    """Event defaults: timestamp set, optional fields unset."""
    before = datetime.now().replace(microsecond=0)
    event = VEvent()
    after = datetime.now()

    properties = event.properties()
    assert list(properties) == EVENT_KEYS
    assert properties["DTSTART"] is None
    assert properties["DURATION"] is None
    assert properties["UID"] is None
    assert properties["DESCRIPTION"] is None
    assert properties["LOCATION"] is None
    assert properties["SUMMARY"] is None
    assert properties["SEQUENCE"] == "0"
    assert properties["TRANSP"] == "OPAQUE"

    stamp = datetime.strptime(properties["DTSTAMP"], "%Y%m%dT%H%M%S")
    assert before <= stamp <= after


def test_defaults_returns_fresh_dict():
    """Mutating the returned defaults does not affect the whitelist."""
    calendar = VCalendar()
    calendar.defaults()["X-CUSTOM"] = "1"
    assert "X-CUSTOM" not in calendar.defaults()


@pytest.mark.parametrize("name", EVENT_KEYS)
def test_set_supported_property(name):
    """Setting a whitelisted property stores it under the uppercase name."""
    event = VEvent().set(name.lower(), "value")
    assert event.properties()[name] == "value"


def test_add_property_is_case_insensitive():
    """Property names are upper-cased."""
    calendar = VCalendar().add("Method", "REQUEST")
    assert calendar.properties()["METHOD"] == "REQUEST"


def test_add_returns_self_for_chaining():
    """add/set/remove return the component."""
    event = VEvent()
    assert event.add("SUMMARY", "x") is event
    assert event.set("LOCATION", "y") is event
    assert event.remove("LOCATION") is event


def test_add_unsupported_property():
    """Unknown property names are rejected and state is unchanged."""
    event = VEvent()
    before = event.properties()

    with pytest.raises(UnsupportedPropertyError):
        event.add("X-COLOR", "red")

    assert event.properties() == before
    assert "X-COLOR" not in event.properties()


def test_add_calendar_property_on_event_is_unsupported():
    """Whitelists are per variant."""
    with pytest.raises(UnsupportedPropertyError):
        VEvent().set("PRODID", "x")
    with pytest.raises(UnsupportedPropertyError):
        VCalendar().set("SUMMARY", "x")


def test_add_single_string_is_missing_parameters():
    """The property form needs a name and a value."""
    with pytest.raises(MissingParametersError):
        VCalendar().add("SUMMARY")


def test_add_without_arguments_is_missing_parameters():
    with pytest.raises(MissingParametersError):
        VCalendar().add()


def test_add_non_string_name_is_invalid_type():
    """Names must be strings."""
    with pytest.raises(InvalidParameterTypeError):
        VEvent().add(42, "value")


def test_add_non_string_value_is_invalid_type():
    """Values must be strings; state is unchanged."""
    event = VEvent()
    with pytest.raises(InvalidParameterTypeError):
        event.add("SEQUENCE", 1)
    assert event.properties()["SEQUENCE"] == "0"


def test_add_component_appends_in_order():
    """Children keep insertion order."""
    first, second = VEvent(), VEvent()
    calendar = VCalendar().add(first).add(second)
    children = calendar.children()
    assert children[0] is first
    assert children[1] is second


def test_add_component_to_event_is_rejected():
    """Events cannot hold children."""
    event = VEvent()
    with pytest.raises(InvalidParameterTypeError):
        event.add(VEvent())
    assert event.children() == []


def test_remove_property_unsets_value():
    """Removing a property sets it to None; the key stays."""
    calendar = VCalendar().remove("method")
    properties = calendar.properties()
    assert "METHOD" in properties
    assert properties["METHOD"] is None
    assert "METHOD" in calendar.defaults()
    assert "METHOD:" not in calendar.serialize()


def test_remove_unsupported_property():
    """Unknown names cannot be removed."""
    calendar = VCalendar()
    with pytest.raises(UnsupportedPropertyError):
        calendar.remove("SUMMARY")
    assert calendar.properties() == VCalendar().properties()


def test_remove_invalid_arguments():
    with pytest.raises(MissingParametersError):
        VEvent().remove()
    with pytest.raises(InvalidParameterTypeError):
        VEvent().remove(3)


def test_remove_child_by_identity():
    """Only the exact instance is removed."""
    first = VEvent().set("DTSTAMP", "20240101T000000")
    twin = VEvent().set("DTSTAMP", "20240101T000000")
    calendar = VCalendar().add(first).add(twin)

    calendar.remove(twin)

    children = calendar.children()
    assert len(children) == 1
    assert children[0] is first


def test_remove_missing_child_is_noop():
    """Removing a child that is not present does nothing."""
    event = VEvent()
    calendar = VCalendar().add(event)
    calendar.remove(VEvent())
    assert calendar.children() == [event]


def test_properties_and_children_are_snapshots():
    """Returned collections do not alias internal state."""
    calendar = VCalendar()
    calendar.properties()["METHOD"] = "CANCEL"
    calendar.children().append(VEvent())
    assert calendar.properties()["METHOD"] == "PUBLISH"
    assert calendar.children() == []


def test_objects_alias(calendar, meeting):
    """objects() is the same as children()."""
    assert calendar.objects() == [meeting]


def test_events(calendar, meeting):
    """Calendar lists its events."""
    assert calendar.events() == [meeting]


def test_equality_is_structural(meeting):
    """Components with the same state compare equal."""
    copy = VEvent(meeting.serialize())
    assert copy == meeting
    assert copy is not meeting
    copy.set("SUMMARY", "Other")
    assert copy != meeting


def test_to_data(calendar):
    """Structured copy mirrors the tree."""
    data = calendar.to_data()
    assert data.type == "VCALENDAR"
    assert data.properties["VERSION"] == "2.0"
    assert len(data.children) == 1
    assert data.children[0].properties["SUMMARY"] == "Meeting"
    assert data.children[0].children == []


def test_from_data_rebuilds_tree(calendar):
    """from_data(to_data(c)) == c."""
    assert from_data(calendar.to_data()) == calendar


def test_from_data_accepts_dict():
    component = from_data(
        {
            "type": "VCALENDAR",
            "properties": {"METHOD": None},
            "children": [{"type": "VEVENT", "properties": {"summary": "Lunch"}}],
        }
    )
    assert isinstance(component, VCalendar)
    assert component.properties()["METHOD"] is None
    assert component.children()[0].properties()["SUMMARY"] == "Lunch"


def test_from_data_rejects_unknown_property():
    with pytest.raises(UnsupportedPropertyError):
        from_data(ComponentData(type="VEVENT", properties={"X-COLOR": "red"}))


def test_from_data_rejects_unknown_type():
    with pytest.raises(UnsupportedComponentError):
        from_data({"type": "VTODO"})


def test_from_data_rejects_children_of_event():
    with pytest.raises(InvalidParameterTypeError):
        from_data({"type": "VEVENT", "children": [{"type": "VEVENT"}]})


def test_component_class():
    assert component_class("VCALENDAR") is VCalendar
    assert component_class("VEVENT") is VEvent
    with pytest.raises(UnsupportedComponentError):
        component_class("VJOURNAL")
