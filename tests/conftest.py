import pytest

from vcal import create_app
from vcal.config import CalendarConfig
from vcal.models import VCalendar, VEvent


@pytest.fixture
def app():
    """Create and configure a Flask app for testing."""
    app = create_app(CalendarConfig(max_upload_bytes=4096))
    return app


@pytest.fixture
def meeting():
    """An event with a fixed timestamp so serialized text is stable."""
    return (
        VEvent()
        .set("SUMMARY", "Meeting")
        .set("DTSTART", "20240101T090000")
        .set("DTSTAMP", "20231231T120000")
    )


@pytest.fixture
def calendar(meeting):
    """A calendar holding the meeting event."""
    return VCalendar().add(meeting)
