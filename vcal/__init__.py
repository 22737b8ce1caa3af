"""Calendar documents in a simplified iCalendar text format."""

import logging

from flask import Flask, Response, jsonify, request
from pydantic import ValidationError

from vcal.config import CalendarConfig
from vcal.exceptions import CalendarError
from vcal.models import VCalendar, VEvent, VObject, from_data, parse
from vcal.tools import format_date

logger = logging.getLogger(__name__)


def create_app(config: CalendarConfig | None = None):
    if config is None:
        config = CalendarConfig.from_env()

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.max_upload_bytes

    @app.route("/parse", methods=["POST"])
    def parse_calendar():
        """Parse calendar text from the request body into JSON."""
        text = request.get_data(as_text=True)
        if not text.strip():
            return ("No calendar data", 400)

        try:
            component = parse(text)
        except CalendarError as e:
            return (str(e), 400)

        logger.info(f"Parsed {component.type()} with {len(component.children())} children")
        return jsonify(component.to_data().model_dump())

    @app.route("/serialize", methods=["POST"])
    def serialize_calendar():
        """Serialize a JSON component tree into calendar text."""
        payload = request.get_json(silent=True)
        if payload is None:
            return ("Expected a JSON body", 400)

        try:
            component = from_data(payload)
        except (ValidationError, CalendarError) as e:
            return (str(e), 400)

        return Response(
            component.serialize(),
            content_type="text/calendar; charset=utf-8",
        )

    return app


__all__ = [
    "VObject",
    "VCalendar",
    "VEvent",
    "CalendarError",
    "create_app",
    "format_date",
    "from_data",
    "parse",
]
