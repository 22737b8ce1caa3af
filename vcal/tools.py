"""Formatting helpers for calendar property values."""

from datetime import date, datetime


def format_date(value: date | datetime) -> str:
    """Format a date/datetime the way DTSTART and DTSTAMP expect it.

    Produces ``YYYYMMDDTHHMMSS`` (e.g. ``20240101T090000``): zero-padded,
    no timezone marker. A plain ``date`` is treated as midnight.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, datetime.min.time())
    # strftime does not zero-pad years below 1000 on every platform
    return (
        f"{value.year:04d}{value.month:02d}{value.day:02d}"
        f"T{value.hour:02d}{value.minute:02d}{value.second:02d}"
    )
