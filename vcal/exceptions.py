"""Exception hierarchy for calendar operations."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class MissingParametersError(CalendarError, TypeError):
    """Too few arguments passed to add/remove."""

    pass


class InvalidParameterTypeError(CalendarError, TypeError):
    """Argument has the wrong type (e.g. a non-string property name)."""

    pass


class UnsupportedPropertyError(CalendarError, ValueError):
    """Property name is not in the component's whitelist."""

    pass


class UnsupportedComponentError(CalendarError, ValueError):
    """Component type is not known."""

    pass


class UnsupportedFormatError(CalendarError):
    """File format not supported."""

    pass


class IngestionError(CalendarError):
    """Error while reading a calendar file."""

    pass


class ExportError(CalendarError):
    """Error during calendar export."""

    pass
