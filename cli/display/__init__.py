"""Display module for rendering calendar output."""

from cli.display.calendar_renderer import CalendarRenderer
from cli.display.console import console

__all__ = [
    "console",
    "CalendarRenderer",
]
