"""Display a calendar file."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import CalendarRenderer

logger = logging.getLogger(__name__)


def show_command(
    path: Annotated[
        Path,
        typer.Argument(help="Calendar file (.vcs, .txt, .ics or .json)"),
    ],
) -> None:
    """Display calendar properties and events.

    Example:
        vcal show work.vcs
    """
    ctx = get_context()

    if not path.exists():
        logger.error(f"File not found: {path}")
        raise typer.Exit(1)

    calendar = ctx.reader_registry.read(path)
    CalendarRenderer().render(calendar, title=str(path))
