"""Create a new calendar holding one event."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from vcal.models import VCalendar, VEvent
from vcal.output import get_writer

logger = logging.getLogger(__name__)


def new_command(
    summary: Annotated[
        str | None,
        typer.Option("--summary", "-s", help="Event summary"),
    ] = None,
    dtstart: Annotated[
        str | None,
        typer.Option("--dtstart", help="Start time (YYYYMMDDTHHMMSS)"),
    ] = None,
    duration: Annotated[
        str | None,
        typer.Option("--duration", help="Duration (e.g. PT1H)"),
    ] = None,
    uid: Annotated[
        str | None,
        typer.Option("--uid", help="Unique event identifier"),
    ] = None,
    location: Annotated[
        str | None,
        typer.Option("--location", "-l", help="Event location"),
    ] = None,
    description: Annotated[
        str | None,
        typer.Option("--description", "-d", help="Event description"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to file instead of stdout"),
    ] = None,
    format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: vcs, ics or json"),
    ] = None,
) -> None:
    """Create a calendar with a single event.

    Examples:
        vcal new --summary Meeting --dtstart 20240101T090000
        vcal new -s Meeting --dtstart 20240101T090000 -o meeting.vcs
    """
    ctx = get_context()

    event = VEvent()
    fields = {
        "SUMMARY": summary,
        "DTSTART": dtstart,
        "DURATION": duration,
        "UID": uid,
        "LOCATION": location,
        "DESCRIPTION": description,
    }
    for name, value in fields.items():
        if value is not None:
            event.set(name, value)

    calendar = VCalendar().add(event)

    if output is None:
        # raw text, no rich markup processing
        typer.echo(calendar.serialize(), nl=False)
        return

    writer = get_writer(format or ctx.config.default_format, ctx.config.file_encoding)
    writer.write(calendar, output)
    logger.info(f"Created calendar at {output}")
    console.print(f"[bold green]✓[/bold green] Calendar written to {output}")
