"""CLI app definition and command routing."""

import functools
import logging

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import export_command, new_command, show_command
from cli.context import CLIContext, set_context
from vcal.exceptions import CalendarError

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Create, inspect and convert vcal calendar files.",
    no_args_is_help=True,
)


@app.callback()
def callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info logging on the console"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up logging and the shared CLI context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


def _exit_on_calendar_error(command):
    """Wrap a command so calendar errors are logged and exit with status 1."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except CalendarError as e:
            logger.error(f"Calendar error: {e}")
            raise typer.Exit(1)

    return wrapper


app.command("show")(_exit_on_calendar_error(show_command))
app.command("new")(_exit_on_calendar_error(new_command))
app.command("export")(_exit_on_calendar_error(export_command))
