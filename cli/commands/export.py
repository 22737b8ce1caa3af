"""Convert a calendar file to another format."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from vcal.output import get_writer

logger = logging.getLogger(__name__)


def export_command(
    path: Annotated[
        Path,
        typer.Argument(help="Calendar file to convert"),
    ],
    format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: vcs, ics or json"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output", "-o", help="Output path (defaults to OUTPUT_DIR/<name>.<format>)"
        ),
    ] = None,
) -> None:
    """Convert a calendar file between the vcs, ics and json formats.

    Examples:
        vcal export work.vcs --format ics
        vcal export work.ics -f json -o work.json
    """
    ctx = get_context()
    config = ctx.config

    if not path.exists():
        logger.error(f"File not found: {path}")
        raise typer.Exit(1)

    calendar = ctx.reader_registry.read(path)
    writer = get_writer(format or config.default_format, config.file_encoding)

    if output is None:
        output = config.output_dir / f"{path.stem}.{writer.get_extension()}"

    writer.write(calendar, output)
    logger.info(f"Exported {path} to {output}")
    console.print(f"[bold green]✓[/bold green] Exported {writer.get_extension().upper()}")
    console.print(f"  {output.resolve()}")
