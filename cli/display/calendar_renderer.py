"""Rich renderer for calendar components."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.display.console import console as shared_console
from vcal.models.component import VObject

# Event columns shown in the events table, in order
EVENT_COLUMNS = ["DTSTART", "DURATION", "SUMMARY", "LOCATION", "UID"]


class CalendarRenderer:
    """Render a calendar's properties and events for terminal display."""

    def __init__(self, console: Console | None = None):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
        """
        self.console = console or shared_console

    def render(self, calendar: VObject, title: str | None = None) -> None:
        """Render component properties followed by a table of children."""
        self.console.print(f"[bold]{escape(title or calendar.type())}[/bold]")
        self.render_properties(calendar)

        children = calendar.children()
        if not children:
            self.console.print("\n[dim]No events[/dim]")
            return

        self.console.print()
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("#", style="dim", justify="right")
        for column in EVENT_COLUMNS:
            style = "cyan" if column == "DTSTART" else None
            table.add_column(column, style=style)

        for index, child in enumerate(children, start=1):
            properties = child.properties()
            table.add_row(
                str(index),
                *(escape(properties.get(column) or "-") for column in EVENT_COLUMNS),
            )

        self.console.print(table)
        count = len(children)
        self.console.print(f"\n[dim]{count} event{'s' if count != 1 else ''}[/dim]")

    def render_properties(self, component: VObject) -> None:
        """Render the set properties of a component as name/value pairs."""
        for name, value in component.properties().items():
            if value is not None:
                self.console.print(f"  [dim]{name}:[/dim] {escape(value)}")
