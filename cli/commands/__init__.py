"""CLI commands package."""

from cli.commands.export import export_command
from cli.commands.new import new_command
from cli.commands.show import show_command

__all__ = [
    "export_command",
    "new_command",
    "show_command",
]
