"""Shared CLI context with lazy-initialized dependencies."""

from vcal.config import CalendarConfig
from vcal.ingestion import ReaderRegistry, setup_reader_registry


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        calendar = ctx.reader_registry.read(path)
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: CalendarConfig | None = None
        self._reader_registry: ReaderRegistry | None = None

    @property
    def config(self) -> CalendarConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = CalendarConfig.from_env()
        return self._config

    @property
    def reader_registry(self) -> ReaderRegistry:
        """Get reader registry with all readers registered (lazy-loaded)."""
        if self._reader_registry is None:
            self._reader_registry = setup_reader_registry(self.config.file_encoding)
        return self._reader_registry


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
