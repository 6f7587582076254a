"""
Centralized CLI output management system.

Provides consistent output handling across all CLI commands with respect for
global --quiet and --verbose flags.
"""

from enum import Enum

from rich.console import Console


class OutputLevel(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"  # Only errors and final results
    NORMAL = "normal"  # Standard output
    VERBOSE = "verbose"  # Detailed output including debug information


class CLIOutputManager:
    """Centralized output manager for CLI commands."""

    def __init__(
        self,
        level: OutputLevel = OutputLevel.NORMAL,
        use_colors: bool = True,
        console: Console | None = None,
        error_console: Console | None = None,
    ):
        self.level = level

        self.console = console or Console(
            stderr=False,
            no_color=not use_colors,
            markup=False,
            quiet=(level == OutputLevel.QUIET),
        )
        # Never quiet for errors
        self.error_console = error_console or Console(
            stderr=True, no_color=not use_colors, markup=False
        )

    def info(self, message: str, **kwargs) -> None:
        """Print informational message."""
        if self.level == OutputLevel.QUIET:
            return
        self.console.print(message, **kwargs)

    def success(self, message: str, **kwargs) -> None:
        """Print success message."""
        if self.level == OutputLevel.QUIET:
            return
        self.console.print(f"✓ {message}", style="green", **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Print warning message."""
        self.error_console.print(f"⚠️  {message}", style="yellow", **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Print error message (always shown regardless of quiet mode)."""
        self.error_console.print(f"❌ {message}", style="red bold", **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        """Print debug message (only in verbose mode)."""
        if self.level != OutputLevel.VERBOSE:
            return
        self.console.print(f"🔍 {message}", style="dim", **kwargs)

    def status(self, message: str, **kwargs) -> None:
        """Print status message."""
        if self.level == OutputLevel.QUIET:
            return
        self.console.print(f"📋 {message}", **kwargs)


def create_output_manager(
    quiet: bool = False, verbose: bool = False, use_colors: bool = True
) -> CLIOutputManager:
    """Factory function to create output manager from CLI flags."""
    if quiet:
        level = OutputLevel.QUIET
    elif verbose:
        level = OutputLevel.VERBOSE
    else:
        level = OutputLevel.NORMAL

    return CLIOutputManager(level=level, use_colors=use_colors)
