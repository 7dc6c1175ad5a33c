"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich, and the
human-scaled size rendering used in reports.
"""

import os
import sys

from rich.console import Console

from weight.core.theme import get_theme

# Units for binary (1024-based) scaling, smallest first
SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise so redirected output carries no color codes.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_size(size: int) -> str:
    """Render a byte count in the largest unit keeping the value under 1024.

    Bytes are shown as an integer, larger units with two decimals. TB is the
    largest unit, so very large totals may show values of 1024 TB and more.

    Args:
        size: Size in bytes.

    Returns:
        Human-readable size, e.g. "0 B", "1023 B", "1.00 KB".

    Raises:
        ValueError: If size is negative.
    """
    if size < 0:
        msg = f"Size must be non-negative, got {size}"
        raise ValueError(msg)

    value = float(size)
    unit_index = 0
    while value >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1

    if unit_index == 0:
        return f"{size} {SIZE_UNITS[0]}"
    return f"{value:.2f} {SIZE_UNITS[unit_index]}"


def display_path(path: str | os.PathLike[str]) -> str:
    """Render a path for output, replacing bytes that are not valid UTF-8.

    Names read from disk may carry surrogate escapes, which cannot be
    written to a UTF-8 stream.

    Args:
        path: Path or path string to render.

    Returns:
        Printable text with undecodable bytes shown as U+FFFD.
    """
    return os.fsencode(path).decode("utf-8", "replace")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")
