"""Rich console formatting utilities.

Provides the shared consoles, message helpers and the fixed-width column
formatters used when rendering a listing.
"""

import sys

from rich.console import Console

from dux.core.theme import get_theme

SIZE_UNITS: tuple[str, ...] = ("KB", "MB", "GB", "TB", "PB")
ELLIPSIS = "..."


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_bytes(size_bytes: int) -> str:
    """Format a byte count in a human-scaled unit.

    Sizes below 1024 are shown as whole bytes; larger sizes use base-1024
    units with two decimals. The unit is chosen before rounding, so a
    size just under the next unit shows as e.g. "1024.00 KB".

    Args:
        size_bytes: Size in bytes.

    Returns:
        Formatted size, e.g. "512 B", "1.00 KB", "3.25 GB".

    Example:
        >>> format_bytes(1536)
        '1.50 KB'
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    exponent = 1
    while exponent < len(SIZE_UNITS) and size_bytes >= 1024 ** (exponent + 1):
        exponent += 1
    value = round(size_bytes / 1024**exponent, 2)
    return f"{value:.2f} {SIZE_UNITS[exponent - 1]}"


def format_size_column(size_bytes: int | None, width: int = 10) -> str:
    """Format a size right-aligned for the size column.

    The numeric part is padded to ``width``; unknown sizes show "?".

    Args:
        size_bytes: Size in bytes, or None if unknown.
        width: Width of the numeric part.

    Returns:
        Padded size string.
    """
    if size_bytes is None:
        return f"{'?':>{width}}"
    number, unit = format_bytes(size_bytes).split(" ")
    return f"{number:>{width}} {unit}"


def format_name(name: str, width: int = 64) -> str:
    """Pad or truncate a name to exactly ``width`` columns.

    Names longer than ``width`` are cut and end with "...".

    Args:
        name: Name to format.
        width: Column width.

    Returns:
        String of exactly ``width`` characters.
    """
    if len(name) > width:
        return name[: width - len(ELLIPSIS)] + ELLIPSIS
    return name.ljust(width)


def format_index(index: int | None, width: int = 5) -> str:
    """Right-align a selection number; blank when there is none."""
    if index is None:
        return " " * width
    return str(index).rjust(width)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")
