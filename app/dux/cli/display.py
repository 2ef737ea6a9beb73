"""Rich display of directory listings.

Renders the banner, the numbered listing rows, walk warnings and the
command prompt, plus the error and farewell messages of the loop.
"""

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from dux.fs.listing import Listing, ListingRow
from dux.utils.formatting import (
    console,
    format_bytes,
    format_index,
    format_name,
    format_size_column,
)

TITLE = "Disk Usage Explorer"
USAGE_HINT = 'Enter folder # to explore, ".." to go back, "." to refresh, Ctrl+C to quit'
FAREWELL_MESSAGE = "Bye! See ya!"
PROMPT = "> "

# Number of walk warnings listed before the rest are summarised
MAX_WARNINGS_SHOWN = 5


def format_row(row: ListingRow, name_width: int = 64) -> str:
    """Format one listing row as Rich markup.

    Directories show their number, a "+" delimiter and ``[name]``;
    files show a blank number column and a "-" delimiter.

    Args:
        row: Row to format.
        name_width: Width of the name column.

    Returns:
        Rich markup string.
    """
    entry = row.entry
    size = escape(format_size_column(entry.size_bytes))
    if entry.is_directory:
        name = escape(format_name(f"[{entry.name}]", name_width))
        return f"[index]{format_index(row.index)}[/] + [directory]{name}[/][size]{size}[/]"
    name = escape(format_name(entry.name, name_width))
    return f"{format_index(None)} - [file]{name}[/][size]{size}[/]"


class ConsolePresenter:
    """Presenter that draws on a Rich console.

    Args:
        out: Console to draw on. Defaults to the shared console.
        name_width: Width of the name column.
    """

    def __init__(self, out: Console | None = None, *, name_width: int = 64) -> None:
        self._console = out or console
        self._name_width = name_width

    def show_listing(self, listing: Listing) -> None:
        """Clear the screen and render ``listing`` followed by the prompt."""
        self._console.clear()
        self._console.print()
        self._console.print(Rule(f"[bold_header]{TITLE}[/]", style="border"))
        self._console.print(f"[muted]{escape(USAGE_HINT)}[/]")
        self._console.print(Rule(style="border"))
        total = format_bytes(listing.total_size)
        self._console.print(
            f"[header]{escape(listing.path)}[/]  [muted](total {total})[/]",
            highlight=False,
        )
        self._console.print(Rule(style="border"))

        for row in listing.rows():
            self._console.print(format_row(row, self._name_width), highlight=False)

        self._console.print(Rule(style="border"))
        self._show_warnings(listing)
        self._console.print(PROMPT, end="")

    def show_error(self, message: str, detail: str) -> None:
        """Print an error message and what happens next."""
        self._console.print(f"[error]{escape(message)}[/]")
        self._console.print(f"[muted]{escape(detail)}[/]")

    def farewell(self) -> None:
        """Print the farewell message."""
        self._console.print()
        self._console.print(f"[success]{FAREWELL_MESSAGE}[/]")

    def _show_warnings(self, listing: Listing) -> None:
        if not listing.warnings:
            return
        for warning in listing.warnings[:MAX_WARNINGS_SHOWN]:
            self._console.print(
                f"[warning]Warning:[/] cannot read {escape(warning.path)}: "
                f"{escape(warning.message)}"
            )
        hidden = len(listing.warnings) - MAX_WARNINGS_SHOWN
        if hidden > 0:
            self._console.print(f"[muted]... and {hidden} more unreadable path(s)[/]")
