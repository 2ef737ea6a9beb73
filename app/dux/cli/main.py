"""Main CLI application entry point.

Defines the Typer application: validates the start path, loads settings,
configures logging and hands control to the navigation engine.
"""

import logging
import os
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from dux import __version__
from dux.cli.display import ConsolePresenter
from dux.core.config import ConfigError, ExplorerSettings, load_settings
from dux.core.engine import NavigationEngine
from dux.core.events import EventMultiplexer
from dux.core.paths import ROOT_PATH
from dux.fs.aggregator import SizeAggregator
from dux.fs.listing import ListingBuilder
from dux.utils.formatting import err_console, print_error, print_info

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dux",
    help="Interactive disk usage explorer.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class StartPathError(Exception):
    """Raised when the start path argument is unusable."""


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dux version {__version__}")
        raise typer.Exit()


def resolve_start_path(args: list[str]) -> str:
    """Resolve the directory to start browsing from.

    Args:
        args: Positional command-line arguments (zero or one).

    Returns:
        Absolute start path; the filesystem root when no argument is given.

    Raises:
        StartPathError: If there are too many arguments or the path is
            missing, not a directory, or not readable.
    """
    if not args:
        return ROOT_PATH
    if len(args) > 1:
        msg = "invalid number of arguments, expected 0-1"
        raise StartPathError(msg)

    path = args[0]
    try:
        os.stat(path)
    except OSError as e:
        raise StartPathError(f"{path}: {e.strerror or e}") from e

    if not os.path.isdir(path):
        msg = f"the path is not a directory: {path}"
        raise StartPathError(msg)
    if not os.access(path, os.R_OK | os.X_OK):
        msg = f"the directory is not readable: {path}"
        raise StartPathError(msg)

    return os.path.abspath(path)


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def main(
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            help="Directory to start in. Defaults to the filesystem root.",
            show_default=False,
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-w",
            min=1,
            help="Maximum concurrent subdirectory walks (default: one per subdirectory).",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Settings file (default: ~/.config/dux/config.toml).",
        ),
    ] = None,
) -> None:
    """Explore disk usage interactively.

    Shows the children of a directory sorted by total size. Type a
    folder number to enter it, ".." to go up, "." to refresh, "open" or
    "reveal" to show the directory in the file manager, and "q" to quit.
    """
    configure_logging(verbose)
    print_info("Initializing...")

    try:
        start_path = resolve_start_path(paths or [])
    except StartPathError as e:
        print_error(f"Cannot get start path: {e}")
        raise typer.Exit(code=1) from None

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if workers is not None:
        settings = settings.model_copy(update={"max_workers": workers})

    raise typer.Exit(code=run_explorer(start_path, settings))


def run_explorer(start_path: str, settings: ExplorerSettings) -> int:
    """Build the explorer components and run the navigation loop.

    Args:
        start_path: Absolute directory to start in.
        settings: Explorer settings.

    Returns:
        Process exit status.
    """
    logger.debug("Starting explorer at %s (max_workers=%s)", start_path, settings.max_workers)
    builder = ListingBuilder(
        aggregator=SizeAggregator(max_workers=settings.max_workers),
        hide_empty=settings.hide_empty,
    )
    engine = NavigationEngine(
        start_path=start_path,
        builder=builder,
        events=EventMultiplexer(),
        presenter=ConsolePresenter(name_width=settings.name_width),
        settings=settings,
    )
    return engine.run()


if __name__ == "__main__":
    app()
