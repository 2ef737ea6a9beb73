"""CLI package for dux.

This package contains the Typer application and the Rich presenter.
"""

from dux.cli.main import app

__all__ = ["app"]
