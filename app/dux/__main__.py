"""Module entrypoint for ``python -m dux``."""

from dux.cli.main import app

if __name__ == "__main__":
    app()
