"""Main CLI callback handling global options."""

import typer

from commitjournal import __version__
from commitjournal.cli.utils import setup_logging


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"commitjournal {__version__}")
        raise typer.Exit()


def main_command(
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show debug output from the parser",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Generate changelogs from structured git commit messages."""
    setup_logging(debug)
