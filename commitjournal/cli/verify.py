"""CLI command for verifying a single commit message."""

from pathlib import Path

import typer

from commitjournal.cli.utils import read_commit_message_file
from commitjournal.parser import ParserError, parse_commit_message


def verify_command(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Commit message file (e.g. .git/COMMIT_EDITMSG)",
    ),
) -> None:
    """Verify that a commit message file can be parsed.

    Suitable for use as a git commit-msg hook.
    """
    message = read_commit_message_file(path)

    try:
        parsed = parse_commit_message(message)
    except ParserError as e:
        typer.echo(f"Invalid commit message: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Commit message is valid ([{parsed.summary.category}]).")
