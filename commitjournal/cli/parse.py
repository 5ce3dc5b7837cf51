"""CLI commands for parsing commit history."""

import typer

from commitjournal.cli.utils import get_effective_config
from commitjournal.git import (
    GitError,
    get_changelog_sections,
    get_commit_messages,
    get_repo_root,
    get_tags,
)
from commitjournal.parser import CommitParser, ParserError, parse_commit_message
from commitjournal.render import render_changelog, render_commit


def parse_command(
    revision_range: str = typer.Argument(
        "HEAD",
        help="Revision range to parse (e.g. v1.0..HEAD)",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Parse the commits of a revision range and print them."""
    try:
        repo_root = get_repo_root()
        config = get_effective_config(repo_root, no_color)
        commits = get_commit_messages(revision_range, cwd=repo_root)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not commits:
        typer.echo(f"No commits found in {revision_range}.")
        return

    skipped = 0
    for sha, message in commits:
        try:
            parsed = parse_commit_message(message)
        except ParserError as e:
            skipped += 1
            typer.echo(f"Skipping commit {sha[:7]}: {e}", err=True)
            continue

        rendered = render_commit(parsed, config)
        if rendered is not None:
            typer.echo(rendered)

    if skipped:
        typer.echo(f"{skipped} commit(s) could not be parsed.", err=True)


def changelog_command(
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Print a changelog grouped by tag, newest first."""
    try:
        repo_root = get_repo_root()
        config = get_effective_config(repo_root, no_color)
        sections = get_changelog_sections(get_tags(cwd=repo_root), cwd=repo_root)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not sections:
        typer.echo("No commits found.")
        return

    parser = CommitParser()
    parsed_sections = [
        (tag, parser.parse_commit_messages(message for _, message in commits))
        for tag, commits in sections
    ]
    typer.echo(render_changelog(parsed_sections, config))
