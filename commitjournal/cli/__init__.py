"""CLI entry point for commitjournal.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitjournal.cli.config import config_app
from commitjournal.cli.main import main_command
from commitjournal.cli.parse import changelog_command, parse_command
from commitjournal.cli.verify import verify_command

# Main application
app = typer.Typer(
    name="commitjournal",
    help="commitjournal: changelogs from structured git commit messages",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("verify")(verify_command)
app.command("parse")(parse_command)
app.command("changelog")(changelog_command)

# Global options (--debug, --version)
app.callback()(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
    "verify_command",
    "parse_command",
    "changelog_command",
]
