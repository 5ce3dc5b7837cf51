"""Shared helpers for the CLI commands."""

import logging
from pathlib import Path

import typer

from commitjournal.config import ConfigError, JournalConfig, load_config


def setup_logging(debug: bool) -> None:
    """Configure the root logger for CLI output.

    Args:
        debug: Show debug messages instead of warnings only.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )


def get_effective_config(repo_root: Path, no_color: bool = False) -> JournalConfig:
    """Load the repository config and apply command line overrides.

    Args:
        repo_root: The root directory of the git repository.
        no_color: Disable colored output even if the config enables it.

    Returns:
        The JournalConfig to render with.
    """
    try:
        config = load_config(repo_root)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if no_color:
        config.colored_output = False
    if config.enable_debug:
        setup_logging(debug=True)
    return config


def read_commit_message_file(path: Path) -> str:
    """Read a commit message file as written by git for commit-msg hooks.

    Lines starting with "#" are git comments and are dropped.

    Args:
        path: Path to the message file.

    Returns:
        The message text without comment lines.
    """
    text = path.read_text(encoding="utf-8", errors="replace")
    lines = [line for line in text.splitlines() if not line.startswith("#")]
    return "\n".join(lines)
