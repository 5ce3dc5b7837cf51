"""CLI commands for repository configuration management."""

import typer

from commitjournal.config import (
    ConfigError,
    JournalConfig,
    get_config_file,
    load_config,
    save_config,
)
from commitjournal.git import GitError, get_repo_root

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage the repository configuration in .commitjournal/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the current repository configuration."""
    try:
        repo_root = get_repo_root()
        config = load_config(repo_root)
    except (GitError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Current configuration ({get_config_file(repo_root)}):")
    typer.echo()
    typer.echo(f"  Colored output: {config.colored_output}")
    typer.echo(f"  Show prefix: {config.show_prefix}")
    typer.echo(f"  Show footers: {config.enable_footers}")
    typer.echo(f"  Debug: {config.enable_debug}")

    if config.excluded_tags:
        typer.echo()
        typer.echo("  Excluded tags:")
        for tag in config.excluded_tags:
            typer.echo(f"    - {tag}")


@config_app.command("init")
def config_init(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing configuration file",
    ),
) -> None:
    """Write a default configuration file to the repository."""
    try:
        repo_root = get_repo_root()
        config_file = get_config_file(repo_root)
        if config_file.exists() and not force:
            typer.echo(f"Configuration already exists: {config_file}")
            typer.echo("Use --force to overwrite it.")
            return
        save_config(repo_root, JournalConfig())
    except (GitError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Wrote default configuration to {config_file}")
