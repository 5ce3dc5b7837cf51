"""Repository configuration for commitjournal.

Handles reading and writing the .commitjournal/config.yaml file in each
repository, and converting it to and from a JournalConfig.
"""

from dataclasses import dataclass, field
from pathlib import Path

import yaml


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or written."""

    pass


@dataclass
class JournalConfig:
    """Settings used when rendering parsed commits."""

    colored_output: bool = True
    show_prefix: bool = False
    excluded_tags: list[str] = field(default_factory=list)
    enable_footers: bool = False
    enable_debug: bool = False


def get_config_dir(repo_root: Path) -> Path:
    """Get the repository config directory.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .commitjournal/
    """
    return repo_root / ".commitjournal"


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .commitjournal/config.yaml
    """
    return get_config_dir(repo_root) / "config.yaml"


def load_config_from_dict(config_dict: dict) -> JournalConfig:
    """Load JournalConfig from a configuration dictionary.

    Missing keys fall back to the JournalConfig defaults.

    Args:
        config_dict: Dictionary with configuration values.

    Returns:
        JournalConfig instance.
    """
    defaults = JournalConfig()
    excluded_tags = config_dict.get("excluded_tags") or []
    return JournalConfig(
        colored_output=bool(config_dict.get("colored_output", defaults.colored_output)),
        show_prefix=bool(config_dict.get("show_prefix", defaults.show_prefix)),
        excluded_tags=[str(tag) for tag in excluded_tags],
        enable_footers=bool(config_dict.get("enable_footers", defaults.enable_footers)),
        enable_debug=bool(config_dict.get("enable_debug", defaults.enable_debug)),
    )


def config_to_dict(config: JournalConfig) -> dict:
    """Convert JournalConfig to a dictionary for saving.

    Args:
        config: JournalConfig instance.

    Returns:
        Dictionary representation.
    """
    return {
        "colored_output": config.colored_output,
        "show_prefix": config.show_prefix,
        "excluded_tags": list(config.excluded_tags),
        "enable_footers": config.enable_footers,
        "enable_debug": config.enable_debug,
    }


def save_config(repo_root: Path, config: JournalConfig) -> None:
    """Save the configuration to config.yaml.

    Args:
        repo_root: The root directory of the git repository.
        config: Configuration to save.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_file = get_config_file(repo_root)

    try:
        config_file.parent.mkdir(exist_ok=True)
        with open(config_file, "w") as f:
            yaml.dump(
                config_to_dict(config),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
    except OSError as e:
        raise ConfigError(f"Failed to save config to {config_file}: {e}")


def load_config(repo_root: Path) -> JournalConfig:
    """Load the commitjournal configuration from config.yaml.

    If the file doesn't exist, creates it with default values.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        JournalConfig instance.

    Raises:
        ConfigError: If the file exists but is not valid YAML.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        config = JournalConfig()
        save_config(repo_root, config)
        return config

    try:
        with open(config_file, "r") as f:
            config_dict = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config_dict, dict):
        raise ConfigError(f"Invalid config in {config_file}: expected a mapping")
    return load_config_from_dict(config_dict)
