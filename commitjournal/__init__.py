"""Changelog generation from structured git commit messages."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitjournal")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
