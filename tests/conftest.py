"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def sample_message():
    """Sample commit message using every block kind."""
    return """AB-1 [Added] Support foo :api,core:

Some details about foo.

- [Added] thing one
- [Fixed] thing two :internal:
- plain item

Closes: AB-1
Reviewed-by: Jane Doe"""
