"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass
