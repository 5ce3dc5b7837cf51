"""Git access for commitjournal.

This package provides:
- exceptions: GitError
- runner: run_git_command, get_repo_root
- history: get_tags, has_commits, get_commit_messages, get_changelog_sections
"""

# Exceptions
from commitjournal.git.exceptions import GitError

# Runner utilities
from commitjournal.git.runner import (
    get_repo_root,
    run_git_command,
)

# History utilities
from commitjournal.git.history import (
    get_changelog_sections,
    get_commit_messages,
    get_tags,
    has_commits,
)


__all__ = [
    # Exceptions
    "GitError",
    # Runner
    "run_git_command",
    "get_repo_root",
    # History
    "get_tags",
    "has_commits",
    "get_commit_messages",
    "get_changelog_sections",
]
