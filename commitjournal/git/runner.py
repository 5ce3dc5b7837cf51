"""Git command runner and repository utilities.

Contains:
- run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
"""

import subprocess
from pathlib import Path
from typing import Optional

from commitjournal.git.exceptions import GitError


def run_git_command(args: list[str], cwd: Optional[Path] = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in. Defaults to the current directory.

    Returns:
        The stdout of the git command, without surrounding whitespace.

    Raises:
        GitError: If the command fails or git is missing.
    """
    try:
        result = subprocess.run(
            ["git", "--no-pager"] + args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=cwd,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    return result.stdout.strip()


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Get the root directory of the git repository containing cwd.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        return Path(run_git_command(["rev-parse", "--show-toplevel"], cwd=cwd))
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")
