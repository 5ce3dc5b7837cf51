"""Tag and commit history retrieval.

Contains:
- get_tags: List version tags with their creation dates, newest first
- has_commits: Check whether HEAD points to a commit
- get_commit_messages: Read full commit messages for a revision range
- get_changelog_sections: Split history into per-tag sections
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from commitjournal.git.exceptions import GitError
from commitjournal.git.runner import run_git_command
from commitjournal.parser.models import ParsedTag

logger = logging.getLogger(__name__)

# Record and field separators for git --format output
_RECORD_SEP = "\x1e"
_FIELD_SEP = "\x1f"


def get_tags(cwd: Optional[Path] = None) -> list[ParsedTag]:
    """Get all tags with their creation dates, newest first.

    Tags whose date cannot be read are skipped.

    Args:
        cwd: Repository directory.

    Returns:
        List of ParsedTag.
    """
    output = run_git_command([
        "for-each-ref",
        "--sort=-creatordate",
        f"--format=%(refname:short){_FIELD_SEP}%(creatordate:short)",
        "refs/tags",
    ], cwd=cwd)
    if not output:
        return []

    tags = []
    for line in output.split("\n"):
        name, _, date_str = line.partition(_FIELD_SEP)
        try:
            tag_date = datetime.strptime(date_str.strip(), "%Y-%m-%d").date()
        except ValueError:
            logger.debug("Skipping tag %s with unreadable date %r", name, date_str)
            continue
        tags.append(ParsedTag(name=name.strip(), date=tag_date))
    return tags


def has_commits(cwd: Optional[Path] = None) -> bool:
    """Check whether the repository has at least one commit.

    Returns:
        False for a repository with an unborn HEAD.
    """
    try:
        run_git_command(["rev-parse", "--verify", "--quiet", "HEAD"], cwd=cwd)
    except GitError:
        return False
    return True


def get_commit_messages(
    revision_range: str = "HEAD",
    cwd: Optional[Path] = None,
) -> list[tuple[str, str]]:
    """Get the full messages of the commits in a revision range.

    Args:
        revision_range: Any range accepted by git log (e.g. "v1.0..HEAD").
        cwd: Repository directory.

    Returns:
        List of (sha, message) tuples, newest first.

    Raises:
        GitError: If the range is invalid or git fails.
    """
    output = run_git_command([
        "log",
        f"--format=%H{_FIELD_SEP}%B{_RECORD_SEP}",
        revision_range,
    ], cwd=cwd)

    commits = []
    for record in output.split(_RECORD_SEP):
        record = record.strip("\n")
        if not record:
            continue
        sha, _, message = record.partition(_FIELD_SEP)
        commits.append((sha.strip(), message))
    return commits


def get_changelog_sections(
    tags: list[ParsedTag],
    head: str = "HEAD",
    cwd: Optional[Path] = None,
) -> list[tuple[Optional[ParsedTag], list[tuple[str, str]]]]:
    """Split the history into sections, one per tag.

    The first section holds the commits after the newest tag and has no
    tag. Each following section holds the commits between a tag and the
    one before it.

    Args:
        tags: Tags, newest first (as returned by get_tags).
        head: Revision to start from.
        cwd: Repository directory.

    Returns:
        List of (tag or None, commits) tuples. Empty sections are dropped.
    """
    if not has_commits(cwd=cwd):
        logger.debug("Repository has no commits yet")
        return []

    sections = []
    newer = head
    current: Optional[ParsedTag] = None
    for tag in tags:
        commits = get_commit_messages(f"{tag.name}..{newer}", cwd=cwd)
        if commits:
            sections.append((current, commits))
        newer = tag.name
        current = tag

    commits = get_commit_messages(newer, cwd=cwd)
    if commits:
        sections.append((current, commits))
    return sections
