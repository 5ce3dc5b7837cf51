"""Text rendering of parsed commits.

Output format:
    v1.2.0 (2024-03-01):
    - AB-1 [Added] Support foo
        - [Fixed] list item
        Paragraph text, indented.

Colors are only applied when JournalConfig.colored_output is set. Anything
tagged with one of JournalConfig.excluded_tags is left out.
"""

from typing import Iterable, Optional

import typer

from commitjournal.config import JournalConfig
from commitjournal.parser.models import (
    FooterElement,
    ListBlock,
    ListElement,
    ParagraphElement,
    ParsedCommit,
    ParsedTag,
    SummaryElement,
)

INDENT = "    "


def _style(text: str, fg: str, config: JournalConfig) -> str:
    if config.colored_output:
        return typer.style(text, fg=fg)
    return text


def has_excluded_tag(tags: Iterable[str], config: JournalConfig) -> bool:
    """Check whether any of the tags is excluded by the config."""
    excluded = set(config.excluded_tags)
    return any(tag in excluded for tag in tags)


def render_tag(tag: Optional[ParsedTag], config: JournalConfig) -> str:
    """Render a section header for a tag.

    Args:
        tag: The tag, or None for commits after the newest tag.
        config: Rendering configuration.

    Returns:
        The header line, preceded by a blank line.
    """
    if tag is None:
        return "\n" + _style("Unreleased", typer.colors.GREEN, config) + ":"
    name = _style(tag.name, typer.colors.GREEN, config)
    date = _style(f"({tag.date.isoformat()})", typer.colors.YELLOW, config)
    return f"\n{name} {date}:"


def render_summary(summary: SummaryElement, config: JournalConfig) -> Optional[str]:
    """Render the summary line of a commit.

    Returns:
        The rendered line, or None if the summary carries an excluded tag.
    """
    if has_excluded_tag(summary.tags, config):
        return None
    parts = ["-"]
    if config.show_prefix and summary.prefix:
        parts.append(summary.prefix)
    parts.append(_style(f"[{summary.category}]", typer.colors.BRIGHT_BLUE, config))
    if summary.text:
        parts.append(summary.text)
    return " ".join(parts)


def render_list_item(item: ListElement, config: JournalConfig) -> Optional[str]:
    """Render a list item, or None if it carries an excluded tag."""
    if has_excluded_tag(item.tags, config):
        return None
    line = f"{INDENT}- "
    if item.category:
        line += _style(f"[{item.category}]", typer.colors.BRIGHT_BLUE, config) + " "
    return line + item.text


def render_paragraph(paragraph: ParagraphElement, config: JournalConfig) -> Optional[str]:
    """Render a paragraph with every line indented.

    Returns None if the paragraph carries an excluded tag.
    """
    if has_excluded_tag(paragraph.tags, config):
        return None
    return "\n".join(f"{INDENT}{line}" for line in paragraph.text.splitlines())


def render_footer(footer: FooterElement) -> str:
    """Render a footer line."""
    return f"{INDENT}{footer.key}: {footer.value}"


def render_commit(commit: ParsedCommit, config: JournalConfig) -> Optional[str]:
    """Render a parsed commit.

    Args:
        commit: The parsed commit.
        config: Rendering configuration.

    Returns:
        The rendered text, or None if the summary is excluded, in which
        case nothing of the commit is shown.
    """
    summary = render_summary(commit.summary, config)
    if summary is None:
        return None

    lines = [summary]
    for element in commit.body:
        if isinstance(element, ListBlock):
            for item in element.items:
                rendered = render_list_item(item, config)
                if rendered is not None:
                    lines.append(rendered)
        else:
            rendered = render_paragraph(element.paragraph, config)
            if rendered:
                lines.append(rendered)

    if config.enable_footers:
        lines.extend(render_footer(footer) for footer in commit.footer)

    return "\n".join(lines)


def render_changelog(
    sections: Iterable[tuple[Optional[ParsedTag], list[ParsedCommit]]],
    config: JournalConfig,
) -> str:
    """Render a changelog made of tag sections.

    Args:
        sections: (tag or None, commits) tuples, in display order.
        config: Rendering configuration.

    Returns:
        The full changelog text.
    """
    parts = []
    for tag, commits in sections:
        parts.append(render_tag(tag, config))
        for commit in commits:
            rendered = render_commit(commit, config)
            if rendered is not None:
                parts.append(rendered)
    return "\n".join(parts)
