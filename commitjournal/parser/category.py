"""Category keyword grammar.

A category is one of the CATEGORIES keywords, optionally wrapped in
square brackets. Each bracket is optional on its own, so "[Added]",
"[Added", "Added]" and "Added" are all accepted.
"""

from typing import Optional

from commitjournal.parser.constants import RE_CATEGORY
from commitjournal.parser.exceptions import CategoryParsingError


def match_category(text: str) -> Optional[tuple[str, str]]:
    """Match a category at the start of text.

    Args:
        text: Input starting with the (optionally bracketed) category.

    Returns:
        Tuple of (category, remaining text), or None if no keyword matches.
    """
    match = RE_CATEGORY.match(text)
    if match is None:
        return None
    return match.group("category"), text[match.end():]


def parse_category(text: str) -> str:
    """Parse a category keyword at the start of text.

    Args:
        text: Input starting with the (optionally bracketed) category.

    Returns:
        The category keyword.

    Raises:
        CategoryParsingError: If no category keyword is found.
    """
    result = match_category(text)
    if result is None:
        raise CategoryParsingError(text)
    return result[0]
