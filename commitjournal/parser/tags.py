"""Inline tag extraction.

Tags are written inline as " :tag1,tag2:" and are removed from the text
they annotate.
"""

import logging
from typing import Union

from commitjournal.parser.constants import RE_TAGS

logger = logging.getLogger(__name__)


def _decode(text: Union[str, bytes]) -> tuple[str, bool]:
    """Decode bytes input as UTF-8.

    Returns:
        The text and whether it was decoded cleanly.
    """
    if isinstance(text, str):
        return text, True
    try:
        return text.decode("utf-8"), True
    except UnicodeDecodeError:
        logger.debug("Undecodable input, skipping tag extraction")
        return text.decode("utf-8", errors="replace"), False


def extract_tags(text: Union[str, bytes]) -> tuple[list[str], str]:
    """Extract inline tags and return them with the cleaned text.

    Every " :...:" marker is split on commas and each piece is stripped.
    Empty pieces are kept. Markers are removed from the text until none
    remain, so running the extractor on its own output finds nothing.

    Args:
        text: The text to scan. Bytes are decoded as UTF-8.

    Returns:
        Tuple of (tags in order of appearance, text without markers).

    Example:
        >>> extract_tags("Support foo :api,core:")
        (['api', 'core'], 'Support foo')
    """
    cleaned, decoded = _decode(text)
    if not decoded:
        return [], cleaned

    tags: list[str] = []
    while True:
        matches = list(RE_TAGS.finditer(cleaned))
        if not matches:
            return tags, cleaned
        for match in matches:
            tags.extend(piece.strip() for piece in match.group(1).split(","))
        cleaned = RE_TAGS.sub("", cleaned)
