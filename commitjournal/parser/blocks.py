"""Body and footer block grammars.

Every block after the summary is classified, in priority order, as:
1. FOOTER: at least one line looks like "Key: value"
2. LIST: the block starts with "- " lines (hanging indents allowed)
3. PARAGRAPH: anything else

A block that satisfies both the footer and list checks is a footer.
"""

import logging
from enum import Enum
from typing import Optional

from commitjournal.parser.category import match_category
from commitjournal.parser.constants import RE_FOOTER, RE_LIST, RE_LIST_ITEM
from commitjournal.parser.exceptions import FooterParsingError
from commitjournal.parser.models import (
    FooterElement,
    ListBlock,
    ListElement,
    ParagraphBlock,
    ParagraphElement,
)
from commitjournal.parser.tags import extract_tags

logger = logging.getLogger(__name__)


class BlockKind(Enum):
    """Kinds of commit message blocks after the summary."""

    FOOTER = "footer"
    LIST = "list"
    PARAGRAPH = "paragraph"


def classify_block(block: str) -> BlockKind:
    """Decide how a block should be parsed.

    Args:
        block: A blank-line delimited block of the message.

    Returns:
        The BlockKind for the block.
    """
    if RE_FOOTER.search(block):
        return BlockKind.FOOTER
    if RE_LIST.match(block.lstrip("\n")):
        return BlockKind.LIST
    return BlockKind.PARAGRAPH


def parse_footer_block(block: str) -> list[FooterElement]:
    """Parse every "Key: value" line of a footer block.

    Args:
        block: A block classified as FOOTER.

    Returns:
        Footer elements in line order.

    Raises:
        FooterParsingError: If a matched line lacks a key or a value.
    """
    footer = []
    for match in RE_FOOTER.finditer(block):
        key, value = match.group(1), match.group(2)
        if key is None or value is None:
            raise FooterParsingError(block)
        footer.append(FooterElement(key=key, value=value))
    return footer


def parse_list_item(line: str) -> Optional[ListElement]:
    """Parse a single list line.

    The category is optional for list items.

    Args:
        line: One line of a list block.

    Returns:
        The ListElement, or None if the line is not a list item.
    """
    marker = RE_LIST_ITEM.match(line)
    if marker is None:
        return None
    rest = line[marker.end():]

    category = ""
    result = match_category(rest)
    if result is not None:
        category, rest = result

    tags, text = extract_tags(rest)
    return ListElement(category=category, text=text.strip(), tags=tags)


def parse_list_block(block: str) -> ListBlock:
    """Parse a list block, skipping lines that are not list items.

    Args:
        block: A block classified as LIST.

    Returns:
        A ListBlock with the items in line order.
    """
    items = []
    for line in block.splitlines():
        item = parse_list_item(line)
        if item is None:
            logger.debug("Skipping non list line: %r", line)
            continue
        items.append(item)
    return ListBlock(items=tuple(items))


def parse_paragraph_block(block: str) -> ParagraphBlock:
    """Parse a free text block.

    Args:
        block: A block classified as PARAGRAPH.

    Returns:
        A ParagraphBlock with tags removed from the text.
    """
    tags, text = extract_tags(block)
    return ParagraphBlock(paragraph=ParagraphElement(text=text.strip(), tags=tags))
