"""Commit message parsing for commitjournal.

This package turns commit messages written as

    AB-123 [Added] Summary text :tag1,tag2:

    Free text paragraph.

    - [Fixed] list item
    - list item without category

    Closes: AB-123

into ParsedCommit models, with:
- constants: CATEGORIES and the compiled grammar patterns
- models: ParsedCommit, SummaryElement, ListBlock, ParagraphBlock, ...
- exceptions: ParserError and its subclasses
- tags: extract_tags
- category: parse_category, match_category
- summary: parse_summary
- blocks: classify_block and the footer, list and paragraph grammars
- commit: parse_commit_message, CommitParser
"""

# Constants
from commitjournal.parser.constants import CATEGORIES

# Models
from commitjournal.parser.models import (
    BodyElement,
    FooterElement,
    ListBlock,
    ListElement,
    ParagraphBlock,
    ParagraphElement,
    ParsedCommit,
    ParsedTag,
    SummaryElement,
)

# Exceptions
from commitjournal.parser.exceptions import (
    CategoryParsingError,
    CommitMessageLengthError,
    FooterParsingError,
    ParserError,
    SummaryParsingError,
)

# Grammars
from commitjournal.parser.tags import extract_tags
from commitjournal.parser.category import match_category, parse_category
from commitjournal.parser.summary import parse_summary
from commitjournal.parser.blocks import (
    BlockKind,
    classify_block,
    parse_footer_block,
    parse_list_block,
    parse_list_item,
    parse_paragraph_block,
)

# Orchestrator
from commitjournal.parser.commit import CommitParser, parse_commit_message


__all__ = [
    # Constants
    "CATEGORIES",
    # Models
    "BodyElement",
    "FooterElement",
    "ListBlock",
    "ListElement",
    "ParagraphBlock",
    "ParagraphElement",
    "ParsedCommit",
    "ParsedTag",
    "SummaryElement",
    # Exceptions
    "ParserError",
    "CommitMessageLengthError",
    "SummaryParsingError",
    "FooterParsingError",
    "CategoryParsingError",
    # Grammars
    "extract_tags",
    "match_category",
    "parse_category",
    "parse_summary",
    "BlockKind",
    "classify_block",
    "parse_footer_block",
    "parse_list_block",
    "parse_list_item",
    "parse_paragraph_block",
    # Orchestrator
    "CommitParser",
    "parse_commit_message",
]
