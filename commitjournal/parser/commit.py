"""Commit message parser.

Splits a message into blank-line delimited blocks, parses the first one as
the summary and routes every other block to the footer, list or paragraph
grammar.
"""

import logging
from typing import Iterable

from commitjournal.parser.blocks import (
    BlockKind,
    classify_block,
    parse_footer_block,
    parse_list_block,
    parse_paragraph_block,
)
from commitjournal.parser.constants import BLOCK_SEPARATOR
from commitjournal.parser.exceptions import CommitMessageLengthError, ParserError
from commitjournal.parser.models import ParsedCommit
from commitjournal.parser.summary import parse_summary

logger = logging.getLogger(__name__)


def parse_commit_message(message: str) -> ParsedCommit:
    """Parse a single commit message into its changelog form.

    Args:
        message: The full commit message.

    Returns:
        The ParsedCommit.

    Raises:
        CommitMessageLengthError: If the message has no summary.
        SummaryParsingError: If the summary does not match the grammar.
        FooterParsingError: If a footer block cannot be parsed.
    """
    blocks = message.split(BLOCK_SEPARATOR)
    summary_line = blocks[0].strip()
    if not summary_line:
        raise CommitMessageLengthError()

    summary = parse_summary(summary_line)

    body = []
    footer = []
    for block in blocks[1:]:
        if not block.strip():
            continue
        kind = classify_block(block)
        if kind == BlockKind.FOOTER:
            footer.extend(parse_footer_block(block))
        elif kind == BlockKind.LIST:
            body.append(parse_list_block(block))
        else:
            body.append(parse_paragraph_block(block))

    return ParsedCommit(summary=summary, body=tuple(body), footer=tuple(footer))


class CommitParser:
    """Parses commit messages one at a time or in batches.

    Holds no state; instances can be shared freely.
    """

    def parse_commit_message(self, message: str) -> ParsedCommit:
        """Parse a single commit message. See parse_commit_message()."""
        return parse_commit_message(message)

    def parse_commit_messages(
        self,
        messages: Iterable[str],
        skip_unparsable: bool = True,
    ) -> list[ParsedCommit]:
        """Parse several commit messages.

        Args:
            messages: Commit messages, in the order they should be returned.
            skip_unparsable: Log and skip messages that fail to parse instead
                of raising.

        Returns:
            The parsed commits, in input order.

        Raises:
            ParserError: If a message fails and skip_unparsable is False.
        """
        parsed = []
        for message in messages:
            try:
                parsed.append(parse_commit_message(message))
            except ParserError as e:
                if not skip_unparsable:
                    raise
                logger.warning("Skipping commit: %s", e)
        return parsed
