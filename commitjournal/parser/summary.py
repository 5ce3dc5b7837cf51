"""Summary line grammar.

Format:
    [<PREFIX>-<NUMBER>] <[Category]> <text> [:tag1,tag2:]

Examples:
    AB-123 [Added] Support foo :api:
    [Fixed] crash on startup
    Changed] default timeout
"""

from commitjournal.parser.category import match_category
from commitjournal.parser.constants import RE_SUMMARY_PREFIX
from commitjournal.parser.exceptions import SummaryParsingError
from commitjournal.parser.models import SummaryElement
from commitjournal.parser.tags import extract_tags


def parse_summary(line: str) -> SummaryElement:
    """Parse the summary block of a commit message.

    Args:
        line: The first block of the message, already trimmed.

    Returns:
        The parsed SummaryElement.

    Raises:
        SummaryParsingError: If the line does not start with an optional
            ticket prefix followed by a category keyword.
    """
    prefix_match = RE_SUMMARY_PREFIX.match(line)
    prefix = ""
    if prefix_match.group("alpha") is not None:
        prefix = f"{prefix_match.group('alpha')}-{prefix_match.group('digits')}"

    result = match_category(line[prefix_match.end():])
    if result is None:
        raise SummaryParsingError(line)
    category, rest = result

    # The category grammar may already have consumed the closing bracket
    if rest.startswith("]"):
        rest = rest[1:]

    tags, text = extract_tags(rest)
    return SummaryElement(
        prefix=prefix,
        category=category,
        text=text.strip(),
        tags=tags,
    )
