"""Constants for the commit parser.

Contains:
- CATEGORIES: The fixed vocabulary of change categories
- RE_TAGS: Inline tag marker pattern (" :a,b:")
- RE_FOOTER: Footer line pattern ("Key: value")
- RE_LIST: List block pattern ("- item" with hanging-indent continuations)
- RE_CATEGORY: Optionally bracketed category keyword
- RE_SUMMARY_PREFIX: Optional ticket prefix and separator of a summary line
- RE_LIST_ITEM: Leading bullet marker of a list line
- BLOCK_SEPARATOR: Separator between message blocks

All patterns are compiled once at import time and never mutated.
"""

import re

# Valid change categories, matched case-sensitively
CATEGORIES = [
    "Added",
    "Changed",
    "Fixed",
    "Improved",
    "Removed",
]

BLOCK_SEPARATOR = "\n\n"

_CATEGORY_ALTERNATION = "|".join(re.escape(c) for c in CATEGORIES)

RE_TAGS = re.compile(r" :(.*?):")

RE_FOOTER = re.compile(r"^([\w-]+):[ \t](.*)$", re.MULTILINE)

RE_LIST = re.compile(r"^-\s.*$(?:\n^\s*-\s.*$)*", re.MULTILINE)

RE_CATEGORY = re.compile(rf"\[?(?P<category>{_CATEGORY_ALTERNATION})\]?")

RE_SUMMARY_PREFIX = re.compile(
    r"(?:(?P<alpha>[A-Za-z]+)-(?P<digits>[0-9]+))?"
    r"[ \t]*"
)

RE_LIST_ITEM = re.compile(r"[ \t]*- ")
