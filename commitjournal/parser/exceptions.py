"""Commit parsing exception classes.

Contains all exception classes raised by the commit message parser:
- ParserError: Base exception for parsing errors
- CommitMessageLengthError: Raised when the message has no summary block
- SummaryParsingError: Raised when the summary line does not match the grammar
- FooterParsingError: Raised when a footer block cannot be split into key/value
- CategoryParsingError: Raised when no category keyword is found
"""


class ParserError(Exception):
    """Base exception for commit parsing errors."""

    pass


class CommitMessageLengthError(ParserError):
    """Raised when the commit message is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Commit message length too small.")


class SummaryParsingError(ParserError):
    """Raised when the first block is not a valid summary line.

    Attributes:
        line: The trimmed summary line that failed to parse.
    """

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Could not parse commit summary: {line}")


class FooterParsingError(ParserError):
    """Raised when a footer line does not yield both key and value.

    Attributes:
        block: The footer block that failed to parse.
    """

    def __init__(self, block: str) -> None:
        self.block = block
        super().__init__(f"Could not parse commit footer: {block}")


class CategoryParsingError(ParserError):
    """Raised when the input does not start with a category keyword."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"No category found at start of: {text!r}")
