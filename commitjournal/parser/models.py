"""Data models for parsed commit messages.

Contains:
- SummaryElement: The parsed first line of a commit
- ListElement / ListBlock: Bullet items of a list block
- ParagraphElement / ParagraphBlock: Free text blocks
- BodyElement: Discriminated union of ListBlock and ParagraphBlock
- FooterElement: A "Key: value" footer line
- ParsedCommit: The full parsed message
- ParsedTag: A version tag with its date, used to group commits
"""

import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _FrozenModel(BaseModel):
    """Base for immutable parser models."""

    model_config = ConfigDict(frozen=True)


class SummaryElement(_FrozenModel):
    """The summary (first block) of a commit message.

    Attributes:
        prefix: Ticket key such as "AB-123", or "" when absent.
        category: One of the category keywords (Added, Fixed, ...).
        text: Summary text with tag markers removed.
        tags: Tags extracted from the summary.
    """

    prefix: str = ""
    category: str
    text: str
    tags: tuple[str, ...] = ()


class ListElement(_FrozenModel):
    """A single item of a list block.

    Attributes:
        category: Category keyword, or "" when the item has none.
        text: Item text with tag markers removed.
        tags: Tags extracted from the item.
    """

    category: str = ""
    text: str
    tags: tuple[str, ...] = ()


class ParagraphElement(_FrozenModel):
    """A free text paragraph."""

    text: str
    tags: tuple[str, ...] = ()


class ListBlock(_FrozenModel):
    """Body element holding the items of one list block."""

    kind: Literal["list"] = "list"
    items: tuple[ListElement, ...] = ()


class ParagraphBlock(_FrozenModel):
    """Body element holding one paragraph."""

    kind: Literal["paragraph"] = "paragraph"
    paragraph: ParagraphElement


BodyElement = Annotated[Union[ListBlock, ParagraphBlock], Field(discriminator="kind")]


class FooterElement(_FrozenModel):
    """A footer line such as "Closes: AB-1"."""

    key: str
    value: str


class ParsedCommit(_FrozenModel):
    """A fully parsed commit message.

    Attributes:
        summary: The parsed summary line.
        body: List and paragraph blocks in message order.
        footer: Footer lines in message order.
    """

    summary: SummaryElement
    body: tuple[BodyElement, ...] = ()
    footer: tuple[FooterElement, ...] = ()


class ParsedTag(_FrozenModel):
    """A version tag and the date it was created."""

    name: str
    date: datetime.date
