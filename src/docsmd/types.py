"""Data types for the Markdown renderer.

Immutable document model built once from the API payload and handed to the
renderer read-only. No logic, just types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias


class HeadingLevel(Enum):
    """Paragraph heading styles (values match the API's namedStyleType)."""

    TITLE = "TITLE"
    SUBTITLE = "SUBTITLE"
    HEADING_1 = "HEADING_1"
    HEADING_2 = "HEADING_2"
    HEADING_3 = "HEADING_3"
    HEADING_4 = "HEADING_4"
    HEADING_5 = "HEADING_5"
    HEADING_6 = "HEADING_6"


# --- Inline content ---


@dataclass(frozen=True)
class TextStyle:
    """Inline style of a run. Only the attributes Markdown can express."""

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    link_url: str | None = None


@dataclass(frozen=True)
class Run:
    """A contiguous span of literal text sharing one style."""

    text: str = ""
    style: TextStyle | None = None


# --- Blocks ---


@dataclass(frozen=True)
class ListMembership:
    """Bullet information of a list paragraph.

    Attributes:
        list_id: Identifier of the list the paragraph belongs to
        nesting_level: Depth within the list, 0..8
    """

    list_id: str
    nesting_level: int = 0


@dataclass(frozen=True)
class Paragraph:
    """A paragraph block."""

    runs: tuple[Run, ...] = ()
    heading: HeadingLevel | None = None
    bullet: ListMembership | None = None


@dataclass(frozen=True)
class TableCell:
    content: tuple[Block, ...] = ()


@dataclass(frozen=True)
class TableRow:
    cells: tuple[TableCell, ...] = ()


@dataclass(frozen=True)
class Table:
    """A table block. Rows need not be rectangular."""

    rows: tuple[TableRow, ...] = ()


Block: TypeAlias = Paragraph | Table
Body: TypeAlias = tuple[Block, ...]


# --- Document structure ---


@dataclass(frozen=True)
class Tab:
    """A named, independently addressable section of a document."""

    tab_id: str
    title: str = ""
    body: Body = ()
    children: tuple[Tab, ...] = ()


@dataclass(frozen=True)
class FlatBody:
    """Content of a document without tabs."""

    body: Body = ()


@dataclass(frozen=True)
class TabForest:
    """Content of a document organised in (possibly nested) tabs."""

    tabs: tuple[Tab, ...] = ()


DocumentContent: TypeAlias = FlatBody | TabForest


@dataclass(frozen=True)
class Document:
    title: str = ""
    content: DocumentContent = field(default_factory=FlatBody)


# --- Comments ---


@dataclass(frozen=True)
class Reply:
    """A reply on a comment thread. Replies do not nest."""

    author: str = ""
    content: str = ""
    created_time: str = ""


@dataclass(frozen=True)
class Comment:
    """A comment thread on a document.

    Attributes:
        author: Display name, empty when the API omits it
        content: Literal comment text (never re-rendered)
        quoted_text: Excerpt of the document text the comment is anchored to
        created_time: RFC 3339 timestamp, empty when absent
        resolved: Whether the thread was resolved
        replies: Replies in thread order
    """

    author: str = ""
    content: str = ""
    quoted_text: str = ""
    created_time: str = ""
    resolved: bool = False
    replies: tuple[Reply, ...] = ()
