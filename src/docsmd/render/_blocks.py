"""Block rendering: paragraphs (headings, list items, plain text) and tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import assert_never

from docsmd.render._inline import render_runs
from docsmd.types import (
    Body,
    HeadingLevel,
    ListMembership,
    Paragraph,
    Run,
    Table,
    TableCell,
    TableRow,
)

# Title and subtitle share the markers of the first two heading levels
HEADING_MARKERS = {
    HeadingLevel.TITLE: "#",
    HeadingLevel.SUBTITLE: "##",
    HeadingLevel.HEADING_1: "#",
    HeadingLevel.HEADING_2: "##",
    HeadingLevel.HEADING_3: "###",
    HeadingLevel.HEADING_4: "####",
    HeadingLevel.HEADING_5: "#####",
    HeadingLevel.HEADING_6: "######",
}

LIST_INDENT = "  "


def _render_list_item(text: str, bullet: ListMembership) -> str:
    # Ordered and unordered lists both render with "-": the glyph type lives
    # in the document's list definitions, which are not part of the model.
    indent = LIST_INDENT * bullet.nesting_level
    return f"{indent}- {text}\n"


def render_paragraph(
    runs: Iterable[Run],
    heading: HeadingLevel | None = None,
    bullet: ListMembership | None = None,
) -> str:
    """Render one paragraph as a Markdown block.

    Args:
        runs: The paragraph's text runs
        heading: Heading style, if any (takes precedence over the bullet)
        bullet: List membership, if the paragraph is a list item

    Returns:
        ``"\\n"`` for an empty paragraph, a heading or plain paragraph
        followed by a blank line, or a single list line.
    """
    text = render_runs(runs).rstrip("\n")

    if not text:
        return "\n"

    if heading is not None:
        return f"{HEADING_MARKERS[heading]} {text}\n\n"

    if bullet is not None:
        return _render_list_item(text, bullet)

    return text + "\n\n"


def _cell_text(content: Body) -> str:
    """Single-line text of a table cell, built from its paragraphs only."""
    parts: list[str] = []
    for block in content:
        match block:
            case Paragraph():
                text = render_runs(block.runs).strip()
                parts.append(text.replace("\n", " "))
            case Table():
                # Nested tables are not rendered inside a cell
                continue
            case _:
                assert_never(block)
    return "".join(parts)


def _render_row(cells: Sequence[TableCell]) -> str:
    return "|" + "".join(f" {_cell_text(cell.content)} |" for cell in cells) + "\n"


def render_table(rows: Sequence[TableRow]) -> str:
    """Render a table as a pipe table.

    The first row is always treated as the header row; the separator has as
    many columns as that row, whatever the width of later rows.
    """
    if not rows:
        return ""

    lines = [_render_row(rows[0].cells), "|" + "---|" * len(rows[0].cells) + "\n"]
    lines.extend(_render_row(row.cells) for row in rows[1:])
    lines.append("\n")
    return "".join(lines)
