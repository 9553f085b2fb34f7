"""Document to Markdown: body selection, block dispatch and assembly."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import assert_never

from docsmd.render._blocks import render_paragraph, render_table
from docsmd.render._comments import render_comments
from docsmd.render._exceptions import TabNotFoundError
from docsmd.render._frontmatter import generate_frontmatter
from docsmd.types import Body, Comment, Document, FlatBody, Paragraph, Tab, Table, TabForest


def find_tab(tabs: Iterable[Tab], tab_id: str) -> Tab | None:
    """Find a tab by ID, searching pre-order depth-first.

    A parent is visited before its children and before its later siblings,
    so the first match in reading order wins.
    """
    for tab in tabs:
        if tab.tab_id == tab_id:
            return tab
        found = find_tab(tab.children, tab_id)
        if found is not None:
            return found
    return None


def first_tab(document: Document) -> Tab | None:
    """Return the first top-level tab, or None for documents without tabs."""
    match document.content:
        case TabForest(tabs=tabs) if tabs:
            return tabs[0]
        case TabForest() | FlatBody():
            return None
        case _:
            assert_never(document.content)


def select_body(document: Document, tab_id: str | None = None) -> tuple[Body, Tab | None]:
    """Pick the body to render.

    Args:
        document: The document
        tab_id: Optional tab to render; empty means the default body

    Returns:
        The body and the tab it belongs to (None for a flat body)

    Raises:
        TabNotFoundError: If ``tab_id`` is given and matches no tab
    """
    content = document.content
    if tab_id:
        tabs = content.tabs if isinstance(content, TabForest) else ()
        tab = find_tab(tabs, tab_id)
        if tab is None:
            raise TabNotFoundError(tab_id)
        return tab.body, tab

    match content:
        case TabForest():
            tab = first_tab(document)
            return (tab.body, tab) if tab is not None else ((), None)
        case FlatBody(body=body):
            return body, None
        case _:
            assert_never(content)


def render_body(body: Body) -> str:
    """Render every block of a body in order."""
    parts: list[str] = []
    for block in body:
        match block:
            case Paragraph():
                parts.append(render_paragraph(block.runs, block.heading, block.bullet))
            case Table():
                parts.append(render_table(block.rows))
            case _:
                assert_never(block)
    return "".join(parts)


def convert_document_to_markdown(
    document: Document,
    *,
    tab_id: str | None = None,
    comments: Sequence[Comment] = (),
) -> str:
    """Convert a document to Markdown with YAML frontmatter.

    Pure function of its inputs: converting the same input twice yields the
    same string.

    Args:
        document: The document to convert
        tab_id: Tab to render instead of the default body
        comments: Comment threads to append as a "Comments" section

    Returns:
        Frontmatter, a blank line, the body, then the optional comments

    Raises:
        TabNotFoundError: If ``tab_id`` matches no tab
        FrontmatterError: If the frontmatter cannot be serialized
    """
    body, tab = select_body(document, tab_id)
    frontmatter = generate_frontmatter(
        document.title, tab.title if tab is not None else None
    )
    return frontmatter + "\n" + render_body(body) + render_comments(comments)
