"""Build the document model from raw API responses.

document_from_api(raw) parses a Docs API v1 document; comments_from_raw(raw)
parses the Drive API v3 comment list. Both degrade gracefully: missing optional
fields become empty values and unsupported content is dropped.
"""

from __future__ import annotations

from typing import Any

from docsmd import api_types
from docsmd.types import (
    Block,
    Body,
    Comment,
    Document,
    FlatBody,
    HeadingLevel,
    ListMembership,
    Paragraph,
    Reply,
    Run,
    Tab,
    Table,
    TableCell,
    TableRow,
    TabForest,
    TextStyle,
)

_HEADINGS = {level.value: level for level in HeadingLevel}


def _convert_text_style(style: api_types.TextStyle | None) -> TextStyle | None:
    if style is None:
        return None
    link_url = style.link.url if style.link and style.link.url else None
    return TextStyle(
        bold=bool(style.bold),
        italic=bool(style.italic),
        strikethrough=bool(style.strikethrough),
        link_url=link_url,
    )


def _convert_paragraph(paragraph: api_types.Paragraph) -> Paragraph:
    runs: list[Run] = []
    for element in paragraph.elements or []:
        # Inline objects, page breaks, people chips etc. carry no text
        if element.text_run is None:
            continue
        runs.append(
            Run(
                text=element.text_run.content or "",
                style=_convert_text_style(element.text_run.text_style),
            )
        )

    heading = None
    if paragraph.paragraph_style and paragraph.paragraph_style.named_style_type:
        heading = _HEADINGS.get(paragraph.paragraph_style.named_style_type)

    bullet = None
    if paragraph.bullet is not None:
        bullet = ListMembership(
            list_id=paragraph.bullet.list_id or "",
            nesting_level=paragraph.bullet.nesting_level or 0,
        )

    return Paragraph(runs=tuple(runs), heading=heading, bullet=bullet)


def _convert_table(table: api_types.Table) -> Table:
    rows = []
    for row in table.table_rows or []:
        cells = tuple(
            TableCell(content=_convert_content(cell.content))
            for cell in row.table_cells or []
        )
        rows.append(TableRow(cells=cells))
    return Table(rows=tuple(rows))


def _convert_content(content: list[api_types.StructuralElement] | None) -> Body:
    """Convert structural elements, dropping section breaks and TOCs."""
    blocks: list[Block] = []
    for element in content or []:
        if element.paragraph is not None:
            blocks.append(_convert_paragraph(element.paragraph))
        elif element.table is not None:
            blocks.append(_convert_table(element.table))
    return tuple(blocks)


def _convert_tab(tab: api_types.Tab) -> Tab:
    props = tab.tab_properties or api_types.TabProperties()
    body = None
    if tab.document_tab is not None and tab.document_tab.body is not None:
        body = tab.document_tab.body.content
    return Tab(
        tab_id=props.tab_id or "",
        title=props.title or "",
        body=_convert_content(body),
        children=tuple(_convert_tab(child) for child in tab.child_tabs or []),
    )


def document_from_api(raw: dict[str, Any]) -> Document:
    """Parse a Docs API v1 document response into a Document.

    Args:
        raw: The JSON response of ``documents.get`` (with or without
            ``includeTabsContent``)

    Returns:
        Document whose content is a TabForest when the response has tabs,
        a FlatBody otherwise
    """
    doc = api_types.Document.model_validate(raw)

    if doc.tabs:
        content: TabForest | FlatBody = TabForest(
            tabs=tuple(_convert_tab(tab) for tab in doc.tabs)
        )
    else:
        content = FlatBody(body=_convert_content(doc.body.content if doc.body else None))

    return Document(title=doc.title or "", content=content)


def _parse_author(author_dict: dict[str, Any] | None) -> str:
    """Display name of a Drive API user, empty when absent."""
    if not author_dict:
        return ""
    return str(author_dict.get("displayName") or "")


def _parse_reply(reply_dict: dict[str, Any]) -> Reply:
    return Reply(
        author=_parse_author(reply_dict.get("author")),
        content=reply_dict.get("content") or "",
        created_time=reply_dict.get("createdTime") or "",
    )


def _parse_comment(comment_dict: dict[str, Any]) -> Comment:
    quoted = comment_dict.get("quotedFileContent") or {}
    replies = tuple(
        _parse_reply(r)
        for r in comment_dict.get("replies") or []
        if not r.get("deleted", False)
    )
    return Comment(
        author=_parse_author(comment_dict.get("author")),
        content=comment_dict.get("content") or "",
        quoted_text=quoted.get("value") or "",
        created_time=comment_dict.get("createdTime") or "",
        resolved=bool(comment_dict.get("resolved", False)),
        replies=replies,
    )


def comments_from_raw(raw_comments: list[dict[str, Any]]) -> list[Comment]:
    """Parse Drive API v3 comment resources, skipping deleted comments and replies."""
    return [_parse_comment(c) for c in raw_comments if not c.get("deleted", False)]
