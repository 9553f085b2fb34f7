"""Render module: document model to Markdown.

Public API:
    convert_document_to_markdown(document, tab_id=..., comments=...) -> str
    select_body(document, tab_id) -> (body, tab)
    find_tab(tabs, tab_id) -> Tab | None
    render_run, render_runs, render_paragraph, render_table, render_comments
    generate_frontmatter(title, tab_title) -> str
"""

from docsmd.render._blocks import render_paragraph, render_table
from docsmd.render._comments import render_comments
from docsmd.render._converter import (
    convert_document_to_markdown,
    find_tab,
    first_tab,
    render_body,
    select_body,
)
from docsmd.render._exceptions import ConversionError, FrontmatterError, TabNotFoundError
from docsmd.render._frontmatter import generate_frontmatter
from docsmd.render._inline import render_run, render_runs

__all__ = [
    "ConversionError",
    "FrontmatterError",
    "TabNotFoundError",
    "convert_document_to_markdown",
    "find_tab",
    "first_tab",
    "generate_frontmatter",
    "render_body",
    "render_comments",
    "render_paragraph",
    "render_run",
    "render_runs",
    "render_table",
    "select_body",
]
