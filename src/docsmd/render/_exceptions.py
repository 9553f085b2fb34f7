"""Public exceptions for the render module."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for errors that abort a Markdown conversion."""


class TabNotFoundError(ConversionError):
    """Raised when the requested tab ID matches no tab in the document."""

    def __init__(self, tab_id: str) -> None:
        super().__init__(f"tab '{tab_id}' not found in document")
        self.tab_id = tab_id


class FrontmatterError(ConversionError):
    """Raised when the frontmatter block cannot be serialized."""
