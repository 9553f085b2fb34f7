"""DocsClient - fetches a document and renders it as Markdown.

Also holds the URL helpers that turn a user-supplied Google Docs address into
a document ID and an optional tab ID.
"""

from __future__ import annotations

import re
import urllib.parse
from typing import TYPE_CHECKING

from loguru import logger

from docsmd.from_raw import comments_from_raw, document_from_api
from docsmd.render import convert_document_to_markdown, select_body

if TYPE_CHECKING:
    from docsmd.transport import Transport
    from docsmd.types import Comment, Document

_DOCUMENT_URL_RE = re.compile(r"https://docs\.google\.com/document/d/([a-zA-Z0-9_-]+)")


class InvalidURLError(ValueError):
    """Raised when an address is not a Google Docs document URL."""


def parse_document_id(url: str) -> str:
    """Extract the document ID from a Google Docs URL.

    Supports:
      https://docs.google.com/document/d/DOC_ID/edit
      https://docs.google.com/document/d/DOC_ID/edit?usp=sharing
      https://docs.google.com/document/d/DOC_ID/
      https://docs.google.com/document/d/DOC_ID

    Raises:
        InvalidURLError: If the URL is not a Google Docs document URL
    """
    match = _DOCUMENT_URL_RE.search(url)
    if not match:
        raise InvalidURLError(
            "invalid Google Docs URL: expected format "
            f"'https://docs.google.com/document/d/{{DOC_ID}}...', got '{url}'"
        )
    return match.group(1)


def parse_tab_id(url: str) -> str | None:
    """Extract the tab ID (``?tab=t.xxx``) from a Google Docs URL, if any.

    The fragment is checked too, for links of the form ``#tab=t.xxx``.
    """
    parsed = urllib.parse.urlparse(url)
    for part in (parsed.query, parsed.fragment):
        values = urllib.parse.parse_qs(part).get("tab")
        if values and values[0]:
            return values[0]
    return None


class DocsClient:
    """Fetches documents and comments through a Transport."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def fetch(
        self, document_id: str, *, include_comments: bool = False
    ) -> tuple[Document, list[Comment]]:
        """Fetch a document and, optionally, its comment threads.

        Args:
            document_id: The document identifier
            include_comments: Whether to fetch comments via the Drive API

        Returns:
            The parsed document and its (non-deleted) comments
        """
        logger.info("Fetching document {}...", document_id)
        document_data = await self._transport.get_document(document_id)
        document = document_from_api(document_data.raw)

        comments: list[Comment] = []
        if include_comments:
            logger.info("Fetching comments...")
            raw_comments = await self._transport.list_comments(document_id)
            comments = comments_from_raw(raw_comments)
            logger.debug("{} comment thread(s)", len(comments))

        return document, comments

    async def export(
        self,
        document_id: str,
        *,
        tab_id: str | None = None,
        include_comments: bool = False,
    ) -> str:
        """Fetch a document and render it as Markdown.

        Args:
            document_id: The document identifier
            tab_id: Tab to render; the first tab (or the body) when omitted
            include_comments: Whether to append the comment threads

        Returns:
            The Markdown text

        Raises:
            TabNotFoundError: If ``tab_id`` is not a tab of the document
        """
        document, comments = await self.fetch(
            document_id, include_comments=include_comments
        )

        if tab_id:
            _, tab = select_body(document, tab_id)
            if tab is not None:
                logger.info("Using tab: {}", tab.title)

        return convert_document_to_markdown(document, tab_id=tab_id, comments=comments)

    async def close(self) -> None:
        """Close the underlying transport."""
        await self._transport.close()
