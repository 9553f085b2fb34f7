"""Where document JSON comes from.

GoogleDocsTransport reads a document (all tabs included) from the Docs API
and its comment threads from the Drive API. LocalFileTransport serves the
same payloads from JSON files on disk.
"""

from __future__ import annotations

import json
import ssl
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

import certifi
import httpx
from loguru import logger

API_BASE = "https://docs.googleapis.com/v1/documents"
DRIVE_API_BASE = "https://www.googleapis.com/drive/v3/files"
DEFAULT_TIMEOUT = 60
COMMENTS_PAGE_SIZE = 100

# Drive field mask: only what the Comments section renders
_COMMENTS_FIELDS = (
    "comments(author(displayName),content,quotedFileContent,createdTime,"
    "resolved,deleted,"
    "replies(author(displayName),content,createdTime,deleted)),"
    "nextPageToken"
)


class TransportError(Exception):
    """A document or its comments could not be retrieved."""


class AuthenticationError(TransportError):
    """The access token was rejected (HTTP 401)."""


class PermissionDeniedError(AuthenticationError):
    """The caller may not read the document, or the token lacks a scope (HTTP 403)."""


class NotFoundError(TransportError):
    """No document with this ID is visible to the caller (HTTP 404)."""


class APIError(TransportError):
    """Any other HTTP error status; keeps the status code."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class DocumentData:
    """A fetched document: its ID, title and untouched JSON payload."""

    document_id: str
    title: str
    raw: dict[str, Any]


class Transport(ABC):
    """Source of document and comment payloads for DocsClient."""

    @abstractmethod
    async def get_document(self, document_id: str) -> DocumentData:
        """Return the document with the content of every tab."""
        ...

    @abstractmethod
    async def list_comments(self, file_id: str) -> list[dict[str, Any]]:
        """Return every comment resource on the file, across all pages."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection, if any."""
        ...


class GoogleDocsTransport(Transport):
    """Reads from the Google Docs and Drive REST APIs with a bearer token."""

    def __init__(
        self,
        access_token: str,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Create the HTTP client.

        Args:
            access_token: OAuth2 token carrying the documents.readonly scope
                (and drive.readonly when comments are listed)
            timeout: Per-request timeout in seconds
        """
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        self._client = httpx.AsyncClient(
            timeout=timeout,
            verify=ssl_context,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
            },
        )

    async def get_document(self, document_id: str) -> DocumentData:
        """GET documents/{id}; includeTabsContent returns every tab's body."""
        url = f"{API_BASE}/{document_id}"
        response = await self._request(url, params={"includeTabsContent": "true"})

        return DocumentData(
            document_id=response.get("documentId", document_id),
            title=response.get("title", ""),
            raw=response,
        )

    async def list_comments(self, file_id: str) -> list[dict[str, Any]]:
        """GET files/{id}/comments, following nextPageToken until exhausted."""
        url = f"{DRIVE_API_BASE}/{file_id}/comments"
        params: dict[str, Any] = {
            "fields": _COMMENTS_FIELDS,
            "pageSize": COMMENTS_PAGE_SIZE,
        }
        comments: list[dict[str, Any]] = []
        pages = 0
        while True:
            page = await self._request(url, params=params)
            pages += 1
            comments.extend(page.get("comments", []))
            next_token = page.get("nextPageToken")
            if not next_token:
                break
            params = {**params, "pageToken": next_token}
        logger.debug("{} comments in {} page(s) for {}", len(comments), pages, file_id)
        return comments

    async def _request(
        self, url: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """GET ``url`` and return the decoded JSON object."""
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            result: dict[str, Any] = response.json()
            return result
        except httpx.HTTPStatusError as e:
            self._handle_http_error(e)
            raise
        except httpx.RequestError as e:
            raise TransportError(f"Network error: {e}") from e

    def _handle_http_error(self, e: httpx.HTTPStatusError) -> None:
        """Raise the TransportError subclass matching the response status."""
        status = e.response.status_code
        if status == 401:
            raise AuthenticationError(
                "Invalid or expired access token. Run with --init to re-authenticate."
            ) from e
        if status == 403:
            raise PermissionDeniedError(
                "Access denied. The document is private and you don't have "
                "permission, or the token lacks the required scopes."
            ) from e
        if status == 404:
            raise NotFoundError(
                "Document not found. Check the document ID and sharing permissions."
            ) from e
        body = e.response.text
        raise APIError(f"API error ({status}): {body}", status_code=status) from e

    async def close(self) -> None:
        """Close the httpx client."""
        await self._client.aclose()


class LocalFileTransport(Transport):
    """Serves saved API responses from a directory.

    Layout:
        directory/
            <document_id>.json
            <document_id>_comments.json   (optional)
    """

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    async def get_document(self, document_id: str) -> DocumentData:
        """Load ``<document_id>.json``."""
        path = self._directory / f"{document_id}.json"
        if not path.exists():
            raise NotFoundError(f"Document not found: {path}")
        response = json.loads(path.read_text(encoding="utf-8"))

        return DocumentData(
            document_id=response.get("documentId", document_id),
            title=response.get("title", ""),
            raw=response,
        )

    async def list_comments(self, file_id: str) -> list[dict[str, Any]]:
        """Load the ``comments`` list of ``<file_id>_comments.json``, if present."""
        path = self._directory / f"{file_id}_comments.json"
        if not path.exists():
            return []
        data = json.loads(path.read_text(encoding="utf-8"))
        result: list[dict[str, Any]] = data.get("comments", [])
        return result

    async def close(self) -> None:
        """Nothing to release."""
