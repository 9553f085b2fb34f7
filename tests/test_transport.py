"""Tests for transport layer."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import httpx
import pytest

from docsmd.transport import (
    API_BASE,
    COMMENTS_PAGE_SIZE,
    DRIVE_API_BASE,
    APIError,
    AuthenticationError,
    DocumentData,
    GoogleDocsTransport,
    LocalFileTransport,
    NotFoundError,
    PermissionDeniedError,
    TransportError,
)


def test_transport_error_hierarchy() -> None:
    """Test that transport errors have correct inheritance."""
    assert issubclass(AuthenticationError, TransportError)
    assert issubclass(PermissionDeniedError, AuthenticationError)
    assert issubclass(NotFoundError, TransportError)
    assert issubclass(APIError, TransportError)


def test_api_error_has_status_code() -> None:
    error = APIError("Test error", status_code=500)
    assert error.status_code == 500
    assert "Test error" in str(error)


def test_document_data_is_frozen() -> None:
    data = DocumentData(document_id="abc", title="T", raw={"documentId": "abc"})
    with pytest.raises(AttributeError):
        data.document_id = "modified"  # type: ignore[misc]


def _mock_transport(handler: Any) -> GoogleDocsTransport:
    """GoogleDocsTransport whose HTTP client is served by ``handler``."""
    transport = GoogleDocsTransport(access_token="test-token")
    transport._client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        headers={"Authorization": "Bearer test-token"},
    )
    return transport


class TestGoogleDocsTransport:
    @pytest.mark.asyncio
    async def test_get_document_requests_tab_content(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200, json={"documentId": "doc1", "title": "Doc One", "tabs": []}
            )

        transport = _mock_transport(handler)
        try:
            data = await transport.get_document("doc1")
        finally:
            await transport.close()

        assert data.document_id == "doc1"
        assert data.title == "Doc One"
        assert data.raw["tabs"] == []
        assert len(requests) == 1
        assert str(requests[0].url).startswith(f"{API_BASE}/doc1")
        assert requests[0].url.params["includeTabsContent"] == "true"
        assert requests[0].headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_list_comments_follows_pages(self) -> None:
        pages = {
            None: {"comments": [{"content": "one"}], "nextPageToken": "p2"},
            "p2": {"comments": [{"content": "two"}]},
        }
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=pages[request.url.params.get("pageToken")])

        transport = _mock_transport(handler)
        try:
            comments = await transport.list_comments("doc1")
        finally:
            await transport.close()

        assert [c["content"] for c in comments] == ["one", "two"]
        assert len(seen) == 2
        assert str(seen[0].url).startswith(f"{DRIVE_API_BASE}/doc1/comments")
        assert seen[0].url.params["pageSize"] == str(COMMENTS_PAGE_SIZE)
        assert "replies(" in seen[0].url.params["fields"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "error_type"),
        [
            (401, AuthenticationError),
            (403, PermissionDeniedError),
            (404, NotFoundError),
        ],
    )
    async def test_http_errors_are_mapped(
        self, status: int, error_type: type[TransportError]
    ) -> None:
        transport = _mock_transport(lambda request: httpx.Response(status))
        try:
            with pytest.raises(error_type):
                await transport.get_document("doc1")
        finally:
            await transport.close()

    @pytest.mark.asyncio
    async def test_other_http_errors_carry_status(self) -> None:
        transport = _mock_transport(
            lambda request: httpx.Response(500, text="backend exploded")
        )
        try:
            with pytest.raises(APIError) as exc_info:
                await transport.get_document("doc1")
        finally:
            await transport.close()

        assert exc_info.value.status_code == 500
        assert "backend exploded" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_network_errors(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        transport = _mock_transport(handler)
        try:
            with pytest.raises(TransportError, match="Network error"):
                await transport.get_document("doc1")
        finally:
            await transport.close()


class TestLocalFileTransport:
    @pytest.mark.asyncio
    async def test_get_document(self, golden_dir: Path) -> None:
        transport = LocalFileTransport(golden_dir)
        data = await transport.get_document("flat_doc")
        assert data.document_id == "flat_doc"
        assert data.title == "Project Notes"

    @pytest.mark.asyncio
    async def test_missing_document(self, tmp_path: Path) -> None:
        transport = LocalFileTransport(tmp_path)
        with pytest.raises(NotFoundError):
            await transport.get_document("nope")

    @pytest.mark.asyncio
    async def test_comments(self, golden_dir: Path) -> None:
        transport = LocalFileTransport(golden_dir)
        comments = await transport.list_comments("tabbed_doc")
        assert [c["id"] for c in comments] == ["c1", "c2"]

    @pytest.mark.asyncio
    async def test_missing_comments_file_is_empty(self, golden_dir: Path) -> None:
        transport = LocalFileTransport(golden_dir)
        assert await transport.list_comments("flat_doc") == []
