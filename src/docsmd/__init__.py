"""docsmd - Google Docs to Markdown.

Fetches a Google Docs document through the Docs API and renders its headings,
paragraphs, lists, tables, inline formatting and (optionally) comment threads
as Markdown with YAML frontmatter.
"""

__version__ = "0.1.0"

from docsmd.client import DocsClient, InvalidURLError, parse_document_id, parse_tab_id
from docsmd.credentials import CredentialsError, CredentialsManager
from docsmd.from_raw import comments_from_raw, document_from_api
from docsmd.render import (
    ConversionError,
    FrontmatterError,
    TabNotFoundError,
    convert_document_to_markdown,
)
from docsmd.transport import (
    APIError,
    AuthenticationError,
    GoogleDocsTransport,
    LocalFileTransport,
    NotFoundError,
    PermissionDeniedError,
    Transport,
    TransportError,
)

__all__ = [
    "APIError",
    "AuthenticationError",
    "ConversionError",
    "CredentialsError",
    "CredentialsManager",
    "DocsClient",
    "FrontmatterError",
    "GoogleDocsTransport",
    "InvalidURLError",
    "LocalFileTransport",
    "NotFoundError",
    "PermissionDeniedError",
    "TabNotFoundError",
    "Transport",
    "TransportError",
    "__version__",
    "comments_from_raw",
    "convert_document_to_markdown",
    "document_from_api",
    "parse_document_id",
    "parse_tab_id",
]
