"""OAuth2 credentials for the Google Docs and Drive APIs.

Runs the three-legged authorization-code flow for an installed (Desktop)
OAuth client: a local callback listener receives the code after the user
approves access in the browser. The resulting token, including its refresh
token, is cached on disk with owner-only permissions and refreshed when it
expires.
"""

from __future__ import annotations

import json
import stat
from pathlib import Path
from typing import TYPE_CHECKING, Any

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from loguru import logger

if TYPE_CHECKING:
    from docsmd.config import Settings

# Google Docs API scope for read-only access
DOCS_SCOPE = "https://www.googleapis.com/auth/documents.readonly"
# Google Drive API scope for read-only access (used for fetching comments)
DRIVE_READONLY_SCOPE = "https://www.googleapis.com/auth/drive.readonly"
SCOPES = [DOCS_SCOPE, DRIVE_READONLY_SCOPE]

DEFAULT_CALLBACK_PORT = 8080

_SETUP_HELP = """

To fix this:
1. Go to https://console.cloud.google.com/
2. Create OAuth 2.0 credentials for a Desktop application
3. Download the credentials JSON file
4. Provide the path using --config flag"""

_AUTH_PROMPT = (
    "Opening browser for authentication...\n"
    "If the browser doesn't open automatically, visit this URL:\n{url}\n"
)
_AUTH_SUCCESS = (
    "Authorization successful! You can close this window and return to the terminal."
)


class CredentialsError(Exception):
    """Raised when the OAuth client credentials are missing or invalid."""


class CredentialsManager:
    """Obtains and caches user credentials for read-only document access.

    Args:
        client_secrets_path: OAuth client credentials JSON downloaded from the
            Google Cloud console (Desktop or Web application client).
        token_cache_path: Where the authorized user token is stored.
        callback_port: Port of the local listener receiving the redirect.
        open_browser: Whether to launch the browser for the consent screen.
    """

    def __init__(
        self,
        client_secrets_path: str | Path,
        token_cache_path: str | Path,
        callback_port: int = DEFAULT_CALLBACK_PORT,
        open_browser: bool = True,
    ) -> None:
        self._client_secrets_path = Path(client_secrets_path)
        self._token_cache_path = Path(token_cache_path)
        self._callback_port = callback_port
        self._open_browser = open_browser

    @classmethod
    def from_settings(cls, settings: Settings) -> CredentialsManager:
        """Create a manager for the paths and port in ``settings``."""
        return cls(
            client_secrets_path=settings.credentials_path,
            token_cache_path=settings.token_path,
            callback_port=settings.callback_port,
        )

    @property
    def token_cache_path(self) -> Path:
        """Return the path where tokens are cached."""
        return self._token_cache_path

    def load_client_config(self) -> dict[str, Any]:
        """Read and validate the OAuth client credentials file.

        Raises:
            CredentialsError: If the file is missing, unreadable, or is not an
                OAuth client configuration.
        """
        path = self._client_secrets_path
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise CredentialsError(
                f"failed to read credentials file {path}: {e}{_SETUP_HELP}"
            ) from e
        except json.JSONDecodeError as e:
            raise CredentialsError(f"failed to parse credentials: {e}") from e

        if not isinstance(data, dict) or not ({"installed", "web"} & data.keys()):
            raise CredentialsError(
                "failed to parse credentials: expected an OAuth client file with "
                f"an 'installed' or 'web' section{_SETUP_HELP}"
            )
        return data

    def get_credentials(self, force_refresh: bool = False) -> Credentials:
        """Get valid credentials, authenticating if necessary.

        Uses the cached token when it is still valid, refreshes it when it has
        expired, and otherwise runs the browser authorization flow.

        Args:
            force_refresh: If True, ignore the cache and re-authenticate.

        Raises:
            CredentialsError: If the client credentials file is missing or
                malformed, or the callback listener cannot start.
        """
        client_config = self.load_client_config()

        if not force_refresh:
            cached = self._load_cached_credentials()
            if cached is not None and cached.valid:
                logger.debug("Using cached token from {}", self._token_cache_path)
                return cached
            if cached is not None and cached.refresh_token:
                try:
                    cached.refresh(Request())
                except RefreshError as e:
                    logger.warning("Failed to refresh cached token: {}", e)
                else:
                    logger.debug("Refreshed cached token")
                    self._save_credentials(cached)
                    return cached

        logger.info("No cached token found. Starting OAuth2 flow...")
        credentials = self._authenticate(client_config)
        self._save_credentials(credentials)
        return credentials

    def _authenticate(self, client_config: dict[str, Any]) -> Credentials:
        """Run the authorization-code flow with a local callback listener.

        The listener serves a single redirect and is shut down afterwards.
        """
        flow = InstalledAppFlow.from_client_config(client_config, scopes=SCOPES)
        try:
            credentials: Credentials = flow.run_local_server(
                host="localhost",
                port=self._callback_port,
                open_browser=self._open_browser,
                authorization_prompt_message=_AUTH_PROMPT,
                success_message=_AUTH_SUCCESS,
                access_type="offline",
            )
        except OSError as e:
            raise CredentialsError(
                f"failed to start callback server on port {self._callback_port}: {e}"
            ) from e
        return credentials

    def _load_cached_credentials(self) -> Credentials | None:
        """Load the cached token, or None if absent or unreadable."""
        if not self._token_cache_path.exists():
            return None

        try:
            data = json.loads(self._token_cache_path.read_text(encoding="utf-8"))
            return Credentials.from_authorized_user_info(data, SCOPES)
        except (OSError, json.JSONDecodeError, ValueError) as e:
            logger.warning("Invalid cached token: {}", e)
            return None

    def _save_credentials(self, credentials: Credentials) -> None:
        """Save token to cache file with secure permissions.

        A directory created here is made owner-only (0700); an existing one
        keeps its permissions. Failing to write the cache is not fatal: the
        credentials are still usable for this run.
        """
        parent = self._token_cache_path.parent
        try:
            if not parent.exists():
                parent.mkdir(parents=True)
                parent.chmod(stat.S_IRWXU)

            # Write to temp file, set permissions, then rename atomically
            temp_path = self._token_cache_path.with_suffix(".tmp")
            temp_path.write_text(credentials.to_json(), encoding="utf-8")
            temp_path.chmod(stat.S_IRUSR | stat.S_IWUSR)  # 0600
            temp_path.replace(self._token_cache_path)
        except OSError as e:
            logger.warning("Failed to save token to {}: {}", self._token_cache_path, e)
            return
        logger.info("Token saved to {}", self._token_cache_path)
