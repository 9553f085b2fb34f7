"""Configuration using pydantic-settings.

Values come from ``DOCSMD_*`` environment variables or a ``.env`` file, then
from command-line flags. A Settings instance is created by the CLI and passed
to the collaborators that need it.
"""

from __future__ import annotations

import stat
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "docsmd"
CREDENTIALS_FILENAME = "config.json"
TOKEN_FILENAME = "token.json"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Tool settings.

    Environment variables:
    - DOCSMD_CONFIG_DIR: Directory for credentials and the token cache
    - DOCSMD_CREDENTIALS_FILE: OAuth client credentials JSON
    - DOCSMD_TOKEN_FILE: Token cache file
    - DOCSMD_CALLBACK_PORT: Port of the local OAuth callback listener
    - DOCSMD_REQUEST_TIMEOUT: HTTP timeout in seconds
    - DOCSMD_LOG_LEVEL: Minimum log level
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCSMD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    config_dir: Path = DEFAULT_CONFIG_DIR
    credentials_file: Path | None = None
    token_file: Path | None = None

    callback_port: int = Field(8080, ge=0, le=65535)
    request_timeout: int = Field(60, gt=0)

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def credentials_path(self) -> Path:
        """OAuth client credentials file (defaults to <config_dir>/config.json)."""
        return self.credentials_file or self.config_dir / CREDENTIALS_FILENAME

    @property
    def token_path(self) -> Path:
        """Token cache file (defaults to <config_dir>/token.json)."""
        return self.token_file or self.config_dir / TOKEN_FILENAME

    def ensure_config_dir(self) -> Path:
        """Create the config directory, readable only by the owner (0700)."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_dir.chmod(stat.S_IRWXU)
        return self.config_dir
