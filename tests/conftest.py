"""Shared test fixtures for docsmd."""

from __future__ import annotations

from pathlib import Path

import pytest

from docsmd.transport import LocalFileTransport

GOLDEN_DIR = Path(__file__).parent / "golden"


@pytest.fixture
def golden_dir() -> Path:
    return GOLDEN_DIR


@pytest.fixture
def local_transport() -> LocalFileTransport:
    """Transport serving the golden API responses."""
    return LocalFileTransport(GOLDEN_DIR)


@pytest.fixture
def isolated_settings_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at a temporary path and clear DOCSMD_* vars."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("DOCSMD_CONFIG_DIR", str(config_dir))
    for name in (
        "DOCSMD_CREDENTIALS_FILE",
        "DOCSMD_TOKEN_FILE",
        "DOCSMD_CALLBACK_PORT",
        "DOCSMD_REQUEST_TIMEOUT",
        "DOCSMD_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)  # no stray .env file
    return config_dir
