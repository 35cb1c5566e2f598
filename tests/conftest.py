"""Shared pytest fixtures for kong_admin_client tests."""

from __future__ import annotations

import os
from unittest.mock import MagicMock

import pytest

from kong_admin_client.config import KongConnectionConfig

BASE_URL = "http://kong.test:8001"


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear KONG_ADMIN_ environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("KONG_ADMIN_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def base_url() -> str:
    """Base URL of the mocked Admin API."""
    return BASE_URL


@pytest.fixture
def connection_config(base_url: str) -> KongConnectionConfig:
    """Create a test connection config."""
    return KongConnectionConfig(base_url=base_url, timeout=5, verify_ssl=False)


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock Kong Admin client."""
    return MagicMock()
