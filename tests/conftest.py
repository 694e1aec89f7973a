"""Shared test fixtures for the front-end test suite."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from animekai.config.settings import FrontendSettings
from animekai.main import create_app
from animekai.upstream.client import UpstreamClient

UPSTREAM = "https://upstream.test"

UPSTREAM_FAILURE: dict[str, Any] = {
    "success": False,
    "error": "Request failed with status code 500",
}


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> FrontendSettings:
    """Test settings with safe defaults."""
    return FrontendSettings(port=3000, log_level="DEBUG")


# ---------------------------------------------------------------------------
# Upstream + app fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def upstream_responses() -> dict[str, Any]:
    """Upstream path -> decoded body. Unknown paths answer with UPSTREAM_FAILURE."""
    return {}


@pytest.fixture
def upstream(upstream_responses: dict[str, Any]) -> AsyncMock:
    """Stand-in UpstreamClient answering from ``upstream_responses``."""
    client = AsyncMock(spec=UpstreamClient)
    client.base_url = UPSTREAM
    client.fetch.side_effect = lambda path: upstream_responses.get(path, UPSTREAM_FAILURE)
    return client


@pytest.fixture
def client(settings: FrontendSettings, upstream: AsyncMock) -> TestClient:
    app = create_app(settings=settings, client=upstream)
    return TestClient(app, raise_server_exceptions=False)
