from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import pytest

from fb_ads_mcp.config import get_settings
from fb_ads_mcp.graph.gateway import GraphGateway


@pytest.fixture(autouse=True)
def configure_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point every test at a non-production host and reset cached settings."""

    monkeypatch.setenv("TESTING", "true")
    monkeypatch.setenv("FACEBOOK_ACCESS_TOKEN", "test-token")
    monkeypatch.setenv("FB_ADS_MCP_GRAPH_API_BASE_URL", "https://example.com")
    monkeypatch.setenv("FB_ADS_MCP_GRAPH_VIDEO_BASE_URL", "https://video.example.com")
    monkeypatch.setenv("FB_ADS_MCP_UPLOAD_TRANSIENT_RETRY_DELAY", "0")
    monkeypatch.delenv("ENABLED_CATEGORIES", raising=False)
    monkeypatch.delenv("FB_ADS_MCP_ENABLED_CATEGORIES", raising=False)
    monkeypatch.delenv("FB_ADS_MCP_ACCESS_TOKEN", raising=False)

    get_settings.cache_clear()
    _ = get_settings()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def gateway() -> AsyncIterator[GraphGateway]:
    gw = GraphGateway()
    yield gw
    await gw.aclose()


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "asyncio: mark async tests")
