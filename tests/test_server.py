from __future__ import annotations

import pytest

from fb_ads_mcp.config import get_settings
from fb_ads_mcp.scopes import scope_tools
from fb_ads_mcp.server import FbAdsMcpServer, create_server, main


async def test_server_registers_meta_tools_and_default_scope(gateway) -> None:
    server = create_server(get_settings(), gateway=gateway)

    assert isinstance(server, FbAdsMcpServer)
    assert server.name == "fb-ads-mcp"
    names = {tool.name for tool in await server.list_tools()}
    assert {"tool_manager", "scope_selector", "facebook_batch", "facebook_video_upload"} <= names
    assert {tool.name for tool in scope_tools("essentials")} <= names
    assert "campaign_list_copies" not in names


async def test_enabled_categories_skip_unknown_names(monkeypatch, gateway) -> None:
    monkeypatch.setenv("ENABLED_CATEGORIES", "campaign, bogus")
    get_settings.cache_clear()

    server = create_server(get_settings(), gateway=gateway)

    names = {tool.name for tool in await server.list_tools()}
    assert {tool.name for tool in scope_tools("campaign")} <= names
    assert "ad_account_list_ads" not in names


def test_main_requires_access_token(monkeypatch) -> None:
    monkeypatch.delenv("FACEBOOK_ACCESS_TOKEN")
    get_settings.cache_clear()

    with pytest.raises(SystemExit) as exc:
        main([])

    assert exc.value.code == 2
