from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from mcp.server.fastmcp import FastMCP

from fb_ads_mcp.generated import OBJECT_SCOPES, ad, campaign
from fb_ads_mcp.registry import ToolRegistry
from fb_ads_mcp.scopes import CURATED_SCOPES, ScopeManager, UnknownScopeError, describe, scope_tools
from fb_ads_mcp.scopes import catalog

META = {"tool_manager", "scope_selector"}


@pytest.fixture
def registry(gateway) -> ToolRegistry:
    server = FastMCP(name="test")
    for name in sorted(META):
        server.add_tool(lambda: "ok", name=name)
    registry = ToolRegistry(server, gateway)
    registry.pin_current()
    return registry


@pytest.fixture
def manager(registry: ToolRegistry) -> ScopeManager:
    return ScopeManager(registry)


def expected_tools(*scopes: str) -> set[str]:
    return {tool.name for scope in scopes for tool in scope_tools(scope)} | META


def test_available_scopes() -> None:
    assert catalog.available_scopes() == [
        "ad",
        "adaccount",
        "adcreative",
        "adset",
        "campaign",
        "customaudience",
        "user",
        "essentials",
        "campaign_management",
        "reporting",
        "audience",
        "creative",
        "optimization",
        "video",
    ]


def test_descriptions() -> None:
    assert describe("essentials").startswith("[RECOMMENDED]")
    assert describe("essentials").endswith(f"({len(CURATED_SCOPES['essentials'].tools)} tools)")
    assert describe("campaign") == (
        f"[LOW-LEVEL] Campaign object - loads ALL {len(campaign.TOOLS)} tools. "
        "Use 'campaign_management' instead"
    )
    assert describe("user") == f"[LOW-LEVEL] User object - loads ALL {len(OBJECT_SCOPES['user'])} tools"


def test_validate_normalizes_and_rejects_unknown() -> None:
    assert catalog.validate([" Campaign ", "campaign", "ESSENTIALS", ""]) == ["campaign", "essentials"]

    with pytest.raises(UnknownScopeError) as exc:
        catalog.validate(["campaign", "bogus"])

    assert exc.value.names == ["bogus"]
    assert "essentials" in exc.value.error.details["available"]


def test_video_scope_contributes_no_generated_tools() -> None:
    assert scope_tools("video") == ()
    assert "ad_account_create_advideo" in {tool.name for tool in scope_tools("creative")}


@pytest.mark.asyncio
async def test_set_replaces_loaded_scopes(manager: ScopeManager, registry: ToolRegistry) -> None:
    notify = AsyncMock()

    change = await manager.set(["campaign", "ad"], notify=notify)
    assert change.loaded == ["ad", "campaign"]
    assert set(registry.names()) == expected_tools("campaign", "ad")
    assert notify.await_count == 1

    change = await manager.set(["campaign"], notify=notify)
    assert change.removed == ["ad"]
    assert change.unregistered == len(ad.TOOLS)
    assert set(registry.names()) == expected_tools("campaign")
    assert await manager.get() == ["campaign"]
    assert notify.await_count == 2


@pytest.mark.asyncio
async def test_repeated_set_notifies_once(manager: ScopeManager, registry: ToolRegistry) -> None:
    notify = AsyncMock()

    await manager.set(["campaign", "adset"], notify=notify)
    before = registry.names()
    change = await manager.set(["adset", "campaign"], notify=notify)

    assert change.changed is False
    assert registry.names() == before
    notify.assert_awaited_once()


@pytest.mark.asyncio
async def test_add_then_remove_restores_registry(manager: ScopeManager, registry: ToolRegistry) -> None:
    await manager.set(["essentials"])
    before = registry.names()

    await manager.add(["reporting"])
    assert set(registry.names()) == expected_tools("essentials", "reporting")

    await manager.remove(["reporting"])
    assert registry.names() == before
    assert await manager.get() == ["essentials"]


@pytest.mark.asyncio
async def test_shared_tools_survive_until_last_scope_is_removed(manager: ScopeManager, registry: ToolRegistry) -> None:
    await manager.set(["essentials", "campaign"])
    assert "campaign_get" in registry

    await manager.remove(["campaign"])
    assert "campaign_get" in registry
    assert "campaign_list_copies" not in registry

    await manager.remove(["essentials"])
    assert set(registry.names()) == META


@pytest.mark.asyncio
async def test_unknown_scope_leaves_state_untouched(manager: ScopeManager, registry: ToolRegistry) -> None:
    await manager.set(["campaign"])
    before = registry.names()

    with pytest.raises(UnknownScopeError):
        await manager.set(["ad", "nope"])
    with pytest.raises(UnknownScopeError):
        await manager.add(["nope"])

    assert registry.names() == before
    assert await manager.get() == ["campaign"]


@pytest.mark.asyncio
async def test_object_scope_warnings(manager: ScopeManager) -> None:
    change = await manager.add(["adaccount", "campaign", "reporting"])

    assert change.warnings[0].startswith("WARNING: 'adaccount' loads")
    assert change.warnings[1] == "NOTE: 'campaign' is a low-level scope. Use 'campaign_management' instead"
    assert len(change.warnings) == 2


@pytest.mark.asyncio
async def test_notification_failure_is_logged_not_raised(manager: ScopeManager, registry: ToolRegistry) -> None:
    notify = AsyncMock(side_effect=RuntimeError("closed"))

    change = await manager.set(["campaign"], notify=notify)

    assert change.registered == len(campaign.TOOLS)
    assert "campaign_get" in registry


@pytest.mark.asyncio
async def test_registry_equals_union_after_any_sequence(manager: ScopeManager, registry: ToolRegistry) -> None:
    await manager.add(["adaccount"])
    await manager.remove(["adaccount"])
    await manager.add(["audience", "creative"])
    await manager.set(["reporting", "adset"])

    assert set(registry.names()) == expected_tools("reporting", "adset")

    await manager.reset()
    assert set(registry.names()) == META


async def test_preload_skips_unknown_names(manager: ScopeManager, registry: ToolRegistry) -> None:
    change = manager.preload(["essentials", "bogus", " Campaign "])

    assert change.loaded == ["campaign", "essentials"]
    assert set(registry.names()) == expected_tools("essentials", "campaign")
