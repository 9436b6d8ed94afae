from __future__ import annotations

import json
from dataclasses import replace
from unittest.mock import MagicMock

import httpx
import pytest
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from fb_ads_mcp.generated import campaign
from fb_ads_mcp.registry import RegisteredTool, ToolRegistry, as_fastmcp_tool


@pytest.fixture
def server() -> FastMCP:
    server = FastMCP(name="test")

    @server.tool(name="tool_manager")
    async def tool_manager() -> str:
        return "ok"

    return server


@pytest.fixture
def registry(server: FastMCP, gateway) -> ToolRegistry:
    registry = ToolRegistry(server, gateway)
    registry.pin_current()
    return registry


async def test_as_fastmcp_tool_keeps_generated_schema(gateway) -> None:
    tool = campaign.TOOLS[0]
    registered = as_fastmcp_tool(tool, gateway)

    assert isinstance(registered, RegisteredTool)
    assert registered.name == "campaign_get"
    assert registered.parameters == dict(tool.input_schema)
    assert registered.description == tool.description


@pytest.mark.asyncio
async def test_register_and_unregister(server: FastMCP, registry: ToolRegistry) -> None:
    assert registry.meta_tools == frozenset({"tool_manager"})

    assert registry.register_all(campaign.TOOLS) == len(campaign.TOOLS)
    assert registry.register_all(campaign.TOOLS) == 0
    assert registry.endpoint_names() == sorted(campaign.TOOL_NAMES)

    listed = {tool.name: tool for tool in await server.list_tools()}
    assert set(listed) == set(campaign.TOOL_NAMES) | {"tool_manager"}
    assert listed["campaign_get"].inputSchema == dict(campaign.TOOLS[0].input_schema)

    assert registry.unregister("campaign_get", "campaign_get", "missing") == 1
    assert "campaign_get" not in registry
    assert registry.reset() == len(campaign.TOOLS) - 1
    assert registry.names() == ["tool_manager"]


async def test_meta_tools_are_never_replaced_or_removed(registry: ToolRegistry) -> None:
    impostor = replace(campaign.TOOLS[0], name="tool_manager")

    assert registry.register(impostor) is False
    assert registry.unregister("tool_manager") == 0
    assert registry.reset() == 0
    assert "tool_manager" in registry


@pytest.mark.asyncio
async def test_registered_tool_returns_raw_text(server: FastMCP, registry: ToolRegistry, respx_mock) -> None:
    registry.register_all(campaign.TOOLS)
    respx_mock.get("https://example.com/v23.0/123").mock(
        return_value=httpx.Response(200, text='{"id":"123","name":"Spring"}')
    )

    tool = server._tool_manager.get_tool("campaign_get")
    content = await tool.run({"id": "123", "fields": ["id", "name"]})

    assert content[0].type == "text"
    assert content[0].text == '{"id":"123","name":"Spring"}'


@pytest.mark.asyncio
async def test_registered_tool_failure_is_a_tool_error(server: FastMCP, registry: ToolRegistry, respx_mock) -> None:
    registry.register_all(campaign.TOOLS)
    respx_mock.get("https://example.com/v23.0/123").mock(
        return_value=httpx.Response(404, json={"error": {"message": "Unknown path", "code": 803}})
    )
    tool = server._tool_manager.get_tool("campaign_get")

    with pytest.raises(ToolError) as exc:
        await tool.run({"id": "123"})
    envelope = json.loads(str(exc.value))
    assert envelope["ok"] is False
    assert envelope["error"]["code"] == "NOT_FOUND"
    assert envelope["meta"] == {"tool": "campaign_get"}

    with pytest.raises(ToolError) as exc:
        await tool.run({"id": "abc"})
    assert json.loads(str(exc.value))["error"]["kind"] == "binding"


async def test_unregister_goes_through_server_remove_tool(
    server: FastMCP, registry: ToolRegistry, monkeypatch
) -> None:
    remove_tool = MagicMock(wraps=server.remove_tool)
    monkeypatch.setattr(server, "remove_tool", remove_tool)
    registry.register_all(campaign.TOOLS)

    assert registry.unregister("campaign_get", "tool_manager", "missing") == 1

    remove_tool.assert_called_once_with("campaign_get")
    assert "campaign_get" not in registry
    assert "tool_manager" in registry
