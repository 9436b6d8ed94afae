from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock
from urllib.parse import parse_qs

import httpx
import pytest

from fb_ads_mcp.config import get_settings
from fb_ads_mcp.graph.batch import BatchOperation
from fb_ads_mcp.mcp_tools.scope_tools import RECOMMENDATION
from fb_ads_mcp.scopes import scope_tools
from fb_ads_mcp.server import create_server

META_TOOLS = {
    "tool_manager",
    "scope_selector",
    "facebook_batch",
    "facebook_video_upload",
    "facebook_video_status",
    "facebook_video_upload_batch",
}
ADVIDEOS_URL = "https://example.com/v23.0/act_123/advideos"
TRANSFER_URL = "https://video.example.com/v23.0/act_123/advideos"


@pytest.fixture
def server(gateway):
    return create_server(get_settings(), gateway=gateway)


@pytest.fixture
def ctx() -> MagicMock:
    ctx = MagicMock()
    ctx.session.send_tool_list_changed = AsyncMock()
    return ctx


def tool(server, name: str):
    return server._tool_manager.get_tool(name).fn


def mock_upload(respx_mock) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        phase = parse_qs(request.content.decode())["upload_phase"][0]
        if phase == "start":
            return httpx.Response(
                200,
                json={"upload_session_id": "s1", "video_id": "v1", "start_offset": "0", "end_offset": "4"},
            )
        return httpx.Response(200, json={"success": True})

    respx_mock.post(ADVIDEOS_URL).mock(side_effect=handler)
    respx_mock.post(TRANSFER_URL).mock(
        return_value=httpx.Response(200, json={"start_offset": "4", "end_offset": "4"})
    )


@pytest.fixture
def video_file(tmp_path: Path) -> Path:
    path = tmp_path / "clip.mp4"
    path.write_bytes(b"clip")
    return path


async def test_tool_manager_get(server, ctx) -> None:
    result = await tool(server, "tool_manager")(ctx=ctx, action="get")

    assert result["ok"] is True
    data = result["data"]
    assert data["loaded_scopes"] == ["essentials"]
    assert data["object_scopes"][0] == "ad"
    assert "video" in data["curated_scopes"]
    assert data["descriptions"]["essentials"].startswith("[RECOMMENDED]")
    assert data["total_tools"] == len(scope_tools("essentials")) + len(META_TOOLS)


async def test_tool_manager_set_notifies_clients(server, ctx) -> None:
    result = await tool(server, "tool_manager")(ctx=ctx, action="set", scopes=["campaign_management"])

    data = result["data"]
    assert data["loaded_scopes"] == ["campaign_management"]
    assert data["added"] == ["campaign_management"]
    assert data["removed"] == ["essentials"]
    assert data["tool_count"] == len(scope_tools("campaign_management")) + len(META_TOOLS)
    assert data["warnings"] == []
    assert "recommendation" not in data
    ctx.session.send_tool_list_changed.assert_awaited_once()

    names = {item.name for item in await server.list_tools()}
    assert "campaign_list_adsets" in names
    assert "ad_delete" not in names


async def test_tool_manager_set_low_level_scope_adds_recommendation(server, ctx) -> None:
    result = await tool(server, "tool_manager")(ctx=ctx, action="set", scopes=["essentials", "adaccount"])

    data = result["data"]
    assert data["warnings"][0].startswith("WARNING: 'adaccount' loads")
    assert data["recommendation"] == RECOMMENDATION


async def test_tool_manager_errors(server, ctx) -> None:
    fn = tool(server, "tool_manager")

    missing = await fn(ctx=ctx, action="set")
    assert missing["ok"] is False
    assert missing["error"]["message"] == "scopes are required for the 'set' action"

    unknown = await fn(ctx=ctx, action="set", scopes=["bogus"])
    assert unknown["error"]["kind"] == "binding"
    assert unknown["error"]["details"]["unknown"] == ["bogus"]
    assert unknown["meta"] == {"tool": "tool_manager"}
    ctx.session.send_tool_list_changed.assert_not_awaited()


async def test_scope_selector_actions(server, ctx) -> None:
    fn = tool(server, "scope_selector")

    current = await fn(ctx=ctx, action="get_scopes")
    assert current["data"]["active_domains"] == ["essentials"]
    assert "customaudience" in current["data"]["available_domains"]

    added = await fn(ctx=ctx, action="add_scopes", domains=["campaign"])
    assert added["data"]["action"] == "add_scopes"
    assert added["data"]["active_domains"] == ["campaign", "essentials"]
    assert added["data"]["registered_tools"] > 0

    removed = await fn(ctx=ctx, action="remove_scopes", domains=["campaign"])
    assert removed["data"]["active_domains"] == ["essentials"]
    assert removed["data"]["unregistered_tools"] == added["data"]["registered_tools"]

    replaced = await fn(ctx=ctx, action="set_scopes", domains=["user"])
    assert replaced["data"]["active_domains"] == ["user"]
    assert ctx.session.send_tool_list_changed.await_count == 3


async def test_scope_selector_requires_domains(server, ctx) -> None:
    result = await tool(server, "scope_selector")(ctx=ctx, action="remove_scopes")

    assert result["ok"] is False
    assert result["error"]["message"] == "domains are required for remove_scopes action"


async def test_facebook_batch(server, respx_mock) -> None:
    route = respx_mock.post("https://example.com/v23.0/").mock(
        return_value=httpx.Response(
            200,
            json=[
                {"code": 200, "body": json.dumps({"id": "act_123"})},
                {"code": 400, "body": json.dumps({"error": {"message": "Invalid object ID"}})},
            ],
        )
    )

    result = await tool(server, "facebook_batch")(
        operations=[
            BatchOperation(method="GET", relative_url="act_123?fields=id"),
            BatchOperation(method="GET", relative_url="bad?fields=id"),
        ]
    )

    assert result["ok"] is True
    assert result["data"]["successful_operations"] == 1
    assert result["data"]["results"][1]["error"] == "Invalid object ID"
    assert route.call_count == 1


async def test_facebook_batch_rejects_empty_batch(server, respx_mock) -> None:
    result = await tool(server, "facebook_batch")(operations=[])

    assert result["ok"] is False
    assert result["meta"] == {"tool": "facebook_batch"}
    assert not respx_mock.calls


async def test_video_upload_tool(server, respx_mock, video_file: Path) -> None:
    mock_upload(respx_mock)

    result = await tool(server, "facebook_video_upload")(account_id="123", file_path=str(video_file))

    data = result["data"]
    assert data["success"] is True
    assert data["video_id"] == "v1"
    assert data["title"] == "clip.mp4"
    assert data["account_id"] == "123"
    assert data["upload_duration_seconds"] >= 0
    assert "encoding_complete" not in data


async def test_video_upload_tool_reports_failures(server, respx_mock, tmp_path: Path) -> None:
    result = await tool(server, "facebook_video_upload")(account_id="123", file_path=str(tmp_path / "nope.mp4"))

    assert result["ok"] is False
    assert result["error"]["message"].startswith("Failed to get file info")
    assert result["meta"] == {"tool": "facebook_video_upload"}


async def test_video_status_tool(server, respx_mock) -> None:
    respx_mock.get("https://example.com/v23.0/v1").mock(
        return_value=httpx.Response(200, json={"status": {"video_status": "processing"}})
    )

    result = await tool(server, "facebook_video_status")(video_id="v1")

    assert result["data"] == {"video_id": "v1", "status": "processing", "ready": False}


@pytest.mark.parametrize(
    ("count", "message"),
    [(0, "At least one file path is required"), (11, "Maximum 10 videos can be uploaded in a batch")],
)
async def test_video_batch_limits(server, respx_mock, count: int, message: str) -> None:
    result = await tool(server, "facebook_video_upload_batch")(
        account_id="123", file_paths=[f"/tmp/{index}.mp4" for index in range(count)]
    )

    assert result["ok"] is False
    assert result["error"]["message"] == message
    assert not respx_mock.calls


@pytest.mark.parametrize("parallel", [False, True])
async def test_video_batch_reports_each_file(
    server, respx_mock, video_file: Path, tmp_path: Path, parallel: bool
) -> None:
    mock_upload(respx_mock)

    result = await tool(server, "facebook_video_upload_batch")(
        account_id="act_123",
        file_paths=[str(video_file), str(tmp_path / "missing.mp4")],
        parallel=parallel,
    )

    data = result["data"]
    assert data["total_videos"] == 2
    assert data["successful"] == 1
    assert data["failed"] == 1
    first, second = data["results"]
    assert first == {"index": 0, "file_path": str(video_file), "success": True, "video_id": "v1", "title": "clip.mp4"}
    assert second["success"] is False
    assert second["error"].startswith("Failed to get file info")
