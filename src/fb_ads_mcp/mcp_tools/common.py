"""Shared helpers for MCP tools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from mcp.server.fastmcp import Context

from ..config import FbAdsMcpSettings
from ..errors import McpError, error_response
from ..graph.batch import BatchExecutor
from ..graph.gateway import GraphGateway
from ..logging import get_logger
from ..registry import ToolRegistry
from ..scopes import ScopeManager
from ..scopes.manager import Notifier

logger = get_logger(__name__)


@dataclass(slots=True)
class ToolEnvironment:
    settings: FbAdsMcpSettings
    gateway: GraphGateway
    registry: ToolRegistry
    scopes: ScopeManager
    batch: BatchExecutor


def success(data: Any, *, meta: Mapping[str, Any] | None = None) -> dict[str, Any]:
    return {
        "ok": True,
        "data": data,
        "meta": dict(meta or {}),
    }


def failure(error: McpError, *, meta: Mapping[str, Any] | None = None) -> dict[str, Any]:
    return dict(error_response(error, meta=meta))


def tool_list_notifier(ctx: Context) -> Notifier:
    """Send ``notifications/tools/list_changed`` on the caller's session."""

    async def notify() -> None:
        await ctx.session.send_tool_list_changed()

    return notify


__all__ = [
    "ToolEnvironment",
    "failure",
    "success",
    "tool_list_notifier",
]
