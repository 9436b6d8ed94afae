"""Mutable view over the FastMCP tool table.

Generated tools are added and removed at runtime by the scope manager; meta
tools registered at startup are pinned and survive every reset.
"""

from __future__ import annotations

import json
import threading
from functools import partial
from typing import Any, Iterable

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.server.fastmcp.tools import Tool
from mcp.server.fastmcp.utilities.func_metadata import ArgModelBase, FuncMetadata
from mcp.types import TextContent

from .endpoints import EndpointTool
from .errors import MCPException, error_response
from .graph.gateway import GraphGateway
from .logging import get_logger

logger = get_logger(__name__)


class RegisteredTool(Tool):
    """A FastMCP tool backed by a generated endpoint handler.

    The handler receives the raw argument mapping and returns the vendor body
    as text; failures become tool errors whose text is the JSON envelope.
    """

    async def run(
        self,
        arguments: dict[str, Any],
        context: Any = None,
        convert_result: bool = False,
    ) -> Any:
        try:
            text = await self.fn(arguments)
        except MCPException as exc:
            raise ToolError(json.dumps(error_response(exc.error, meta={"tool": self.name}))) from exc
        return [TextContent(type="text", text=text)]


def as_fastmcp_tool(tool: EndpointTool, gateway: GraphGateway) -> RegisteredTool:
    return RegisteredTool(
        fn=partial(tool.handler, gateway),
        name=tool.name,
        description=tool.description,
        parameters=dict(tool.input_schema),
        fn_metadata=FuncMetadata(arg_model=ArgModelBase),
        is_async=True,
        context_kwarg=None,
    )


class ToolRegistry:
    def __init__(self, server: FastMCP, gateway: GraphGateway) -> None:
        self._server = server
        # FastMCP has no public insert-or-replace; removal goes through remove_tool.
        self._tools: dict[str, Tool] = server._tool_manager._tools
        self._gateway = gateway
        self._lock = threading.RLock()
        self._pinned: frozenset[str] = frozenset()

    def pin_current(self) -> frozenset[str]:
        """Mark every tool registered so far as a meta tool."""

        with self._lock:
            self._pinned = frozenset(self._tools)
            return self._pinned

    @property
    def meta_tools(self) -> frozenset[str]:
        return self._pinned

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._tools)

    def endpoint_names(self) -> list[str]:
        with self._lock:
            return sorted(name for name in self._tools if name not in self._pinned)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def register(self, tool: EndpointTool) -> bool:
        """Add or replace ``tool``; returns True when the name was new."""

        if tool.name in self._pinned:
            return False
        with self._lock:
            is_new = tool.name not in self._tools
            self._tools[tool.name] = as_fastmcp_tool(tool, self._gateway)
        return is_new

    def register_all(self, tools: Iterable[EndpointTool]) -> int:
        added = sum(1 for tool in tools if self.register(tool))
        if added:
            logger.info("tools_registered", count=added, total=len(self))
        return added

    def unregister(self, *names: str) -> int:
        removed = 0
        with self._lock:
            for name in names:
                if name in self._pinned:
                    continue
                if name in self._tools:
                    self._server.remove_tool(name)
                    removed += 1
        if removed:
            logger.info("tools_unregistered", count=removed, total=len(self))
        return removed

    def reset(self) -> int:
        """Drop every generated tool, keeping the meta tools."""

        return self.unregister(*self.endpoint_names())


__all__ = ["RegisteredTool", "ToolRegistry", "as_fastmcp_tool"]
