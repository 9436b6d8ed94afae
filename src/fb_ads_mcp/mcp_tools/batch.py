"""Graph API batch meta tool."""

from __future__ import annotations

from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ..errors import MCPException
from ..graph.batch import MAX_BATCH_SIZE, BatchOperation
from .common import ToolEnvironment, failure, success

BATCH_DESCRIPTION = (
    "Execute multiple Facebook Graph API operations in a single batch request. Supports GET, POST, "
    "PUT, DELETE operations with enhanced error handling and result processing."
)


def register(server: FastMCP, env: ToolEnvironment) -> None:
    @server.tool(name="facebook_batch", structured_output=True, description=BATCH_DESCRIPTION)
    async def facebook_batch(
        operations: Annotated[
            list[BatchOperation],
            Field(
                min_length=1,
                max_length=MAX_BATCH_SIZE,
                description=f"Array of operations to execute (max {MAX_BATCH_SIZE})",
            ),
        ],
    ) -> dict[str, Any]:
        try:
            result = await env.batch.execute(operations)
            return success(result.to_dict())
        except MCPException as exc:
            return failure(exc.error, meta={"tool": "facebook_batch"})


__all__ = ["register"]
