"""MCP server bootstrap for the Facebook Marketing API tools."""

from __future__ import annotations

import argparse
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp.server.fastmcp import FastMCP
from mcp.server.lowlevel.server import NotificationOptions
from mcp.server.stdio import stdio_server

from .config import FbAdsMcpSettings, get_settings
from .graph.batch import BatchExecutor
from .graph.gateway import GraphGateway
from .logging import configure_logging, get_logger
from .mcp_tools import batch, scope_tools, video
from .mcp_tools.common import ToolEnvironment
from .registry import ToolRegistry
from .scopes import ScopeManager

logger = get_logger(__name__)

DEFAULT_TRANSPORT = "stdio"

INSTRUCTIONS = (
    "Facebook Marketing API tools. Only the loaded scopes are listed; use 'tool_manager' or "
    "'scope_selector' to load more. The tool list changes when scopes change."
)


class FbAdsMcpServer(FastMCP):
    """FastMCP server that advertises ``tools.listChanged`` over stdio."""

    async def run_stdio_async(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            await self._mcp_server.run(
                read_stream,
                write_stream,
                self._mcp_server.create_initialization_options(
                    NotificationOptions(tools_changed=True)
                ),
            )


def create_server(
    settings: FbAdsMcpSettings | None = None,
    *,
    gateway: GraphGateway | None = None,
) -> FbAdsMcpServer:
    settings = settings or get_settings()
    configure_logging()

    gateway = gateway or GraphGateway(settings)

    @asynccontextmanager
    async def lifespan(app: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            await gateway.aclose()

    server = FbAdsMcpServer(
        name="fb-ads-mcp",
        instructions=INSTRUCTIONS,
        lifespan=lifespan,
    )

    registry = ToolRegistry(server, gateway)
    environment = ToolEnvironment(
        settings=settings,
        gateway=gateway,
        registry=registry,
        scopes=ScopeManager(registry),
        batch=BatchExecutor(gateway),
    )

    scope_tools.register(server, environment)
    batch.register(server, environment)
    video.register(server, environment)
    registry.pin_current()

    environment.scopes.preload(settings.startup_scopes)
    logger.info(
        "server_created",
        meta_tools=sorted(registry.meta_tools),
        tools=len(registry),
        graph_api_version=gateway.version,
    )
    return server


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the Facebook Ads MCP server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default=DEFAULT_TRANSPORT,
        help="Transport protocol to use",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    args = parser.parse_args(argv)

    settings = get_settings()
    if settings.access_token is None or not settings.access_token.get_secret_value():
        parser.error("FACEBOOK_ACCESS_TOKEN environment variable is required")

    server = create_server(settings)
    logger.info("server_starting", transport=args.transport)

    if args.transport == "streamable-http":
        import uvicorn

        uvicorn.run(server.streamable_http_app(), host=args.host, port=args.port)
    elif args.transport == "sse":
        import uvicorn

        uvicorn.run(server.sse_app(), host=args.host, port=args.port)
    else:
        server.run(transport="stdio")


if __name__ == "__main__":
    main()


__all__ = ["FbAdsMcpServer", "create_server", "main"]
