"""Meta tools that load and unload tool scopes at runtime."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from ..errors import BindingError, MCPException
from ..scopes import catalog
from .common import ToolEnvironment, failure, success, tool_list_notifier

TOOL_MANAGER_DESCRIPTION = (
    "Manage which Facebook API tool sets are loaded. This allows efficient memory usage by only "
    "loading the tools you need. RECOMMENDED: Use curated scopes (essentials, campaign_management, "
    "reporting, etc.) for common workflows. Object scopes load ALL tools for an object type and "
    "should only be used when you need comprehensive access. Actions: 'get' (list loaded and "
    "available scopes), 'set' (load exactly the given scopes)."
)

SCOPES_DESCRIPTION = (
    "Tool scopes to load. PREFER CURATED SCOPES: 'essentials', 'campaign_management', 'reporting', "
    "'audience', 'creative', 'optimization', 'video'. Object scopes ('ad', 'adaccount', etc.) load "
    "ALL tools and should be used sparingly."
)

SCOPE_SELECTOR_DESCRIPTION = (
    "Manage which Facebook API domain tool sets are currently loaded. Use this tool to dynamically "
    "load/unload tools for different domains (ad, adaccount, adcreative, adset, campaign, "
    "customaudience, user) or curated scopes."
)

RECOMMENDATION = (
    "TIP: Use 'tool_manager action=get' to see available curated scopes optimized for specific workflows"
)


def register(server: FastMCP, env: ToolEnvironment) -> None:
    @server.tool(name="tool_manager", structured_output=True, description=TOOL_MANAGER_DESCRIPTION)
    async def tool_manager(
        ctx: Context,
        action: Annotated[
            Literal["get", "set"],
            Field(description="Action to perform: 'get' (list loaded scopes), 'set' (replace loaded scopes)"),
        ],
        scopes: Annotated[list[str] | None, Field(description=SCOPES_DESCRIPTION)] = None,
    ) -> dict[str, Any]:
        try:
            if action == "get":
                return success(
                    {
                        "loaded_scopes": await env.scopes.get(),
                        "object_scopes": catalog.object_scope_names(),
                        "curated_scopes": catalog.curated_scope_names(),
                        "descriptions": dict(catalog.descriptions()),
                        "total_tools": len(env.registry),
                    }
                )

            if scopes is None:
                raise BindingError("scopes are required for the 'set' action")
            change = await env.scopes.set(scopes, notify=tool_list_notifier(ctx))
            data: dict[str, Any] = {
                "loaded_scopes": change.loaded,
                "added": change.added,
                "removed": change.removed,
                "tool_count": len(env.registry),
                "warnings": change.warnings,
            }
            if change.warnings:
                data["recommendation"] = RECOMMENDATION
            return success(data)
        except MCPException as exc:
            return failure(exc.error, meta={"tool": "tool_manager"})

    @server.tool(name="scope_selector", structured_output=True, description=SCOPE_SELECTOR_DESCRIPTION)
    async def scope_selector(
        ctx: Context,
        action: Annotated[
            Literal["get_scopes", "set_scopes", "add_scopes", "remove_scopes"],
            Field(description="Action to perform"),
        ],
        domains: Annotated[list[str] | None, Field(description="Domain names to manage")] = None,
    ) -> dict[str, Any]:
        try:
            if action == "get_scopes":
                return success(
                    {
                        "active_domains": await env.scopes.get(),
                        "available_domains": catalog.available_scopes(),
                    }
                )

            if not domains:
                raise BindingError(f"domains are required for {action} action")
            notify = tool_list_notifier(ctx)
            if action == "set_scopes":
                change = await env.scopes.set(domains, notify=notify)
            elif action == "add_scopes":
                change = await env.scopes.add(domains, notify=notify)
            else:
                change = await env.scopes.remove(domains, notify=notify)
            return success(
                {
                    "action": action,
                    "active_domains": change.loaded,
                    "available_domains": catalog.available_scopes(),
                    "registered_tools": change.registered,
                    "unregistered_tools": change.unregistered,
                }
            )
        except MCPException as exc:
            return failure(exc.error, meta={"tool": "scope_selector"})


__all__ = ["register"]
