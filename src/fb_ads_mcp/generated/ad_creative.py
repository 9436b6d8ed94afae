# Code generated by fb_ads_mcp.codegen. DO NOT EDIT.
"""Graph API tools for AdCreative endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from pydantic import Field, NonNegativeInt

from ..endpoints import (
    EndpointTool,
    NUMERIC_ID,
    ReadArgs,
    WriteArgs,
    bind,
    body_params,
    query_params,
    values,
)
from .enums import AdCreativeStatus, AdPreviewAdFormat

if TYPE_CHECKING:
    from ..graph.gateway import GraphGateway

OBJECT_NAME = "AdCreative"


class AdCreativeGetArgs(ReadArgs):
    """Arguments of ``ad_creative_get``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdCreative ID")
    thumbnail_height: NonNegativeInt | None = Field(default=None, description="Thumbnail Height")
    thumbnail_width: NonNegativeInt | None = Field(default=None, description="Thumbnail Width")


async def ad_creative_get(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdCreativeGetArgs, arguments)
    return await gateway.call("GET", f"/{args.id}", query=query_params(args))


class AdCreativeUpdateArgs(WriteArgs):
    """Arguments of ``ad_creative_update``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdCreative ID")
    name: str | None = Field(default=None, description="Name of the AdCreative")
    status: AdCreativeStatus | None = Field(default=None, description="Current status of the AdCreative (enum: AdCreative_status)")
    adlabels: list[dict[str, Any]] | None = Field(default=None, description="Adlabels")


async def ad_creative_update(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdCreativeUpdateArgs, arguments)
    return await gateway.call("POST", f"/{args.id}", body=body_params(args))


class AdCreativeDeleteArgs(WriteArgs):
    """Arguments of ``ad_creative_delete``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdCreative ID")
    account_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Account")
    name: str | None = Field(default=None, description="Name of the AdCreative")
    status: AdCreativeStatus | None = Field(default=None, description="Current status of the AdCreative (enum: AdCreative_status)")


async def ad_creative_delete(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdCreativeDeleteArgs, arguments)
    return await gateway.call("DELETE", f"/{args.id}", query=query_params(args))


class AdCreativeListPreviewsArgs(ReadArgs):
    """Arguments of ``ad_creative_list_previews``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdCreative ID")
    ad_format: AdPreviewAdFormat = Field(description="Ad Format (enum: AdPreview_ad_format)")
    height: NonNegativeInt | None = Field(default=None, description="Height")
    width: NonNegativeInt | None = Field(default=None, description="Width")
    locale: str | None = Field(default=None, description="Locale")


async def ad_creative_list_previews(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdCreativeListPreviewsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/previews", query=query_params(args))


class AdCreativeListCreativeInsightsArgs(ReadArgs):
    """Arguments of ``ad_creative_list_creative_insights``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdCreative ID")


async def ad_creative_list_creative_insights(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdCreativeListCreativeInsightsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/creative_insights", query=query_params(args))


class AdCreativeCreateAdlabelArgs(WriteArgs):
    """Arguments of ``ad_creative_create_adlabel``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdCreative ID")
    adlabels: list[dict[str, Any]] = Field(description="Adlabels")


async def ad_creative_create_adlabel(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdCreativeCreateAdlabelArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/adlabels", body=body_params(args))


TOOLS: tuple[EndpointTool, ...] = (
    EndpointTool(
        name="ad_creative_get",
        description="Get details of a specific AdCreative. Returns AdCreative.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="",
        id_bearing=True,
        args_model=AdCreativeGetArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdCreative ID",
                },
                "fields": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Fields to return",
                },
                "limit": {
                    "type": "integer",
                    "minimum": 1,
                    "maximum": 100,
                    "description": "Maximum number of results",
                },
                "after": {
                    "type": "string",
                    "description": "Cursor for pagination (next page)",
                },
                "before": {
                    "type": "string",
                    "description": "Cursor for pagination (previous page)",
                },
                "thumbnail_height": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Thumbnail Height",
                },
                "thumbnail_width": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Thumbnail Width",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_creative_get,
    ),
    EndpointTool(
        name="ad_creative_update",
        description="Update a AdCreative. Returns AdCreative.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="",
        id_bearing=True,
        args_model=AdCreativeUpdateArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdCreative ID",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the AdCreative",
                },
                "status": {
                    "type": "string",
                    "enum": values(AdCreativeStatus),
                    "description": "Current status of the AdCreative (enum: AdCreative_status)",
                },
                "adlabels": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "additionalProperties": True,
                    },
                    "description": "Adlabels",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_creative_update,
    ),
    EndpointTool(
        name="ad_creative_delete",
        description="Delete a AdCreative.",
        object_name=OBJECT_NAME,
        method="DELETE",
        endpoint="",
        id_bearing=True,
        args_model=AdCreativeDeleteArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdCreative ID",
                },
                "account_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Account",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the AdCreative",
                },
                "status": {
                    "type": "string",
                    "enum": values(AdCreativeStatus),
                    "description": "Current status of the AdCreative (enum: AdCreative_status)",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_creative_delete,
    ),
    EndpointTool(
        name="ad_creative_list_previews",
        description="List previews for this AdCreative. Returns AdPreview. Required: ad_format (enum)",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="previews",
        id_bearing=True,
        args_model=AdCreativeListPreviewsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdCreative ID",
                },
                "fields": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Fields to return",
                },
                "limit": {
                    "type": "integer",
                    "minimum": 1,
                    "maximum": 100,
                    "description": "Maximum number of results",
                },
                "after": {
                    "type": "string",
                    "description": "Cursor for pagination (next page)",
                },
                "before": {
                    "type": "string",
                    "description": "Cursor for pagination (previous page)",
                },
                "ad_format": {
                    "type": "string",
                    "enum": values(AdPreviewAdFormat),
                    "description": "Ad Format (enum: AdPreview_ad_format)",
                },
                "height": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Height",
                },
                "width": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Width",
                },
                "locale": {
                    "type": "string",
                    "description": "Locale",
                },
            },
            "required": ["id", "ad_format"],
            "additionalProperties": True,
        },
        handler=ad_creative_list_previews,
    ),
    EndpointTool(
        name="ad_creative_list_creative_insights",
        description="List creative_insights for this AdCreative. Returns AdCreativeInsights.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="creative_insights",
        id_bearing=True,
        args_model=AdCreativeListCreativeInsightsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdCreative ID",
                },
                "fields": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Fields to return",
                },
                "limit": {
                    "type": "integer",
                    "minimum": 1,
                    "maximum": 100,
                    "description": "Maximum number of results",
                },
                "after": {
                    "type": "string",
                    "description": "Cursor for pagination (next page)",
                },
                "before": {
                    "type": "string",
                    "description": "Cursor for pagination (previous page)",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_creative_list_creative_insights,
    ),
    EndpointTool(
        name="ad_creative_create_adlabel",
        description="Associate adlabels with this AdCreative. Returns AdCreative. Required: adlabels",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="adlabels",
        id_bearing=True,
        args_model=AdCreativeCreateAdlabelArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdCreative ID",
                },
                "adlabels": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "additionalProperties": True,
                    },
                    "description": "Adlabels",
                },
            },
            "required": ["id", "adlabels"],
            "additionalProperties": False,
        },
        handler=ad_creative_create_adlabel,
    ),
)

TOOL_NAMES: tuple[str, ...] = (
    "ad_creative_get",
    "ad_creative_update",
    "ad_creative_delete",
    "ad_creative_list_previews",
    "ad_creative_list_creative_insights",
    "ad_creative_create_adlabel",
)

__all__ = ["OBJECT_NAME", "TOOLS", "TOOL_NAMES"]
