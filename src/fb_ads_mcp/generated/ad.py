# Code generated by fb_ads_mcp.codegen. DO NOT EDIT.
"""Graph API tools for Ad endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from pydantic import Field

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
from .enums import (
    AdCreativeCallToActionType,
    AdCreativeStatus,
    AdPreviewAdFormat,
    AdStatus,
    AdsInsightsBreakdowns,
    AdsInsightsDatePreset,
    AdsInsightsLevel,
    CampaignStatusOption,
)
from .objects import AdCreative

if TYPE_CHECKING:
    from ..graph.gateway import GraphGateway

OBJECT_NAME = "Ad"


class AdGetArgs(ReadArgs):
    """Arguments of ``ad_get``."""

    id: str = Field(pattern=NUMERIC_ID, description="Ad ID")


async def ad_get(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdGetArgs, arguments)
    return await gateway.call("GET", f"/{args.id}", query=query_params(args))


class AdUpdateArgs(WriteArgs):
    """Arguments of ``ad_update``."""

    id: str = Field(pattern=NUMERIC_ID, description="Ad ID")
    name: str | None = Field(default=None, description="Name of the Ad")
    status: AdStatus | None = Field(default=None, description="Current status of the Ad (enum: Ad_status)")
    creative: AdCreative | None = Field(default=None, description="Creative")
    bid_amount: int | None = Field(default=None, description="Bid Amount")
    adlabels: list[dict[str, Any]] | None = Field(default=None, description="Adlabels")
    tracking_specs: dict[str, Any] | None = Field(default=None, description="Tracking Specs")


async def ad_update(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdUpdateArgs, arguments)
    return await gateway.call("POST", f"/{args.id}", body=body_params(args))


class AdDeleteArgs(WriteArgs):
    """Arguments of ``ad_delete``."""

    id: str = Field(pattern=NUMERIC_ID, description="Ad ID")


async def ad_delete(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdDeleteArgs, arguments)
    return await gateway.call("DELETE", f"/{args.id}", query=query_params(args))


class AdListAdcreativesArgs(ReadArgs):
    """Arguments of ``ad_list_adcreatives``."""

    id: str = Field(pattern=NUMERIC_ID, description="Ad ID")


async def ad_list_adcreatives(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdListAdcreativesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/adcreatives", query=query_params(args))


class AdCreateAdlabelArgs(WriteArgs):
    """Arguments of ``ad_create_adlabel``."""

    id: str = Field(pattern=NUMERIC_ID, description="Ad ID")
    adlabels: list[dict[str, Any]] = Field(description="Adlabels")


async def ad_create_adlabel(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdCreateAdlabelArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/adlabels", body=body_params(args))


class AdGetInsightsArgs(ReadArgs):
    """Arguments of ``ad_get_insights``."""

    id: str = Field(pattern=NUMERIC_ID, description="Ad ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    level: AdsInsightsLevel | None = Field(default=None, description="Level (enum: AdsInsights_level)")
    breakdowns: list[AdsInsightsBreakdowns] | None = Field(default=None, description="Breakdowns (enum: AdsInsights_breakdowns)")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")
    time_increment: str | None = Field(default=None, description="Time Increment")


async def ad_get_insights(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdGetInsightsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/insights", query=query_params(args))


class AdCreateInsightsReportArgs(WriteArgs):
    """Arguments of ``ad_create_insights_report``."""

    id: str = Field(pattern=NUMERIC_ID, description="Ad ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    level: AdsInsightsLevel | None = Field(default=None, description="Level (enum: AdsInsights_level)")
    breakdowns: list[AdsInsightsBreakdowns] | None = Field(default=None, description="Breakdowns (enum: AdsInsights_breakdowns)")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")


async def ad_create_insights_report(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdCreateInsightsReportArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/insights", body=body_params(args))


class AdListLeadsArgs(ReadArgs):
    """Arguments of ``ad_list_leads``."""

    id: str = Field(pattern=NUMERIC_ID, description="Ad ID")


async def ad_list_leads(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdListLeadsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/leads", query=query_params(args))


class AdListPreviewsArgs(ReadArgs):
    """Arguments of ``ad_list_previews``."""

    id: str = Field(pattern=NUMERIC_ID, description="Ad ID")
    ad_format: AdPreviewAdFormat = Field(description="Ad Format (enum: AdPreview_ad_format)")
    locale: str | None = Field(default=None, description="Locale")
    render_type: str | None = Field(default=None, description="Render Type")


async def ad_list_previews(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdListPreviewsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/previews", query=query_params(args))


class AdListCopiesArgs(ReadArgs):
    """Arguments of ``ad_list_copies``."""

    id: str = Field(pattern=NUMERIC_ID, description="Ad ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    effective_status: list[str] | None = Field(default=None, description="Effective Status")


async def ad_list_copies(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdListCopiesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/copies", query=query_params(args))


class AdCreateCopieArgs(WriteArgs):
    """Arguments of ``ad_create_copie``."""

    id: str = Field(pattern=NUMERIC_ID, description="Ad ID")
    adset_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Adset")
    rename_options: dict[str, Any] | None = Field(default=None, description="Rename Options")
    status_option: CampaignStatusOption | None = Field(default=None, description="Status Option (enum: Campaign_status_option)")


async def ad_create_copie(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdCreateCopieArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/copies", body=body_params(args))


TOOLS: tuple[EndpointTool, ...] = (
    EndpointTool(
        name="ad_get",
        description="Get details of a specific Ad. Returns Ad.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="",
        id_bearing=True,
        args_model=AdGetArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Ad ID",
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
        handler=ad_get,
    ),
    EndpointTool(
        name="ad_update",
        description="Update a Ad. Returns Ad.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="",
        id_bearing=True,
        args_model=AdUpdateArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Ad ID",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the Ad",
                },
                "status": {
                    "type": "string",
                    "enum": values(AdStatus),
                    "description": "Current status of the Ad (enum: Ad_status)",
                },
                "creative": {
                    "type": "object",
                    "properties": {
                        "id": {
                            "type": "string",
                        },
                        "account_id": {
                            "type": "string",
                        },
                        "name": {
                            "type": "string",
                        },
                        "status": {
                            "type": "string",
                            "enum": values(AdCreativeStatus),
                        },
                        "title": {
                            "type": "string",
                        },
                        "body": {
                            "type": "string",
                        },
                        "image_hash": {
                            "type": "string",
                        },
                        "image_url": {
                            "type": "string",
                        },
                        "video_id": {
                            "type": "string",
                        },
                        "link_url": {
                            "type": "string",
                        },
                        "object_story_spec": {
                            "type": "object",
                            "additionalProperties": True,
                        },
                        "object_story_id": {
                            "type": "string",
                        },
                        "effective_object_story_id": {
                            "type": "string",
                        },
                        "call_to_action_type": {
                            "type": "string",
                            "enum": values(AdCreativeCallToActionType),
                        },
                        "thumbnail_url": {
                            "type": "string",
                        },
                        "url_tags": {
                            "type": "string",
                        },
                    },
                    "additionalProperties": True,
                    "description": "Creative",
                },
                "bid_amount": {
                    "type": "integer",
                    "description": "Bid Amount",
                },
                "adlabels": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "additionalProperties": True,
                    },
                    "description": "Adlabels",
                },
                "tracking_specs": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Tracking Specs",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_update,
    ),
    EndpointTool(
        name="ad_delete",
        description="Delete a Ad.",
        object_name=OBJECT_NAME,
        method="DELETE",
        endpoint="",
        id_bearing=True,
        args_model=AdDeleteArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Ad ID",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_delete,
    ),
    EndpointTool(
        name="ad_list_adcreatives",
        description="List adcreatives for this Ad. Returns AdCreative.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="adcreatives",
        id_bearing=True,
        args_model=AdListAdcreativesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Ad ID",
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
        handler=ad_list_adcreatives,
    ),
    EndpointTool(
        name="ad_create_adlabel",
        description="Associate adlabels with this Ad. Returns Ad. Required: adlabels",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="adlabels",
        id_bearing=True,
        args_model=AdCreateAdlabelArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Ad ID",
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
        handler=ad_create_adlabel,
    ),
    EndpointTool(
        name="ad_get_insights",
        description="Get analytics insights for this Ad. Returns AdsInsights.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="insights",
        id_bearing=True,
        args_model=AdGetInsightsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Ad ID",
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
                "date_preset": {
                    "type": "string",
                    "enum": values(AdsInsightsDatePreset),
                    "description": "Date Preset (enum: AdsInsights_date_preset)",
                },
                "level": {
                    "type": "string",
                    "enum": values(AdsInsightsLevel),
                    "description": "Level (enum: AdsInsights_level)",
                },
                "breakdowns": {
                    "type": "array",
                    "items": {
                        "type": "string",
                        "enum": values(AdsInsightsBreakdowns),
                    },
                    "description": "Breakdowns (enum: AdsInsights_breakdowns)",
                },
                "time_range": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Time Range",
                },
                "time_increment": {
                    "type": "string",
                    "description": "Time Increment",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_get_insights,
    ),
    EndpointTool(
        name="ad_create_insights_report",
        description="Generate an insights report for this Ad. Returns AdReportRun.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="insights",
        id_bearing=True,
        args_model=AdCreateInsightsReportArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Ad ID",
                },
                "date_preset": {
                    "type": "string",
                    "enum": values(AdsInsightsDatePreset),
                    "description": "Date Preset (enum: AdsInsights_date_preset)",
                },
                "level": {
                    "type": "string",
                    "enum": values(AdsInsightsLevel),
                    "description": "Level (enum: AdsInsights_level)",
                },
                "breakdowns": {
                    "type": "array",
                    "items": {
                        "type": "string",
                        "enum": values(AdsInsightsBreakdowns),
                    },
                    "description": "Breakdowns (enum: AdsInsights_breakdowns)",
                },
                "time_range": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Time Range",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_create_insights_report,
    ),
    EndpointTool(
        name="ad_list_leads",
        description="List leads for this Ad. Returns Lead.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="leads",
        id_bearing=True,
        args_model=AdListLeadsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Ad ID",
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
        handler=ad_list_leads,
    ),
    EndpointTool(
        name="ad_list_previews",
        description="List previews for this Ad. Returns AdPreview. Required: ad_format (enum)",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="previews",
        id_bearing=True,
        args_model=AdListPreviewsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Ad ID",
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
                "locale": {
                    "type": "string",
                    "description": "Locale",
                },
                "render_type": {
                    "type": "string",
                    "description": "Render Type",
                },
            },
            "required": ["id", "ad_format"],
            "additionalProperties": True,
        },
        handler=ad_list_previews,
    ),
    EndpointTool(
        name="ad_list_copies",
        description="List copies of this Ad. Returns Ad.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="copies",
        id_bearing=True,
        args_model=AdListCopiesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Ad ID",
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
                "date_preset": {
                    "type": "string",
                    "enum": values(AdsInsightsDatePreset),
                    "description": "Date Preset (enum: AdsInsights_date_preset)",
                },
                "effective_status": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Effective Status",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_list_copies,
    ),
    EndpointTool(
        name="ad_create_copie",
        description="Create a copy of this Ad. Returns Ad.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="copies",
        id_bearing=True,
        args_model=AdCreateCopieArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Ad ID",
                },
                "adset_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Adset",
                },
                "rename_options": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Rename Options",
                },
                "status_option": {
                    "type": "string",
                    "enum": values(CampaignStatusOption),
                    "description": "Status Option (enum: Campaign_status_option)",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_create_copie,
    ),
)

TOOL_NAMES: tuple[str, ...] = (
    "ad_get",
    "ad_update",
    "ad_delete",
    "ad_list_adcreatives",
    "ad_create_adlabel",
    "ad_get_insights",
    "ad_create_insights_report",
    "ad_list_leads",
    "ad_list_previews",
    "ad_list_copies",
    "ad_create_copie",
)

__all__ = ["OBJECT_NAME", "TOOLS", "TOOL_NAMES"]
