# Code generated by fb_ads_mcp.codegen. DO NOT EDIT.
"""Graph API tools for Campaign endpoints."""

from __future__ import annotations

from datetime import datetime
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
from .enums import (
    AdsInsightsBreakdowns,
    AdsInsightsDatePreset,
    AdsInsightsLevel,
    CampaignBidStrategy,
    CampaignObjective,
    CampaignSpecialAdCategories,
    CampaignStatus,
    CampaignStatusOption,
    HighDemandPeriodBudgetValueType,
)

if TYPE_CHECKING:
    from ..graph.gateway import GraphGateway

OBJECT_NAME = "Campaign"


class CampaignGetArgs(ReadArgs):
    """Arguments of ``campaign_get``."""

    id: str = Field(pattern=NUMERIC_ID, description="Campaign ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")


async def campaign_get(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CampaignGetArgs, arguments)
    return await gateway.call("GET", f"/{args.id}", query=query_params(args))


class CampaignUpdateArgs(WriteArgs):
    """Arguments of ``campaign_update``."""

    id: str = Field(pattern=NUMERIC_ID, description="Campaign ID")
    name: str | None = Field(default=None, description="Name of the Campaign")
    status: CampaignStatus | None = Field(default=None, description="Current status of the Campaign (enum: Campaign_status)")
    objective: CampaignObjective | None = Field(default=None, description="Objective (enum: Campaign_objective)")
    daily_budget: NonNegativeInt | None = Field(default=None, description="Daily Budget")
    lifetime_budget: NonNegativeInt | None = Field(default=None, description="Lifetime Budget")
    spend_cap: NonNegativeInt | None = Field(default=None, description="Spend Cap")
    bid_strategy: CampaignBidStrategy | None = Field(default=None, description="Bid Strategy (enum: Campaign_bid_strategy)")
    special_ad_categories: list[CampaignSpecialAdCategories] | None = Field(default=None, description="Special Ad Categories (enum: Campaign_special_ad_categories)")
    start_time: datetime | None = Field(default=None, description="Start Time")
    stop_time: datetime | None = Field(default=None, description="Stop Time")
    adlabels: list[dict[str, Any]] | None = Field(default=None, description="Adlabels")


async def campaign_update(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CampaignUpdateArgs, arguments)
    return await gateway.call("POST", f"/{args.id}", body=body_params(args))


class CampaignDeleteArgs(WriteArgs):
    """Arguments of ``campaign_delete``."""

    id: str = Field(pattern=NUMERIC_ID, description="Campaign ID")


async def campaign_delete(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CampaignDeleteArgs, arguments)
    return await gateway.call("DELETE", f"/{args.id}", query=query_params(args))


class CampaignListAdsArgs(ReadArgs):
    """Arguments of ``campaign_list_ads``."""

    id: str = Field(pattern=NUMERIC_ID, description="Campaign ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    effective_status: list[str] | None = Field(default=None, description="Effective Status")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")


async def campaign_list_ads(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CampaignListAdsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/ads", query=query_params(args))


class CampaignListAdsetsArgs(ReadArgs):
    """Arguments of ``campaign_list_adsets``."""

    id: str = Field(pattern=NUMERIC_ID, description="Campaign ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    effective_status: list[str] | None = Field(default=None, description="Effective Status")
    is_completed: bool | None = Field(default=None, description="Is Completed")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")


async def campaign_list_adsets(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CampaignListAdsetsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/adsets", query=query_params(args))


class CampaignCreateAdlabelArgs(WriteArgs):
    """Arguments of ``campaign_create_adlabel``."""

    id: str = Field(pattern=NUMERIC_ID, description="Campaign ID")
    adlabels: list[dict[str, Any]] = Field(description="Adlabels")


async def campaign_create_adlabel(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CampaignCreateAdlabelArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/adlabels", body=body_params(args))


class CampaignGetInsightsArgs(ReadArgs):
    """Arguments of ``campaign_get_insights``."""

    id: str = Field(pattern=NUMERIC_ID, description="Campaign ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    level: AdsInsightsLevel | None = Field(default=None, description="Level (enum: AdsInsights_level)")
    breakdowns: list[AdsInsightsBreakdowns] | None = Field(default=None, description="Breakdowns (enum: AdsInsights_breakdowns)")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")
    time_increment: str | None = Field(default=None, description="Time Increment")


async def campaign_get_insights(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CampaignGetInsightsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/insights", query=query_params(args))


class CampaignCreateInsightsReportArgs(WriteArgs):
    """Arguments of ``campaign_create_insights_report``."""

    id: str = Field(pattern=NUMERIC_ID, description="Campaign ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    level: AdsInsightsLevel | None = Field(default=None, description="Level (enum: AdsInsights_level)")
    breakdowns: list[AdsInsightsBreakdowns] | None = Field(default=None, description="Breakdowns (enum: AdsInsights_breakdowns)")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")


async def campaign_create_insights_report(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CampaignCreateInsightsReportArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/insights", body=body_params(args))


class CampaignCreateBudgetScheduleArgs(WriteArgs):
    """Arguments of ``campaign_create_budget_schedule``."""

    id: str = Field(pattern=NUMERIC_ID, description="Campaign ID")
    budget_value: NonNegativeInt = Field(description="Budget Value")
    budget_value_type: HighDemandPeriodBudgetValueType = Field(description="Budget Value Type (enum: HighDemandPeriod_budget_value_type)")
    time_end: NonNegativeInt = Field(description="Time End")
    time_start: NonNegativeInt = Field(description="Time Start")


async def campaign_create_budget_schedule(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CampaignCreateBudgetScheduleArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/budget_schedules", body=body_params(args))


class CampaignListCopiesArgs(ReadArgs):
    """Arguments of ``campaign_list_copies``."""

    id: str = Field(pattern=NUMERIC_ID, description="Campaign ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    effective_status: list[str] | None = Field(default=None, description="Effective Status")
    is_completed: bool | None = Field(default=None, description="Is Completed")


async def campaign_list_copies(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CampaignListCopiesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/copies", query=query_params(args))


class CampaignCreateCopieArgs(WriteArgs):
    """Arguments of ``campaign_create_copie``."""

    id: str = Field(pattern=NUMERIC_ID, description="Campaign ID")
    deep_copy: bool | None = Field(default=None, description="Deep Copy")
    end_time: datetime | None = Field(default=None, description="End Time")
    rename_options: dict[str, Any] | None = Field(default=None, description="Rename Options")
    start_time: datetime | None = Field(default=None, description="Start Time")
    status_option: CampaignStatusOption | None = Field(default=None, description="Status Option (enum: Campaign_status_option)")


async def campaign_create_copie(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CampaignCreateCopieArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/copies", body=body_params(args))


TOOLS: tuple[EndpointTool, ...] = (
    EndpointTool(
        name="campaign_get",
        description="Get details of a specific Campaign. Returns Campaign.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="",
        id_bearing=True,
        args_model=CampaignGetArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Campaign ID",
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
                "time_range": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Time Range",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=campaign_get,
    ),
    EndpointTool(
        name="campaign_update",
        description="Update a Campaign. Returns Campaign.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="",
        id_bearing=True,
        args_model=CampaignUpdateArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Campaign ID",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the Campaign",
                },
                "status": {
                    "type": "string",
                    "enum": values(CampaignStatus),
                    "description": "Current status of the Campaign (enum: Campaign_status)",
                },
                "objective": {
                    "type": "string",
                    "enum": values(CampaignObjective),
                    "description": "Objective (enum: Campaign_objective)",
                },
                "daily_budget": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Daily Budget",
                },
                "lifetime_budget": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Lifetime Budget",
                },
                "spend_cap": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Spend Cap",
                },
                "bid_strategy": {
                    "type": "string",
                    "enum": values(CampaignBidStrategy),
                    "description": "Bid Strategy (enum: Campaign_bid_strategy)",
                },
                "special_ad_categories": {
                    "type": "array",
                    "items": {
                        "type": "string",
                        "enum": values(CampaignSpecialAdCategories),
                    },
                    "description": "Special Ad Categories (enum: Campaign_special_ad_categories)",
                },
                "start_time": {
                    "type": "string",
                    "format": "date-time",
                    "description": "Start Time",
                },
                "stop_time": {
                    "type": "string",
                    "format": "date-time",
                    "description": "Stop Time",
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
        handler=campaign_update,
    ),
    EndpointTool(
        name="campaign_delete",
        description="Delete a Campaign.",
        object_name=OBJECT_NAME,
        method="DELETE",
        endpoint="",
        id_bearing=True,
        args_model=CampaignDeleteArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Campaign ID",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=campaign_delete,
    ),
    EndpointTool(
        name="campaign_list_ads",
        description="List ads for this Campaign. Returns Ad.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="ads",
        id_bearing=True,
        args_model=CampaignListAdsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Campaign ID",
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
                "time_range": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Time Range",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=campaign_list_ads,
    ),
    EndpointTool(
        name="campaign_list_adsets",
        description="List adsets for this Campaign. Returns AdSet.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="adsets",
        id_bearing=True,
        args_model=CampaignListAdsetsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Campaign ID",
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
                "is_completed": {
                    "type": "boolean",
                    "description": "Is Completed",
                },
                "time_range": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Time Range",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=campaign_list_adsets,
    ),
    EndpointTool(
        name="campaign_create_adlabel",
        description="Associate adlabels with this Campaign. Returns Campaign. Required: adlabels",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="adlabels",
        id_bearing=True,
        args_model=CampaignCreateAdlabelArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Campaign ID",
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
        handler=campaign_create_adlabel,
    ),
    EndpointTool(
        name="campaign_get_insights",
        description="Get analytics insights for this Campaign. Returns AdsInsights.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="insights",
        id_bearing=True,
        args_model=CampaignGetInsightsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Campaign ID",
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
        handler=campaign_get_insights,
    ),
    EndpointTool(
        name="campaign_create_insights_report",
        description="Generate an insights report for this Campaign. Returns AdReportRun.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="insights",
        id_bearing=True,
        args_model=CampaignCreateInsightsReportArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Campaign ID",
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
        handler=campaign_create_insights_report,
    ),
    EndpointTool(
        name="campaign_create_budget_schedule",
        description="Create or update budget_schedules for this Campaign. Returns HighDemandPeriod. Required: budget_value, budget_value_type (enum), time_end, time_start",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="budget_schedules",
        id_bearing=True,
        args_model=CampaignCreateBudgetScheduleArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Campaign ID",
                },
                "budget_value": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Budget Value",
                },
                "budget_value_type": {
                    "type": "string",
                    "enum": values(HighDemandPeriodBudgetValueType),
                    "description": "Budget Value Type (enum: HighDemandPeriod_budget_value_type)",
                },
                "time_end": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Time End",
                },
                "time_start": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Time Start",
                },
            },
            "required": ["id", "budget_value", "budget_value_type", "time_end", "time_start"],
            "additionalProperties": False,
        },
        handler=campaign_create_budget_schedule,
    ),
    EndpointTool(
        name="campaign_list_copies",
        description="List copies of this Campaign. Returns Campaign.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="copies",
        id_bearing=True,
        args_model=CampaignListCopiesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Campaign ID",
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
                "is_completed": {
                    "type": "boolean",
                    "description": "Is Completed",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=campaign_list_copies,
    ),
    EndpointTool(
        name="campaign_create_copie",
        description="Create a copy of this Campaign. Returns Campaign.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="copies",
        id_bearing=True,
        args_model=CampaignCreateCopieArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "Campaign ID",
                },
                "deep_copy": {
                    "type": "boolean",
                    "description": "Deep Copy",
                },
                "end_time": {
                    "type": "string",
                    "format": "date-time",
                    "description": "End Time",
                },
                "rename_options": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Rename Options",
                },
                "start_time": {
                    "type": "string",
                    "format": "date-time",
                    "description": "Start Time",
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
        handler=campaign_create_copie,
    ),
)

TOOL_NAMES: tuple[str, ...] = (
    "campaign_get",
    "campaign_update",
    "campaign_delete",
    "campaign_list_ads",
    "campaign_list_adsets",
    "campaign_create_adlabel",
    "campaign_get_insights",
    "campaign_create_insights_report",
    "campaign_create_budget_schedule",
    "campaign_list_copies",
    "campaign_create_copie",
)

__all__ = ["OBJECT_NAME", "TOOLS", "TOOL_NAMES"]
