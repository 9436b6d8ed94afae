# Code generated by fb_ads_mcp.codegen. DO NOT EDIT.
"""Graph API tools for AdSet endpoints."""

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
    AdActivityCategory,
    AdSetBillingEvent,
    AdSetOptimizationGoal,
    AdSetStatus,
    AdsInsightsBreakdowns,
    AdsInsightsDatePreset,
    AdsInsightsLevel,
    CampaignBidStrategy,
    CampaignStatusOption,
    HighDemandPeriodBudgetValueType,
)

if TYPE_CHECKING:
    from ..graph.gateway import GraphGateway

OBJECT_NAME = "AdSet"


class AdSetGetArgs(ReadArgs):
    """Arguments of ``ad_set_get``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")


async def ad_set_get(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetGetArgs, arguments)
    return await gateway.call("GET", f"/{args.id}", query=query_params(args))


class AdSetUpdateArgs(WriteArgs):
    """Arguments of ``ad_set_update``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")
    name: str | None = Field(default=None, description="Name of the AdSet")
    status: AdSetStatus | None = Field(default=None, description="Current status of the AdSet (enum: AdSet_status)")
    daily_budget: NonNegativeInt | None = Field(default=None, description="Daily Budget")
    lifetime_budget: NonNegativeInt | None = Field(default=None, description="Lifetime Budget")
    bid_amount: NonNegativeInt | None = Field(default=None, description="Bid Amount")
    bid_strategy: CampaignBidStrategy | None = Field(default=None, description="Bid Strategy (enum: Campaign_bid_strategy)")
    billing_event: AdSetBillingEvent | None = Field(default=None, description="Billing Event (enum: AdSet_billing_event)")
    optimization_goal: AdSetOptimizationGoal | None = Field(default=None, description="Optimization Goal (enum: AdSet_optimization_goal)")
    targeting: Any | None = Field(default=None, description="Targeting")
    start_time: datetime | None = Field(default=None, description="Start Time")
    end_time: datetime | None = Field(default=None, description="End Time")


async def ad_set_update(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetUpdateArgs, arguments)
    return await gateway.call("POST", f"/{args.id}", body=body_params(args))


class AdSetDeleteArgs(WriteArgs):
    """Arguments of ``ad_set_delete``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")


async def ad_set_delete(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetDeleteArgs, arguments)
    return await gateway.call("DELETE", f"/{args.id}", query=query_params(args))


class AdSetListAdsArgs(ReadArgs):
    """Arguments of ``ad_set_list_ads``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    effective_status: list[str] | None = Field(default=None, description="Effective Status")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")
    updated_since: int | None = Field(default=None, description="When last updated")


async def ad_set_list_ads(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetListAdsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/ads", query=query_params(args))


class AdSetListAdcreativesArgs(ReadArgs):
    """Arguments of ``ad_set_list_adcreatives``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")


async def ad_set_list_adcreatives(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetListAdcreativesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/adcreatives", query=query_params(args))


class AdSetCreateAdlabelArgs(WriteArgs):
    """Arguments of ``ad_set_create_adlabel``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")
    adlabels: list[dict[str, Any]] = Field(description="Adlabels")


async def ad_set_create_adlabel(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetCreateAdlabelArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/adlabels", body=body_params(args))


class AdSetListActivitiesArgs(ReadArgs):
    """Arguments of ``ad_set_list_activities``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")
    category: AdActivityCategory | None = Field(default=None, description="Category (enum: AdActivity_category)")
    since: datetime | None = Field(default=None, description="Since")
    until: datetime | None = Field(default=None, description="Until")


async def ad_set_list_activities(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetListActivitiesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/activities", query=query_params(args))


class AdSetGetInsightsArgs(ReadArgs):
    """Arguments of ``ad_set_get_insights``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    level: AdsInsightsLevel | None = Field(default=None, description="Level (enum: AdsInsights_level)")
    breakdowns: list[AdsInsightsBreakdowns] | None = Field(default=None, description="Breakdowns (enum: AdsInsights_breakdowns)")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")
    time_increment: str | None = Field(default=None, description="Time Increment")


async def ad_set_get_insights(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetGetInsightsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/insights", query=query_params(args))


class AdSetCreateInsightsReportArgs(WriteArgs):
    """Arguments of ``ad_set_create_insights_report``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    level: AdsInsightsLevel | None = Field(default=None, description="Level (enum: AdsInsights_level)")
    breakdowns: list[AdsInsightsBreakdowns] | None = Field(default=None, description="Breakdowns (enum: AdsInsights_breakdowns)")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")


async def ad_set_create_insights_report(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetCreateInsightsReportArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/insights", body=body_params(args))


class AdSetGetDeliveryEstimateArgs(ReadArgs):
    """Arguments of ``ad_set_get_delivery_estimate``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")
    optimization_goal: AdSetOptimizationGoal | None = Field(default=None, description="Optimization Goal (enum: AdSet_optimization_goal)")
    promoted_object: dict[str, Any] | None = Field(default=None, description="Promoted Object")
    targeting_spec: Any | None = Field(default=None, description="Targeting Spec")


async def ad_set_get_delivery_estimate(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetGetDeliveryEstimateArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/delivery_estimate", query=query_params(args))


class AdSetGetMessageDeliveryEstimateArgs(ReadArgs):
    """Arguments of ``ad_set_get_message_delivery_estimate``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")
    bid_amount: NonNegativeInt | None = Field(default=None, description="Bid Amount")
    daily_budget: NonNegativeInt | None = Field(default=None, description="Daily Budget")
    optimization_goal: AdSetOptimizationGoal | None = Field(default=None, description="Optimization Goal (enum: AdSet_optimization_goal)")
    pacing_type: str | None = Field(default=None, description="Pacing Type")
    targeting_spec: Any | None = Field(default=None, description="Targeting Spec")


async def ad_set_get_message_delivery_estimate(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetGetMessageDeliveryEstimateArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/message_delivery_estimate", query=query_params(args))


class AdSetCreateBudgetScheduleArgs(WriteArgs):
    """Arguments of ``ad_set_create_budget_schedule``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")
    budget_value: NonNegativeInt = Field(description="Budget Value")
    budget_value_type: HighDemandPeriodBudgetValueType = Field(description="Budget Value Type (enum: HighDemandPeriod_budget_value_type)")
    time_end: NonNegativeInt = Field(description="Time End")
    time_start: NonNegativeInt = Field(description="Time Start")


async def ad_set_create_budget_schedule(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetCreateBudgetScheduleArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/budget_schedules", body=body_params(args))


class AdSetListCopiesArgs(ReadArgs):
    """Arguments of ``ad_set_list_copies``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    effective_status: list[str] | None = Field(default=None, description="Effective Status")
    is_completed: bool | None = Field(default=None, description="Is Completed")


async def ad_set_list_copies(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetListCopiesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/copies", query=query_params(args))


class AdSetCreateCopieArgs(WriteArgs):
    """Arguments of ``ad_set_create_copie``."""

    id: str = Field(pattern=NUMERIC_ID, description="AdSet ID")
    campaign_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Campaign")
    deep_copy: bool | None = Field(default=None, description="Deep Copy")
    rename_options: dict[str, Any] | None = Field(default=None, description="Rename Options")
    status_option: CampaignStatusOption | None = Field(default=None, description="Status Option (enum: Campaign_status_option)")
    start_time: datetime | None = Field(default=None, description="Start Time")
    end_time: datetime | None = Field(default=None, description="End Time")


async def ad_set_create_copie(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdSetCreateCopieArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/copies", body=body_params(args))


TOOLS: tuple[EndpointTool, ...] = (
    EndpointTool(
        name="ad_set_get",
        description="Get details of a specific AdSet. Returns AdSet.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="",
        id_bearing=True,
        args_model=AdSetGetArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
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
        handler=ad_set_get,
    ),
    EndpointTool(
        name="ad_set_update",
        description="Update a AdSet. Returns AdSet.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="",
        id_bearing=True,
        args_model=AdSetUpdateArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the AdSet",
                },
                "status": {
                    "type": "string",
                    "enum": values(AdSetStatus),
                    "description": "Current status of the AdSet (enum: AdSet_status)",
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
                "bid_amount": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Bid Amount",
                },
                "bid_strategy": {
                    "type": "string",
                    "enum": values(CampaignBidStrategy),
                    "description": "Bid Strategy (enum: Campaign_bid_strategy)",
                },
                "billing_event": {
                    "type": "string",
                    "enum": values(AdSetBillingEvent),
                    "description": "Billing Event (enum: AdSet_billing_event)",
                },
                "optimization_goal": {
                    "type": "string",
                    "enum": values(AdSetOptimizationGoal),
                    "description": "Optimization Goal (enum: AdSet_optimization_goal)",
                },
                "targeting": {
                    "description": "Targeting",
                },
                "start_time": {
                    "type": "string",
                    "format": "date-time",
                    "description": "Start Time",
                },
                "end_time": {
                    "type": "string",
                    "format": "date-time",
                    "description": "End Time",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_set_update,
    ),
    EndpointTool(
        name="ad_set_delete",
        description="Delete a AdSet.",
        object_name=OBJECT_NAME,
        method="DELETE",
        endpoint="",
        id_bearing=True,
        args_model=AdSetDeleteArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_set_delete,
    ),
    EndpointTool(
        name="ad_set_list_ads",
        description="List ads for this AdSet. Returns Ad.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="ads",
        id_bearing=True,
        args_model=AdSetListAdsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
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
                "updated_since": {
                    "type": "integer",
                    "description": "When last updated",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_set_list_ads,
    ),
    EndpointTool(
        name="ad_set_list_adcreatives",
        description="List adcreatives for this AdSet. Returns AdCreative.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="adcreatives",
        id_bearing=True,
        args_model=AdSetListAdcreativesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
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
        handler=ad_set_list_adcreatives,
    ),
    EndpointTool(
        name="ad_set_create_adlabel",
        description="Associate adlabels with this AdSet. Returns AdSet. Required: adlabels",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="adlabels",
        id_bearing=True,
        args_model=AdSetCreateAdlabelArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
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
        handler=ad_set_create_adlabel,
    ),
    EndpointTool(
        name="ad_set_list_activities",
        description="List activities for this AdSet. Returns AdActivity.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="activities",
        id_bearing=True,
        args_model=AdSetListActivitiesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
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
                "category": {
                    "type": "string",
                    "enum": values(AdActivityCategory),
                    "description": "Category (enum: AdActivity_category)",
                },
                "since": {
                    "type": "string",
                    "format": "date-time",
                    "description": "Since",
                },
                "until": {
                    "type": "string",
                    "format": "date-time",
                    "description": "Until",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_set_list_activities,
    ),
    EndpointTool(
        name="ad_set_get_insights",
        description="Get analytics insights for this AdSet. Returns AdsInsights.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="insights",
        id_bearing=True,
        args_model=AdSetGetInsightsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
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
        handler=ad_set_get_insights,
    ),
    EndpointTool(
        name="ad_set_create_insights_report",
        description="Generate an insights report for this AdSet. Returns AdReportRun.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="insights",
        id_bearing=True,
        args_model=AdSetCreateInsightsReportArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
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
        handler=ad_set_create_insights_report,
    ),
    EndpointTool(
        name="ad_set_get_delivery_estimate",
        description="Get delivery_estimate data for this AdSet. Returns AdCampaignDeliveryEstimate.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="delivery_estimate",
        id_bearing=True,
        args_model=AdSetGetDeliveryEstimateArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
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
                "optimization_goal": {
                    "type": "string",
                    "enum": values(AdSetOptimizationGoal),
                    "description": "Optimization Goal (enum: AdSet_optimization_goal)",
                },
                "promoted_object": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Promoted Object",
                },
                "targeting_spec": {
                    "description": "Targeting Spec",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_set_get_delivery_estimate,
    ),
    EndpointTool(
        name="ad_set_get_message_delivery_estimate",
        description="Get message_delivery_estimate data for this AdSet. Returns MessageDeliveryEstimate.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="message_delivery_estimate",
        id_bearing=True,
        args_model=AdSetGetMessageDeliveryEstimateArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
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
                "bid_amount": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Bid Amount",
                },
                "daily_budget": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Daily Budget",
                },
                "optimization_goal": {
                    "type": "string",
                    "enum": values(AdSetOptimizationGoal),
                    "description": "Optimization Goal (enum: AdSet_optimization_goal)",
                },
                "pacing_type": {
                    "type": "string",
                    "description": "Pacing Type",
                },
                "targeting_spec": {
                    "description": "Targeting Spec",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_set_get_message_delivery_estimate,
    ),
    EndpointTool(
        name="ad_set_create_budget_schedule",
        description="Create or update budget_schedules for this AdSet. Returns HighDemandPeriod. Required: budget_value, budget_value_type (enum), time_end, time_start",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="budget_schedules",
        id_bearing=True,
        args_model=AdSetCreateBudgetScheduleArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
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
        handler=ad_set_create_budget_schedule,
    ),
    EndpointTool(
        name="ad_set_list_copies",
        description="List copies of this AdSet. Returns AdSet.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="copies",
        id_bearing=True,
        args_model=AdSetListCopiesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
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
        handler=ad_set_list_copies,
    ),
    EndpointTool(
        name="ad_set_create_copie",
        description="Create a copy of this AdSet. Returns AdSet.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="copies",
        id_bearing=True,
        args_model=AdSetCreateCopieArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "AdSet ID",
                },
                "campaign_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Campaign",
                },
                "deep_copy": {
                    "type": "boolean",
                    "description": "Deep Copy",
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
                "start_time": {
                    "type": "string",
                    "format": "date-time",
                    "description": "Start Time",
                },
                "end_time": {
                    "type": "string",
                    "format": "date-time",
                    "description": "End Time",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_set_create_copie,
    ),
)

TOOL_NAMES: tuple[str, ...] = (
    "ad_set_get",
    "ad_set_update",
    "ad_set_delete",
    "ad_set_list_ads",
    "ad_set_list_adcreatives",
    "ad_set_create_adlabel",
    "ad_set_list_activities",
    "ad_set_get_insights",
    "ad_set_create_insights_report",
    "ad_set_get_delivery_estimate",
    "ad_set_get_message_delivery_estimate",
    "ad_set_create_budget_schedule",
    "ad_set_list_copies",
    "ad_set_create_copie",
)

__all__ = ["OBJECT_NAME", "TOOLS", "TOOL_NAMES"]
