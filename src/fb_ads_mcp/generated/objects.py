# Code generated by fb_ads_mcp.codegen. DO NOT EDIT.
"""Object records returned by the Graph API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import NonNegativeInt

from ..endpoints import GraphObject
from .enums import (
    AdCreativeCallToActionType,
    AdCreativeStatus,
    AdSetBillingEvent,
    AdSetDestinationType,
    AdSetOptimizationGoal,
    AdSetStatus,
    AdStatus,
    CampaignBidStrategy,
    CampaignEffectiveStatus,
    CampaignObjective,
    CampaignSpecialAdCategories,
    CampaignStatus,
    CustomAudienceCustomerFileSource,
    CustomAudienceSubtype,
)


class Ad(GraphObject):
    """Ad object."""

    id: str | None = None
    account_id: str | None = None
    adset_id: str | None = None
    campaign_id: str | None = None
    name: str | None = None
    status: AdStatus | None = None
    effective_status: str | None = None
    creative: AdCreative | None = None
    bid_amount: int | None = None
    tracking_specs: list[dict[str, Any]] | None = None
    conversion_specs: list[dict[str, Any]] | None = None
    adlabels: list[Any] | None = None
    preview_shareable_link: str | None = None
    created_time: datetime | None = None
    updated_time: datetime | None = None


class AdAccount(GraphObject):
    """AdAccount object."""

    id: str | None = None
    account_id: str | None = None
    name: str | None = None
    account_status: NonNegativeInt | None = None
    currency: str | None = None
    timezone_name: str | None = None
    amount_spent: str | None = None
    balance: str | None = None
    spend_cap: str | None = None
    business_name: str | None = None
    owner: str | None = None
    min_daily_budget: NonNegativeInt | None = None
    disable_reason: NonNegativeInt | None = None
    capabilities: list[str] | None = None
    funding_source: str | None = None
    created_time: datetime | None = None


class AdCreative(GraphObject):
    """AdCreative object."""

    id: str | None = None
    account_id: str | None = None
    name: str | None = None
    status: AdCreativeStatus | None = None
    title: str | None = None
    body: str | None = None
    image_hash: str | None = None
    image_url: str | None = None
    video_id: str | None = None
    link_url: str | None = None
    object_story_spec: dict[str, Any] | None = None
    object_story_id: str | None = None
    effective_object_story_id: str | None = None
    call_to_action_type: AdCreativeCallToActionType | None = None
    thumbnail_url: str | None = None
    url_tags: str | None = None


class AdSet(GraphObject):
    """AdSet object."""

    id: str | None = None
    account_id: str | None = None
    campaign_id: str | None = None
    name: str | None = None
    status: AdSetStatus | None = None
    effective_status: str | None = None
    billing_event: AdSetBillingEvent | None = None
    optimization_goal: AdSetOptimizationGoal | None = None
    daily_budget: str | None = None
    lifetime_budget: str | None = None
    bid_amount: NonNegativeInt | None = None
    bid_strategy: CampaignBidStrategy | None = None
    targeting: Any | None = None
    destination_type: AdSetDestinationType | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    created_time: datetime | None = None
    updated_time: datetime | None = None


class Campaign(GraphObject):
    """Campaign object."""

    id: str | None = None
    account_id: str | None = None
    name: str | None = None
    objective: CampaignObjective | None = None
    status: CampaignStatus | None = None
    effective_status: CampaignEffectiveStatus | None = None
    bid_strategy: CampaignBidStrategy | None = None
    buying_type: str | None = None
    daily_budget: str | None = None
    lifetime_budget: str | None = None
    spend_cap: str | None = None
    special_ad_categories: list[CampaignSpecialAdCategories] | None = None
    adlabels: list[Any] | None = None
    start_time: datetime | None = None
    stop_time: datetime | None = None
    created_time: datetime | None = None
    updated_time: datetime | None = None


class CustomAudience(GraphObject):
    """CustomAudience object."""

    id: str | None = None
    account_id: str | None = None
    name: str | None = None
    description: str | None = None
    subtype: CustomAudienceSubtype | None = None
    customer_file_source: CustomAudienceCustomerFileSource | None = None
    approximate_count_lower_bound: int | None = None
    approximate_count_upper_bound: int | None = None
    retention_days: NonNegativeInt | None = None
    rule: str | None = None
    operation_status: dict[str, Any] | None = None
    delivery_status: dict[str, Any] | None = None
    time_created: datetime | None = None
    time_updated: datetime | None = None


class User(GraphObject):
    """User object."""

    id: str | None = None
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    locale: str | None = None
    timezone: float | None = None
    verified: bool | None = None
    updated_time: datetime | None = None


Ad.model_rebuild()


__all__ = [
    "Ad",
    "AdAccount",
    "AdCreative",
    "AdSet",
    "Campaign",
    "CustomAudience",
    "User",
]
