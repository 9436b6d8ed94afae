# Code generated by fb_ads_mcp.codegen. DO NOT EDIT.
"""Graph API tools for AdAccount endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Mapping

from pydantic import Field, NonNegativeInt

from ..endpoints import (
    AD_ACCOUNT_ID,
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
    AdCreativeCallToActionType,
    AdCreativeStatus,
    AdPreviewAdFormat,
    AdSetBillingEvent,
    AdSetDestinationType,
    AdSetOptimizationGoal,
    AdSetStatus,
    AdStatus,
    AdVideoUnpublishedContentType,
    AdsInsightsBreakdowns,
    AdsInsightsDatePreset,
    AdsInsightsLevel,
    CampaignBidStrategy,
    CampaignEffectiveStatus,
    CampaignObjective,
    CampaignSpecialAdCategories,
    CampaignStatus,
    CustomAudienceCustomerFileSource,
    CustomAudienceSubtype,
)
from .objects import AdCreative

if TYPE_CHECKING:
    from ..graph.gateway import GraphGateway

OBJECT_NAME = "AdAccount"


class AdAccountGetArgs(ReadArgs):
    """Arguments of ``ad_account_get``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")


async def ad_account_get(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountGetArgs, arguments)
    return await gateway.call("GET", f"/{args.id}", query=query_params(args))


class AdAccountUpdateArgs(WriteArgs):
    """Arguments of ``ad_account_update``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    name: str | None = Field(default=None, description="Name of the AdAccount")
    spend_cap: float | None = Field(default=None, description="Spend Cap")
    spend_cap_action: str | None = Field(default=None, description="Spend Cap Action")
    end_advertiser: str | None = Field(default=None, description="End Advertiser")
    media_agency: str | None = Field(default=None, description="Media Agency")
    partner: str | None = Field(default=None, description="Partner")


async def ad_account_update(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountUpdateArgs, arguments)
    return await gateway.call("POST", f"/{args.id}", body=body_params(args))


class AdAccountListCampaignsArgs(ReadArgs):
    """Arguments of ``ad_account_list_campaigns``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    effective_status: list[CampaignEffectiveStatus] | None = Field(default=None, description="Effective Status (enum: Campaign_effective_status)")
    is_completed: bool | None = Field(default=None, description="Is Completed")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")


async def ad_account_list_campaigns(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListCampaignsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/campaigns", query=query_params(args))


class AdAccountCreateCampaignArgs(WriteArgs):
    """Arguments of ``ad_account_create_campaign``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    name: str = Field(description="Name of the Campaign")
    objective: CampaignObjective = Field(description="Objective (enum: Campaign_objective)")
    status: CampaignStatus | None = Field(default=None, description="Current status of the Campaign (enum: Campaign_status)")
    special_ad_categories: list[CampaignSpecialAdCategories] = Field(description="Special Ad Categories (enum: Campaign_special_ad_categories)")
    buying_type: str | None = Field(default=None, description="Buying Type")
    bid_strategy: CampaignBidStrategy | None = Field(default=None, description="Bid Strategy (enum: Campaign_bid_strategy)")
    daily_budget: NonNegativeInt | None = Field(default=None, description="Daily Budget")
    lifetime_budget: NonNegativeInt | None = Field(default=None, description="Lifetime Budget")
    spend_cap: NonNegativeInt | None = Field(default=None, description="Spend Cap")
    start_time: datetime | None = Field(default=None, description="Start Time")
    stop_time: datetime | None = Field(default=None, description="Stop Time")
    promoted_object: dict[str, Any] | None = Field(default=None, description="Promoted Object")
    source_campaign_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Source Campaign")
    adlabels: list[dict[str, Any]] | None = Field(default=None, description="Adlabels")


async def ad_account_create_campaign(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountCreateCampaignArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/campaigns", body=body_params(args))


class AdAccountListAdsetsArgs(ReadArgs):
    """Arguments of ``ad_account_list_adsets``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    effective_status: list[str] | None = Field(default=None, description="Effective Status")
    is_completed: bool | None = Field(default=None, description="Is Completed")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")


async def ad_account_list_adsets(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListAdsetsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/adsets", query=query_params(args))


class AdAccountCreateAdsetArgs(WriteArgs):
    """Arguments of ``ad_account_create_adset``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    name: str = Field(description="Name of the AdSet")
    campaign_id: str = Field(pattern=NUMERIC_ID, description="ID of the Campaign")
    billing_event: AdSetBillingEvent = Field(description="Billing Event (enum: AdSet_billing_event)")
    optimization_goal: AdSetOptimizationGoal = Field(description="Optimization Goal (enum: AdSet_optimization_goal)")
    targeting: Any = Field(description="Targeting")
    status: AdSetStatus | None = Field(default=None, description="Current status of the AdSet (enum: AdSet_status)")
    daily_budget: NonNegativeInt | None = Field(default=None, description="Daily Budget")
    lifetime_budget: NonNegativeInt | None = Field(default=None, description="Lifetime Budget")
    bid_amount: NonNegativeInt | None = Field(default=None, description="Bid Amount")
    bid_strategy: CampaignBidStrategy | None = Field(default=None, description="Bid Strategy (enum: Campaign_bid_strategy)")
    start_time: datetime | None = Field(default=None, description="Start Time")
    end_time: datetime | None = Field(default=None, description="End Time")
    destination_type: AdSetDestinationType | None = Field(default=None, description="Destination Type (enum: AdSet_destination_type)")
    promoted_object: dict[str, Any] | None = Field(default=None, description="Promoted Object")


async def ad_account_create_adset(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountCreateAdsetArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/adsets", body=body_params(args))


class AdAccountListAdsArgs(ReadArgs):
    """Arguments of ``ad_account_list_ads``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    effective_status: list[str] | None = Field(default=None, description="Effective Status")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")
    updated_since: int | None = Field(default=None, description="When last updated")


async def ad_account_list_ads(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListAdsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/ads", query=query_params(args))


class AdAccountCreateAdArgs(WriteArgs):
    """Arguments of ``ad_account_create_ad``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    name: str = Field(description="Name of the Ad")
    adset_id: str = Field(pattern=NUMERIC_ID, description="ID of the Adset")
    creative: AdCreative = Field(description="Creative")
    status: AdStatus | None = Field(default=None, description="Current status of the Ad (enum: Ad_status)")
    bid_amount: int | None = Field(default=None, description="Bid Amount")
    tracking_specs: dict[str, Any] | None = Field(default=None, description="Tracking Specs")
    conversion_domain: str | None = Field(default=None, description="Conversion Domain")
    adlabels: list[dict[str, Any]] | None = Field(default=None, description="Adlabels")


async def ad_account_create_ad(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountCreateAdArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/ads", body=body_params(args))


class AdAccountListAdcreativesArgs(ReadArgs):
    """Arguments of ``ad_account_list_adcreatives``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")


async def ad_account_list_adcreatives(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListAdcreativesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/adcreatives", query=query_params(args))


class AdAccountCreateAdcreativeArgs(WriteArgs):
    """Arguments of ``ad_account_create_adcreative``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    name: str | None = Field(default=None, description="Name of the AdCreative")
    object_story_spec: dict[str, Any] | None = Field(default=None, description="Object Story Spec")
    object_story_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Object Story")
    asset_feed_spec: dict[str, Any] | None = Field(default=None, description="Asset Feed Spec")
    call_to_action_type: AdCreativeCallToActionType | None = Field(default=None, description="Call To Action Type (enum: AdCreative_call_to_action_type)")
    image_hash: str | None = Field(default=None, description="Image Hash")
    image_url: str | None = Field(default=None, description="Image URL")
    video_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Video")
    title: str | None = Field(default=None, description="Title")
    body: str | None = Field(default=None, description="Body")
    link_url: str | None = Field(default=None, description="Link URL")
    url_tags: str | None = Field(default=None, description="URL Tags")
    degrees_of_freedom_spec: dict[str, Any] | None = Field(default=None, description="Degrees Of Freedom Spec")


async def ad_account_create_adcreative(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountCreateAdcreativeArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/adcreatives", body=body_params(args))


class AdAccountListAdimagesArgs(ReadArgs):
    """Arguments of ``ad_account_list_adimages``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    hashes: list[str] | None = Field(default=None, description="Hashes")
    minheight: NonNegativeInt | None = Field(default=None, description="Minheight")
    minwidth: NonNegativeInt | None = Field(default=None, description="Minwidth")
    name: str | None = Field(default=None, description="Name of the AdImage")


async def ad_account_list_adimages(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListAdimagesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/adimages", query=query_params(args))


class AdAccountCreateAdimageArgs(WriteArgs):
    """Arguments of ``ad_account_create_adimage``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    bytes: str | None = Field(default=None, description="Bytes")
    copy_from: dict[str, Any] | None = Field(default=None, description="Copy From")
    name: str | None = Field(default=None, description="Name of the AdAccount")


async def ad_account_create_adimage(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountCreateAdimageArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/adimages", body=body_params(args))


class AdAccountRemoveAdimagesArgs(WriteArgs):
    """Arguments of ``ad_account_remove_adimages``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    hash: str = Field(description="Hash")


async def ad_account_remove_adimages(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountRemoveAdimagesArgs, arguments)
    return await gateway.call("DELETE", f"/{args.id}/adimages", query=query_params(args))


class AdAccountListAdvideosArgs(ReadArgs):
    """Arguments of ``ad_account_list_advideos``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    max_aspect_ratio: float | None = Field(default=None, description="Max Aspect Ratio")
    maxlength: NonNegativeInt | None = Field(default=None, description="Maxlength")
    min_aspect_ratio: float | None = Field(default=None, description="Min Aspect Ratio")
    minlength: NonNegativeInt | None = Field(default=None, description="Minlength")
    title: str | None = Field(default=None, description="Title")


async def ad_account_list_advideos(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListAdvideosArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/advideos", query=query_params(args))


class AdAccountCreateAdvideoArgs(WriteArgs):
    """Arguments of ``ad_account_create_advideo``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    title: str | None = Field(default=None, description="Title")
    description: str | None = Field(default=None, description="Description")
    file_url: str | None = Field(default=None, description="File URL")
    file_size: NonNegativeInt | None = Field(default=None, description="File Size")
    upload_phase: str | None = Field(default=None, description="Upload Phase")
    upload_session_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Upload Session")
    unpublished_content_type: AdVideoUnpublishedContentType | None = Field(default=None, description="Unpublished Content Type (enum: AdVideo_unpublished_content_type)")


async def ad_account_create_advideo(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountCreateAdvideoArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/advideos", body=body_params(args))


class AdAccountGetInsightsArgs(ReadArgs):
    """Arguments of ``ad_account_get_insights``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    level: AdsInsightsLevel | None = Field(default=None, description="Level (enum: AdsInsights_level)")
    breakdowns: list[AdsInsightsBreakdowns] | None = Field(default=None, description="Breakdowns (enum: AdsInsights_breakdowns)")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")
    time_increment: str | None = Field(default=None, description="Time Increment")
    action_attribution_windows: list[str] | None = Field(default=None, description="Action Attribution Windows")
    filtering: list[dict[str, Any]] | None = Field(default=None, description="Filtering")


async def ad_account_get_insights(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountGetInsightsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/insights", query=query_params(args))


class AdAccountCreateInsightsReportArgs(WriteArgs):
    """Arguments of ``ad_account_create_insights_report``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    date_preset: AdsInsightsDatePreset | None = Field(default=None, description="Date Preset (enum: AdsInsights_date_preset)")
    level: AdsInsightsLevel | None = Field(default=None, description="Level (enum: AdsInsights_level)")
    breakdowns: list[AdsInsightsBreakdowns] | None = Field(default=None, description="Breakdowns (enum: AdsInsights_breakdowns)")
    time_range: dict[str, Any] | None = Field(default=None, description="Time Range")
    time_increment: str | None = Field(default=None, description="Time Increment")
    fields: list[str] | None = Field(default=None, description="Fields")


async def ad_account_create_insights_report(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountCreateInsightsReportArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/insights", body=body_params(args))


class AdAccountListActivitiesArgs(ReadArgs):
    """Arguments of ``ad_account_list_activities``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    add_children: bool | None = Field(default=None, description="Add Children")
    business_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Business")
    category: AdActivityCategory | None = Field(default=None, description="Category (enum: AdActivity_category)")
    since: datetime | None = Field(default=None, description="Since")
    until: datetime | None = Field(default=None, description="Until")


async def ad_account_list_activities(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListActivitiesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/activities", query=query_params(args))


class AdAccountGetAdsVolumeArgs(ReadArgs):
    """Arguments of ``ad_account_get_ads_volume``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    page_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Page")
    show_breakdown_by_actor: bool | None = Field(default=None, description="Show Breakdown By Actor")


async def ad_account_get_ads_volume(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountGetAdsVolumeArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/ads_volume", query=query_params(args))


class AdAccountListCustomaudiencesArgs(ReadArgs):
    """Arguments of ``ad_account_list_customaudiences``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    business_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Business")
    filtering: list[dict[str, Any]] | None = Field(default=None, description="Filtering")


async def ad_account_list_customaudiences(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListCustomaudiencesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/customaudiences", query=query_params(args))


class AdAccountCreateCustomaudienceArgs(WriteArgs):
    """Arguments of ``ad_account_create_customaudience``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    name: str | None = Field(default=None, description="Name of the CustomAudience")
    description: str | None = Field(default=None, description="Description")
    subtype: CustomAudienceSubtype | None = Field(default=None, description="Subtype (enum: CustomAudience_subtype)")
    customer_file_source: CustomAudienceCustomerFileSource | None = Field(default=None, description="Customer File Source (enum: CustomAudience_customer_file_source)")
    retention_days: NonNegativeInt | None = Field(default=None, description="Retention Days")
    rule: str | None = Field(default=None, description="Rule")
    origin_audience_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Origin Audience")
    lookalike_spec: str | None = Field(default=None, description="Lookalike Spec")
    prefill: bool | None = Field(default=None, description="Prefill")


async def ad_account_create_customaudience(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountCreateCustomaudienceArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/customaudiences", body=body_params(args))


class AdAccountListSavedAudiencesArgs(ReadArgs):
    """Arguments of ``ad_account_list_saved_audiences``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    business_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Business")


async def ad_account_list_saved_audiences(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListSavedAudiencesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/saved_audiences", query=query_params(args))


class AdAccountGetTargetingbrowseArgs(ReadArgs):
    """Arguments of ``ad_account_get_targetingbrowse``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    limit_type: str | None = Field(default=None, description="Limit Type")
    regulated_categories: list[str] | None = Field(default=None, description="Regulated Categories")


async def ad_account_get_targetingbrowse(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountGetTargetingbrowseArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/targetingbrowse", query=query_params(args))


class AdAccountGetTargetingsearchArgs(ReadArgs):
    """Arguments of ``ad_account_get_targetingsearch``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    q: str = Field(description="Q")
    limit_type: str | None = Field(default=None, description="Limit Type")
    regulated_categories: list[str] | None = Field(default=None, description="Regulated Categories")


async def ad_account_get_targetingsearch(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountGetTargetingsearchArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/targetingsearch", query=query_params(args))


class AdAccountGetTargetingvalidationArgs(ReadArgs):
    """Arguments of ``ad_account_get_targetingvalidation``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    id_list: list[NonNegativeInt] | None = Field(default=None, description="ID List")
    name_list: list[str] | None = Field(default=None, description="Name List")
    targeting_list: list[dict[str, Any]] | None = Field(default=None, description="Targeting List")


async def ad_account_get_targetingvalidation(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountGetTargetingvalidationArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/targetingvalidation", query=query_params(args))


class AdAccountGetReachestimateArgs(ReadArgs):
    """Arguments of ``ad_account_get_reachestimate``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    targeting_spec: Any = Field(description="Targeting Spec")
    object_store_url: str | None = Field(default=None, description="Object Store URL")


async def ad_account_get_reachestimate(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountGetReachestimateArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/reachestimate", query=query_params(args))


class AdAccountGetDeliveryEstimateArgs(ReadArgs):
    """Arguments of ``ad_account_get_delivery_estimate``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    optimization_goal: AdSetOptimizationGoal = Field(description="Optimization Goal (enum: AdSet_optimization_goal)")
    targeting_spec: Any = Field(description="Targeting Spec")
    promoted_object: dict[str, Any] | None = Field(default=None, description="Promoted Object")


async def ad_account_get_delivery_estimate(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountGetDeliveryEstimateArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/delivery_estimate", query=query_params(args))


class AdAccountListBroadtargetingcategoriesArgs(ReadArgs):
    """Arguments of ``ad_account_list_broadtargetingcategories``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    custom_categories_only: bool | None = Field(default=None, description="Custom Categories Only")


async def ad_account_list_broadtargetingcategories(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListBroadtargetingcategoriesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/broadtargetingcategories", query=query_params(args))


class AdAccountListRecommendationsArgs(ReadArgs):
    """Arguments of ``ad_account_list_recommendations``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")


async def ad_account_list_recommendations(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListRecommendationsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/recommendations", query=query_params(args))


class AdAccountCreateRecommendationArgs(WriteArgs):
    """Arguments of ``ad_account_create_recommendation``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    recommendation_signature: str = Field(description="Recommendation Signature")
    music_parameters: dict[str, Any] | None = Field(default=None, description="Music Parameters")


async def ad_account_create_recommendation(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountCreateRecommendationArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/recommendations", body=body_params(args))


class AdAccountGetMaxBidArgs(ReadArgs):
    """Arguments of ``ad_account_get_max_bid``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")


async def ad_account_get_max_bid(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountGetMaxBidArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/max_bid", query=query_params(args))


class AdAccountListMinimumBudgetsArgs(ReadArgs):
    """Arguments of ``ad_account_list_minimum_budgets``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    bid_amount: int | None = Field(default=None, description="Bid Amount")


async def ad_account_list_minimum_budgets(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListMinimumBudgetsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/minimum_budgets", query=query_params(args))


class AdAccountListGeneratepreviewsArgs(ReadArgs):
    """Arguments of ``ad_account_list_generatepreviews``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    ad_format: AdPreviewAdFormat = Field(description="Ad Format (enum: AdPreview_ad_format)")
    creative: AdCreative = Field(description="Creative")
    locale: str | None = Field(default=None, description="Locale")


async def ad_account_list_generatepreviews(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListGeneratepreviewsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/generatepreviews", query=query_params(args))


class AdAccountListAdPlacePageSetsArgs(ReadArgs):
    """Arguments of ``ad_account_list_ad_place_page_sets``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")


async def ad_account_list_ad_place_page_sets(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListAdPlacePageSetsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/ad_place_page_sets", query=query_params(args))


class AdAccountListSubscribedAppsArgs(ReadArgs):
    """Arguments of ``ad_account_list_subscribed_apps``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")


async def ad_account_list_subscribed_apps(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListSubscribedAppsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/subscribed_apps", query=query_params(args))


class AdAccountCreateSubscribedAppArgs(WriteArgs):
    """Arguments of ``ad_account_create_subscribed_app``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    app_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the App")


async def ad_account_create_subscribed_app(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountCreateSubscribedAppArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/subscribed_apps", body=body_params(args))


class AdAccountRemoveSubscribedAppsArgs(WriteArgs):
    """Arguments of ``ad_account_remove_subscribed_apps``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")
    app_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the App")


async def ad_account_remove_subscribed_apps(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountRemoveSubscribedAppsArgs, arguments)
    return await gateway.call("DELETE", f"/{args.id}/subscribed_apps", query=query_params(args))


class AdAccountListUsersArgs(ReadArgs):
    """Arguments of ``ad_account_list_users``."""

    id: str = Field(pattern=AD_ACCOUNT_ID, description="AdAccount ID")


async def ad_account_list_users(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(AdAccountListUsersArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/users", query=query_params(args))


TOOLS: tuple[EndpointTool, ...] = (
    EndpointTool(
        name="ad_account_get",
        description="Get details of a specific AdAccount. Returns AdAccount.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="",
        id_bearing=True,
        args_model=AdAccountGetArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
        handler=ad_account_get,
    ),
    EndpointTool(
        name="ad_account_update",
        description="Update a AdAccount. Returns AdAccount.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="",
        id_bearing=True,
        args_model=AdAccountUpdateArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the AdAccount",
                },
                "spend_cap": {
                    "type": "number",
                    "description": "Spend Cap",
                },
                "spend_cap_action": {
                    "type": "string",
                    "description": "Spend Cap Action",
                },
                "end_advertiser": {
                    "type": "string",
                    "description": "End Advertiser",
                },
                "media_agency": {
                    "type": "string",
                    "description": "Media Agency",
                },
                "partner": {
                    "type": "string",
                    "description": "Partner",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_account_update,
    ),
    EndpointTool(
        name="ad_account_list_campaigns",
        description="List campaigns for this AdAccount. Returns Campaign.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="campaigns",
        id_bearing=True,
        args_model=AdAccountListCampaignsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                        "enum": values(CampaignEffectiveStatus),
                    },
                    "description": "Effective Status (enum: Campaign_effective_status)",
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
        handler=ad_account_list_campaigns,
    ),
    EndpointTool(
        name="ad_account_create_campaign",
        description="Create or update campaigns for this AdAccount. Returns Campaign. Required: name, objective (enum), special_ad_categories (enum)",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="campaigns",
        id_bearing=True,
        args_model=AdAccountCreateCampaignArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the Campaign",
                },
                "objective": {
                    "type": "string",
                    "enum": values(CampaignObjective),
                    "description": "Objective (enum: Campaign_objective)",
                },
                "status": {
                    "type": "string",
                    "enum": values(CampaignStatus),
                    "description": "Current status of the Campaign (enum: Campaign_status)",
                },
                "special_ad_categories": {
                    "type": "array",
                    "items": {
                        "type": "string",
                        "enum": values(CampaignSpecialAdCategories),
                    },
                    "description": "Special Ad Categories (enum: Campaign_special_ad_categories)",
                },
                "buying_type": {
                    "type": "string",
                    "description": "Buying Type",
                },
                "bid_strategy": {
                    "type": "string",
                    "enum": values(CampaignBidStrategy),
                    "description": "Bid Strategy (enum: Campaign_bid_strategy)",
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
                "promoted_object": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Promoted Object",
                },
                "source_campaign_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Source Campaign",
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
            "required": ["id", "name", "objective", "special_ad_categories"],
            "additionalProperties": False,
        },
        handler=ad_account_create_campaign,
    ),
    EndpointTool(
        name="ad_account_list_adsets",
        description="List adsets for this AdAccount. Returns AdSet.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="adsets",
        id_bearing=True,
        args_model=AdAccountListAdsetsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
        handler=ad_account_list_adsets,
    ),
    EndpointTool(
        name="ad_account_create_adset",
        description="Associate adsets with this AdAccount. Returns AdSet. Required: name, campaign_id, billing_event (enum), optimization_goal (enum), targeting",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="adsets",
        id_bearing=True,
        args_model=AdAccountCreateAdsetArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the AdSet",
                },
                "campaign_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Campaign",
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
                "destination_type": {
                    "type": "string",
                    "enum": values(AdSetDestinationType),
                    "description": "Destination Type (enum: AdSet_destination_type)",
                },
                "promoted_object": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Promoted Object",
                },
            },
            "required": [
                "id",
                "name",
                "campaign_id",
                "billing_event",
                "optimization_goal",
                "targeting",
            ],
            "additionalProperties": False,
        },
        handler=ad_account_create_adset,
    ),
    EndpointTool(
        name="ad_account_list_ads",
        description="List ads for this AdAccount. Returns Ad.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="ads",
        id_bearing=True,
        args_model=AdAccountListAdsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
        handler=ad_account_list_ads,
    ),
    EndpointTool(
        name="ad_account_create_ad",
        description="Associate ads with this AdAccount. Returns Ad. Required: name, adset_id, creative",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="ads",
        id_bearing=True,
        args_model=AdAccountCreateAdArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the Ad",
                },
                "adset_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Adset",
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
                "status": {
                    "type": "string",
                    "enum": values(AdStatus),
                    "description": "Current status of the Ad (enum: Ad_status)",
                },
                "bid_amount": {
                    "type": "integer",
                    "description": "Bid Amount",
                },
                "tracking_specs": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Tracking Specs",
                },
                "conversion_domain": {
                    "type": "string",
                    "description": "Conversion Domain",
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
            "required": ["id", "name", "adset_id", "creative"],
            "additionalProperties": False,
        },
        handler=ad_account_create_ad,
    ),
    EndpointTool(
        name="ad_account_list_adcreatives",
        description="List adcreatives for this AdAccount. Returns AdCreative.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="adcreatives",
        id_bearing=True,
        args_model=AdAccountListAdcreativesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
        handler=ad_account_list_adcreatives,
    ),
    EndpointTool(
        name="ad_account_create_adcreative",
        description="Associate adcreatives with this AdAccount. Returns AdCreative.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="adcreatives",
        id_bearing=True,
        args_model=AdAccountCreateAdcreativeArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the AdCreative",
                },
                "object_story_spec": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Object Story Spec",
                },
                "object_story_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Object Story",
                },
                "asset_feed_spec": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Asset Feed Spec",
                },
                "call_to_action_type": {
                    "type": "string",
                    "enum": values(AdCreativeCallToActionType),
                    "description": "Call To Action Type (enum: AdCreative_call_to_action_type)",
                },
                "image_hash": {
                    "type": "string",
                    "description": "Image Hash",
                },
                "image_url": {
                    "type": "string",
                    "description": "Image URL",
                },
                "video_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Video",
                },
                "title": {
                    "type": "string",
                    "description": "Title",
                },
                "body": {
                    "type": "string",
                    "description": "Body",
                },
                "link_url": {
                    "type": "string",
                    "description": "Link URL",
                },
                "url_tags": {
                    "type": "string",
                    "description": "URL Tags",
                },
                "degrees_of_freedom_spec": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Degrees Of Freedom Spec",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_account_create_adcreative,
    ),
    EndpointTool(
        name="ad_account_list_adimages",
        description="List adimages for this AdAccount. Returns AdImage.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="adimages",
        id_bearing=True,
        args_model=AdAccountListAdimagesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "hashes": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Hashes",
                },
                "minheight": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Minheight",
                },
                "minwidth": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Minwidth",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the AdImage",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_account_list_adimages,
    ),
    EndpointTool(
        name="ad_account_create_adimage",
        description="Associate adimages with this AdAccount.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="adimages",
        id_bearing=True,
        args_model=AdAccountCreateAdimageArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
                },
                "bytes": {
                    "type": "string",
                    "description": "Bytes",
                },
                "copy_from": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Copy From",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the AdAccount",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_account_create_adimage,
    ),
    EndpointTool(
        name="ad_account_remove_adimages",
        description="Remove adimages from this AdAccount. Required: hash",
        object_name=OBJECT_NAME,
        method="DELETE",
        endpoint="adimages",
        id_bearing=True,
        args_model=AdAccountRemoveAdimagesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
                },
                "hash": {
                    "type": "string",
                    "description": "Hash",
                },
            },
            "required": ["id", "hash"],
            "additionalProperties": False,
        },
        handler=ad_account_remove_adimages,
    ),
    EndpointTool(
        name="ad_account_list_advideos",
        description="List advideos for this AdAccount. Returns AdVideo.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="advideos",
        id_bearing=True,
        args_model=AdAccountListAdvideosArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "max_aspect_ratio": {
                    "type": "number",
                    "description": "Max Aspect Ratio",
                },
                "maxlength": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Maxlength",
                },
                "min_aspect_ratio": {
                    "type": "number",
                    "description": "Min Aspect Ratio",
                },
                "minlength": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Minlength",
                },
                "title": {
                    "type": "string",
                    "description": "Title",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_account_list_advideos,
    ),
    EndpointTool(
        name="ad_account_create_advideo",
        description="Associate advideos with this AdAccount. Returns AdVideo.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="advideos",
        id_bearing=True,
        args_model=AdAccountCreateAdvideoArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
                },
                "title": {
                    "type": "string",
                    "description": "Title",
                },
                "description": {
                    "type": "string",
                    "description": "Description",
                },
                "file_url": {
                    "type": "string",
                    "description": "File URL",
                },
                "file_size": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "File Size",
                },
                "upload_phase": {
                    "type": "string",
                    "description": "Upload Phase",
                },
                "upload_session_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Upload Session",
                },
                "unpublished_content_type": {
                    "type": "string",
                    "enum": values(AdVideoUnpublishedContentType),
                    "description": "Unpublished Content Type (enum: AdVideo_unpublished_content_type)",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_account_create_advideo,
    ),
    EndpointTool(
        name="ad_account_get_insights",
        description="Get analytics insights for this AdAccount. Returns AdsInsights.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="insights",
        id_bearing=True,
        args_model=AdAccountGetInsightsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "action_attribution_windows": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Action Attribution Windows",
                },
                "filtering": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "additionalProperties": True,
                    },
                    "description": "Filtering",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_account_get_insights,
    ),
    EndpointTool(
        name="ad_account_create_insights_report",
        description="Generate an insights report for this AdAccount. Returns AdReportRun.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="insights",
        id_bearing=True,
        args_model=AdAccountCreateInsightsReportArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "fields": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Fields",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_account_create_insights_report,
    ),
    EndpointTool(
        name="ad_account_list_activities",
        description="List activities for this AdAccount. Returns AdActivity.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="activities",
        id_bearing=True,
        args_model=AdAccountListActivitiesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "add_children": {
                    "type": "boolean",
                    "description": "Add Children",
                },
                "business_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Business",
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
        handler=ad_account_list_activities,
    ),
    EndpointTool(
        name="ad_account_get_ads_volume",
        description="Get ads_volume data for this AdAccount. Returns AdAccountAdVolume.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="ads_volume",
        id_bearing=True,
        args_model=AdAccountGetAdsVolumeArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "page_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Page",
                },
                "show_breakdown_by_actor": {
                    "type": "boolean",
                    "description": "Show Breakdown By Actor",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_account_get_ads_volume,
    ),
    EndpointTool(
        name="ad_account_list_customaudiences",
        description="List customaudiences for this AdAccount. Returns CustomAudience.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="customaudiences",
        id_bearing=True,
        args_model=AdAccountListCustomaudiencesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "business_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Business",
                },
                "filtering": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "additionalProperties": True,
                    },
                    "description": "Filtering",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_account_list_customaudiences,
    ),
    EndpointTool(
        name="ad_account_create_customaudience",
        description="Create or update customaudiences for this AdAccount. Returns CustomAudience.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="customaudiences",
        id_bearing=True,
        args_model=AdAccountCreateCustomaudienceArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the CustomAudience",
                },
                "description": {
                    "type": "string",
                    "description": "Description",
                },
                "subtype": {
                    "type": "string",
                    "enum": values(CustomAudienceSubtype),
                    "description": "Subtype (enum: CustomAudience_subtype)",
                },
                "customer_file_source": {
                    "type": "string",
                    "enum": values(CustomAudienceCustomerFileSource),
                    "description": "Customer File Source (enum: CustomAudience_customer_file_source)",
                },
                "retention_days": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Retention Days",
                },
                "rule": {
                    "type": "string",
                    "description": "Rule",
                },
                "origin_audience_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Origin Audience",
                },
                "lookalike_spec": {
                    "type": "string",
                    "description": "Lookalike Spec",
                },
                "prefill": {
                    "type": "boolean",
                    "description": "Prefill",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_account_create_customaudience,
    ),
    EndpointTool(
        name="ad_account_list_saved_audiences",
        description="List saved_audiences for this AdAccount. Returns SavedAudience.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="saved_audiences",
        id_bearing=True,
        args_model=AdAccountListSavedAudiencesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "business_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Business",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_account_list_saved_audiences,
    ),
    EndpointTool(
        name="ad_account_get_targetingbrowse",
        description="Get targeting information for this AdAccount. Returns AdAccountTargetingUnified.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="targetingbrowse",
        id_bearing=True,
        args_model=AdAccountGetTargetingbrowseArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "limit_type": {
                    "type": "string",
                    "description": "Limit Type",
                },
                "regulated_categories": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Regulated Categories",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_account_get_targetingbrowse,
    ),
    EndpointTool(
        name="ad_account_get_targetingsearch",
        description="Get targeting information for this AdAccount. Returns AdAccountTargetingUnified. Required: q",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="targetingsearch",
        id_bearing=True,
        args_model=AdAccountGetTargetingsearchArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "q": {
                    "type": "string",
                    "description": "Q",
                },
                "limit_type": {
                    "type": "string",
                    "description": "Limit Type",
                },
                "regulated_categories": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Regulated Categories",
                },
            },
            "required": ["id", "q"],
            "additionalProperties": True,
        },
        handler=ad_account_get_targetingsearch,
    ),
    EndpointTool(
        name="ad_account_get_targetingvalidation",
        description="Get targeting information for this AdAccount. Returns AdAccountTargetingUnified.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="targetingvalidation",
        id_bearing=True,
        args_model=AdAccountGetTargetingvalidationArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "id_list": {
                    "type": "array",
                    "items": {
                        "type": "integer",
                        "minimum": 0,
                    },
                    "description": "ID List",
                },
                "name_list": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Name List",
                },
                "targeting_list": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "additionalProperties": True,
                    },
                    "description": "Targeting List",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_account_get_targetingvalidation,
    ),
    EndpointTool(
        name="ad_account_get_reachestimate",
        description="Get reachestimate data for this AdAccount. Returns AdAccountReachEstimate. Required: targeting_spec",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="reachestimate",
        id_bearing=True,
        args_model=AdAccountGetReachestimateArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "targeting_spec": {
                    "description": "Targeting Spec",
                },
                "object_store_url": {
                    "type": "string",
                    "description": "Object Store URL",
                },
            },
            "required": ["id", "targeting_spec"],
            "additionalProperties": True,
        },
        handler=ad_account_get_reachestimate,
    ),
    EndpointTool(
        name="ad_account_get_delivery_estimate",
        description="Get delivery_estimate data for this AdAccount. Returns AdCampaignDeliveryEstimate. Required: optimization_goal (enum), targeting_spec",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="delivery_estimate",
        id_bearing=True,
        args_model=AdAccountGetDeliveryEstimateArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "targeting_spec": {
                    "description": "Targeting Spec",
                },
                "promoted_object": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Promoted Object",
                },
            },
            "required": ["id", "optimization_goal", "targeting_spec"],
            "additionalProperties": True,
        },
        handler=ad_account_get_delivery_estimate,
    ),
    EndpointTool(
        name="ad_account_list_broadtargetingcategories",
        description="List broadtargetingcategories for this AdAccount. Returns BroadTargetingCategories.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="broadtargetingcategories",
        id_bearing=True,
        args_model=AdAccountListBroadtargetingcategoriesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "custom_categories_only": {
                    "type": "boolean",
                    "description": "Custom Categories Only",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_account_list_broadtargetingcategories,
    ),
    EndpointTool(
        name="ad_account_list_recommendations",
        description="List recommendations for this AdAccount. Returns AdAccountRecommendations.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="recommendations",
        id_bearing=True,
        args_model=AdAccountListRecommendationsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
        handler=ad_account_list_recommendations,
    ),
    EndpointTool(
        name="ad_account_create_recommendation",
        description="Create or update recommendations for this AdAccount. Returns AdAccountRecommendations. Required: recommendation_signature",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="recommendations",
        id_bearing=True,
        args_model=AdAccountCreateRecommendationArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
                },
                "recommendation_signature": {
                    "type": "string",
                    "description": "Recommendation Signature",
                },
                "music_parameters": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Music Parameters",
                },
            },
            "required": ["id", "recommendation_signature"],
            "additionalProperties": False,
        },
        handler=ad_account_create_recommendation,
    ),
    EndpointTool(
        name="ad_account_get_max_bid",
        description="Get max_bid data for this AdAccount. Returns AdAccountMaxBid.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="max_bid",
        id_bearing=True,
        args_model=AdAccountGetMaxBidArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
        handler=ad_account_get_max_bid,
    ),
    EndpointTool(
        name="ad_account_list_minimum_budgets",
        description="List minimum_budgets for this AdAccount. Returns MinimumBudget.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="minimum_budgets",
        id_bearing=True,
        args_model=AdAccountListMinimumBudgetsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                    "description": "Bid Amount",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=ad_account_list_minimum_budgets,
    ),
    EndpointTool(
        name="ad_account_list_generatepreviews",
        description="List generatepreviews for this AdAccount. Returns AdPreview. Required: ad_format (enum), creative",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="generatepreviews",
        id_bearing=True,
        args_model=AdAccountListGeneratepreviewsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
                "locale": {
                    "type": "string",
                    "description": "Locale",
                },
            },
            "required": ["id", "ad_format", "creative"],
            "additionalProperties": True,
        },
        handler=ad_account_list_generatepreviews,
    ),
    EndpointTool(
        name="ad_account_list_ad_place_page_sets",
        description="List ad_place_page_sets for this AdAccount. Returns AdPlacePageSet.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="ad_place_page_sets",
        id_bearing=True,
        args_model=AdAccountListAdPlacePageSetsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
        handler=ad_account_list_ad_place_page_sets,
    ),
    EndpointTool(
        name="ad_account_list_subscribed_apps",
        description="List subscribed_apps for this AdAccount. Returns AdAccountSubscribedApps.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="subscribed_apps",
        id_bearing=True,
        args_model=AdAccountListSubscribedAppsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
        handler=ad_account_list_subscribed_apps,
    ),
    EndpointTool(
        name="ad_account_create_subscribed_app",
        description="Create or update subscribed_apps for this AdAccount. Returns AdAccountSubscribedApps.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="subscribed_apps",
        id_bearing=True,
        args_model=AdAccountCreateSubscribedAppArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
                },
                "app_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the App",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_account_create_subscribed_app,
    ),
    EndpointTool(
        name="ad_account_remove_subscribed_apps",
        description="Remove subscribed_apps from this AdAccount.",
        object_name=OBJECT_NAME,
        method="DELETE",
        endpoint="subscribed_apps",
        id_bearing=True,
        args_model=AdAccountRemoveSubscribedAppsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
                },
                "app_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the App",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=ad_account_remove_subscribed_apps,
    ),
    EndpointTool(
        name="ad_account_list_users",
        description="List users for this AdAccount. Returns AdAccountUser.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="users",
        id_bearing=True,
        args_model=AdAccountListUsersArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^(act_)?[0-9]+$",
                    "description": "AdAccount ID",
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
        handler=ad_account_list_users,
    ),
)

TOOL_NAMES: tuple[str, ...] = (
    "ad_account_get",
    "ad_account_update",
    "ad_account_list_campaigns",
    "ad_account_create_campaign",
    "ad_account_list_adsets",
    "ad_account_create_adset",
    "ad_account_list_ads",
    "ad_account_create_ad",
    "ad_account_list_adcreatives",
    "ad_account_create_adcreative",
    "ad_account_list_adimages",
    "ad_account_create_adimage",
    "ad_account_remove_adimages",
    "ad_account_list_advideos",
    "ad_account_create_advideo",
    "ad_account_get_insights",
    "ad_account_create_insights_report",
    "ad_account_list_activities",
    "ad_account_get_ads_volume",
    "ad_account_list_customaudiences",
    "ad_account_create_customaudience",
    "ad_account_list_saved_audiences",
    "ad_account_get_targetingbrowse",
    "ad_account_get_targetingsearch",
    "ad_account_get_targetingvalidation",
    "ad_account_get_reachestimate",
    "ad_account_get_delivery_estimate",
    "ad_account_list_broadtargetingcategories",
    "ad_account_list_recommendations",
    "ad_account_create_recommendation",
    "ad_account_get_max_bid",
    "ad_account_list_minimum_budgets",
    "ad_account_list_generatepreviews",
    "ad_account_list_ad_place_page_sets",
    "ad_account_list_subscribed_apps",
    "ad_account_create_subscribed_app",
    "ad_account_remove_subscribed_apps",
    "ad_account_list_users",
)

__all__ = ["OBJECT_NAME", "TOOLS", "TOOL_NAMES"]
