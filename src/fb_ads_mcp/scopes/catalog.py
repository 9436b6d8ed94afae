"""Scope catalog: object scopes from the generated package plus curated sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..endpoints import EndpointTool
from ..errors import BindingError
from ..generated import ALL_TOOLS, OBJECT_SCOPES

VIDEO_TOOLS = ("facebook_video_upload", "facebook_video_status", "facebook_video_upload_batch")


@dataclass(frozen=True, slots=True)
class CuratedScope:
    name: str
    summary: str
    tools: tuple[str, ...]

    @property
    def description(self) -> str:
        return f"{self.summary} ({len(self.tools)} tools)"


CURATED_SCOPES: dict[str, CuratedScope] = {
    scope.name: scope
    for scope in (
        CuratedScope(
            "essentials",
            "[RECOMMENDED] Core CRUD operations for campaigns, ad sets, and ads. "
            "Perfect starting point for basic ad management",
            (
                "ad_account_get",
                "ad_account_list_campaigns",
                "ad_account_list_adsets",
                "ad_account_list_ads",
                "ad_account_create_campaign",
                "ad_account_create_adset",
                "ad_account_create_ad",
                "campaign_get",
                "campaign_update",
                "campaign_delete",
                "ad_set_get",
                "ad_set_update",
                "ad_set_delete",
                "ad_get",
                "ad_update",
                "ad_delete",
            ),
        ),
        CuratedScope(
            "campaign_management",
            "[POPULAR] Complete campaign lifecycle management - create, update, "
            "monitor campaigns and their hierarchy",
            (
                "ad_account_create_campaign",
                "ad_account_list_campaigns",
                "campaign_get",
                "campaign_update",
                "campaign_delete",
                "campaign_list_adsets",
                "campaign_list_ads",
                "campaign_get_insights",
                "campaign_create_budget_schedule",
                "ad_account_create_adset",
                "ad_set_get",
                "ad_set_update",
                "ad_set_list_ads",
                "ad_account_create_ad",
                "ad_get",
                "ad_update",
            ),
        ),
        CuratedScope(
            "reporting",
            "[ANALYTICS] Comprehensive insights and reporting across all levels - "
            "account, campaign, ad set, ad",
            (
                "ad_account_get_insights",
                "ad_account_create_insights_report",
                "campaign_get_insights",
                "campaign_create_insights_report",
                "ad_set_get_insights",
                "ad_set_create_insights_report",
                "ad_get_insights",
                "ad_create_insights_report",
                "ad_creative_list_creative_insights",
                "ad_account_list_activities",
                "ad_account_get_ads_volume",
            ),
        ),
        CuratedScope(
            "audience",
            "[TARGETING] Audience creation, custom audiences, targeting browse/search, "
            "and reach estimates",
            (
                "ad_account_create_customaudience",
                "ad_account_list_customaudiences",
                "custom_audience_get",
                "custom_audience_update",
                "custom_audience_create_user",
                "custom_audience_remove_users",
                "ad_account_get_targetingbrowse",
                "ad_account_get_targetingsearch",
                "ad_account_get_targetingvalidation",
                "ad_account_get_reachestimate",
                "ad_account_get_delivery_estimate",
                "ad_account_list_saved_audiences",
                "ad_account_list_broadtargetingcategories",
            ),
        ),
        CuratedScope(
            "creative",
            "[CONTENT] Creative assets, images, videos, and ad preview management",
            (
                "ad_account_create_adcreative",
                "ad_account_list_adcreatives",
                "ad_creative_get",
                "ad_creative_update",
                "ad_creative_delete",
                "ad_creative_list_previews",
                "ad_account_create_adimage",
                "ad_account_list_adimages",
                "ad_account_create_advideo",
                "ad_account_list_advideos",
                "ad_list_previews",
                "ad_account_list_generatepreviews",
                *VIDEO_TOOLS,
            ),
        ),
        CuratedScope(
            "optimization",
            "[PERFORMANCE] Optimization tools - delivery estimates, recommendations, "
            "budgets, and bidding",
            (
                "ad_account_get_delivery_estimate",
                "ad_set_get_delivery_estimate",
                "ad_set_get_message_delivery_estimate",
                "ad_account_get_reachestimate",
                "ad_account_list_recommendations",
                "ad_account_create_recommendation",
                "ad_account_get_max_bid",
                "ad_account_list_minimum_budgets",
                "campaign_create_budget_schedule",
                "ad_set_create_budget_schedule",
            ),
        ),
        CuratedScope(
            "video",
            "[VIDEO] Video upload and management tools - upload single or batch videos, "
            "check encoding status",
            VIDEO_TOOLS,
        ),
    )
}

_OBJECT_LABELS = {
    "ad": "Ad object",
    "adaccount": "Ad account object",
    "adcreative": "Ad creative object",
    "adset": "Ad set object",
    "campaign": "Campaign object",
    "customaudience": "Custom audience object",
    "user": "User object",
}

_OBJECT_ALTERNATIVES = {
    "ad": "Use 'essentials' or 'campaign_management' instead",
    "adaccount": "Use curated scopes instead",
    "adcreative": "Use 'creative' scope instead",
    "adset": "Use 'essentials' or 'campaign_management' instead",
    "campaign": "Use 'campaign_management' instead",
    "customaudience": "Use 'audience' scope instead",
}

_TOOLS_BY_NAME: dict[str, EndpointTool] = {tool.name: tool for tool in ALL_TOOLS}


class UnknownScopeError(BindingError):
    def __init__(self, names: list[str]):
        super().__init__(
            f"Unknown scope(s): {', '.join(names)}",
            details={"unknown": names, "available": available_scopes()},
        )
        self.names = names


def normalize(name: str) -> str:
    return name.strip().lower()


def object_scope_names() -> list[str]:
    return sorted(OBJECT_SCOPES)


def curated_scope_names() -> list[str]:
    return list(CURATED_SCOPES)


def available_scopes() -> list[str]:
    return object_scope_names() + curated_scope_names()


def is_known(name: str) -> bool:
    return name in OBJECT_SCOPES or name in CURATED_SCOPES


def validate(names: list[str]) -> list[str]:
    """Normalize ``names``, dropping duplicates; raise on any unknown scope."""

    result: list[str] = []
    unknown: list[str] = []
    for raw in names:
        name = normalize(raw)
        if not name or name in result:
            continue
        (result if is_known(name) else unknown).append(name)
    if unknown:
        raise UnknownScopeError(unknown)
    return result


def scope_tools(name: str) -> tuple[EndpointTool, ...]:
    """Generated tools contributed by ``name``.

    Curated members that are not generated endpoints (the video meta tools)
    are always registered and therefore not returned here.
    """

    if name in OBJECT_SCOPES:
        return tuple(OBJECT_SCOPES[name])
    scope = CURATED_SCOPES.get(name)
    if scope is None:
        raise UnknownScopeError([name])
    return tuple(_TOOLS_BY_NAME[tool] for tool in scope.tools if tool in _TOOLS_BY_NAME)


def describe(name: str) -> str:
    if name in CURATED_SCOPES:
        return CURATED_SCOPES[name].description
    count = len(OBJECT_SCOPES[name])
    label = _OBJECT_LABELS.get(name, f"{name} object")
    text = f"[LOW-LEVEL] {label} - loads ALL {count} tools"
    alternative = _OBJECT_ALTERNATIVES.get(name)
    return f"{text}. {alternative}" if alternative else text


def descriptions() -> Mapping[str, str]:
    return {name: describe(name) for name in available_scopes()}


def scope_warning(name: str) -> str | None:
    """Advice shown when a low-level object scope is loaded."""

    if name in CURATED_SCOPES:
        return None
    if name == "adaccount":
        return (
            f"WARNING: '{name}' loads {len(OBJECT_SCOPES[name])} tools! Consider using curated "
            "scopes like 'essentials' or 'campaign_management' instead"
        )
    alternative = _OBJECT_ALTERNATIVES.get(name)
    if alternative is None:
        return None
    return f"NOTE: '{name}' is a low-level scope. {alternative}"


__all__ = [
    "CURATED_SCOPES",
    "CuratedScope",
    "UnknownScopeError",
    "VIDEO_TOOLS",
    "available_scopes",
    "curated_scope_names",
    "describe",
    "descriptions",
    "is_known",
    "normalize",
    "object_scope_names",
    "scope_tools",
    "scope_warning",
    "validate",
]
