# Code generated by fb_ads_mcp.codegen. DO NOT EDIT.
"""Object-scope catalog: one scope per Graph API object, keyed by lower-cased name."""

from __future__ import annotations

from types import MappingProxyType

from ..endpoints import EndpointTool
from . import ad, ad_account, ad_creative, ad_set, campaign, custom_audience, user

OBJECT_SCOPES: MappingProxyType[str, tuple[EndpointTool, ...]] = MappingProxyType(
    {
        "ad": ad.TOOLS,
        "adaccount": ad_account.TOOLS,
        "adcreative": ad_creative.TOOLS,
        "adset": ad_set.TOOLS,
        "campaign": campaign.TOOLS,
        "customaudience": custom_audience.TOOLS,
        "user": user.TOOLS,
    }
)

ALL_TOOLS: tuple[EndpointTool, ...] = tuple(
    tool for tools in OBJECT_SCOPES.values() for tool in tools
)

__all__ = ["ALL_TOOLS", "OBJECT_SCOPES"]
