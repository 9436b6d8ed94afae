# Code generated by fb_ads_mcp.codegen. DO NOT EDIT.
"""Graph API tools for CustomAudience endpoints."""

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
from .enums import CustomAudienceCustomerFileSource

if TYPE_CHECKING:
    from ..graph.gateway import GraphGateway

OBJECT_NAME = "CustomAudience"


class CustomAudienceGetArgs(ReadArgs):
    """Arguments of ``custom_audience_get``."""

    id: str = Field(pattern=NUMERIC_ID, description="CustomAudience ID")
    ad_account_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Ad Account")
    special_ad_categories: list[str] | None = Field(default=None, description="Special Ad Categories")


async def custom_audience_get(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CustomAudienceGetArgs, arguments)
    return await gateway.call("GET", f"/{args.id}", query=query_params(args))


class CustomAudienceUpdateArgs(WriteArgs):
    """Arguments of ``custom_audience_update``."""

    id: str = Field(pattern=NUMERIC_ID, description="CustomAudience ID")
    name: str | None = Field(default=None, description="Name of the CustomAudience")
    description: str | None = Field(default=None, description="Description")
    retention_days: NonNegativeInt | None = Field(default=None, description="Retention Days")
    rule: str | None = Field(default=None, description="Rule")
    customer_file_source: CustomAudienceCustomerFileSource | None = Field(default=None, description="Customer File Source (enum: CustomAudience_customer_file_source)")
    opt_out_link: str | None = Field(default=None, description="Opt Out Link")


async def custom_audience_update(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CustomAudienceUpdateArgs, arguments)
    return await gateway.call("POST", f"/{args.id}", body=body_params(args))


class CustomAudienceDeleteArgs(WriteArgs):
    """Arguments of ``custom_audience_delete``."""

    id: str = Field(pattern=NUMERIC_ID, description="CustomAudience ID")


async def custom_audience_delete(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CustomAudienceDeleteArgs, arguments)
    return await gateway.call("DELETE", f"/{args.id}", query=query_params(args))


class CustomAudienceListAdsArgs(ReadArgs):
    """Arguments of ``custom_audience_list_ads``."""

    id: str = Field(pattern=NUMERIC_ID, description="CustomAudience ID")
    effective_status: list[str] | None = Field(default=None, description="Effective Status")
    status: list[str] | None = Field(default=None, description="Current status of the Ad")


async def custom_audience_list_ads(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CustomAudienceListAdsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/ads", query=query_params(args))


class CustomAudienceListAdaccountsArgs(ReadArgs):
    """Arguments of ``custom_audience_list_adaccounts``."""

    id: str = Field(pattern=NUMERIC_ID, description="CustomAudience ID")
    permissions: str | None = Field(default=None, description="Permissions")


async def custom_audience_list_adaccounts(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CustomAudienceListAdaccountsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/adaccounts", query=query_params(args))


class CustomAudienceCreateAdaccountArgs(WriteArgs):
    """Arguments of ``custom_audience_create_adaccount``."""

    id: str = Field(pattern=NUMERIC_ID, description="CustomAudience ID")
    adaccounts: list[str] = Field(description="Adaccounts")
    permissions: str | None = Field(default=None, description="Permissions")
    relationship_type: list[str] | None = Field(default=None, description="Relationship Type")


async def custom_audience_create_adaccount(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CustomAudienceCreateAdaccountArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/adaccounts", body=body_params(args))


class CustomAudienceRemoveAdaccountsArgs(WriteArgs):
    """Arguments of ``custom_audience_remove_adaccounts``."""

    id: str = Field(pattern=NUMERIC_ID, description="CustomAudience ID")
    adaccounts: list[str] = Field(description="Adaccounts")


async def custom_audience_remove_adaccounts(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CustomAudienceRemoveAdaccountsArgs, arguments)
    return await gateway.call("DELETE", f"/{args.id}/adaccounts", query=query_params(args))


class CustomAudienceCreateUserArgs(WriteArgs):
    """Arguments of ``custom_audience_create_user``."""

    id: str = Field(pattern=NUMERIC_ID, description="CustomAudience ID")
    payload: dict[str, Any] = Field(description="Payload")
    session: dict[str, Any] | None = Field(default=None, description="Session")


async def custom_audience_create_user(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CustomAudienceCreateUserArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/users", body=body_params(args))


class CustomAudienceRemoveUsersArgs(WriteArgs):
    """Arguments of ``custom_audience_remove_users``."""

    id: str = Field(pattern=NUMERIC_ID, description="CustomAudience ID")
    payload: dict[str, Any] = Field(description="Payload")
    session: dict[str, Any] | None = Field(default=None, description="Session")


async def custom_audience_remove_users(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CustomAudienceRemoveUsersArgs, arguments)
    return await gateway.call("DELETE", f"/{args.id}/users", query=query_params(args))


class CustomAudienceListSessionsArgs(ReadArgs):
    """Arguments of ``custom_audience_list_sessions``."""

    id: str = Field(pattern=NUMERIC_ID, description="CustomAudience ID")
    session_id: NonNegativeInt | None = Field(default=None, description="ID of the Session")


async def custom_audience_list_sessions(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(CustomAudienceListSessionsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/sessions", query=query_params(args))


TOOLS: tuple[EndpointTool, ...] = (
    EndpointTool(
        name="custom_audience_get",
        description="Get details of a specific CustomAudience. Returns CustomAudience.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="",
        id_bearing=True,
        args_model=CustomAudienceGetArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "CustomAudience ID",
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
                "ad_account_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Ad Account",
                },
                "special_ad_categories": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Special Ad Categories",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=custom_audience_get,
    ),
    EndpointTool(
        name="custom_audience_update",
        description="Update a CustomAudience. Returns CustomAudience.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="",
        id_bearing=True,
        args_model=CustomAudienceUpdateArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "CustomAudience ID",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the CustomAudience",
                },
                "description": {
                    "type": "string",
                    "description": "Description",
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
                "customer_file_source": {
                    "type": "string",
                    "enum": values(CustomAudienceCustomerFileSource),
                    "description": "Customer File Source (enum: CustomAudience_customer_file_source)",
                },
                "opt_out_link": {
                    "type": "string",
                    "description": "Opt Out Link",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=custom_audience_update,
    ),
    EndpointTool(
        name="custom_audience_delete",
        description="Delete a CustomAudience.",
        object_name=OBJECT_NAME,
        method="DELETE",
        endpoint="",
        id_bearing=True,
        args_model=CustomAudienceDeleteArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "CustomAudience ID",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=custom_audience_delete,
    ),
    EndpointTool(
        name="custom_audience_list_ads",
        description="List ads for this CustomAudience. Returns Ad.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="ads",
        id_bearing=True,
        args_model=CustomAudienceListAdsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "CustomAudience ID",
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
                "effective_status": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Effective Status",
                },
                "status": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Current status of the Ad",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=custom_audience_list_ads,
    ),
    EndpointTool(
        name="custom_audience_list_adaccounts",
        description="List adaccounts for this CustomAudience. Returns AdAccount.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="adaccounts",
        id_bearing=True,
        args_model=CustomAudienceListAdaccountsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "CustomAudience ID",
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
                "permissions": {
                    "type": "string",
                    "description": "Permissions",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=custom_audience_list_adaccounts,
    ),
    EndpointTool(
        name="custom_audience_create_adaccount",
        description="Associate adaccounts with this CustomAudience. Returns CustomAudience. Required: adaccounts",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="adaccounts",
        id_bearing=True,
        args_model=CustomAudienceCreateAdaccountArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "CustomAudience ID",
                },
                "adaccounts": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Adaccounts",
                },
                "permissions": {
                    "type": "string",
                    "description": "Permissions",
                },
                "relationship_type": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Relationship Type",
                },
            },
            "required": ["id", "adaccounts"],
            "additionalProperties": False,
        },
        handler=custom_audience_create_adaccount,
    ),
    EndpointTool(
        name="custom_audience_remove_adaccounts",
        description="Remove adaccounts from this CustomAudience. Required: adaccounts",
        object_name=OBJECT_NAME,
        method="DELETE",
        endpoint="adaccounts",
        id_bearing=True,
        args_model=CustomAudienceRemoveAdaccountsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "CustomAudience ID",
                },
                "adaccounts": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Adaccounts",
                },
            },
            "required": ["id", "adaccounts"],
            "additionalProperties": False,
        },
        handler=custom_audience_remove_adaccounts,
    ),
    EndpointTool(
        name="custom_audience_create_user",
        description="Create or update users for this CustomAudience. Returns CustomAudience. Required: payload",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="users",
        id_bearing=True,
        args_model=CustomAudienceCreateUserArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "CustomAudience ID",
                },
                "payload": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Payload",
                },
                "session": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Session",
                },
            },
            "required": ["id", "payload"],
            "additionalProperties": False,
        },
        handler=custom_audience_create_user,
    ),
    EndpointTool(
        name="custom_audience_remove_users",
        description="Remove users from this CustomAudience. Returns CustomAudience. Required: payload",
        object_name=OBJECT_NAME,
        method="DELETE",
        endpoint="users",
        id_bearing=True,
        args_model=CustomAudienceRemoveUsersArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "CustomAudience ID",
                },
                "payload": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Payload",
                },
                "session": {
                    "type": "object",
                    "additionalProperties": True,
                    "description": "Session",
                },
            },
            "required": ["id", "payload"],
            "additionalProperties": False,
        },
        handler=custom_audience_remove_users,
    ),
    EndpointTool(
        name="custom_audience_list_sessions",
        description="List sessions for this CustomAudience. Returns CustomAudienceSession.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="sessions",
        id_bearing=True,
        args_model=CustomAudienceListSessionsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "CustomAudience ID",
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
                "session_id": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "ID of the Session",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=custom_audience_list_sessions,
    ),
)

TOOL_NAMES: tuple[str, ...] = (
    "custom_audience_get",
    "custom_audience_update",
    "custom_audience_delete",
    "custom_audience_list_ads",
    "custom_audience_list_adaccounts",
    "custom_audience_create_adaccount",
    "custom_audience_remove_adaccounts",
    "custom_audience_create_user",
    "custom_audience_remove_users",
    "custom_audience_list_sessions",
)

__all__ = ["OBJECT_NAME", "TOOLS", "TOOL_NAMES"]
