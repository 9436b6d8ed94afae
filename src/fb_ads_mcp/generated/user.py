# Code generated by fb_ads_mcp.codegen. DO NOT EDIT.
"""Graph API tools for User endpoints."""

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
from .enums import (
    UserbusinessesSurveyBusinessTypeEnumParam,
    UserbusinessesVerticalEnumParam,
)

if TYPE_CHECKING:
    from ..graph.gateway import GraphGateway

OBJECT_NAME = "User"


class UserGetArgs(ReadArgs):
    """Arguments of ``user_get``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")


async def user_get(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserGetArgs, arguments)
    return await gateway.call("GET", f"/{args.id}", query=query_params(args))


class UserUpdateArgs(WriteArgs):
    """Arguments of ``user_update``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")
    firstname: str | None = Field(default=None, description="Firstname")
    lastname: str | None = Field(default=None, description="Lastname")
    name: str | None = Field(default=None, description="Name of the User")


async def user_update(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserUpdateArgs, arguments)
    return await gateway.call("POST", f"/{args.id}", body=body_params(args))


class UserDeleteArgs(WriteArgs):
    """Arguments of ``user_delete``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")


async def user_delete(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserDeleteArgs, arguments)
    return await gateway.call("DELETE", f"/{args.id}", query=query_params(args))


class UserListAdaccountsArgs(ReadArgs):
    """Arguments of ``user_list_adaccounts``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")


async def user_list_adaccounts(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserListAdaccountsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/adaccounts", query=query_params(args))


class UserListBusinessesArgs(ReadArgs):
    """Arguments of ``user_list_businesses``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")


async def user_list_businesses(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserListBusinessesArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/businesses", query=query_params(args))


class UserCreateBusinesseArgs(WriteArgs):
    """Arguments of ``user_create_businesse``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")
    child_business_external_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Child Business External")
    email: str | None = Field(default=None, description="Email")
    name: str = Field(description="Name of the Business")
    primary_page: str | None = Field(default=None, description="Primary Page")
    sales_rep_email: str | None = Field(default=None, description="Sales Rep Email")
    survey_business_type: UserbusinessesSurveyBusinessTypeEnumParam | None = Field(default=None, description="Survey Business Type (enum: userbusinesses_survey_business_type_enum_param)")
    survey_num_assets: NonNegativeInt | None = Field(default=None, description="Survey Num Assets")
    survey_num_people: NonNegativeInt | None = Field(default=None, description="Survey Num People")
    timezone_id: NonNegativeInt | None = Field(default=None, description="ID of the Timezone")
    vertical: UserbusinessesVerticalEnumParam = Field(description="Vertical (enum: userbusinesses_vertical_enum_param)")


async def user_create_businesse(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserCreateBusinesseArgs, arguments)
    return await gateway.call("POST", f"/{args.id}/businesses", body=body_params(args))


class UserListBusinessUsersArgs(ReadArgs):
    """Arguments of ``user_list_business_users``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")


async def user_list_business_users(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserListBusinessUsersArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/business_users", query=query_params(args))


class UserListConversationsArgs(ReadArgs):
    """Arguments of ``user_list_conversations``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")
    folder: str | None = Field(default=None, description="Folder")
    platform: str | None = Field(default=None, description="Platform")
    tags: list[str] | None = Field(default=None, description="Tags")
    user_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the User")


async def user_list_conversations(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserListConversationsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/conversations", query=query_params(args))


class UserListEventsArgs(ReadArgs):
    """Arguments of ``user_list_events``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")
    include_canceled: bool | None = Field(default=None, description="Include Canceled")
    type: str | None = Field(default=None, description="Type")


async def user_list_events(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserListEventsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/events", query=query_params(args))


class UserListGroupsArgs(ReadArgs):
    """Arguments of ``user_list_groups``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")
    admin_only: bool | None = Field(default=None, description="Admin Only")
    parent: str | None = Field(default=None, description="Parent")


async def user_list_groups(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserListGroupsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/groups", query=query_params(args))


class UserListPermissionsArgs(ReadArgs):
    """Arguments of ``user_list_permissions``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")
    permission: str | None = Field(default=None, description="Permission")
    status: str | None = Field(default=None, description="Current status of the Permission")


async def user_list_permissions(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserListPermissionsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/permissions", query=query_params(args))


class UserRemovePermissionsArgs(WriteArgs):
    """Arguments of ``user_remove_permissions``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")
    permission: str | None = Field(default=None, description="Permission")


async def user_remove_permissions(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserRemovePermissionsArgs, arguments)
    return await gateway.call("DELETE", f"/{args.id}/permissions", query=query_params(args))


class UserListAccountsArgs(ReadArgs):
    """Arguments of ``user_list_accounts``."""

    id: str = Field(pattern=NUMERIC_ID, description="User ID")
    ad_id: str | None = Field(default=None, pattern=NUMERIC_ID, description="ID of the Ad")
    is_place: bool | None = Field(default=None, description="Is Place")
    is_promotable: bool | None = Field(default=None, description="Is Promotable")


async def user_list_accounts(gateway: GraphGateway, arguments: Mapping[str, Any]) -> str:
    args = bind(UserListAccountsArgs, arguments)
    return await gateway.call("GET", f"/{args.id}/accounts", query=query_params(args))


TOOLS: tuple[EndpointTool, ...] = (
    EndpointTool(
        name="user_get",
        description="Get details of a specific User. Returns User.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="",
        id_bearing=True,
        args_model=UserGetArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
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
        handler=user_get,
    ),
    EndpointTool(
        name="user_update",
        description="Update a User. Returns User.",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="",
        id_bearing=True,
        args_model=UserUpdateArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
                },
                "firstname": {
                    "type": "string",
                    "description": "Firstname",
                },
                "lastname": {
                    "type": "string",
                    "description": "Lastname",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the User",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=user_update,
    ),
    EndpointTool(
        name="user_delete",
        description="Delete a User.",
        object_name=OBJECT_NAME,
        method="DELETE",
        endpoint="",
        id_bearing=True,
        args_model=UserDeleteArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=user_delete,
    ),
    EndpointTool(
        name="user_list_adaccounts",
        description="List adaccounts for this User. Returns AdAccount.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="adaccounts",
        id_bearing=True,
        args_model=UserListAdaccountsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
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
        handler=user_list_adaccounts,
    ),
    EndpointTool(
        name="user_list_businesses",
        description="List businesses for this User. Returns Business.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="businesses",
        id_bearing=True,
        args_model=UserListBusinessesArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
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
        handler=user_list_businesses,
    ),
    EndpointTool(
        name="user_create_businesse",
        description="Create or update businesses for this User. Returns Business. Required: name, vertical (enum)",
        object_name=OBJECT_NAME,
        method="POST",
        endpoint="businesses",
        id_bearing=True,
        args_model=UserCreateBusinesseArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
                },
                "child_business_external_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Child Business External",
                },
                "email": {
                    "type": "string",
                    "description": "Email",
                },
                "name": {
                    "type": "string",
                    "description": "Name of the Business",
                },
                "primary_page": {
                    "type": "string",
                    "description": "Primary Page",
                },
                "sales_rep_email": {
                    "type": "string",
                    "description": "Sales Rep Email",
                },
                "survey_business_type": {
                    "type": "string",
                    "enum": values(UserbusinessesSurveyBusinessTypeEnumParam),
                    "description": "Survey Business Type (enum: userbusinesses_survey_business_type_enum_param)",
                },
                "survey_num_assets": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Survey Num Assets",
                },
                "survey_num_people": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Survey Num People",
                },
                "timezone_id": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "ID of the Timezone",
                },
                "vertical": {
                    "type": "string",
                    "enum": values(UserbusinessesVerticalEnumParam),
                    "description": "Vertical (enum: userbusinesses_vertical_enum_param)",
                },
            },
            "required": ["id", "name", "vertical"],
            "additionalProperties": False,
        },
        handler=user_create_businesse,
    ),
    EndpointTool(
        name="user_list_business_users",
        description="List business_users for this User. Returns BusinessUser.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="business_users",
        id_bearing=True,
        args_model=UserListBusinessUsersArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
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
        handler=user_list_business_users,
    ),
    EndpointTool(
        name="user_list_conversations",
        description="List conversations for this User. Returns UnifiedThread.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="conversations",
        id_bearing=True,
        args_model=UserListConversationsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
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
                "folder": {
                    "type": "string",
                    "description": "Folder",
                },
                "platform": {
                    "type": "string",
                    "description": "Platform",
                },
                "tags": {
                    "type": "array",
                    "items": {
                        "type": "string",
                    },
                    "description": "Tags",
                },
                "user_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the User",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=user_list_conversations,
    ),
    EndpointTool(
        name="user_list_events",
        description="List events for this User. Returns Event.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="events",
        id_bearing=True,
        args_model=UserListEventsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
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
                "include_canceled": {
                    "type": "boolean",
                    "description": "Include Canceled",
                },
                "type": {
                    "type": "string",
                    "description": "Type",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=user_list_events,
    ),
    EndpointTool(
        name="user_list_groups",
        description="List groups for this User. Returns Group.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="groups",
        id_bearing=True,
        args_model=UserListGroupsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
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
                "admin_only": {
                    "type": "boolean",
                    "description": "Admin Only",
                },
                "parent": {
                    "type": "string",
                    "description": "Parent",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=user_list_groups,
    ),
    EndpointTool(
        name="user_list_permissions",
        description="List permissions for this User. Returns Permission.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="permissions",
        id_bearing=True,
        args_model=UserListPermissionsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
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
                "permission": {
                    "type": "string",
                    "description": "Permission",
                },
                "status": {
                    "type": "string",
                    "description": "Current status of the Permission",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=user_list_permissions,
    ),
    EndpointTool(
        name="user_remove_permissions",
        description="Remove permissions from this User.",
        object_name=OBJECT_NAME,
        method="DELETE",
        endpoint="permissions",
        id_bearing=True,
        args_model=UserRemovePermissionsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
                },
                "permission": {
                    "type": "string",
                    "description": "Permission",
                },
            },
            "required": ["id"],
            "additionalProperties": False,
        },
        handler=user_remove_permissions,
    ),
    EndpointTool(
        name="user_list_accounts",
        description="List accounts for this User. Returns Page.",
        object_name=OBJECT_NAME,
        method="GET",
        endpoint="accounts",
        id_bearing=True,
        args_model=UserListAccountsArgs,
        input_schema={
            "type": "object",
            "properties": {
                "id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "User ID",
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
                "ad_id": {
                    "type": "string",
                    "pattern": "^[0-9]+$",
                    "description": "ID of the Ad",
                },
                "is_place": {
                    "type": "boolean",
                    "description": "Is Place",
                },
                "is_promotable": {
                    "type": "boolean",
                    "description": "Is Promotable",
                },
            },
            "required": ["id"],
            "additionalProperties": True,
        },
        handler=user_list_accounts,
    ),
)

TOOL_NAMES: tuple[str, ...] = (
    "user_get",
    "user_update",
    "user_delete",
    "user_list_adaccounts",
    "user_list_businesses",
    "user_create_businesse",
    "user_list_business_users",
    "user_list_conversations",
    "user_list_events",
    "user_list_groups",
    "user_list_permissions",
    "user_remove_permissions",
    "user_list_accounts",
)

__all__ = ["OBJECT_NAME", "TOOLS", "TOOL_NAMES"]
