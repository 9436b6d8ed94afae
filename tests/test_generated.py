from __future__ import annotations

import inspect
from enum import Enum
from typing import Any

import jsonschema
import pytest

from fb_ads_mcp.endpoints import AD_ACCOUNT_ID, NUMERIC_ID, EndpointTool, bind
from fb_ads_mcp.errors import BindingError
from fb_ads_mcp.generated import ALL_TOOLS, OBJECT_SCOPES, enums
from fb_ads_mcp.scopes import CURATED_SCOPES
from fb_ads_mcp.scopes.catalog import VIDEO_TOOLS

TOOL_IDS = [tool.name for tool in ALL_TOOLS]


def sample(schema: dict[str, Any]) -> Any:
    """A small value valid under ``schema``."""

    if "enum" in schema:
        return schema["enum"][0]
    kind = schema.get("type")
    if kind == "string":
        if "pattern" in schema:
            return "123"
        if schema.get("format") == "date-time":
            return "2024-01-01T00:00:00+00:00"
        return "value"
    if kind == "integer":
        return 1
    if kind == "number":
        return 1.5
    if kind == "boolean":
        return True
    if kind == "array":
        return [sample(schema.get("items", {}))]
    if kind == "object":
        return {}
    return "value"


def test_catalog_has_every_object_scope() -> None:
    assert sorted(OBJECT_SCOPES) == [
        "ad",
        "adaccount",
        "adcreative",
        "adset",
        "campaign",
        "customaudience",
        "user",
    ]
    assert len(ALL_TOOLS) == sum(len(tools) for tools in OBJECT_SCOPES.values())


def test_tool_names_are_unique() -> None:
    assert len(set(TOOL_IDS)) == len(TOOL_IDS)


def test_module_tool_names_match_tools() -> None:
    for tools in OBJECT_SCOPES.values():
        module = inspect.getmodule(tools[0].handler)
        assert module.TOOL_NAMES == tuple(tool.name for tool in module.TOOLS)


def test_curated_scopes_reference_existing_tools() -> None:
    known = set(TOOL_IDS) | set(VIDEO_TOOLS)
    for scope in CURATED_SCOPES.values():
        missing = [name for name in scope.tools if name not in known]
        assert not missing, f"{scope.name}: {missing}"


def test_enum_values_are_unique() -> None:
    classes = [
        value
        for value in vars(enums).values()
        if inspect.isclass(value) and issubclass(value, Enum) and value.__module__ == enums.__name__
    ]
    assert classes
    for enum_cls in classes:
        values = [member.value for member in enum_cls]
        assert len(values) == len(set(values)), enum_cls.__name__


@pytest.mark.parametrize("tool", ALL_TOOLS, ids=TOOL_IDS)
def test_schema_shape(tool: EndpointTool) -> None:
    schema = tool.input_schema
    jsonschema.Draft202012Validator.check_schema(schema)
    assert schema["type"] == "object"
    assert schema["additionalProperties"] is (tool.method == "GET")
    assert tool.description and len(tool.description) <= 200

    if tool.id_bearing:
        assert "id" in schema["required"]
        expected = AD_ACCOUNT_ID if tool.object_name == "AdAccount" else NUMERIC_ID
        assert schema["properties"]["id"]["pattern"] == expected


@pytest.mark.parametrize("tool", ALL_TOOLS, ids=TOOL_IDS)
def test_schema_and_record_accept_the_same_arguments(tool: EndpointTool) -> None:
    schema = tool.input_schema
    properties = schema["properties"]
    required = schema.get("required", [])

    minimal = {name: sample(properties[name]) for name in required}
    full = {name: sample(prop) for name, prop in properties.items()}
    for arguments in (minimal, full):
        jsonschema.validate(arguments, schema)
        bind(tool.args_model, arguments)

    for name in required:
        missing = {key: value for key, value in minimal.items() if key != name}
        with pytest.raises(jsonschema.ValidationError):
            jsonschema.validate(missing, schema)
        with pytest.raises(BindingError):
            bind(tool.args_model, missing)

    if tool.method != "GET":
        unknown = {**minimal, "not_a_parameter": "x"}
        with pytest.raises(jsonschema.ValidationError):
            jsonschema.validate(unknown, schema)
        with pytest.raises(BindingError):
            bind(tool.args_model, unknown)


@pytest.mark.parametrize("tool", [tool for tool in ALL_TOOLS if tool.id_bearing], ids=lambda tool: tool.name)
def test_malformed_ids_are_rejected(tool: EndpointTool) -> None:
    arguments = {
        name: sample(prop)
        for name, prop in tool.input_schema["properties"].items()
        if name in tool.input_schema["required"]
    }
    arguments["id"] = "not-an-id"
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(arguments, tool.input_schema)
    with pytest.raises(BindingError):
        bind(tool.args_model, arguments)


def typed_property(tool: EndpointTool) -> str | None:
    for name, prop in tool.input_schema["properties"].items():
        if prop.get("type") in ("integer", "number", "boolean"):
            return name
    return None


@pytest.mark.parametrize(
    "tool", [tool for tool in ALL_TOOLS if typed_property(tool)], ids=lambda tool: tool.name
)
def test_schema_and_record_reject_the_same_arguments(tool: EndpointTool) -> None:
    schema = tool.input_schema
    arguments = {name: sample(schema["properties"][name]) for name in schema.get("required", [])}
    arguments[typed_property(tool)] = "25"

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(arguments, schema)
    with pytest.raises(BindingError):
        bind(tool.args_model, arguments)
