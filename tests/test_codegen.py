from __future__ import annotations

import json
from pathlib import Path

import pytest

from fb_ads_mcp.codegen import GenerationError, ToolNameCollision, load_catalog, render_package
from fb_ads_mcp.codegen.loader import EnumSpec, ObjectSpec, dedupe, load_enums
from fb_ads_mcp.codegen.render import HEADER, from_import, py_literal, stale_files, write_package
from fb_ads_mcp.codegen.schema import build_tool
from fb_ads_mcp.codegen.types import (
    ANY,
    ENUM,
    LIST,
    MAP,
    RECORD,
    STRING,
    EnumValues,
    TypeMapper,
    split_top_level,
)
from fb_ads_mcp.endpoints import AD_ACCOUNT_ID, NUMERIC_ID


def write_specs(directory: Path, objects: dict[str, dict], enums: list[dict] | None = None) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    for name, payload in objects.items():
        (directory / f"{name}.json").write_text(json.dumps(payload), encoding="utf-8")
    (directory / "enum_types.json").write_text(json.dumps(enums or []), encoding="utf-8")
    return directory


FOO_SPEC = {
    "fields": [
        {"name": "id", "type": "string"},
        {"name": "name", "type": "string"},
        {"name": "status", "type": "Foo_status"},
        {"name": "class", "type": "string"},
    ],
    "apis": [
        {"method": "GET", "endpoint": "", "return": "Foo", "params": []},
        {
            "method": "POST",
            "endpoint": "bars",
            "return": "Foo",
            "params": [
                {"name": "name", "type": "string", "required": True},
                {"name": "class", "type": "string"},
                {"name": "status", "type": "Foo_status"},
                {"name": "page_id", "type": "string"},
            ],
        },
        {"method": "DELETE", "endpoint": "", "return": "Object", "params": []},
    ],
}

FOO_ENUMS = [
    {"name": "Foo_status", "node": "Foo", "field_or_param": "status", "values": ["ACTIVE", "PAUSED"]},
    {"name": "Foo_status", "node": "Foo", "field_or_param": "status", "values": ["PAUSED", "DELETED"]},
]


@pytest.fixture
def mapper() -> TypeMapper:
    enums = {"Campaign_status": EnumSpec(name="Campaign_status", values=("ACTIVE", "PAUSED"))}
    return TypeMapper(enums, {"AdCreative", "Campaign"})


def test_dedupe_keeps_first_occurrence() -> None:
    assert dedupe(["B", "A", "B", "C", "A"]) == ("B", "A", "C")


def test_load_enums_merges_and_dedupes(tmp_path: Path) -> None:
    write_specs(tmp_path, {}, FOO_ENUMS)
    enums = load_enums(tmp_path / "enum_types.json")
    assert enums["Foo_status"].values == ("ACTIVE", "PAUSED", "DELETED")


def test_load_catalog_skips_unreadable_files(tmp_path: Path) -> None:
    write_specs(tmp_path, {"Foo": FOO_SPEC}, FOO_ENUMS)
    (tmp_path / "Broken.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "List.json").write_text("[]", encoding="utf-8")

    catalog = load_catalog(tmp_path)

    assert list(catalog.objects) == ["Foo"]
    assert catalog.objects["Foo"].apis[1].return_type == "Foo"
    assert catalog.objects["Foo"].apis[1].params[0].required is True


def test_bundled_specs_load() -> None:
    catalog = load_catalog()
    assert {"Ad", "AdAccount", "AdCreative", "AdSet", "Campaign", "CustomAudience", "User"} <= set(
        catalog.objects
    )
    assert catalog.enums


def test_split_top_level() -> None:
    assert split_top_level("string, map<string, int>") == ["string", "map<string, int>"]


def test_type_mapper_parses_containers(mapper: TypeMapper) -> None:
    ref = mapper.parse("list<string>")
    assert ref.kind == LIST and ref.item.kind == STRING
    assert mapper.python(ref) == "list[str]"

    ref = mapper.parse("map<string, list<int>>")
    assert ref.kind == MAP
    assert mapper.python(ref) == "dict[str, list[int]]"
    assert mapper.json_schema(ref) == {"type": "object", "additionalProperties": True}

    ref = mapper.parse("map<AdCreative, string>")
    assert ref.key.kind == STRING


def test_type_mapper_enums_and_records(mapper: TypeMapper) -> None:
    ref = mapper.parse("list<Campaign_status>")
    assert ref.base.kind == ENUM
    assert mapper.python(ref) == "list[CampaignStatus]"
    schema = mapper.json_schema(ref)
    assert schema == {"type": "array", "items": {"type": "string", "enum": ["ACTIVE", "PAUSED"]}}
    assert isinstance(schema["items"]["enum"], EnumValues)
    assert schema["items"]["enum"].class_name == "CampaignStatus"
    assert mapper.enums_used(ref) == {"CampaignStatus"}

    ref = mapper.parse("AdCreative")
    assert ref.kind == RECORD
    assert mapper.python(ref) == "AdCreative"
    assert mapper.json_schema(ref, records={"AdCreative": {"name": {"type": "string"}}}) == {
        "type": "object",
        "properties": {"name": {"type": "string"}},
        "additionalProperties": True,
    }
    assert mapper.records_used(mapper.parse("list<AdCreative>")) == {"AdCreative"}


def test_type_mapper_leaves(mapper: TypeMapper) -> None:
    assert mapper.python(mapper.parse("unsigned int")) == "NonNegativeInt"
    assert mapper.json_schema(mapper.parse("unsigned int")) == {"type": "integer", "minimum": 0}
    assert mapper.json_schema(mapper.parse("datetime")) == {"type": "string", "format": "date-time"}
    assert mapper.python(mapper.parse("bool")) == "bool"
    unknown = mapper.parse("SomethingElse")
    assert unknown.kind == ANY
    assert mapper.python(unknown) == "Any"
    assert mapper.json_schema(unknown) == {}


def test_build_tool_for_read_endpoint(mapper: TypeMapper) -> None:
    obj = ObjectSpec.model_validate(
        {
            "name": "Campaign",
            "apis": [
                {
                    "method": "GET",
                    "endpoint": "",
                    "return": "Campaign",
                    "params": [
                        {"name": "id", "type": "string", "required": True},
                        {"name": "fields", "type": "list<string>"},
                        {"name": "date_preset", "type": "Campaign_status"},
                    ],
                }
            ],
        }
    )
    tool = build_tool(obj, obj.apis[0], mapper)

    assert tool.name == "campaign_get"
    assert tool.class_name == "CampaignGetArgs"
    assert tool.base_class == "ReadArgs"
    assert list(tool.input_schema["properties"]) == ["id", "fields", "limit", "after", "before", "date_preset"]
    assert tool.input_schema["required"] == ["id"]
    assert tool.input_schema["additionalProperties"] is True
    assert tool.input_schema["properties"]["id"]["pattern"] == NUMERIC_ID
    assert tool.path_expression == 'f"/{args.id}"'
    assert tool.call_arguments == '"GET", f"/{args.id}", query=query_params(args)'
    assert [field.wire_name for field in tool.fields] == ["id", "date_preset"]


def test_build_tool_for_write_endpoint(mapper: TypeMapper) -> None:
    obj = ObjectSpec.model_validate(
        {
            "name": "AdAccount",
            "apis": [
                {
                    "method": "POST",
                    "endpoint": "campaigns",
                    "return": "Campaign",
                    "params": [
                        {"name": "name", "type": "string", "required": True},
                        {"name": "status", "type": "Campaign_status", "required": True},
                        {"name": "source_campaign_id", "type": "string"},
                        {"name": "class", "type": "string"},
                    ],
                }
            ],
        }
    )
    tool = build_tool(obj, obj.apis[0], mapper)

    assert tool.name == "ad_account_create_campaign"
    assert tool.base_class == "WriteArgs"
    schema = tool.input_schema
    assert schema["additionalProperties"] is False
    assert schema["required"] == ["id", "name", "status"]
    assert schema["properties"]["id"]["pattern"] == AD_ACCOUNT_ID
    assert schema["properties"]["source_campaign_id"]["pattern"] == NUMERIC_ID
    assert schema["properties"]["name"]["description"] == "Name of the Campaign"
    assert tool.description == (
        "Create or update campaigns for this AdAccount. Returns Campaign. Required: name, status (enum)"
    )
    assert tool.call_arguments == '"POST", f"/{args.id}/campaigns", body=body_params(args)'

    aliased = {field.wire_name: field for field in tool.fields}["class"]
    assert aliased.attr_name == "class_"
    assert aliased.declaration() == 'class_: str | None = Field(default=None, alias="class", description="Class")'
    assert {field.wire_name: field for field in tool.fields}["name"].declaration() == (
        'name: str = Field(description="Name of the Campaign")'
    )


def test_build_tool_without_id(mapper: TypeMapper) -> None:
    obj = ObjectSpec.model_validate(
        {
            "name": "User",
            "apis": [{"method": "GET", "endpoint": "search", "params": [{"name": "q", "type": "string"}]}],
        }
    )
    tool = build_tool(obj, obj.apis[0], mapper)
    assert tool.id_bearing is False
    assert "id" not in tool.input_schema["properties"]
    assert "required" not in tool.input_schema
    assert tool.path_expression == '"/search"'


def test_py_literal_formats_schemas() -> None:
    assert py_literal(None) == "None"
    assert py_literal(True) == "True"
    assert py_literal("a\"b") == '"a\\"b"'
    assert py_literal(["a", "b"]) == '["a", "b"]'
    assert py_literal(EnumValues("CampaignStatus", ["ACTIVE"])) == "values(CampaignStatus)"
    assert py_literal({"type": "string"}, 4) == '{\n        "type": "string",\n    }'
    with pytest.raises(GenerationError):
        py_literal(object())


def test_from_import_wraps_long_lines() -> None:
    assert from_import("..endpoints", ["bind", "EndpointTool"]) == "from ..endpoints import EndpointTool, bind"
    wrapped = from_import(".enums", [f"VeryLongEnumerationName{index}" for index in range(6)])
    assert wrapped.startswith("from .enums import (\n    VeryLongEnumerationName0,\n")
    assert wrapped.endswith("\n)")


def test_render_package_emits_valid_modules(tmp_path: Path) -> None:
    catalog = load_catalog(write_specs(tmp_path / "specs", {"Foo": FOO_SPEC}, FOO_ENUMS))
    files = render_package(catalog)

    assert set(files) == {"__init__.py", "enums.py", "objects.py", "foo.py"}
    for name, text in files.items():
        assert text.startswith(HEADER)
        compile(text, name, "exec")

    module = files["foo.py"]
    assert "class FooCreateBarArgs(WriteArgs):" in module
    assert 'alias="class"' in module
    assert '"enum": values(FooStatus)' in module
    assert '"foo_get",' in module and '"foo_create_bar",' in module and '"foo_delete",' in module
    assert files["enums.py"].count('= "PAUSED"') == 1
    assert '"foo": foo.TOOLS' in files["__init__.py"]


def test_render_is_deterministic(tmp_path: Path) -> None:
    first = render_package(load_catalog())
    second = render_package(load_catalog())
    assert first == second

    written = write_package(first, tmp_path)
    assert sorted(path.name for path in written) == sorted(first)
    assert stale_files(first, tmp_path) == []
    (tmp_path / "campaign.py").write_text("# edited\n", encoding="utf-8")
    assert stale_files(first, tmp_path) == ["campaign.py"]


def test_tool_name_collision_aborts_generation(tmp_path: Path) -> None:
    spec = {
        "fields": [],
        "apis": [
            {"method": "GET", "endpoint": "ads", "params": []},
            {"method": "GET", "endpoint": "ads", "params": [{"name": "limit", "type": "int"}]},
        ],
    }
    catalog = load_catalog(write_specs(tmp_path, {"Foo": spec}))

    with pytest.raises(ToolNameCollision) as exc:
        render_package(catalog)

    assert exc.value.name == "foo_list_ads"
    assert "GET Foo/ads" in str(exc.value)
