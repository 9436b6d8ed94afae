"""Synthesize the typed argument record and JSON Schema for each endpoint."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

from ..endpoints import AD_ACCOUNT_ID, NUMERIC_ID, READ_FIELDS
from .loader import EndpointSpec, ObjectSpec
from .naming import (
    field_identifier,
    is_id_bearing,
    object_snake,
    param_description,
    tool_description,
    tool_name,
    unique_attributes,
)
from .types import ANY, ENUM, RECORD, STRING, TypeMapper, TypeRef

AD_ACCOUNT = "AdAccount"

READ_PROPERTIES: dict[str, dict[str, Any]] = {
    "fields": {"type": "array", "items": {"type": "string"}, "description": "Fields to return"},
    "limit": {
        "type": "integer",
        "minimum": 1,
        "maximum": 100,
        "description": "Maximum number of results",
    },
    "after": {"type": "string", "description": "Cursor for pagination (next page)"},
    "before": {"type": "string", "description": "Cursor for pagination (previous page)"},
}


@dataclass(frozen=True, slots=True)
class ArgField:
    """One attribute of a generated argument or object record."""

    wire_name: str
    attr_name: str
    annotation: str
    required: bool
    description: str | None = None
    pattern: str | None = None

    @property
    def aliased(self) -> bool:
        return self.attr_name != self.wire_name

    def declaration(self) -> str:
        """Source line declaring this attribute on a pydantic model."""

        args = []
        if not self.required:
            args.append("default=None")
        if self.aliased:
            args.append(f'alias="{self.wire_name}"')
        if self.pattern:
            args.append(f"pattern={self.pattern}")
        if self.description:
            args.append(f"description={json.dumps(self.description)}")
        annotation = self.annotation if self.required else f"{self.annotation} | None"
        if not args:
            return f"{self.attr_name}: {annotation}"
        if args == ["default=None"]:
            return f"{self.attr_name}: {annotation} = None"
        return f"{self.attr_name}: {annotation} = Field({', '.join(args)})"


@dataclass(slots=True)
class ToolModel:
    name: str
    object_name: str
    method: str
    endpoint: str
    return_type: str
    id_bearing: bool
    description: str
    class_name: str
    base_class: str
    fields: list[ArgField]
    input_schema: dict[str, Any]
    enums: set[str] = field(default_factory=set)
    records: set[str] = field(default_factory=set)
    kinds: set[str] = field(default_factory=set)
    patterns: set[str] = field(default_factory=set)

    @property
    def is_read(self) -> bool:
        return self.method == "GET"

    @property
    def path_expression(self) -> str:
        if self.id_bearing and self.endpoint:
            return f'f"/{{args.id}}/{self.endpoint}"'
        if self.id_bearing:
            return 'f"/{args.id}"'
        return f'"/{self.endpoint}"'

    @property
    def call_arguments(self) -> str:
        """Arguments of the ``gateway.call`` emitted in the handler body."""

        if self.method == "POST":
            payload = "body=body_params(args)"
        else:
            payload = "query=query_params(args)"
        return f'"{self.method}", {self.path_expression}, {payload}'


@dataclass(slots=True)
class RecordModel:
    name: str
    fields: list[ArgField]
    enums: set[str] = field(default_factory=set)
    records: set[str] = field(default_factory=set)
    kinds: set[str] = field(default_factory=set)


def id_pattern_constant(object_name: str) -> str:
    return "AD_ACCOUNT_ID" if object_name == AD_ACCOUNT else "NUMERIC_ID"


def id_pattern(object_name: str) -> str:
    return AD_ACCOUNT_ID if object_name == AD_ACCOUNT else NUMERIC_ID


def wants_pattern(name: str, ref: TypeRef) -> bool:
    return ref.kind == STRING and (name == "id" or name.endswith("_id"))


def description_target(obj: ObjectSpec, endpoint: EndpointSpec, mapper: TypeMapper) -> str:
    return_type = endpoint.return_type
    if return_type and return_type != "Object" and mapper.parse(return_type).kind in (RECORD, ANY):
        return return_type
    return obj.name


def record_properties(obj: ObjectSpec, mapper: TypeMapper) -> dict[str, dict[str, Any]]:
    """Property schemas of an object record; nested records stay open objects."""

    properties = {}
    for spec in obj.fields:
        properties[spec.name] = mapper.json_schema(mapper.parse(spec.type))
    return properties


def build_record(obj: ObjectSpec, mapper: TypeMapper) -> RecordModel:
    record = RecordModel(name=obj.name, fields=[])
    wire_names = [spec.name for spec in obj.fields]
    for spec, attr in zip(obj.fields, unique_attributes(wire_names)):
        ref = mapper.parse(spec.type)
        record.fields.append(
            ArgField(
                wire_name=spec.name,
                attr_name=attr,
                annotation=mapper.python(ref),
                required=False,
            )
        )
        record.enums |= mapper.enums_used(ref)
        record.records |= mapper.records_used(ref)
        record.kinds |= mapper.kinds_used(ref)
    record.records.discard(obj.name)
    return record


def build_tool(
    obj: ObjectSpec,
    endpoint: EndpointSpec,
    mapper: TypeMapper,
    records: Mapping[str, Mapping[str, Any]] | None = None,
) -> ToolModel:
    method = endpoint.method.upper()
    name = tool_name(obj.name, method, endpoint.endpoint)
    id_bearing = is_id_bearing(obj.name, endpoint.endpoint)
    is_read = method == "GET"
    target = description_target(obj, endpoint, mapper)

    params = [
        param
        for param in endpoint.params
        if param.name != "id" or not id_bearing
    ]
    if is_read:
        params = [param for param in params if param.name not in READ_FIELDS]

    fields: list[ArgField] = []
    properties: dict[str, Any] = {}
    required: list[str] = []
    required_summary: list[str] = []
    enums: set[str] = set()
    record_refs: set[str] = set()
    kinds: set[str] = set()
    patterns: set[str] = set()

    taken = set(READ_FIELDS) if is_read else set()
    if id_bearing:
        constant = id_pattern_constant(obj.name)
        fields.append(
            ArgField(
                wire_name="id",
                attr_name="id",
                annotation="str",
                required=True,
                description=f"{obj.name} ID",
                pattern=constant,
            )
        )
        properties["id"] = {
            "type": "string",
            "pattern": id_pattern(obj.name),
            "description": f"{obj.name} ID",
        }
        required.append("id")
        patterns.add(constant)
        taken.add("id")

    if is_read:
        properties.update({key: dict(value) for key, value in READ_PROPERTIES.items()})

    attrs = unique_attributes([param.name for param in params], taken)
    for param, attr in zip(params, attrs):
        ref = mapper.parse(param.type)
        enum_name = ref.base.name if ref.base.kind == ENUM else None
        description = param_description(param.name, target, enum_name)
        pattern = "NUMERIC_ID" if wants_pattern(param.name, ref) else None
        fields.append(
            ArgField(
                wire_name=param.name,
                attr_name=attr,
                annotation=mapper.python(ref),
                required=param.required,
                description=description,
                pattern=pattern,
            )
        )
        schema = mapper.json_schema(ref, records=records)
        if pattern:
            schema["pattern"] = NUMERIC_ID
            patterns.add(pattern)
        schema["description"] = description
        properties[param.name] = schema
        if param.required:
            required.append(param.name)
            required_summary.append(f"{param.name} (enum)" if enum_name else param.name)
        enums |= mapper.enums_used(ref)
        record_refs |= mapper.records_used(ref)
        kinds |= mapper.kinds_used(ref)

    input_schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        input_schema["required"] = required
    input_schema["additionalProperties"] = is_read

    return ToolModel(
        name=name,
        object_name=obj.name,
        method=method,
        endpoint=endpoint.endpoint,
        return_type=endpoint.return_type,
        id_bearing=id_bearing,
        description=tool_description(
            obj.name, method, endpoint.endpoint, endpoint.return_type, required_summary
        ),
        class_name=f"{field_identifier(name)}Args",
        base_class="ReadArgs" if is_read else "WriteArgs",
        fields=fields,
        input_schema=input_schema,
        enums=enums,
        records=record_refs,
        kinds=kinds,
        patterns=patterns,
    )


def module_name(object_name: str) -> str:
    return object_snake(object_name)


__all__ = [
    "ArgField",
    "READ_PROPERTIES",
    "RecordModel",
    "ToolModel",
    "build_record",
    "build_tool",
    "description_target",
    "id_pattern",
    "id_pattern_constant",
    "module_name",
    "record_properties",
    "wants_pattern",
]
