"""Render the generated package from the loaded API catalog with Jinja2."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from jinja2 import Environment, FileSystemLoader

from ..logging import get_logger
from .loader import ApiCatalog, EnumSpec
from .naming import enum_constant_identifier, enum_type_identifier, object_scope, object_snake
from .schema import RecordModel, ToolModel, build_record, build_tool, record_properties
from .types import DATETIME, UNSIGNED, EnumValues, TypeMapper

logger = get_logger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
DEFAULT_OUTPUT_DIR = Path(__file__).resolve().parent.parent / "generated"
HEADER = "# Code generated by fb_ads_mcp.codegen. DO NOT EDIT."
INLINE_LIST_WIDTH = 72
LINE_WIDTH = 88

_ANY = re.compile(r"\bAny\b")


class GenerationError(ValueError):
    pass


class ToolNameCollision(GenerationError):
    def __init__(self, name: str, first: ToolModel, second: ToolModel) -> None:
        super().__init__(
            f"Tool name {name!r} produced by both "
            f"{first.method} {first.object_name}/{first.endpoint} and "
            f"{second.method} {second.object_name}/{second.endpoint}"
        )
        self.name = name
        self.first = first
        self.second = second


@dataclass(frozen=True, slots=True)
class EnumModel:
    name: str
    class_name: str
    members: tuple[tuple[str, str], ...]


@dataclass(slots=True)
class ObjectModule:
    object_name: str
    module: str
    scope: str
    tools: list[ToolModel]


def py_literal(value: Any, indent: int = 0) -> str:
    """Python source for a JSON-like value, formatted for generated modules."""

    if isinstance(value, EnumValues):
        return f"values({value.class_name})"
    if value is None:
        return "None"
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return json.dumps(value)

    pad = " " * indent
    inner = " " * (indent + 4)
    if isinstance(value, dict):
        if not value:
            return "{}"
        lines = [f"{inner}{json.dumps(str(key))}: {py_literal(item, indent + 4)}," for key, item in value.items()]
        return "{\n" + "\n".join(lines) + f"\n{pad}}}"
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        if all(not isinstance(item, (dict, list, tuple)) for item in value):
            inline = "[" + ", ".join(py_literal(item) for item in value) + "]"
            if len(inline) <= INLINE_LIST_WIDTH:
                return inline
        lines = [f"{inner}{py_literal(item, indent + 4)}," for item in value]
        return "[\n" + "\n".join(lines) + f"\n{pad}]"
    raise GenerationError(f"Cannot render {type(value).__name__} as a literal")


def schema_enums(value: Any) -> set[str]:
    """Enum classes referenced by ``values(...)`` inside a rendered schema."""

    if isinstance(value, EnumValues):
        return {value.class_name}
    if isinstance(value, dict):
        return set().union(*(schema_enums(item) for item in value.values())) if value else set()
    if isinstance(value, list):
        return set().union(*(schema_enums(item) for item in value)) if value else set()
    return set()


def enum_members(values: Iterable[str]) -> tuple[tuple[str, str], ...]:
    members = []
    used: set[str] = set()
    for value in values:
        constant = enum_constant_identifier(value)
        if constant in used:
            suffix = 2
            while f"{constant}_{suffix}" in used:
                suffix += 1
            constant = f"{constant}_{suffix}"
        used.add(constant)
        members.append((constant, value))
    return tuple(members)


def build_enums(enums: dict[str, EnumSpec]) -> list[EnumModel]:
    models = []
    seen: dict[str, str] = {}
    for name in sorted(enums):
        class_name = enum_type_identifier(name)
        if class_name in seen:
            raise GenerationError(f"Enums {seen[class_name]!r} and {name!r} both map to {class_name}")
        seen[class_name] = name
        models.append(EnumModel(name=name, class_name=class_name, members=enum_members(enums[name].values)))
    return models


def build_modules(catalog: ApiCatalog) -> tuple[list[RecordModel], list[ObjectModule]]:
    mapper = TypeMapper(catalog.enums, catalog.objects)
    records = {name: record_properties(obj, mapper) for name, obj in catalog.objects.items()}

    seen: dict[str, ToolModel] = {}
    modules = []
    for name in sorted(catalog.objects):
        obj = catalog.objects[name]
        tools = []
        for endpoint in obj.apis:
            tool = build_tool(obj, endpoint, mapper, records)
            if tool.name in seen:
                raise ToolNameCollision(tool.name, seen[tool.name], tool)
            seen[tool.name] = tool
            tools.append(tool)
        modules.append(ObjectModule(name, object_snake(name), object_scope(name), tools))

    record_models = [build_record(catalog.objects[name], mapper) for name in sorted(catalog.objects)]
    return record_models, modules


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["py"] = py_literal
    return env


def from_import(module: str, names: Iterable[str]) -> str:
    """``from module import a, b``; wrapped one name per line when too long."""

    names = sorted(names)
    line = f"from {module} import {', '.join(names)}"
    if len(line) <= LINE_WIDTH:
        return line
    body = "".join(f"    {name},\n" for name in names)
    return f"from {module} import (\n{body})"


def import_block(*groups: list[str]) -> str:
    return "\n\n".join("\n".join(group) for group in groups if group)


def _module_context(module: ObjectModule) -> dict[str, Any]:
    enums: set[str] = set()
    records: set[str] = set()
    kinds: set[str] = set()
    endpoint_names = {"EndpointTool", "bind"}
    for tool in module.tools:
        used = schema_enums(tool.input_schema)
        enums |= tool.enums | used
        records |= tool.records
        kinds |= tool.kinds
        endpoint_names |= tool.patterns
        endpoint_names.add(tool.base_class)
        endpoint_names.add("body_params" if tool.method == "POST" else "query_params")
        if used:
            endpoint_names.add("values")

    stdlib = []
    if DATETIME in kinds:
        stdlib.append("from datetime import datetime")
    stdlib.append("from typing import TYPE_CHECKING, Any, Mapping")
    pydantic = ["Field", "NonNegativeInt"] if UNSIGNED in kinds else ["Field"]
    local = [from_import("..endpoints", endpoint_names)]
    if enums:
        local.append(from_import(".enums", enums))
    if records:
        local.append(from_import(".objects", records))
    return {
        "header": HEADER,
        "module": module,
        "imports": import_block(stdlib, [from_import("pydantic", pydantic)], local),
    }


def _objects_context(records: list[RecordModel]) -> dict[str, Any]:
    enums: set[str] = set()
    kinds: set[str] = set()
    for record in records:
        enums |= record.enums
        kinds |= record.kinds
    fields = [field for record in records for field in record.fields]

    stdlib = []
    if DATETIME in kinds:
        stdlib.append("from datetime import datetime")
    if any(_ANY.search(field.annotation) for field in fields):
        stdlib.append("from typing import Any")
    pydantic = []
    if any(field.aliased for field in fields):
        pydantic.append("Field")
    if UNSIGNED in kinds:
        pydantic.append("NonNegativeInt")
    local = [from_import("..endpoints", ["GraphObject"])]
    if enums:
        local.append(from_import(".enums", enums))
    return {
        "header": HEADER,
        "records": records,
        "imports": import_block(stdlib, [from_import("pydantic", pydantic)] if pydantic else [], local),
        "rebuild": [record.name for record in records if record.records],
    }


def render_package(catalog: ApiCatalog) -> dict[str, str]:
    """Map of generated file name to its source text."""

    env = _environment()
    records, modules = build_modules(catalog)
    files = {
        "enums.py": env.get_template("enums.py.j2").render(
            header=HEADER, enums=build_enums(catalog.enums)
        ),
        "objects.py": env.get_template("objects.py.j2").render(**_objects_context(records)),
        "__init__.py": env.get_template("catalog.py.j2").render(header=HEADER, modules=modules),
    }
    module_template = env.get_template("object_module.py.j2")
    for module in modules:
        files[f"{module.module}.py"] = module_template.render(**_module_context(module))
    return files


def write_package(files: dict[str, str], output_dir: Path | None = None) -> list[Path]:
    target = output_dir or DEFAULT_OUTPUT_DIR
    target.mkdir(parents=True, exist_ok=True)
    written = []
    for name in sorted(files):
        path = target / name
        path.write_text(files[name], encoding="utf-8")
        written.append(path)
    logger.info("package_generated", output=str(target), files=len(written))
    return written


def stale_files(files: dict[str, str], output_dir: Path | None = None) -> list[str]:
    """Names of generated files whose committed text differs from ``files``."""

    target = output_dir or DEFAULT_OUTPUT_DIR
    stale = []
    for name in sorted(files):
        path = target / name
        if not path.exists() or path.read_text(encoding="utf-8") != files[name]:
            stale.append(name)
    return stale


__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "EnumModel",
    "GenerationError",
    "ObjectModule",
    "ToolNameCollision",
    "build_enums",
    "build_modules",
    "enum_members",
    "from_import",
    "import_block",
    "py_literal",
    "render_package",
    "schema_enums",
    "stale_files",
    "write_package",
]
