"""Load per-object API specification files and the global enum file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..logging import get_logger

logger = get_logger(__name__)

ENUM_FILE = "enum_types.json"
DEFAULT_SPEC_DIR = Path(__file__).resolve().parent.parent / "api_specs"


class FieldSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str


class ParamSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    required: bool = False


class EndpointSpec(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    method: str
    endpoint: str = ""
    return_type: str = Field(default="", alias="return")
    params: tuple[ParamSpec, ...] = ()


class ObjectSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[FieldSpec, ...] = ()
    apis: tuple[EndpointSpec, ...] = ()


class EnumSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    node: str = ""
    field_or_param: str = ""
    values: tuple[str, ...] = ()


@dataclass(slots=True)
class ApiCatalog:
    objects: dict[str, ObjectSpec] = field(default_factory=dict)
    enums: dict[str, EnumSpec] = field(default_factory=dict)


def dedupe(values: Iterable[str]) -> tuple[str, ...]:
    """Drop repeated values, keeping the first occurrence."""

    seen: set[str] = set()
    result = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return tuple(result)


def load_enums(path: Path) -> dict[str, EnumSpec]:
    if not path.exists():
        logger.warning("enum_file_missing", path=str(path))
        return {}
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("enum_file_unreadable", path=str(path), error=str(exc))
        return {}
    if not isinstance(raw, list):
        logger.warning("enum_file_unexpected_shape", path=str(path))
        return {}

    merged: dict[str, list[str]] = {}
    meta: dict[str, dict[str, Any]] = {}
    for entry in raw:
        try:
            spec = EnumSpec.model_validate(entry)
        except ValidationError as exc:
            logger.warning("enum_entry_skipped", path=str(path), error=str(exc))
            continue
        merged.setdefault(spec.name, []).extend(spec.values)
        meta.setdefault(spec.name, {"node": spec.node, "field_or_param": spec.field_or_param})

    return {
        name: EnumSpec(name=name, values=dedupe(values), **meta[name])
        for name, values in merged.items()
    }


def load_object(path: Path) -> ObjectSpec:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name} does not contain a JSON object")
    return ObjectSpec.model_validate({"name": path.stem, **raw})


def load_catalog(spec_dir: Path | None = None) -> ApiCatalog:
    """Read every ``*.json`` file in ``spec_dir``.

    Files are visited in sorted order so that the emitted output only depends
    on file contents. Unreadable object files are logged and skipped.
    """

    spec_dir = Path(spec_dir or DEFAULT_SPEC_DIR)
    catalog = ApiCatalog(enums=load_enums(spec_dir / ENUM_FILE))
    for path in sorted(spec_dir.glob("*.json")):
        if path.name == ENUM_FILE:
            continue
        try:
            spec = load_object(path)
        except (OSError, ValueError) as exc:
            logger.warning("spec_file_skipped", path=str(path), error=str(exc))
            continue
        catalog.objects[spec.name] = spec
    logger.info("specs_loaded", objects=len(catalog.objects), enums=len(catalog.enums))
    return catalog


__all__ = [
    "ApiCatalog",
    "DEFAULT_SPEC_DIR",
    "ENUM_FILE",
    "EndpointSpec",
    "EnumSpec",
    "FieldSpec",
    "ObjectSpec",
    "ParamSpec",
    "dedupe",
    "load_catalog",
    "load_enums",
    "load_object",
]
