"""Map vendor type strings to Python annotations and JSON Schema fragments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .loader import EnumSpec
from .naming import enum_type_identifier

STRING = "string"
INTEGER = "integer"
UNSIGNED = "unsigned"
NUMBER = "number"
BOOLEAN = "boolean"
DATETIME = "datetime"
OBJECT = "object"
ENUM = "enum"
RECORD = "record"
LIST = "list"
MAP = "map"
ANY = "any"

_LEAVES = {
    "string": STRING,
    "int": INTEGER,
    "integer": INTEGER,
    "int32": INTEGER,
    "int64": INTEGER,
    "unsigned int": UNSIGNED,
    "unsigned integer": UNSIGNED,
    "float": NUMBER,
    "double": NUMBER,
    "number": NUMBER,
    "bool": BOOLEAN,
    "boolean": BOOLEAN,
    "datetime": DATETIME,
    "timestamp": DATETIME,
    "object": OBJECT,
    "map": OBJECT,
    "dict": OBJECT,
}

_PYTHON_LEAVES = {
    STRING: "str",
    INTEGER: "int",
    UNSIGNED: "NonNegativeInt",
    NUMBER: "float",
    BOOLEAN: "bool",
    DATETIME: "datetime",
    OBJECT: "dict[str, Any]",
    ANY: "Any",
}

_SCHEMA_LEAVES: dict[str, dict[str, Any]] = {
    STRING: {"type": "string"},
    INTEGER: {"type": "integer"},
    UNSIGNED: {"type": "integer", "minimum": 0},
    NUMBER: {"type": "number"},
    BOOLEAN: {"type": "boolean"},
    DATETIME: {"type": "string", "format": "date-time"},
    OBJECT: {"type": "object", "additionalProperties": True},
    ANY: {},
}

# Map keys that survive as-is; anything else becomes a string key.
_SCALAR_KEYS = {STRING, INTEGER, UNSIGNED, ENUM}


class EnumValues(list):
    """An inlined enum value list that remembers its generated class."""

    def __init__(self, class_name: str, values: Iterable[str]):
        super().__init__(values)
        self.class_name = class_name


@dataclass(frozen=True, slots=True)
class TypeRef:
    kind: str
    name: str | None = None
    item: TypeRef | None = None
    key: TypeRef | None = None

    @property
    def base(self) -> TypeRef:
        """The innermost type once list wrappers are removed."""

        ref = self
        while ref.kind == LIST and ref.item is not None:
            ref = ref.item
        return ref


def split_top_level(text: str) -> list[str]:
    """Split ``text`` on commas that are not nested inside ``<...>``."""

    parts, depth, current = [], 0, []
    for char in text:
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
        if char == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    parts.append("".join(current).strip())
    return parts


class TypeMapper:
    """Resolves vendor type strings against the loaded enums and objects."""

    def __init__(self, enums: Mapping[str, EnumSpec], objects: Iterable[str]) -> None:
        self.enums = enums
        self.objects = frozenset(objects)

    def parse(self, vendor_type: str) -> TypeRef:
        text = vendor_type.strip()
        lowered = text.lower()
        if lowered.startswith("list<") and text.endswith(">"):
            return TypeRef(LIST, item=self.parse(text[5:-1]))
        if lowered.startswith("map<") and text.endswith(">"):
            parts = split_top_level(text[4:-1])
            key = self.parse(parts[0]) if parts and parts[0] else TypeRef(STRING)
            value = self.parse(parts[1]) if len(parts) > 1 else TypeRef(ANY)
            if key.kind not in _SCALAR_KEYS:
                key = TypeRef(STRING)
            return TypeRef(MAP, item=value, key=key)
        if text in self.enums:
            return TypeRef(ENUM, name=text)
        if text in self.objects:
            return TypeRef(RECORD, name=text)
        if lowered in _LEAVES:
            return TypeRef(_LEAVES[lowered])
        return TypeRef(ANY)

    def python(self, ref: TypeRef) -> str:
        if ref.kind == LIST:
            return f"list[{self.python(ref.item or TypeRef(ANY))}]"
        if ref.kind == MAP:
            key = "str" if ref.key is None or ref.key.kind == STRING else self.python(ref.key)
            return f"dict[{key}, {self.python(ref.item or TypeRef(ANY))}]"
        if ref.kind == ENUM:
            return enum_type_identifier(ref.name or "")
        if ref.kind == RECORD:
            return ref.name or "Any"
        return _PYTHON_LEAVES[ref.kind]

    def json_schema(
        self,
        ref: TypeRef,
        *,
        records: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """JSON Schema for ``ref``.

        ``records`` maps object names to their property schemas; referenced
        records are inlined as open objects carrying those properties.
        """

        if ref.kind == LIST:
            return {"type": "array", "items": self.json_schema(ref.item or TypeRef(ANY), records=records)}
        if ref.kind == MAP:
            return {"type": "object", "additionalProperties": True}
        if ref.kind == ENUM:
            spec = self.enums[ref.name or ""]
            return {"type": "string", "enum": EnumValues(enum_type_identifier(spec.name), spec.values)}
        if ref.kind == RECORD:
            schema: dict[str, Any] = {"type": "object"}
            properties = (records or {}).get(ref.name or "")
            if properties:
                schema["properties"] = dict(properties)
            schema["additionalProperties"] = True
            return schema
        return dict(_SCHEMA_LEAVES[ref.kind])

    def enums_used(self, ref: TypeRef) -> set[str]:
        if ref.kind in (LIST, MAP):
            return self.enums_used(ref.item) if ref.item else set()
        if ref.kind == ENUM:
            return {enum_type_identifier(ref.name or "")}
        return set()

    def records_used(self, ref: TypeRef) -> set[str]:
        if ref.kind in (LIST, MAP):
            return self.records_used(ref.item) if ref.item else set()
        if ref.kind == RECORD and ref.name:
            return {ref.name}
        return set()

    def kinds_used(self, ref: TypeRef) -> set[str]:
        kinds = {ref.kind}
        if ref.item is not None:
            kinds |= self.kinds_used(ref.item)
        if ref.key is not None:
            kinds |= self.kinds_used(ref.key)
        return kinds


__all__ = ["EnumValues", "TypeMapper", "TypeRef", "split_top_level"]
