"""Runtime support imported by the generated endpoint modules.

Generated code stays declarative: argument records subclass ``ReadArgs`` or
``WriteArgs``, handlers call ``bind`` then ``query_params``/``body_params``,
and each module exposes a ``TOOLS`` tuple of ``EndpointTool`` records.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import BindingError

if TYPE_CHECKING:
    from .graph.gateway import GraphGateway

NUMERIC_ID = r"^[0-9]+$"
AD_ACCOUNT_ID = r"^(act_)?[0-9]+$"

READ_FIELDS = ("fields", "limit", "after", "before")

ArgsT = TypeVar("ArgsT", bound="ToolArgs")
Handler = Callable[["GraphGateway", Mapping[str, Any]], Awaitable[str]]


class GraphObject(BaseModel):
    """Base for object records; vendor payloads routinely carry extra keys."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, protected_namespaces=())


class ToolArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())


class ReadArgs(ToolArgs):
    """Arguments of a GET endpoint, including pagination and field selection.

    Unknown keys are kept and forwarded as query parameters.
    """

    model_config = ConfigDict(extra="allow")

    fields: list[str] | None = Field(default=None, description="Fields to return")
    limit: int | None = Field(default=None, ge=1, le=100, description="Maximum number of results")
    after: str | None = Field(default=None, description="Cursor for pagination (next page)")
    before: str | None = Field(default=None, description="Cursor for pagination (previous page)")


class WriteArgs(ToolArgs):
    """Arguments of a POST or DELETE endpoint; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")


@dataclass(frozen=True, slots=True)
class EndpointTool:
    """One generated tool: metadata, argument record, schema and handler."""

    name: str
    description: str
    object_name: str
    method: str
    endpoint: str
    id_bearing: bool
    args_model: type[ToolArgs]
    input_schema: Mapping[str, Any]
    handler: Handler


def values(enum_cls: type[Enum]) -> list[str]:
    return [member.value for member in enum_cls]


def bind(model: type[ArgsT], arguments: Mapping[str, Any] | None) -> ArgsT:
    """Validate ``arguments`` as strict JSON.

    Strings are never coerced to numbers or booleans, so a record binds
    exactly the inputs its JSON Schema accepts.
    """

    try:
        payload = json.dumps(dict(arguments or {}))
    except (TypeError, ValueError) as exc:
        raise BindingError("Arguments must be JSON values", details={"error": str(exc)}) from exc
    try:
        return model.model_validate_json(payload, strict=True)
    except ValidationError as exc:
        raise BindingError.from_validation(exc) from exc


def query_params(args: ToolArgs) -> dict[str, str]:
    """Serialize non-empty arguments for the query string.

    Scalar lists are comma joined, structured values are JSON encoded and
    booleans are lower-cased.
    """

    return {key: _query_value(value) for key, value in _non_empty(args).items()}


def body_params(args: ToolArgs) -> dict[str, Any]:
    return _non_empty(args)


def _non_empty(args: ToolArgs) -> dict[str, Any]:
    dumped = args.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"id"})
    return {key: value for key, value in dumped.items() if not _is_empty(value)}


def _is_empty(value: Any) -> bool:
    if value is None or value == "":
        return True
    return isinstance(value, (list, dict)) and not value


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list) and all(_is_scalar(item) for item in value):
        return ",".join(_query_value(item) for item in value)
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


__all__ = [
    "AD_ACCOUNT_ID",
    "EndpointTool",
    "GraphObject",
    "Handler",
    "NUMERIC_ID",
    "READ_FIELDS",
    "ReadArgs",
    "ToolArgs",
    "WriteArgs",
    "bind",
    "body_params",
    "query_params",
    "values",
]
