"""Deterministic identifier, tool-name and description rules.

These mappings are part of the public tool contract: changing any of them
renames generated identifiers or tools.
"""

from __future__ import annotations

import keyword
import re

FIELD_DIGIT_PREFIX = "X"
ENUM_DIGIT_PREFIX = "Enum"
UNKNOWN_ENUM = "UnknownEnum"
MAX_DESCRIPTION_LENGTH = 200

# Applied in order to the concatenated identifier.
_ACRONYMS = (
    ("Id", "ID"),
    ("Url", "URL"),
    ("Api", "API"),
    ("Ios", "IOS"),
    ("Https", "HTTPS"),
    ("Http", "HTTP"),
)

_DESCRIPTION_ACRONYMS = {"id": "ID", "url": "URL", "api": "API"}

_CONSTANT_REPLACEMENTS = {
    " ": "_",
    "-": "_",
    "(": "_",
    ")": "_",
    "&": "_AND_",
    "/": "_",
    "\\": "_",
    ".": "_",
    ",": "_",
    "'": "_",
    '"': "_",
    "+": "_PLUS_",
    ":": "_",
    ";": "_",
    "?": "_",
    "!": "_",
    "@": "_AT_",
    "#": "_HASH_",
    "$": "_DOLLAR_",
    "%": "_PERCENT_",
    "^": "_",
    "*": "_STAR_",
    "=": "_EQUALS_",
    "{": "_",
    "}": "_",
    "[": "_",
    "]": "_",
    "|": "_",
    "<": "_LT_",
    ">": "_GT_",
    "~": "_",
    "`": "_",
}

# Attribute names that would shadow pydantic.BaseModel members.
_RESERVED_ATTRIBUTES = frozenset(
    {
        "construct",
        "copy",
        "dict",
        "json",
        "model_config",
        "model_computed_fields",
        "model_extra",
        "model_fields",
        "model_fields_set",
        "parse_obj",
        "schema",
        "schema_json",
        "validate",
    }
)

_SEARCH_WORDS = frozenset({"search", "me", "root"})
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_IDENT = re.compile(r"[^0-9A-Za-z_]")


def _capitalize(piece: str) -> str:
    return piece[:1].upper() + piece[1:]


def field_identifier(name: str) -> str:
    """``account_id`` -> ``AccountID``; ``1d_click`` -> ``X1dClick``.

    Acronyms are replaced as substrings of the joined name, so
    ``identity_verification`` becomes ``IDentityVerification``.
    """

    result = "".join(_capitalize(piece) for piece in name.replace(".", "_").split("_") if piece)
    for title, upper in _ACRONYMS:
        result = result.replace(title, upper)
    if result[:1].isdigit():
        result = FIELD_DIGIT_PREFIX + result
    return result


def enum_type_identifier(name: str) -> str:
    """``AdsInsights_date_preset`` -> ``AdsInsightsDatePreset``."""

    result = "".join(_capitalize(piece) for piece in name.replace(".", "_").split("_") if piece)
    if not result:
        return UNKNOWN_ENUM
    if result[0].isdigit():
        result = ENUM_DIGIT_PREFIX + result
    return result


def enum_constant_identifier(value: str) -> str:
    """``Mobile App (iOS)`` -> ``MOBILE_APP_IOS``; ``7d`` -> ``_7D``."""

    result = []
    for char in value.upper():
        if char.isascii() and (char.isalnum() or char == "_"):
            result.append(char)
        else:
            result.append(_CONSTANT_REPLACEMENTS.get(char, "_"))
    constant = re.sub(r"_+", "_", "".join(result)).strip("_")
    if not constant or constant[0].isdigit():
        constant = f"_{constant}"
    return constant


def attribute_name(wire_name: str) -> str:
    """Python attribute for a wire name; equal to it whenever that is legal."""

    if wire_name.isidentifier() and not keyword.iskeyword(wire_name) and not wire_name.startswith("_"):
        if wire_name not in _RESERVED_ATTRIBUTES:
            return wire_name
    value = _NON_IDENT.sub("_", wire_name)
    value = re.sub(r"_+", "_", value).strip("_").lower()
    if not value:
        value = "value"
    if value[0].isdigit():
        value = f"{FIELD_DIGIT_PREFIX.lower()}_{value}"
    if keyword.iskeyword(value) or value in _RESERVED_ATTRIBUTES:
        value += "_"
    return value


def unique_attributes(wire_names: list[str], taken: set[str] | None = None) -> list[str]:
    """Attribute names for ``wire_names``; collisions get numeric suffixes in order."""

    used = set(taken or ())
    result = []
    for wire_name in wire_names:
        candidate = attribute_name(wire_name)
        if candidate in used:
            suffix = 2
            while f"{candidate}_{suffix}" in used:
                suffix += 1
            candidate = f"{candidate}_{suffix}"
        used.add(candidate)
        result.append(candidate)
    return result


def object_scope(object_name: str) -> str:
    return object_name.lower()


def object_snake(object_name: str) -> str:
    """``AdAccount`` -> ``ad_account``."""

    return _CAMEL_BOUNDARY.sub("_", object_name).lower()


def is_id_bearing(object_name: str, endpoint: str) -> bool:
    words = set(endpoint.lower().split("_"))
    if words & _SEARCH_WORDS:
        return False
    own = object_name.lower()
    return endpoint.lower() not in {own, f"{own}s"}


def tool_name(object_name: str, method: str, endpoint: str) -> str:
    snake = object_snake(object_name)
    method = method.upper()
    if not endpoint:
        verb = {"GET": "get", "POST": "update", "DELETE": "delete"}.get(method, method.lower())
        return f"{snake}_{verb}"
    suffix = endpoint.replace("/", "_")
    if suffix == "insights":
        if method == "GET":
            return f"{snake}_get_insights"
        if method == "POST":
            return f"{snake}_create_insights_report"
    if method == "DELETE":
        return f"{snake}_remove_{suffix}"
    if suffix.endswith("s"):
        if method == "GET":
            return f"{snake}_list_{suffix}"
        if method == "POST":
            return f"{snake}_create_{suffix[:-1]}"
    if method == "GET":
        return f"{snake}_get_{suffix}"
    if method == "POST":
        return f"{snake}_update_{suffix}"
    return f"{snake}_{method.lower()}_{suffix}"


def action_phrase(object_name: str, method: str, endpoint: str) -> str:
    method = method.upper()
    if not endpoint:
        if method == "GET":
            return f"Get details of a specific {object_name}"
        if method == "POST":
            return f"Update a {object_name}"
        if method == "DELETE":
            return f"Delete a {object_name}"
        return f"{method.title()} a {object_name}"

    lowered = endpoint.lower()
    if endpoint == "insights":
        if method == "GET":
            return f"Get analytics insights for this {object_name}"
        return f"Generate an insights report for this {object_name}"
    if endpoint == "copies":
        if method == "GET":
            return f"List copies of this {object_name}"
        return f"Create a copy of this {object_name}"
    if endpoint.endswith("s") and method == "GET":
        return f"List {endpoint} for this {object_name}"
    if "preview" in lowered:
        return f"Get preview of this {object_name}"
    if endpoint == "leads":
        return f"Get lead information from this {object_name}"
    if "targeting" in lowered:
        return f"Get targeting information for this {object_name}"
    if method == "POST" and endpoint.startswith("ad"):
        return f"Associate {endpoint} with this {object_name}"
    if method == "GET":
        return f"Get {endpoint} data for this {object_name}"
    if method == "POST":
        return f"Create or update {endpoint} for this {object_name}"
    if method == "DELETE":
        return f"Remove {endpoint} from this {object_name}"
    return f"{method.title()} {endpoint} for this {object_name}"


def tool_description(
    object_name: str,
    method: str,
    endpoint: str,
    return_type: str,
    required: list[str],
) -> str:
    """One-line summary: action, returned type, then required parameters."""

    description = action_phrase(object_name, method, endpoint) + "."
    if return_type and return_type != "Object":
        description += f" Returns {return_type}."
    if required:
        description += " Required: " + ", ".join(required)
    if len(description) > MAX_DESCRIPTION_LENGTH:
        description = description[: MAX_DESCRIPTION_LENGTH - 3].rstrip() + "..."
    return description


def humanize(name: str) -> str:
    return " ".join(
        _DESCRIPTION_ACRONYMS.get(word.lower(), _capitalize(word)) for word in name.split("_") if word
    )


def param_description(name: str, target: str, enum_name: str | None = None) -> str:
    words = humanize(name)
    if name == "id":
        text = f"{target} ID"
    elif name.endswith("_id"):
        text = f"ID of the {words.removesuffix(' ID')}"
    elif name == "name":
        text = f"Name of the {target}"
    elif name == "status":
        text = f"Current status of the {target}"
    elif "created" in name:
        text = "When created"
    elif "updated" in name:
        text = "When last updated"
    else:
        text = words
    if enum_name:
        text += f" (enum: {enum_name})"
    return text


__all__ = [
    "MAX_DESCRIPTION_LENGTH",
    "UNKNOWN_ENUM",
    "action_phrase",
    "attribute_name",
    "enum_constant_identifier",
    "enum_type_identifier",
    "field_identifier",
    "humanize",
    "is_id_bearing",
    "object_scope",
    "object_snake",
    "param_description",
    "tool_description",
    "tool_name",
    "unique_attributes",
]
