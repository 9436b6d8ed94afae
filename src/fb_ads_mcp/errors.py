"""Error definitions mapping Graph API failures to the MCP error model."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    BINDING = "binding"
    VENDOR = "vendor"
    TRANSPORT = "transport"


class McpErrorCode(str, Enum):
    AUTH = "AUTH"
    PERMISSION = "PERMISSION"
    RATE_LIMIT = "RATE_LIMIT"
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    REMOTE_5XX = "REMOTE_5XX"
    TRANSPORT = "TRANSPORT"
    UNSUPPORTED = "UNSUPPORTED"


class McpError(BaseModel):
    """Typed error returned to MCP clients."""

    kind: ErrorKind | None = None
    code: McpErrorCode
    message: str
    details: Mapping[str, Any] | None = None
    retry_after: float | None = Field(default=None, description="Retry hint in seconds")

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.kind is not None:
            payload["kind"] = self.kind.value
        if self.details:
            payload["details"] = dict(self.details)
        if self.retry_after is not None:
            payload["retry_after"] = self.retry_after
        return payload


class MCPException(RuntimeError):
    """Internal exception carrying an MCP error payload."""

    def __init__(self, error: McpError):
        super().__init__(error.message)
        self.error = error


class BindingError(MCPException):
    """Tool arguments did not bind to the typed argument record."""

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None):
        super().__init__(
            McpError(
                kind=ErrorKind.BINDING,
                code=McpErrorCode.VALIDATION,
                message=message,
                details=details,
            )
        )

    @classmethod
    def from_validation(cls, exc: Any, *, message: str = "Invalid arguments") -> "BindingError":
        errors = [
            {
                "loc": ".".join(str(part) for part in error.get("loc", ())),
                "msg": error.get("msg"),
                "type": error.get("type"),
            }
            for error in exc.errors()
        ]
        return cls(message, details={"errors": errors})


class TransportError(MCPException):
    """The request never produced a usable Graph API response."""

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None):
        super().__init__(
            McpError(
                kind=ErrorKind.TRANSPORT,
                code=McpErrorCode.TRANSPORT,
                message=message,
                details=details,
            )
        )


class GraphApiError(MCPException):
    """Graph API answered with an HTTP status of 400 or above."""

    def __init__(
        self,
        *,
        message: str,
        http_status: int,
        type: str | None = None,
        code: int | None = None,
        error_subcode: int | None = None,
        fbtrace_id: str | None = None,
        is_transient: bool = False,
        error_data: Any = None,
        category: McpErrorCode = McpErrorCode.VALIDATION,
        retry_after: float | None = None,
    ):
        self.message = message
        self.http_status = http_status
        self.type = type
        self.code = code
        self.error_subcode = error_subcode
        self.fbtrace_id = fbtrace_id
        self.is_transient = is_transient
        self.error_data = error_data

        details: dict[str, Any] = {"http_status": http_status, "message": message}
        if type:
            details["type"] = type
        if code is not None:
            details["code"] = code
        if error_subcode is not None:
            details["error_subcode"] = error_subcode
        if fbtrace_id:
            details["fbtrace_id"] = fbtrace_id
        if is_transient:
            details["is_transient"] = True
        super().__init__(
            McpError(
                kind=ErrorKind.VENDOR,
                code=category,
                message=f"{message} (code: {code}, type: {type}, http_status: {http_status})",
                details=details,
                retry_after=retry_after,
            )
        )


class GuardrailViolation(BaseException):
    """A test run tried to reach the production Graph API host.

    Derives from BaseException so tool-level ``except Exception`` handlers
    never swallow it and the server process terminates.
    """

    def __init__(self, url: str):
        super().__init__(f"Refusing to call production Graph API while TESTING=true: {url}")
        self.url = url


def error_response(error: McpError, *, meta: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    """Build a JSON error response."""

    return {
        "ok": False,
        "error": error.to_dict(),
        "meta": meta or {},
    }


__all__ = [
    "BindingError",
    "ErrorKind",
    "GraphApiError",
    "GuardrailViolation",
    "McpError",
    "McpErrorCode",
    "MCPException",
    "TransportError",
    "error_response",
]
