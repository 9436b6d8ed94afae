"""Graph API batch requests: up to 50 sub-requests in one physical call."""

from __future__ import annotations

import json
from typing import Any, Literal, Mapping, Sequence
from urllib.parse import urlencode

from pydantic import BaseModel, Field, ValidationError

from ..errors import BindingError, TransportError
from ..logging import get_logger
from .gateway import GraphGateway, decode_json

logger = get_logger(__name__)

MAX_BATCH_SIZE = 50


class BatchOperation(BaseModel):
    method: Literal["GET", "POST", "PUT", "DELETE"] = Field(description="HTTP method")
    relative_url: str = Field(
        min_length=1,
        description="Relative URL path (e.g. '123456789' or '123456789/ads?fields=id')",
    )
    body: Mapping[str, Any] | str | None = Field(
        default=None,
        description="Request body for POST/PUT requests",
    )
    headers: Mapping[str, str] | None = Field(default=None, description="Custom headers for this request")
    name: str | None = Field(
        default=None,
        description="Optional name for referencing this operation in responses",
    )

    def to_wire(self) -> dict[str, Any]:
        item: dict[str, Any] = {"method": self.method, "relative_url": self.relative_url}
        if self.body:
            item["body"] = self.body if isinstance(self.body, str) else encode_body(self.body)
        if self.headers:
            item["headers"] = [{"name": key, "value": value} for key, value in self.headers.items()]
        if self.name:
            item["name"] = self.name
        return item


class BatchItemResult(BaseModel):
    code: int
    headers: dict[str, str] | None = None
    body: str | None = None
    name: str | None = None
    success: bool
    error: str | None = None
    parsed_body: Any = None


class BatchResult(BaseModel):
    total_operations: int
    successful_operations: int
    failed_operations: int
    results: list[BatchItemResult]
    summary: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def encode_body(body: Mapping[str, Any]) -> str:
    """URL-encode a sub-request body; structured values travel as JSON."""

    return urlencode(
        {
            key: value if isinstance(value, str) else json.dumps(value, separators=(",", ":"))
            for key, value in body.items()
            if value is not None
        }
    )


def parse_item(raw: Any, operation: BatchOperation) -> BatchItemResult:
    if not isinstance(raw, Mapping):
        return BatchItemResult(
            code=0,
            name=operation.name,
            success=False,
            error="No response returned for this operation",
        )

    try:
        code = int(raw.get("code") or 0)
    except (TypeError, ValueError):
        code = 0

    headers = _parse_headers(raw.get("headers"))
    body = raw.get("body")
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)

    parsed_body = None
    if body:
        try:
            parsed_body = json.loads(body)
        except ValueError:
            parsed_body = None

    success = 200 <= code < 300
    error = None
    if not success:
        error = _error_message(parsed_body) or f"HTTP {code} error"

    return BatchItemResult(
        code=code,
        headers=headers,
        body=body,
        name=operation.name,
        success=success,
        error=error,
        parsed_body=parsed_body,
    )


def _parse_headers(raw: Any) -> dict[str, str] | None:
    if isinstance(raw, Mapping):
        return {str(key): str(value) for key, value in raw.items()}
    if isinstance(raw, list):
        headers = {}
        for entry in raw:
            if isinstance(entry, Mapping) and "name" in entry:
                headers[str(entry["name"])] = str(entry.get("value", ""))
        return headers or None
    return None


def _error_message(parsed_body: Any) -> str | None:
    if not isinstance(parsed_body, Mapping):
        return None
    err = parsed_body.get("error")
    if isinstance(err, Mapping) and err.get("message"):
        return str(err["message"])
    return None


class BatchExecutor:
    """Packs sub-requests into one POST to the API root and unpacks the answers."""

    def __init__(self, gateway: GraphGateway) -> None:
        self._gateway = gateway

    async def execute(self, operations: Sequence[BatchOperation | Mapping[str, Any]]) -> BatchResult:
        if not operations:
            raise BindingError("Batch must contain at least one operation")
        if len(operations) > MAX_BATCH_SIZE:
            raise BindingError(
                f"Batch cannot exceed {MAX_BATCH_SIZE} operations",
                details={"operations": len(operations)},
            )

        try:
            ops = [
                op if isinstance(op, BatchOperation) else BatchOperation.model_validate(op)
                for op in operations
            ]
        except ValidationError as exc:
            raise BindingError.from_validation(exc, message="Invalid batch operation") from exc

        response = await self._gateway.request(
            "POST",
            "/",
            form={"batch": json.dumps([op.to_wire() for op in ops])},
        )
        raw = decode_json(response)
        if not isinstance(raw, list):
            raise TransportError(
                "Unexpected batch response shape",
                details={"body": response.text[:500]},
            )

        results = [
            parse_item(raw[index] if index < len(raw) else None, op)
            for index, op in enumerate(ops)
        ]
        successful = sum(1 for item in results if item.success)
        failed = len(results) - successful
        logger.info("batch_executed", total=len(results), successful=successful, failed=failed)
        return BatchResult(
            total_operations=len(results),
            successful_operations=successful,
            failed_operations=failed,
            results=results,
            summary={
                "total_operations": len(results),
                "successful_operations": successful,
                "failed_operations": failed,
                "success_rate": successful / len(results),
            },
        )


class BatchBuilder:
    """Accumulates named operations and runs them as one batch.

    Names are echoed on each result so callers can correlate without
    relying on position.
    """

    def __init__(self, executor: BatchExecutor | None = None) -> None:
        self._executor = executor
        self._operations: list[BatchOperation] = []

    def __len__(self) -> int:
        return len(self._operations)

    def get(self, relative_url: str, *, name: str | None = None) -> "BatchBuilder":
        return self._add("GET", relative_url, name=name)

    def post(
        self,
        relative_url: str,
        body: Mapping[str, Any] | None = None,
        *,
        name: str | None = None,
    ) -> "BatchBuilder":
        return self._add("POST", relative_url, body=body, name=name)

    def delete(self, relative_url: str, *, name: str | None = None) -> "BatchBuilder":
        return self._add("DELETE", relative_url, name=name)

    def build(self) -> list[BatchOperation]:
        return list(self._operations)

    async def execute(self) -> BatchResult:
        if self._executor is None:
            raise RuntimeError("BatchBuilder has no executor")
        return await self._executor.execute(self.build())

    def _add(
        self,
        method: Literal["GET", "POST", "PUT", "DELETE"],
        relative_url: str,
        *,
        body: Mapping[str, Any] | None = None,
        name: str | None = None,
    ) -> "BatchBuilder":
        if len(self._operations) >= MAX_BATCH_SIZE:
            raise BindingError(f"Batch cannot exceed {MAX_BATCH_SIZE} operations")
        self._operations.append(
            BatchOperation(method=method, relative_url=relative_url, body=body, name=name)
        )
        return self


__all__ = [
    "BatchBuilder",
    "BatchExecutor",
    "BatchItemResult",
    "BatchOperation",
    "BatchResult",
    "MAX_BATCH_SIZE",
    "encode_body",
    "parse_item",
]
