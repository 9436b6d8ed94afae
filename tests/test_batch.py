from __future__ import annotations

import json
from urllib.parse import parse_qs

import httpx
import pytest

from fb_ads_mcp.errors import BindingError, TransportError
from fb_ads_mcp.graph.batch import (
    MAX_BATCH_SIZE,
    BatchBuilder,
    BatchExecutor,
    BatchOperation,
    encode_body,
)

BATCH_URL = "https://example.com/v23.0/"


def sent_batch(route) -> list[dict]:
    form = parse_qs(route.calls.last.request.content.decode())
    assert form["access_token"] == ["test-token"]
    return json.loads(form["batch"][0])


@pytest.mark.asyncio
async def test_mixed_success_and_failure(gateway, respx_mock) -> None:
    route = respx_mock.post(BATCH_URL).mock(
        return_value=httpx.Response(
            200,
            json=[
                {"code": 200, "body": json.dumps({"id": "act_123", "name": "A"})},
                {
                    "code": 400,
                    "headers": [{"name": "Content-Type", "value": "application/json"}],
                    "body": json.dumps({"error": {"message": "Invalid object ID"}}),
                },
            ],
        )
    )

    result = await BatchExecutor(gateway).execute(
        [
            {"method": "GET", "relative_url": "act_123?fields=id,name"},
            {"method": "GET", "relative_url": "invalid_id?fields=id,name", "name": "second"},
        ]
    )

    assert result.total_operations == 2
    assert result.successful_operations == 1
    assert result.failed_operations == 1
    first, second = result.results
    assert first.success is True and first.error is None
    assert first.parsed_body == {"id": "act_123", "name": "A"}
    assert second.success is False
    assert second.error == "Invalid object ID"
    assert second.name == "second"
    assert second.headers == {"Content-Type": "application/json"}
    assert result.summary["success_rate"] == 0.5

    assert sent_batch(route) == [
        {"method": "GET", "relative_url": "act_123?fields=id,name"},
        {"method": "GET", "relative_url": "invalid_id?fields=id,name", "name": "second"},
    ]


@pytest.mark.asyncio
async def test_missing_items_are_failures(gateway, respx_mock) -> None:
    respx_mock.post(BATCH_URL).mock(
        return_value=httpx.Response(200, json=[{"code": 200, "body": "{}"}, None])
    )

    result = await BatchExecutor(gateway).execute(
        [BatchOperation(method="GET", relative_url="1"), BatchOperation(method="GET", relative_url="2")]
    )

    assert [item.success for item in result.results] == [True, False]
    assert result.results[1].code == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("count", [0, MAX_BATCH_SIZE + 1])
async def test_size_limits_fail_before_any_request(gateway, respx_mock, count: int) -> None:
    operations = [{"method": "GET", "relative_url": str(index)} for index in range(count)]

    with pytest.raises(BindingError):
        await BatchExecutor(gateway).execute(operations)

    assert not respx_mock.calls


@pytest.mark.asyncio
async def test_invalid_operation_is_a_binding_error(gateway, respx_mock) -> None:
    with pytest.raises(BindingError) as exc:
        await BatchExecutor(gateway).execute([{"method": "PATCH", "relative_url": "1"}])

    assert exc.value.error.message == "Invalid batch operation"
    assert not respx_mock.calls


@pytest.mark.asyncio
async def test_unexpected_response_shape(gateway, respx_mock) -> None:
    respx_mock.post(BATCH_URL).mock(return_value=httpx.Response(200, json={"error": "nope"}))

    with pytest.raises(TransportError):
        await BatchExecutor(gateway).execute([{"method": "GET", "relative_url": "1"}])


def test_operation_wire_format() -> None:
    operation = BatchOperation(
        method="POST",
        relative_url="123",
        body={"name": "New", "targeting": {"geo_locations": {"countries": ["US"]}}, "skip": None},
        headers={"X-Test": "1"},
    )

    wire = operation.to_wire()

    assert wire["headers"] == [{"name": "X-Test", "value": "1"}]
    assert parse_qs(wire["body"]) == {
        "name": ["New"],
        "targeting": ['{"geo_locations":{"countries":["US"]}}'],
    }
    assert encode_body({"status": "PAUSED"}) == "status=PAUSED"


@pytest.mark.asyncio
async def test_builder_collects_named_operations(gateway, respx_mock) -> None:
    route = respx_mock.post(BATCH_URL).mock(
        return_value=httpx.Response(
            200,
            json=[{"code": 200, "body": "{}"}, {"code": 200, "body": "{}"}, {"code": 200, "body": "true"}],
        )
    )

    builder = (
        BatchBuilder(BatchExecutor(gateway))
        .get("act_1/campaigns?fields=id", name="campaigns")
        .post("123", {"status": "PAUSED"}, name="pause")
        .delete("456")
    )
    assert len(builder) == 3

    result = await builder.execute()

    assert [item.name for item in result.results] == ["campaigns", "pause", None]
    assert sent_batch(route)[1] == {
        "method": "POST",
        "relative_url": "123",
        "body": "status=PAUSED",
        "name": "pause",
    }


def test_builder_enforces_limit() -> None:
    builder = BatchBuilder()
    for index in range(MAX_BATCH_SIZE):
        builder.get(str(index))

    with pytest.raises(BindingError):
        builder.get("overflow")


@pytest.mark.asyncio
async def test_builder_without_executor() -> None:
    with pytest.raises(RuntimeError):
        await BatchBuilder().get("1").execute()
