from __future__ import annotations

import json

import httpx
import pytest

from fb_ads_mcp.config import FbAdsMcpSettings
from fb_ads_mcp.errors import (
    ErrorKind,
    GraphApiError,
    GuardrailViolation,
    McpErrorCode,
    TransportError,
    error_response,
)
from fb_ads_mcp.graph.gateway import GraphGateway, classify_error


async def test_url_uses_configured_hosts_and_version(gateway: GraphGateway) -> None:
    assert gateway.url("me") == "https://example.com/v23.0/me"
    assert gateway.url("/act_1/advideos", video=True) == "https://video.example.com/v23.0/act_1/advideos"

    gateway.set_version("v22.0")
    gateway.set_host("https://other.example.com/")
    assert gateway.url("/1") == "https://other.example.com/v22.0/1"


@pytest.mark.asyncio
async def test_vendor_error_envelope_is_parsed(gateway: GraphGateway, respx_mock) -> None:
    respx_mock.get("https://example.com/v23.0/123").mock(
        return_value=httpx.Response(
            400,
            json={
                "error": {
                    "message": "Invalid parameter",
                    "type": "OAuthException",
                    "code": 100,
                    "error_subcode": 33,
                    "fbtrace_id": "trace-1",
                }
            },
        )
    )

    with pytest.raises(GraphApiError) as exc:
        await gateway.call("GET", "/123")

    error = exc.value
    assert str(error) == "Invalid parameter (code: 100, type: OAuthException, http_status: 400)"
    assert error.code == 100
    assert error.error_subcode == 33
    assert error.fbtrace_id == "trace-1"
    assert error.http_status == 400
    assert error.error.kind == ErrorKind.VENDOR
    assert error.error.code == McpErrorCode.VALIDATION

    envelope = error_response(error.error, meta={"tool": "campaign_get"})
    assert envelope["ok"] is False
    assert envelope["error"]["details"]["fbtrace_id"] == "trace-1"


@pytest.mark.asyncio
async def test_error_data_string_is_decoded(gateway: GraphGateway, respx_mock) -> None:
    respx_mock.post("https://example.com/v23.0/act_1/advideos").mock(
        return_value=httpx.Response(
            400,
            json={
                "error": {
                    "message": "Offsets mismatch",
                    "code": 6001,
                    "error_subcode": 1363037,
                    "is_transient": True,
                    "error_data": json.dumps({"start_offset": "10", "end_offset": "20"}),
                }
            },
        )
    )

    with pytest.raises(GraphApiError) as exc:
        await gateway.call_json("POST", "/act_1/advideos", form={"upload_phase": "transfer"})

    assert exc.value.error_data == {"start_offset": "10", "end_offset": "20"}
    assert exc.value.is_transient is True


@pytest.mark.asyncio
async def test_non_json_error_body(gateway: GraphGateway, respx_mock) -> None:
    respx_mock.get("https://example.com/v23.0/1").mock(return_value=httpx.Response(502, text="Bad gateway"))

    with pytest.raises(GraphApiError) as exc:
        await gateway.call("GET", "/1")

    assert exc.value.message == "Bad gateway"
    assert exc.value.error.code == McpErrorCode.REMOTE_5XX


@pytest.mark.asyncio
async def test_connection_failure_is_a_transport_error(gateway: GraphGateway, respx_mock) -> None:
    respx_mock.get("https://example.com/v23.0/1").mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(TransportError) as exc:
        await gateway.call("GET", "/1")

    assert exc.value.error.kind == ErrorKind.TRANSPORT
    assert "http_status" not in (exc.value.error.details or {})


@pytest.mark.asyncio
async def test_undecodable_response_is_a_transport_error(gateway: GraphGateway, respx_mock) -> None:
    respx_mock.get("https://example.com/v23.0/1").mock(return_value=httpx.Response(200, text="<html>"))

    assert await gateway.call("GET", "/1") == "<html>"
    with pytest.raises(TransportError):
        await gateway.call_json("GET", "/1")


@pytest.mark.asyncio
async def test_missing_token_fails_before_request(gateway: GraphGateway, respx_mock) -> None:
    gateway.set_access_token(None)

    with pytest.raises(TransportError) as exc:
        await gateway.call("GET", "/1")

    assert "FACEBOOK_ACCESS_TOKEN" in str(exc.value)
    assert not respx_mock.calls


@pytest.mark.asyncio
async def test_form_requests_carry_token_in_form(gateway: GraphGateway, respx_mock) -> None:
    route = respx_mock.post("https://example.com/v23.0/").mock(return_value=httpx.Response(200, json=[]))

    await gateway.request("POST", "/", form={"batch": "[]", "skip": None})

    request = route.calls.last.request
    assert "access_token" not in request.url.params
    assert b"access_token=test-token" in request.content
    assert b"skip" not in request.content


@pytest.mark.asyncio
async def test_json_and_form_bodies_are_exclusive(gateway: GraphGateway) -> None:
    with pytest.raises(ValueError):
        await gateway.request("POST", "/1", body={"a": 1}, form={"b": 2})


@pytest.mark.asyncio
@pytest.mark.parametrize("host", ["https://graph.facebook.com", "https://graph-video.facebook.com"])
async def test_guardrail_blocks_production_host(gateway: GraphGateway, respx_mock, host: str) -> None:
    gateway.set_host(host)

    with pytest.raises(GuardrailViolation):
        await gateway.call("GET", "/me")

    assert not respx_mock.calls


@pytest.mark.asyncio
async def test_guardrail_is_inactive_outside_tests(monkeypatch, respx_mock) -> None:
    monkeypatch.setenv("TESTING", "false")
    respx_mock.get("https://graph.facebook.com/v23.0/me").mock(return_value=httpx.Response(200, json={}))

    async with GraphGateway() as gw:
        gw.set_host("https://graph.facebook.com")
        assert await gw.call("GET", "/me") == "{}"


def test_guardrail_is_not_an_exception() -> None:
    assert not issubclass(GuardrailViolation, Exception)


@pytest.mark.parametrize(
    ("status", "code", "expected"),
    [
        (401, None, McpErrorCode.AUTH),
        (400, 190, McpErrorCode.AUTH),
        (403, None, McpErrorCode.PERMISSION),
        (400, 200, McpErrorCode.PERMISSION),
        (429, None, McpErrorCode.RATE_LIMIT),
        (400, 17, McpErrorCode.RATE_LIMIT),
        (400, 80004, McpErrorCode.RATE_LIMIT),
        (404, None, McpErrorCode.NOT_FOUND),
        (409, None, McpErrorCode.CONFLICT),
        (503, None, McpErrorCode.REMOTE_5XX),
        (400, 100, McpErrorCode.VALIDATION),
    ],
)
def test_classify_error(status: int, code: int | None, expected: McpErrorCode) -> None:
    assert classify_error(status, code) == expected


@pytest.mark.asyncio
async def test_closed_client_is_reopened(gateway: GraphGateway, respx_mock) -> None:
    respx_mock.get("https://example.com/v23.0/1").mock(return_value=httpx.Response(200, json={"id": "1"}))

    await gateway.aclose()

    assert await gateway.call_json("GET", "/1") == {"id": "1"}
    assert gateway.client.is_closed is False


@pytest.mark.asyncio
async def test_guardrail_follows_environment_not_cached_settings(
    gateway: GraphGateway, monkeypatch, respx_mock
) -> None:
    gateway.set_host("https://graph.facebook.com")
    respx_mock.get("https://graph.facebook.com/v23.0/me").mock(return_value=httpx.Response(200, json={}))

    monkeypatch.setenv("TESTING", "false")
    assert await gateway.call("GET", "/me") == "{}"

    monkeypatch.setenv("TESTING", "true")
    with pytest.raises(GuardrailViolation):
        await gateway.call("GET", "/me")
    assert respx_mock.calls.call_count == 1
    assert "testing" not in FbAdsMcpSettings.model_fields
