from __future__ import annotations

import json
from datetime import datetime, timezone

import httpx
import pytest

from fb_ads_mcp.endpoints import ReadArgs, WriteArgs, bind, body_params, query_params
from fb_ads_mcp.errors import BindingError
from fb_ads_mcp.generated import ad, ad_account, campaign, user


class ExampleReadArgs(ReadArgs):
    id: str
    active: bool | None = None
    count: int | None = None
    since: datetime | None = None
    tags: list[str] | None = None
    time_range: dict | None = None
    note: str | None = None


class ExampleWriteArgs(WriteArgs):
    id: str
    name: str | None = None
    enabled: bool | None = None
    budget: int | None = None
    targeting: dict | None = None
    labels: list[str] | None = None


def test_query_params_serialization() -> None:
    args = ExampleReadArgs(
        id="1",
        fields=["id", "name"],
        limit=10,
        active=False,
        count=0,
        since=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        tags=[],
        time_range={"since": "2024-01-01", "until": "2024-01-31"},
        note="",
    )

    assert query_params(args) == {
        "fields": "id,name",
        "limit": "10",
        "active": "false",
        "count": "0",
        "since": "2024-01-02T03:04:05Z",
        "time_range": '{"since":"2024-01-01","until":"2024-01-31"}',
    }


def test_read_args_forward_unknown_keys() -> None:
    args = bind(ExampleReadArgs, {"id": "1", "breakdowns": ["age", "gender"]})
    assert query_params(args) == {"breakdowns": "age,gender"}


def test_body_params_keep_structured_values() -> None:
    args = ExampleWriteArgs(
        id="1",
        name="Acme",
        enabled=False,
        budget=0,
        targeting={"geo_locations": {"countries": ["US"]}},
        labels=[],
    )

    assert body_params(args) == {
        "name": "Acme",
        "enabled": False,
        "budget": 0,
        "targeting": {"geo_locations": {"countries": ["US"]}},
    }


def test_write_args_reject_unknown_keys() -> None:
    with pytest.raises(BindingError) as exc:
        bind(ExampleWriteArgs, {"id": "1", "vertical": "RETAIL"})
    assert exc.value.error.code.value == "VALIDATION"
    assert exc.value.error.details["errors"][0]["loc"] == "vertical"


@pytest.mark.asyncio
async def test_get_endpoint_returns_raw_body(gateway, respx_mock) -> None:
    raw = '{"data": [{"id": "1", "name": "Ad", "status": "ACTIVE"}], "paging": {}}'
    route = respx_mock.get("https://example.com/v23.0/act_123456789/ads").mock(
        return_value=httpx.Response(200, text=raw)
    )

    result = await ad_account.ad_account_list_ads(
        gateway,
        {"id": "act_123456789", "fields": ["id", "name", "status"], "limit": 25},
    )

    assert result == raw
    request = route.calls.last.request
    assert request.method == "GET"
    assert request.url.params["fields"] == "id,name,status"
    assert request.url.params["limit"] == "25"
    assert request.url.params["access_token"] == "test-token"


@pytest.mark.asyncio
async def test_post_endpoint_sends_filtered_json_body(gateway, respx_mock) -> None:
    route = respx_mock.post("https://example.com/v23.0/1001/businesses").mock(
        return_value=httpx.Response(200, json={"id": "555"})
    )

    result = await user.user_create_businesse(
        gateway,
        {"id": "1001", "name": "Acme", "vertical": "RETAIL", "primary_page": ""},
    )

    assert json.loads(result) == {"id": "555"}
    request = route.calls.last.request
    assert request.method == "POST"
    assert json.loads(request.content) == {"name": "Acme", "vertical": "RETAIL"}
    assert request.url.params["access_token"] == "test-token"


@pytest.mark.asyncio
async def test_delete_endpoint(gateway, respx_mock) -> None:
    route = respx_mock.delete("https://example.com/v23.0/42").mock(
        return_value=httpx.Response(200, json={"success": True})
    )

    assert json.loads(await campaign.campaign_delete(gateway, {"id": "42"})) == {"success": True}
    assert route.called


@pytest.mark.asyncio
async def test_binding_error_makes_no_request(gateway, respx_mock) -> None:
    with pytest.raises(BindingError):
        await campaign.campaign_get(gateway, {"id": "act_42"})
    with pytest.raises(BindingError):
        await user.user_create_businesse(gateway, {"id": "1001", "name": "Acme", "vertical": "RETAIL", "industry": "x"})
    with pytest.raises(BindingError):
        await user.user_create_businesse(gateway, {"id": "1001", "name": "Acme"})
    assert not respx_mock.calls


@pytest.mark.parametrize(
    "arguments",
    [
        {"id": "123", "limit": "25"},
        {"id": "123", "fields": "id,name"},
        {"id": 123},
    ],
)
def test_binding_never_coerces_types(arguments: dict) -> None:
    with pytest.raises(BindingError):
        bind(ad.AdGetArgs, arguments)


def test_binding_accepts_enum_and_datetime_strings() -> None:
    args = bind(ExampleReadArgs, {"id": "1", "since": "2024-01-02T03:04:05Z", "active": True, "count": 3})

    assert args.since == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert args.active is True
    assert bind(campaign.CampaignUpdateArgs, {"id": "1", "status": "PAUSED"}).status.value == "PAUSED"
