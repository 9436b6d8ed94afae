from __future__ import annotations

import pytest

from fb_ads_mcp.codegen.naming import (
    MAX_DESCRIPTION_LENGTH,
    UNKNOWN_ENUM,
    action_phrase,
    attribute_name,
    enum_constant_identifier,
    enum_type_identifier,
    field_identifier,
    is_id_bearing,
    object_scope,
    object_snake,
    param_description,
    tool_description,
    tool_name,
    unique_attributes,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("account_id", "AccountID"),
        ("image_url", "ImageURL"),
        ("adset_ids", "AdsetIDs"),
        ("1d_click", "X1dClick"),
        ("action.type", "ActionType"),
        ("identity_verification", "IDentityVerification"),
        ("ios_http_url", "IOSHTTPURL"),
        ("https_link", "HTTPSLink"),
        ("api_version", "APIVersion"),
        ("name", "Name"),
    ],
)
def test_field_identifier(name: str, expected: str) -> None:
    assert field_identifier(name) == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("AdsInsights_date_preset", "AdsInsightsDatePreset"),
        ("Campaign_status", "CampaignStatus"),
        ("7d_window", "Enum7dWindow"),
        ("", UNKNOWN_ENUM),
    ],
)
def test_enum_type_identifier(name: str, expected: str) -> None:
    assert enum_type_identifier(name) == expected


@pytest.mark.parametrize("name", ["account_id", "1d_click", "image_url", "daily_budget", "identity_verification"])
def test_field_identifier_is_idempotent(name: str) -> None:
    once = field_identifier(name)
    assert field_identifier(once) == once
    assert once and not once[0].isdigit()


@pytest.mark.parametrize("name", ["AdsInsights_date_preset", "7d_window", "Campaign_status"])
def test_enum_type_identifier_is_idempotent(name: str) -> None:
    once = enum_type_identifier(name)
    assert enum_type_identifier(once) == once
    assert once and not once[0].isdigit()


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("ACTIVE", "ACTIVE"),
        ("Mobile App (iOS)", "MOBILE_APP_IOS"),
        ("7d", "_7D"),
        ("a&b", "A_AND_B"),
        ("", "_"),
    ],
)
def test_enum_constant_identifier(value: str, expected: str) -> None:
    assert enum_constant_identifier(value) == expected


def test_attribute_name_keeps_legal_wire_names() -> None:
    assert attribute_name("account_id") == "account_id"
    assert attribute_name("class") == "class_"
    assert attribute_name("copy") == "copy_"
    assert attribute_name("1d_click") == "x_1d_click"
    assert attribute_name("action.type") == "action_type"


def test_unique_attributes_suffixes_collisions_in_order() -> None:
    assert unique_attributes(["a-b", "a_b", "a.b"]) == ["a_b", "a_b_2", "a_b_3"]
    assert unique_attributes(["fields", "id"], {"fields", "id"}) == ["fields_2", "id_2"]


def test_object_names() -> None:
    assert object_scope("AdAccount") == "adaccount"
    assert object_snake("AdAccount") == "ad_account"
    assert object_snake("CustomAudience") == "custom_audience"
    assert object_snake("User") == "user"


@pytest.mark.parametrize(
    ("object_name", "endpoint", "expected"),
    [
        ("AdAccount", "ads", True),
        ("Campaign", "", True),
        ("User", "search", False),
        ("AdAccount", "targeting_search", False),
        ("User", "me", False),
        ("AdAccount", "adaccounts", False),
        ("AdAccount", "adaccount", False),
    ],
)
def test_is_id_bearing(object_name: str, endpoint: str, expected: bool) -> None:
    assert is_id_bearing(object_name, endpoint) is expected


@pytest.mark.parametrize(
    ("object_name", "method", "endpoint", "expected"),
    [
        ("Campaign", "GET", "", "campaign_get"),
        ("Campaign", "POST", "", "campaign_update"),
        ("Campaign", "DELETE", "", "campaign_delete"),
        ("Campaign", "GET", "insights", "campaign_get_insights"),
        ("Campaign", "POST", "insights", "campaign_create_insights_report"),
        ("AdAccount", "GET", "ads", "ad_account_list_ads"),
        ("User", "POST", "businesses", "user_create_businesse"),
        ("CustomAudience", "DELETE", "users", "custom_audience_remove_users"),
        ("AdAccount", "GET", "reachestimate", "ad_account_get_reachestimate"),
        ("AdAccount", "POST", "reachestimate", "ad_account_update_reachestimate"),
    ],
)
def test_tool_name(object_name: str, method: str, endpoint: str, expected: str) -> None:
    assert tool_name(object_name, method, endpoint) == expected


def test_action_phrases() -> None:
    assert action_phrase("Campaign", "GET", "") == "Get details of a specific Campaign"
    assert action_phrase("Ad", "GET", "copies") == "List copies of this Ad"
    assert action_phrase("Ad", "POST", "copies") == "Create a copy of this Ad"
    assert action_phrase("Ad", "GET", "previews") == "List previews for this Ad"
    assert action_phrase("AdAccount", "POST", "adlabels") == "Associate adlabels with this AdAccount"
    assert action_phrase("AdAccount", "GET", "targetingbrowse") == "Get targeting information for this AdAccount"


def test_tool_description_lists_return_and_required() -> None:
    assert (
        tool_description("Campaign", "POST", "", "Campaign", ["name", "status (enum)"])
        == "Update a Campaign. Returns Campaign. Required: name, status (enum)"
    )
    assert tool_description("Campaign", "DELETE", "", "Object", []) == "Delete a Campaign."


def test_tool_description_is_truncated() -> None:
    required = [f"parameter_number_{index}" for index in range(30)]
    description = tool_description("AdAccount", "POST", "ads", "Ad", required)
    assert len(description) <= MAX_DESCRIPTION_LENGTH
    assert description.endswith("...")


def test_param_description() -> None:
    assert param_description("id", "Campaign") == "Campaign ID"
    assert param_description("account_id", "Campaign") == "ID of the Account"
    assert param_description("name", "Business") == "Name of the Business"
    assert (
        param_description("status", "Campaign", "Campaign_status")
        == "Current status of the Campaign (enum: Campaign_status)"
    )
    assert param_description("created_time", "Ad") == "When created"
    assert param_description("updated_since", "Ad") == "When last updated"
    assert param_description("image_url", "Ad") == "Image URL"
