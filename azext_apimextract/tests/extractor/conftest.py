# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import List, Optional
from urllib.parse import urlencode

import pytest

from azext_apimextract.extractor.common import APIM_API_VERSION

from ..generators import BASE_URL, generate_random_string, get_zeroed_subscription

ZEROED_SUBSCRIPTION = get_zeroed_subscription()
RESOURCE_PROVIDER = "Microsoft.ApiManagement"


def get_service_endpoint(
    resource_group_name: str,
    service_name: str,
    resource_path: str = "",
    api_version: Optional[str] = APIM_API_VERSION,
    **query,
) -> str:
    expected_endpoint = (
        f"{BASE_URL}/subscriptions/{ZEROED_SUBSCRIPTION}/resourceGroups/{resource_group_name}"
        f"/providers/{RESOURCE_PROVIDER}/service/{service_name}{resource_path}"
    )
    if api_version:
        expected_endpoint += "?" + urlencode({"api-version": api_version, **query})
    return expected_endpoint


def get_mock_service_record(service_name: str, resource_group_name: str, sku: str = "Developer") -> dict:
    return {
        "id": get_service_endpoint(resource_group_name, service_name, api_version=None).replace(BASE_URL, ""),
        "type": f"{RESOURCE_PROVIDER}/service",
        "name": service_name,
        "location": "West US",
        "sku": {"name": sku, "capacity": 0 if sku == "Consumption" else 1},
        "properties": {
            "publisherEmail": "apim@contoso.com",
            "publisherName": "Contoso",
            "provisioningState": "Succeeded",
        },
    }


def get_mock_product_record(product_name: str, display_name: Optional[str] = None) -> dict:
    return {
        "id": f"/subscriptions/{ZEROED_SUBSCRIPTION}/products/{product_name}",
        "type": f"{RESOURCE_PROVIDER}/service/products",
        "name": product_name,
        "properties": {
            "displayName": display_name or product_name,
            "description": f"Subscribers of {product_name} can use the apis.",
            "terms": None,
            "subscriptionRequired": True,
            "approvalRequired": False,
            "subscriptionsLimit": 1,
            "state": "published",
        },
    }


def get_mock_tag_record(tag_name: str, display_name: Optional[str] = None) -> dict:
    return {
        "id": f"/subscriptions/{ZEROED_SUBSCRIPTION}/tags/{tag_name}",
        "type": f"{RESOURCE_PROVIDER}/service/tags",
        "name": tag_name,
        "properties": {"displayName": display_name or tag_name},
    }


def get_mock_group_record(group_name: str, built_in: bool = False) -> dict:
    return {
        "id": f"/subscriptions/{ZEROED_SUBSCRIPTION}/groups/{group_name}",
        "type": f"{RESOURCE_PROVIDER}/service/groups",
        "name": group_name,
        "properties": {
            "displayName": group_name.capitalize(),
            "description": f"{group_name} group",
            "builtIn": built_in,
            "type": "system" if built_in else "custom",
            "externalId": None,
        },
    }


def get_mock_policy_record(value: Optional[str] = None) -> dict:
    if value is None:
        value = '<policies><inbound><rate-limit calls="5" renewal-period="60" /><base /></inbound></policies>'
    return {
        "id": f"/subscriptions/{ZEROED_SUBSCRIPTION}/policies/policy",
        "type": f"{RESOURCE_PROVIDER}/service/products/policies",
        "name": "policy",
        "properties": {"format": "rawxml", "value": value},
    }


def get_paged_body(records: List[dict], next_link: Optional[str] = None) -> dict:
    body = {"value": records, "count": len(records)}
    if next_link:
        body["nextLink"] = next_link
    return body


@pytest.fixture
def mocked_apim_client(mocker):
    """
    Client whose operation groups return the records held in the mock attributes.
    """
    client = mocker.Mock()
    client.products.list.return_value = []
    client.products.list_by_api.return_value = []
    client.tags.list_by_product.return_value = []
    client.groups.list_by_product.return_value = []
    client.policies.get_product_policy.return_value = None
    yield client


@pytest.fixture
def policy_xml() -> str:
    return (
        f'<policies><inbound><base /><set-header name="x-id"><value>{generate_random_string()}</value>'
        "</set-header></inbound></policies>"
    )
