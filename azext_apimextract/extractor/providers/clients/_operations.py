# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import TYPE_CHECKING, Iterable, Optional

from azure.core.exceptions import ResourceNotFoundError
from azure.core.paging import ItemPaged
from azure.core.rest import HttpRequest
from knack.log import get_logger

from ...common import PolicyFormat

if TYPE_CHECKING:
    from ._client import ApiManagementClient

logger = get_logger(__name__)


class _Operations:
    def __init__(self, client: "ApiManagementClient"):
        self._client = client

    def _get(self, *segments: str, **params) -> dict:
        request = HttpRequest(
            method="GET",
            url=self._client.format_url(*segments),
            params={"api-version": self._client.api_version, **params},
            headers={"Accept": "application/json"},
        )
        return self._client.send_request(request).json()

    def _list(self, *segments: str, **params) -> Iterable[dict]:
        def prepare_request(next_link: Optional[str] = None) -> HttpRequest:
            if next_link:
                # nextLink carries the original query, including api-version.
                return HttpRequest(method="GET", url=next_link, headers={"Accept": "application/json"})
            return HttpRequest(
                method="GET",
                url=self._client.format_url(*segments),
                params={"api-version": self._client.api_version, **params},
                headers={"Accept": "application/json"},
            )

        def get_next(next_link: Optional[str] = None):
            return self._client.send_request(prepare_request(next_link))

        def extract_data(response):
            payload: dict = response.json()
            return payload.get("nextLink") or None, iter(payload.get("value", []))

        return ItemPaged(get_next, extract_data)


class ServiceOperations(_Operations):
    def get(self) -> dict:
        return self._get()


class ProductsOperations(_Operations):
    def list(self) -> Iterable[dict]:
        return self._list("products")

    def list_by_api(self, api_name: str) -> Iterable[dict]:
        return self._list("apis", api_name, "products")


class TagsOperations(_Operations):
    def list_by_product(self, product_name: str) -> Iterable[dict]:
        return self._list("products", product_name, "tags")


class GroupsOperations(_Operations):
    def list_by_product(self, product_name: str) -> Iterable[dict]:
        return self._list("products", product_name, "groups")


class PoliciesOperations(_Operations):
    def get_product_policy(self, product_name: str) -> Optional[dict]:
        """
        Fetches the policy of a product in raw xml format. Returns None when the product has no policy.
        """
        try:
            return self._get("products", product_name, "policies", "policy", format=PolicyFormat.RAW_XML.value)
        except ResourceNotFoundError:
            logger.debug("No policy is associated with product '%s'.", product_name)
