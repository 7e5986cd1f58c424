# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import TYPE_CHECKING, Any, List, Optional
from urllib.parse import quote

from azure.core import PipelineClient
from azure.core.exceptions import (
    ClientAuthenticationError,
    HttpResponseError,
    ResourceExistsError,
    ResourceNotFoundError,
    map_error,
)
from azure.core.pipeline import policies
from azure.core.rest import HttpRequest, HttpResponse

from ....constants import USER_AGENT
from ...common import APIM_API_VERSION, APIM_PROVIDER
from ._operations import (
    GroupsOperations,
    PoliciesOperations,
    ProductsOperations,
    ServiceOperations,
    TagsOperations,
)

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential


DEFAULT_CREDENTIAL_SCOPES = ["https://management.azure.com/.default"]

ERROR_MAP = {
    401: ClientAuthenticationError,
    404: ResourceNotFoundError,
    409: ResourceExistsError,
}


class ApiManagementClientConfiguration:
    """
    Pipeline configuration of the API Management client.
    """

    def __init__(
        self,
        credential: "TokenCredential",
        subscription_id: str,
        api_version: str = APIM_API_VERSION,
        credential_scopes: Optional[List[str]] = None,
        **kwargs: Any,
    ):
        if credential is None:
            raise ValueError("Parameter 'credential' must not be None.")
        if subscription_id is None:
            raise ValueError("Parameter 'subscription_id' must not be None.")

        self.credential = credential
        self.subscription_id = subscription_id
        self.api_version = api_version
        self.credential_scopes = credential_scopes or DEFAULT_CREDENTIAL_SCOPES

        self.user_agent_policy = kwargs.get("user_agent_policy") or policies.UserAgentPolicy(user_agent=USER_AGENT)
        self.headers_policy = kwargs.get("headers_policy") or policies.HeadersPolicy(**kwargs)
        self.proxy_policy = kwargs.get("proxy_policy") or policies.ProxyPolicy(**kwargs)
        self.logging_policy = kwargs.get("logging_policy") or policies.NetworkTraceLoggingPolicy(**kwargs)
        self.http_logging_policy = kwargs.get("http_logging_policy") or policies.HttpLoggingPolicy(**kwargs)
        self.retry_policy = kwargs.get("retry_policy") or policies.RetryPolicy(**kwargs)
        self.redirect_policy = kwargs.get("redirect_policy") or policies.RedirectPolicy(**kwargs)
        self.authentication_policy = kwargs.get("authentication_policy") or policies.BearerTokenCredentialPolicy(
            self.credential, *self.credential_scopes, **kwargs
        )

    def get_policies(self) -> list:
        return [
            policies.RequestIdPolicy(),
            self.headers_policy,
            self.user_agent_policy,
            self.proxy_policy,
            policies.ContentDecodePolicy(),
            self.redirect_policy,
            self.retry_policy,
            self.authentication_policy,
            self.logging_policy,
            self.http_logging_policy,
        ]


class ApiManagementClient:
    """
    Typed access to the API Management resources of a single service.

    :param credential: Credential used to acquire ARM tokens.
    :param subscription_id: Subscription of the service.
    :param resource_group_name: Resource group of the service.
    :param service_name: Name of the API Management service.
    :param base_url: Resource manager endpoint of the active cloud.
    """

    def __init__(
        self,
        credential: "TokenCredential",
        subscription_id: str,
        resource_group_name: str,
        service_name: str,
        base_url: str = "https://management.azure.com/",
        **kwargs: Any,
    ):
        self._config = ApiManagementClientConfiguration(
            credential=credential, subscription_id=subscription_id, **kwargs
        )
        self._base_url = base_url.rstrip("/")
        self._client = PipelineClient(base_url=self._base_url, policies=self._config.get_policies())

        self.resource_group_name = resource_group_name
        self.service_name = service_name

        self.service = ServiceOperations(self)
        self.products = ProductsOperations(self)
        self.groups = GroupsOperations(self)
        self.tags = TagsOperations(self)
        self.policies = PoliciesOperations(self)

    @property
    def api_version(self) -> str:
        return self._config.api_version

    @property
    def service_path(self) -> str:
        return (
            f"/subscriptions/{quote(self._config.subscription_id, safe='')}"
            f"/resourceGroups/{quote(self.resource_group_name, safe='')}"
            f"/providers/{APIM_PROVIDER}/service/{quote(self.service_name, safe='')}"
        )

    def format_url(self, *segments: str) -> str:
        url = f"{self._base_url}{self.service_path}"
        for segment in segments:
            url += f"/{quote(segment, safe='')}"
        return url

    def send_request(self, request: HttpRequest, **kwargs: Any) -> HttpResponse:
        response = self._client.send_request(request, stream=False, **kwargs)
        if response.status_code not in [200]:
            map_error(status_code=response.status_code, response=response, error_map=ERROR_MAP)
            raise HttpResponseError(response=response)
        return response

    def close(self):
        self._client.close()

    def __enter__(self) -> "ApiManagementClient":
        self._client.__enter__()
        return self

    def __exit__(self, *exc_details):
        self._client.__exit__(*exc_details)
