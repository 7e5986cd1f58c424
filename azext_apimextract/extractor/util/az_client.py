# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import TYPE_CHECKING, Optional

from azure.core.pipeline.policies import HttpLoggingPolicy
from azure.identity import AzureCliCredential
from knack.log import get_logger

AZURE_CLI_CREDENTIAL = AzureCliCredential()

DEFAULT_RESOURCE_MANAGER = "https://management.azure.com/"

logger = get_logger(__name__)


if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential

    from ..providers.clients import ApiManagementClient


def get_apim_mgmt_client(
    cmd,
    resource_group_name: str,
    service_name: str,
    subscription_id: Optional[str] = None,
    credential: Optional["TokenCredential"] = None,
    **kwargs,
) -> "ApiManagementClient":
    from ..providers.clients import ApiManagementClient

    if not subscription_id:
        subscription_id = get_subscription_id(cmd)

    if "http_logging_policy" not in kwargs:
        kwargs["http_logging_policy"] = get_default_logging_policy()

    resource_manager, token_audience = get_cloud_endpoints(cmd)
    return ApiManagementClient(
        credential=credential or AZURE_CLI_CREDENTIAL,
        subscription_id=subscription_id,
        resource_group_name=resource_group_name,
        service_name=service_name,
        base_url=resource_manager,
        credential_scopes=[f"{token_audience.rstrip('/')}/.default"],
        **kwargs,
    )


def get_subscription_id(cmd) -> str:
    from azure.cli.core.commands.client_factory import get_subscription_id

    return get_subscription_id(cli_ctx=cmd.cli_ctx)


def get_cloud_endpoints(cmd):
    """
    Returns the resource manager endpoint and the token audience of the active cloud.
    """
    endpoints = cmd.cli_ctx.cloud.endpoints
    resource_manager = getattr(endpoints, "resource_manager", None) or DEFAULT_RESOURCE_MANAGER
    token_audience = getattr(endpoints, "active_directory_resource_id", None) or resource_manager
    return resource_manager, token_audience


def get_default_logging_policy() -> HttpLoggingPolicy:
    http_logging_policy = HttpLoggingPolicy(logger=logger)
    http_logging_policy.allowed_query_params.add("api-version")
    http_logging_policy.allowed_query_params.add("format")
    http_logging_policy.allowed_query_params.add("$skip")
    http_logging_policy.allowed_header_names.add("x-ms-correlation-request-id")

    return http_logging_policy
