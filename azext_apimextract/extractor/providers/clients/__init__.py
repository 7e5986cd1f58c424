# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from ._client import ApiManagementClient, ApiManagementClientConfiguration
from ._operations import (
    GroupsOperations,
    PoliciesOperations,
    ProductsOperations,
    ServiceOperations,
    TagsOperations,
)

__all__ = [
    "ApiManagementClient",
    "ApiManagementClientConfiguration",
    "GroupsOperations",
    "PoliciesOperations",
    "ProductsOperations",
    "ServiceOperations",
    "TagsOperations",
]
