# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

"""
common: Define shared data types(enums) and constant strings.

"""

from enum import Enum
from typing import Optional

APIM_API_VERSION = "2021-08-01"
APIM_PROVIDER = "Microsoft.ApiManagement"

TEMPLATE_SCHEMA = "https://schema.management.azure.com/schemas/2019-04-01/deploymentTemplate.json#"
PARAMETERS_SCHEMA = "https://schema.management.azure.com/schemas/2019-04-01/deploymentParameters.json#"
TEMPLATE_CONTENT_VERSION = "1.0.0.0"


class ListableEnum(Enum):
    @classmethod
    def list(cls):
        return [c.value for c in cls]


class ParameterNames(ListableEnum):
    """
    Template parameter names.
    """

    APIM_SERVICE_NAME = "apimServiceName"
    POLICY_XML_BASE_URL = "policyXMLBaseUrl"
    POLICY_XML_SAS_TOKEN = "policyXMLSasToken"


class ResourceTypes(ListableEnum):
    """
    ARM resource types emitted by the product extraction.
    """

    PRODUCT = f"{APIM_PROVIDER}/service/products"
    PRODUCT_POLICY = f"{APIM_PROVIDER}/service/products/policies"
    PRODUCT_TAG = f"{APIM_PROVIDER}/service/products/tags"
    PRODUCT_GROUP = f"{APIM_PROVIDER}/service/products/groups"


class SkuType(ListableEnum):
    """
    API Management service tiers.
    """

    DEVELOPER = "Developer"
    STANDARD = "Standard"
    PREMIUM = "Premium"
    BASIC = "Basic"
    CONSUMPTION = "Consumption"
    ISOLATED = "Isolated"

    @classmethod
    def is_consumption(cls, sku: Optional[str]) -> bool:
        return isinstance(sku, str) and sku.lower() == cls.CONSUMPTION.value.lower()


class PolicyFormat(ListableEnum):
    RAW_XML = "rawxml"
    RAW_XML_LINK = "rawxml-link"


class ExtractSummaryMode(ListableEnum):
    """
    Extraction summary modes.
    """

    SIMPLE = "simple"
    DETAILED = "detailed"


class ProductResourceKind(ListableEnum):
    """
    Collections making up a products template.
    """

    PRODUCTS = "products"
    POLICIES = "policies"
    TAGS = "tags"
    GROUPS = "groups"


# Extractor configuration file keys
class ConfigKeys(ListableEnum):
    SOURCE_APIM_NAME = "sourceApimName"
    DESTINATION_APIM_NAME = "destinationApimName"
    RESOURCE_GROUP = "resourceGroup"
    FILE_FOLDER = "fileFolder"
    API_NAME = "apiName"
    POLICY_XML_BASE_URL = "policyXMLBaseUrl"
    POLICY_XML_SAS_TOKEN = "policyXMLSasToken"
    FILE_NAME_PREFIX = "fileNamePrefix"


PRODUCTS_TEMPLATE_FILE_SUFFIX = "-products.template"
PARAMETERS_FILE_SUFFIX = "-parameters"
POLICY_DIR_NAME = "policies"
PRODUCT_POLICY_FILE_SUFFIX = "-productPolicy"
