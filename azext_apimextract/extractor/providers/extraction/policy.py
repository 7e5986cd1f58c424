# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

import os
from typing import TYPE_CHECKING, List, Optional, Set

from knack.log import get_logger

from ...common import (
    APIM_API_VERSION,
    POLICY_DIR_NAME,
    PRODUCT_POLICY_FILE_SUFFIX,
    PolicyFormat,
    ResourceTypes,
)
from ...util import to_safe_filename
from ..templates import PolicyTemplateResource, ProductTemplateResource
from ..templates.resources import get_nested_name_expr, get_policy_link_expr

if TYPE_CHECKING:
    from ..clients import ApiManagementClient
    from .parameters import ExtractorParameters

logger = get_logger(__name__)


def get_product_policy_file_name(product_name: str, index: int = 1) -> str:
    safe_name = to_safe_filename(product_name)
    if index > 1:
        safe_name = f"{safe_name}_{index}"
    return f"{safe_name}{PRODUCT_POLICY_FILE_SUFFIX}"


class PolicyExtractor:
    """
    Produces policy template resources. Policies are inlined as raw xml unless a policy XML base URL
    is configured, in which case the resource links to a file under the policies directory. Linked
    files are written together with the template, see ExtractionState.write.
    """

    def __init__(self, client: "ApiManagementClient"):
        self.client = client
        self.used_file_names: Set[str] = set()

    def generate_product_policy_resource(
        self,
        extractor_parameters: "ExtractorParameters",
        product: ProductTemplateResource,
        depends_on: List[str],
        files_dir: Optional[str] = None,
    ) -> Optional[PolicyTemplateResource]:
        policy = self.client.policies.get_product_policy(product.original_name)
        if not policy:
            return

        policy_xml: str = policy.get("properties", {}).get("value")
        if policy_xml is None:
            logger.warning("Policy of product %s has no content.", product.original_name)
            return

        logger.debug("Policy found for %s product", product.original_name)
        policy_resource = PolicyTemplateResource(
            name=get_nested_name_expr(product.new_name, "policy"),
            type=ResourceTypes.PRODUCT_POLICY.value,
            api_version=APIM_API_VERSION,
            policy_format=PolicyFormat.RAW_XML.value,
            value=policy_xml,
            depends_on=list(depends_on),
            label=f"{product.new_name}/policy",
        )

        if extractor_parameters.policy_xml_base_url:
            file_name = self.reserve_file_name(product.new_name)
            policy_resource.properties = {
                "format": PolicyFormat.RAW_XML_LINK.value,
                "value": get_policy_link_expr(
                    file_name=f"{file_name}.xml",
                    with_sas_token=bool(extractor_parameters.policy_xml_sas_token),
                ),
            }
            policy_resource.policy_xml = policy_xml
            policy_resource.file_name = file_name
            policy_resource.policy_dir = os.path.join(files_dir or ".", POLICY_DIR_NAME)

        return policy_resource

    def reserve_file_name(self, product_name: str) -> str:
        """
        Returns a policy file name no other product of this run uses. Names are compared
        case-insensitively since product ids may collapse to the same file name.
        """
        index = 1
        file_name = get_product_policy_file_name(product_name)
        while file_name.lower() in self.used_file_names:
            index += 1
            file_name = get_product_policy_file_name(product_name, index)

        if index > 1:
            logger.warning("Policy file of product %s is named %s to avoid a name clash.", product_name, file_name)
        self.used_file_names.add(file_name.lower())
        return file_name
