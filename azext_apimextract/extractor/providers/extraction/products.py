# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import TYPE_CHECKING, List, Optional

from knack.log import get_logger

from ...common import APIM_API_VERSION, ResourceTypes, SkuType
from ..templates import (
    GroupTemplateResource,
    ProductApiTemplateResource,
    ProductTemplateResource,
    ProductTemplateResources,
    TagTemplateResource,
    Template,
    TemplateBuilder,
)
from ..templates.resources import get_nested_name_expr, get_product_resource_id_expr
from .policy import PolicyExtractor

if TYPE_CHECKING:
    from ..clients import ApiManagementClient
    from .parameters import ExtractorParameters

logger = get_logger(__name__)


class ProductExtractor:
    """
    Builds the products template: products with their policy, tag and group associations.
    """

    def __init__(
        self,
        client: "ApiManagementClient",
        policy_extractor: PolicyExtractor,
        template_builder_cls=TemplateBuilder,
    ):
        self.client = client
        self.policy_extractor = policy_extractor
        self.template_builder_cls = template_builder_cls

    def generate_products_template(
        self,
        single_api_name: Optional[str],
        files_dir: Optional[str],
        extractor_parameters: "ExtractorParameters",
    ) -> Template:
        products_template = (
            self.template_builder_cls()
            .with_service_name_parameter()
            .with_policy_parameters(extractor_parameters)
            .build()
        )

        all_products = [ProductTemplateResource.from_record(r) for r in self.client.products.list()]

        api_products: List[ProductApiTemplateResource] = []
        if single_api_name:
            api_products = [
                ProductApiTemplateResource.from_record(r) for r in self.client.products.list_by_api(single_api_name)
            ]
        api_product_names = {p.name for p in api_products}

        for product in all_products:
            product.name = get_nested_name_expr(product.new_name)
            product.api_version = APIM_API_VERSION

            # Full extraction takes every product, single api extraction only the products linked to the api.
            if not single_api_name or product.new_name in api_product_names:
                logger.debug("'%s' product found", product.original_name)
                products_template.typed_resources.products.append(product)

                self._add_product_policy(extractor_parameters, product, products_template.typed_resources, files_dir)
                self._add_product_tags(product, products_template.typed_resources)
                self._add_product_groups(extractor_parameters, product, products_template.typed_resources)

        return products_template

    def _add_product_tags(
        self,
        product: ProductTemplateResource,
        product_template_resources: ProductTemplateResources,
    ):
        try:
            product_tags = [
                TagTemplateResource.from_record(r) for r in self.client.tags.list_by_product(product.original_name)
            ]

            if not product_tags:
                logger.warning(f"No tags found for product {product.original_name}")
                return

            for product_tag in product_tags:
                original_tag_name = product_tag.name
                logger.debug("'%s' tag association found for %s product", original_tag_name, product.original_name)

                product_tag.name = get_nested_name_expr(product.new_name, original_tag_name)
                product_tag.label = f"{product.new_name}/{original_tag_name}"
                product_tag.type = ResourceTypes.PRODUCT_TAG.value
                product_tag.api_version = APIM_API_VERSION
                product_tag.scale = None
                product_tag.depends_on = [get_product_resource_id_expr(product.new_name)]

                product_template_resources.tags.append(product_tag)
        except Exception as e:
            logger.error("Exception occurred while generating product tag template resources: %s", e)
            raise

    def _add_product_policy(
        self,
        extractor_parameters: "ExtractorParameters",
        product: ProductTemplateResource,
        product_template_resources: ProductTemplateResources,
        files_dir: Optional[str],
    ):
        product_resource_id = [get_product_resource_id_expr(product.new_name)]

        try:
            product_policy_resource = self.policy_extractor.generate_product_policy_resource(
                extractor_parameters=extractor_parameters,
                product=product,
                depends_on=product_resource_id,
                files_dir=files_dir,
            )

            if product_policy_resource is not None:
                product_template_resources.policies.append(product_policy_resource)
        except Exception as e:
            logger.error("Exception occurred while generating product policy template resource: %s", e)
            raise

    def _add_product_groups(
        self,
        extractor_parameters: "ExtractorParameters",
        product: ProductTemplateResource,
        product_template_resources: ProductTemplateResources,
    ):
        product_resource_id = [get_product_resource_id_expr(product.new_name)]

        if SkuType.is_consumption(extractor_parameters.current_sku):
            logger.info("Skipping generation of product group associations for the consumption sku...")
            return

        try:
            groups = self.client.groups.list_by_product(product.original_name)

            for record in groups:
                product_group = GroupTemplateResource.from_record(record)
                original_group_name = product_group.name
                product_group.name = get_nested_name_expr(product.new_name, original_group_name)
                product_group.label = f"{product.new_name}/{original_group_name}"
                product_group.type = ResourceTypes.PRODUCT_GROUP.value
                product_group.api_version = APIM_API_VERSION
                product_group.depends_on = list(product_resource_id)
                product_template_resources.groups.append(product_group)
        except Exception as e:
            logger.error("Exception occurred while adding groups linked to product: %s", e)
            raise
