# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import Dict, Iterable, List, Optional

from ...common import ParameterNames, ProductResourceKind, ResourceTypes

SERVICE_NAME_PARAM_EXPR = f"parameters('{ParameterNames.APIM_SERVICE_NAME.value}')"


def escape_literal(value: str) -> str:
    """
    Escapes a value for use inside a single quoted template expression literal.
    """
    return value.replace("'", "''")


def get_nested_name_expr(*name_parts: str) -> str:
    suffix = "/".join(escape_literal(part) for part in name_parts)
    return f"[concat({SERVICE_NAME_PARAM_EXPR}, '/{suffix}')]"


def get_product_resource_id_expr(product_name: str) -> str:
    return (
        f"[resourceId('{ResourceTypes.PRODUCT.value}', {SERVICE_NAME_PARAM_EXPR}, "
        f"'{escape_literal(product_name)}')]"
    )


def get_policy_link_expr(file_name: str, with_sas_token: bool = False) -> str:
    base_url_expr = f"parameters('{ParameterNames.POLICY_XML_BASE_URL.value}')"
    if with_sas_token:
        sas_token_expr = f"parameters('{ParameterNames.POLICY_XML_SAS_TOKEN.value}')"
        return f"[concat({base_url_expr}, '{escape_literal(file_name)}', {sas_token_expr})]"
    return f"[concat({base_url_expr}, '{escape_literal(file_name)}')]"


def _prune_properties(properties: Optional[dict], keys: Iterable[str]) -> dict:
    result = {}
    if not properties:
        return result
    for key in keys:
        if properties.get(key) is not None:
            result[key] = properties[key]
    return result


class TemplateResource:
    """
    A resource entry of an ARM template.
    """

    def __init__(
        self,
        name: str,
        type: Optional[str] = None,
        api_version: Optional[str] = None,
        properties: Optional[dict] = None,
        depends_on: Optional[List[str]] = None,
        label: Optional[str] = None,
    ):
        self.name = name
        self.label = label or name
        self.type = type
        self.api_version = api_version
        self.properties = properties or {}
        self.depends_on = depends_on

    def get(self) -> dict:
        result = {
            "type": self.type,
            "apiVersion": self.api_version,
            "name": self.name,
        }
        if self.properties:
            result["properties"] = dict(self.properties)
        if self.depends_on:
            result["dependsOn"] = list(self.depends_on)
        return result


class ProductTemplateResource(TemplateResource):
    PROPERTY_KEYS = [
        "displayName",
        "description",
        "terms",
        "subscriptionRequired",
        "approvalRequired",
        "subscriptionsLimit",
        "state",
    ]

    def __init__(self, original_name: str, properties: Optional[dict] = None):
        super().__init__(
            name=original_name,
            type=ResourceTypes.PRODUCT.value,
            properties=_prune_properties(properties, self.PROPERTY_KEYS),
        )
        self.original_name = original_name
        self.new_name = original_name

    @classmethod
    def from_record(cls, record: dict) -> "ProductTemplateResource":
        return cls(original_name=record["name"], properties=record.get("properties"))


class ProductApiTemplateResource(TemplateResource):
    """
    A product linked to an api, as listed by the api products endpoint.
    """

    @classmethod
    def from_record(cls, record: dict) -> "ProductApiTemplateResource":
        return cls(name=record["name"], type=record.get("type"), properties=record.get("properties"))


class TagTemplateResource(TemplateResource):
    PROPERTY_KEYS = ["displayName"]

    def __init__(self, name: str, properties: Optional[dict] = None, scale: Optional[dict] = None, **kwargs):
        super().__init__(name=name, properties=_prune_properties(properties, self.PROPERTY_KEYS), **kwargs)
        self.scale = scale

    @classmethod
    def from_record(cls, record: dict) -> "TagTemplateResource":
        return cls(name=record["name"], properties=record.get("properties"), scale=record.get("scale"))

    def get(self) -> dict:
        result = super().get()
        if self.scale:
            result["scale"] = self.scale
        return result


class GroupTemplateResource(TemplateResource):
    PROPERTY_KEYS = ["displayName", "description", "type", "externalId"]

    def __init__(self, name: str, properties: Optional[dict] = None, **kwargs):
        super().__init__(name=name, properties=_prune_properties(properties, self.PROPERTY_KEYS), **kwargs)

    @classmethod
    def from_record(cls, record: dict) -> "GroupTemplateResource":
        return cls(name=record["name"], properties=record.get("properties"))


class PolicyTemplateResource(TemplateResource):
    """
    A policy resource. Linked policies also carry the xml content and the file it is written to,
    neither is serialized into the template.
    """

    def __init__(
        self,
        name: str,
        policy_format: str,
        value: str,
        policy_xml: Optional[str] = None,
        file_name: Optional[str] = None,
        policy_dir: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(name=name, properties={"format": policy_format, "value": value}, **kwargs)
        self.policy_xml = policy_xml
        self.file_name = file_name
        self.policy_dir = policy_dir

    @property
    def is_linked(self) -> bool:
        return bool(self.file_name)


class ProductTemplateResources:
    """
    Typed resources of a products template. Emission order is products, policies, tags then groups.
    """

    def __init__(self):
        self.products: List[ProductTemplateResource] = []
        self.policies: List[PolicyTemplateResource] = []
        self.tags: List[TagTemplateResource] = []
        self.groups: List[GroupTemplateResource] = []

    def _get_collections(self) -> Dict[str, List[TemplateResource]]:
        return {
            ProductResourceKind.PRODUCTS.value: self.products,
            ProductResourceKind.POLICIES.value: self.policies,
            ProductResourceKind.TAGS.value: self.tags,
            ProductResourceKind.GROUPS.value: self.groups,
        }

    def build_template_resources(self) -> List[TemplateResource]:
        result = []
        for collection in self._get_collections().values():
            result.extend(collection)
        return result

    def enumerate(self) -> Dict[str, List[str]]:
        """
        Map of resource kind to the labels of its resources.
        """
        return {kind: [r.label for r in collection] for kind, collection in self._get_collections().items()}

    def has_resources(self) -> bool:
        return any(self._get_collections().values())
