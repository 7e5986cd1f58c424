# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

import pytest

from azext_apimextract.extractor.common import (
    APIM_API_VERSION,
    PARAMETERS_SCHEMA,
    TEMPLATE_CONTENT_VERSION,
    TEMPLATE_SCHEMA,
    ResourceTypes,
)
from azext_apimextract.extractor.providers.extraction.parameters import ExtractorParameters
from azext_apimextract.extractor.providers.templates import (
    GroupTemplateResource,
    PolicyTemplateResource,
    ProductTemplateResource,
    TagTemplateResource,
    TemplateBuilder,
)
from azext_apimextract.extractor.providers.templates.builder import build_parameter
from azext_apimextract.extractor.providers.templates.resources import (
    escape_literal,
    get_nested_name_expr,
    get_policy_link_expr,
    get_product_resource_id_expr,
)

from ...generators import generate_random_string
from ..conftest import get_mock_group_record, get_mock_product_record, get_mock_tag_record


def test_template_expressions():
    assert escape_literal("bob's product") == "bob''s product"
    assert get_nested_name_expr("starter") == "[concat(parameters('apimServiceName'), '/starter')]"
    assert get_nested_name_expr("starter", "tag1") == "[concat(parameters('apimServiceName'), '/starter/tag1')]"
    assert get_nested_name_expr("bob's") == "[concat(parameters('apimServiceName'), '/bob''s')]"
    assert get_product_resource_id_expr("starter") == (
        "[resourceId('Microsoft.ApiManagement/service/products', parameters('apimServiceName'), 'starter')]"
    )
    assert get_policy_link_expr("starter-productPolicy.xml") == (
        "[concat(parameters('policyXMLBaseUrl'), 'starter-productPolicy.xml')]"
    )
    assert get_policy_link_expr("starter-productPolicy.xml", with_sas_token=True) == (
        "[concat(parameters('policyXMLBaseUrl'), 'starter-productPolicy.xml', parameters('policyXMLSasToken'))]"
    )


def test_product_template_resource():
    product_name = generate_random_string()
    record = get_mock_product_record(product_name)
    record["properties"]["extraneous"] = generate_random_string()

    product = ProductTemplateResource.from_record(record)
    assert product.original_name == product_name
    assert product.new_name == product_name
    assert product.label == product_name
    assert product.type == ResourceTypes.PRODUCT.value

    expected_properties = {k: v for k, v in record["properties"].items() if v is not None}
    expected_properties.pop("extraneous")
    product.api_version = APIM_API_VERSION
    result = product.get()
    assert result == {
        "type": ResourceTypes.PRODUCT.value,
        "apiVersion": APIM_API_VERSION,
        "name": product_name,
        "properties": expected_properties,
    }
    assert "terms" not in result["properties"]
    assert "dependsOn" not in result


@pytest.mark.parametrize("scale", [None, {"capacity": 1}])
def test_tag_template_resource(scale):
    record = get_mock_tag_record(generate_random_string())
    if scale:
        record["scale"] = scale

    tag = TagTemplateResource.from_record(record)
    tag.depends_on = [generate_random_string()]
    result = tag.get()
    assert result["properties"] == {"displayName": record["properties"]["displayName"]}
    assert result["dependsOn"] == tag.depends_on
    assert ("scale" in result) is bool(scale)
    if scale:
        assert result["scale"] == scale


def test_group_template_resource():
    record = get_mock_group_record(generate_random_string(), built_in=True)
    group = GroupTemplateResource.from_record(record)
    assert group.properties == {
        "displayName": record["properties"]["displayName"],
        "description": record["properties"]["description"],
        "type": "system",
    }


def test_policy_template_resource():
    value = generate_random_string()
    policy = PolicyTemplateResource(
        name=get_nested_name_expr("starter", "policy"),
        type=ResourceTypes.PRODUCT_POLICY.value,
        api_version=APIM_API_VERSION,
        policy_format="rawxml",
        value=value,
        depends_on=[get_product_resource_id_expr("starter")],
        label="starter/policy",
    )
    assert policy.label == "starter/policy"
    assert policy.get() == {
        "type": ResourceTypes.PRODUCT_POLICY.value,
        "apiVersion": APIM_API_VERSION,
        "name": "[concat(parameters('apimServiceName'), '/starter/policy')]",
        "properties": {"format": "rawxml", "value": value},
        "dependsOn": [get_product_resource_id_expr("starter")],
    }


def test_build_parameter():
    assert build_parameter("apimServiceName") == {"apimServiceName": {"type": "string"}}
    assert build_parameter("p", metadata={"description": "d"}, value="v", default="x") == {
        "p": {"type": "string", "metadata": {"description": "d"}, "value": "v", "defaultValue": "x"}
    }


@pytest.mark.parametrize(
    "policy_params",
    [
        {},
        {"policy_xml_base_url": "https://contoso.com/policies/"},
        {"policy_xml_base_url": "https://contoso.com/policies/", "policy_xml_sas_token": "?sv=1"},
    ],
)
def test_template_builder(policy_params: dict):
    extractor_parameters = ExtractorParameters(
        source_apim_name=generate_random_string(), resource_group_name=generate_random_string(), **policy_params
    )
    template = (
        TemplateBuilder().with_service_name_parameter().with_policy_parameters(extractor_parameters).build()
    )

    expected_parameters = ["apimServiceName"]
    if "policy_xml_base_url" in policy_params:
        expected_parameters.append("policyXMLBaseUrl")
    if "policy_xml_sas_token" in policy_params:
        expected_parameters.append("policyXMLSasToken")

    content = template.get()
    assert content["$schema"] == TEMPLATE_SCHEMA
    assert content["contentVersion"] == TEMPLATE_CONTENT_VERSION
    assert list(content["parameters"].keys()) == expected_parameters
    for parameter in content["parameters"].values():
        assert parameter == {"type": "string"}
    assert content["resources"] == []
    assert not template.typed_resources.has_resources()

    parameters_content = template.get_parameters_content(extractor_parameters.get_parameter_values())
    assert parameters_content["$schema"] == PARAMETERS_SCHEMA
    assert parameters_content["contentVersion"] == TEMPLATE_CONTENT_VERSION
    assert list(parameters_content["parameters"].keys()) == expected_parameters
    assert parameters_content["parameters"]["apimServiceName"] == {"value": extractor_parameters.source_apim_name}


def test_template_resource_order():
    template = TemplateBuilder().with_service_name_parameter().build()
    resources = template.typed_resources

    # Appended out of order, emitted by kind.
    resources.groups.append(GroupTemplateResource(name="g", label="starter/g"))
    resources.tags.append(TagTemplateResource(name="t", label="starter/t"))
    resources.policies.append(PolicyTemplateResource(name="p", policy_format="rawxml", value="v", label="starter/p"))
    resources.products.append(ProductTemplateResource(original_name="starter"))

    assert [r["name"] for r in template.get()["resources"]] == ["starter", "p", "t", "g"]
    assert resources.enumerate() == {
        "products": ["starter"],
        "policies": ["starter/p"],
        "tags": ["starter/t"],
        "groups": ["starter/g"],
    }
    assert resources.has_resources()
