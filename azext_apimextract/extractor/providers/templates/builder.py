# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import TYPE_CHECKING, Any, Dict, Optional

from ...common import (
    PARAMETERS_SCHEMA,
    TEMPLATE_CONTENT_VERSION,
    TEMPLATE_SCHEMA,
    ParameterNames,
)
from .resources import ProductTemplateResources

if TYPE_CHECKING:
    from ..extraction.parameters import ExtractorParameters


def build_parameter(
    name: str,
    type: str = "string",
    metadata: Optional[dict] = None,
    value: Optional[Any] = None,
    default: Optional[Any] = None,
) -> dict:
    result = {
        name: {
            "type": type,
        }
    }
    if metadata:
        result[name]["metadata"] = metadata
    if value:
        result[name]["value"] = value
    if default:
        result[name]["defaultValue"] = default
    return result


class Template:
    """
    An ARM template holding the typed resources of an extraction.
    """

    def __init__(self, parameters: Dict[str, dict], typed_resources: ProductTemplateResources):
        self.parameters = parameters
        self.typed_resources = typed_resources

    def get(self) -> dict:
        return {
            "$schema": TEMPLATE_SCHEMA,
            "contentVersion": TEMPLATE_CONTENT_VERSION,
            "parameters": dict(self.parameters),
            "resources": [r.get() for r in self.typed_resources.build_template_resources()],
        }

    def get_parameters_content(self, values: Dict[str, Any]) -> dict:
        """
        Builds a deployment parameters document for the parameters this template declares.
        """
        parameters = {}
        for name in self.parameters:
            if values.get(name) is not None:
                parameters[name] = {"value": values[name]}
        return {
            "$schema": PARAMETERS_SCHEMA,
            "contentVersion": TEMPLATE_CONTENT_VERSION,
            "parameters": parameters,
        }


class TemplateBuilder:
    def __init__(self):
        self.parameter_map: Dict[str, dict] = {}

    def with_service_name_parameter(self) -> "TemplateBuilder":
        self.parameter_map.update(build_parameter(name=ParameterNames.APIM_SERVICE_NAME.value))
        return self

    def with_policy_parameters(self, extractor_parameters: "ExtractorParameters") -> "TemplateBuilder":
        if extractor_parameters.policy_xml_base_url:
            self.parameter_map.update(build_parameter(name=ParameterNames.POLICY_XML_BASE_URL.value))
        if extractor_parameters.policy_xml_sas_token:
            self.parameter_map.update(build_parameter(name=ParameterNames.POLICY_XML_SAS_TOKEN.value))
        return self

    def build(self) -> Template:
        return Template(parameters=dict(self.parameter_map), typed_resources=ProductTemplateResources())
