# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import Any, Dict, Optional

from azure.cli.core.azclierror import (
    InvalidArgumentValueError,
    RequiredArgumentMissingError,
)
from knack.log import get_logger

from ...common import ConfigKeys, ParameterNames
from ...util import deserialize_file_content, is_http_url, none_if_empty

logger = get_logger(__name__)

CONFIG_KEY_TO_ATTR_MAP = {
    ConfigKeys.SOURCE_APIM_NAME.value: "source_apim_name",
    ConfigKeys.DESTINATION_APIM_NAME.value: "destination_apim_name",
    ConfigKeys.RESOURCE_GROUP.value: "resource_group_name",
    ConfigKeys.FILE_FOLDER.value: "files_dir",
    ConfigKeys.API_NAME.value: "single_api_name",
    ConfigKeys.POLICY_XML_BASE_URL.value: "policy_xml_base_url",
    ConfigKeys.POLICY_XML_SAS_TOKEN.value: "policy_xml_sas_token",
    ConfigKeys.FILE_NAME_PREFIX.value: "file_name_prefix",
}


class ExtractorParameters:
    """
    Settings of a single extraction run.

    The current sku is not user provided, it is resolved from the source service.
    """

    def __init__(
        self,
        source_apim_name: Optional[str] = None,
        resource_group_name: Optional[str] = None,
        destination_apim_name: Optional[str] = None,
        single_api_name: Optional[str] = None,
        files_dir: Optional[str] = None,
        policy_xml_base_url: Optional[str] = None,
        policy_xml_sas_token: Optional[str] = None,
        file_name_prefix: Optional[str] = None,
        current_sku: Optional[str] = None,
    ):
        self.source_apim_name = none_if_empty(source_apim_name)
        self.resource_group_name = none_if_empty(resource_group_name)
        self.destination_apim_name = none_if_empty(destination_apim_name)
        self.single_api_name = none_if_empty(single_api_name)
        self.files_dir = none_if_empty(files_dir)
        self.policy_xml_base_url = none_if_empty(policy_xml_base_url)
        self.policy_xml_sas_token = none_if_empty(policy_xml_sas_token)
        self.file_name_prefix = none_if_empty(file_name_prefix)
        self.current_sku = current_sku

    @property
    def target_apim_name(self) -> Optional[str]:
        return self.destination_apim_name or self.source_apim_name

    @property
    def base_file_name(self) -> str:
        return f"{self.file_name_prefix or ''}{self.source_apim_name}"

    @classmethod
    def from_config_file(cls, file_path: str) -> "ExtractorParameters":
        config = deserialize_file_content(file_path)
        if not isinstance(config, dict):
            raise InvalidArgumentValueError(f"Extractor configuration {file_path} must be a key-value document.")
        return cls.from_config(config)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ExtractorParameters":
        kwargs = {}
        for key, value in config.items():
            if key not in CONFIG_KEY_TO_ATTR_MAP:
                logger.warning("Ignoring unsupported extractor configuration key '%s'.", key)
                continue
            kwargs[CONFIG_KEY_TO_ATTR_MAP[key]] = value
        return cls(**kwargs)

    def override(self, **kwargs) -> "ExtractorParameters":
        """
        Applies non-empty values on top of the current settings.
        """
        for attr, value in kwargs.items():
            if attr not in CONFIG_KEY_TO_ATTR_MAP.values():
                raise ValueError(f"Unknown extractor parameter '{attr}'.")
            value = none_if_empty(value)
            if value is not None:
                setattr(self, attr, value)
        return self

    def validate(self):
        if not self.source_apim_name:
            raise RequiredArgumentMissingError(
                "The source API Management service name is required. Use --service-name or "
                f"'{ConfigKeys.SOURCE_APIM_NAME.value}' in the configuration file."
            )
        if not self.resource_group_name:
            raise RequiredArgumentMissingError(
                "The resource group is required. Use --resource-group or "
                f"'{ConfigKeys.RESOURCE_GROUP.value}' in the configuration file."
            )
        if self.policy_xml_sas_token and not self.policy_xml_base_url:
            raise InvalidArgumentValueError("A policy XML SAS token requires a policy XML base URL.")
        if self.policy_xml_base_url and not is_http_url(self.policy_xml_base_url):
            raise InvalidArgumentValueError(
                f"Invalid policy XML base URL '{self.policy_xml_base_url}'. An http(s) URL is expected."
            )
        if self.policy_xml_base_url and not self.files_dir:
            raise RequiredArgumentMissingError(
                "An output directory is required when policies are linked by URL. Use --to-dir or "
                f"'{ConfigKeys.FILE_FOLDER.value}' in the configuration file."
            )

    def get_parameter_values(self) -> Dict[str, Optional[str]]:
        """
        Deployment values of the template parameters.
        """
        return {
            ParameterNames.APIM_SERVICE_NAME.value: self.target_apim_name,
            ParameterNames.POLICY_XML_BASE_URL.value: self.policy_xml_base_url,
            ParameterNames.POLICY_XML_SAS_TOKEN.value: self.policy_xml_sas_token,
        }
