# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

"""
CLI parameter definitions.
"""

from azure.cli.core.commands.parameters import (
    get_enum_type,
    get_three_state_flag,
)

from ._validators import validate_policy_xml_base_url, validate_service_name
from .common import ConfigKeys, ExtractSummaryMode


def load_apim_extract_arguments(self, _):
    """
    Load CLI Args for Knack parser
    """

    with self.argument_context("apim extract") as context:
        context.argument(
            "service_name",
            options_list=["--service-name", "-n"],
            help="Name of the source API Management service. "
            f"Falls back to '{ConfigKeys.SOURCE_APIM_NAME.value}' of the configuration file.",
            validator=validate_service_name,
        )
        context.argument(
            "resource_group_name",
            options_list=["--resource-group", "-g"],
            help="The resource group the source API Management service resides in. "
            f"Falls back to '{ConfigKeys.RESOURCE_GROUP.value}' of the configuration file.",
        )
        context.argument(
            "destination_service_name",
            options_list=["--dest-service-name"],
            help="Name of the API Management service the templates will be deployed to. "
            "If omitted the source service name is used.",
        )
        context.argument(
            "config_file",
            options_list=["--config-file"],
            help="Path to a JSON or YAML extractor configuration file. "
            "Values provided via command arguments take precedence over the file.",
        )
        context.argument(
            "no_progress",
            options_list=["--no-progress"],
            arg_type=get_three_state_flag(),
            help="Disable visual representation of work.",
        )

    with self.argument_context("apim extract products") as context:
        context.argument(
            "api_name",
            options_list=["--api-name"],
            help="Only extract the products linked to this API.",
        )
        context.argument(
            "summary_mode",
            options_list=["--summary"],
            arg_type=get_enum_type(ExtractSummaryMode, default=ExtractSummaryMode.SIMPLE.value),
            help="Extraction summary option.",
        )
        context.argument(
            "to_dir",
            options_list=["--to-dir"],
            help="The local directory the templates and policy files will be stored in. "
            "If omitted the products template is returned as command output.",
            arg_group="Local Target",
        )
        context.argument(
            "file_name_prefix",
            options_list=["--file-prefix"],
            help="Prefix applied to the names of the generated template files.",
            arg_group="Local Target",
        )
        context.argument(
            "replace",
            options_list=["--replace"],
            arg_type=get_three_state_flag(),
            help="Overwrite existing files in the target directory.",
            arg_group="Local Target",
        )
        context.argument(
            "policy_xml_base_url",
            options_list=["--policy-base-url"],
            help="Base URL the policy files will be hosted at. When set, product policies are stored as "
            "separate XML files and linked from the template instead of being inlined. "
            "Example: `https://mystorage.blob.core.windows.net/policies/`.",
            arg_group="Policy Link",
            validator=validate_policy_xml_base_url,
        )
        context.argument(
            "policy_xml_sas_token",
            options_list=["--policy-sas-token"],
            help="SAS token appended to linked policy file URLs.",
            arg_group="Policy Link",
        )
