# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

"""
Load CLI commands
"""
from azure.cli.core.commands import CliCommandType

extract_resource_ops = CliCommandType(operations_tmpl="azext_apimextract.extractor.commands_extract#{}")


def load_apim_extract_commands(self, _):
    """
    Load CLI commands
    """
    with self.command_group(
        "apim extract",
        command_type=extract_resource_ops,
        is_preview=True,
    ) as cmd_group:
        cmd_group.command("products", "extract_products")
