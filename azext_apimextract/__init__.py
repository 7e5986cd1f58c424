# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from azure.cli.core import AzCommandsLoader
from azext_apimextract.constants import VERSION
from azext_apimextract.extractor._help import load_apim_extract_help

load_apim_extract_help()


class ApimExtractorCommandsLoader(AzCommandsLoader):
    def __init__(self, cli_ctx=None):
        super(ApimExtractorCommandsLoader, self).__init__(cli_ctx=cli_ctx)

    def load_command_table(self, args):
        from azext_apimextract.extractor.command_map import load_apim_extract_commands

        load_apim_extract_commands(self, args)

        return self.command_table

    def load_arguments(self, command):
        from azext_apimextract.extractor.params import load_apim_extract_arguments

        load_apim_extract_arguments(self, command)


COMMAND_LOADER_CLS = ApimExtractorCommandsLoader

__version__ = VERSION
