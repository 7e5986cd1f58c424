# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------


import re
from argparse import Namespace
from azure.cli.core.azclierror import InvalidArgumentValueError

from .util import is_http_url

# API Management service names start with a letter and end with a letter or digit.
SERVICE_NAME_RE = re.compile(r"[a-zA-Z](?:[a-zA-Z0-9-]{0,48}[a-zA-Z0-9])?")


def validate_service_name(namespace: Namespace):
    for attr in ("service_name", "destination_service_name"):
        value = getattr(namespace, attr, None)
        if value and not SERVICE_NAME_RE.fullmatch(value):
            raise InvalidArgumentValueError(
                f"Invalid API Management service name '{value}': Limited to 50 total characters, "
                "only alphanumeric characters and '-' allowed."
            )


def validate_policy_xml_base_url(namespace: Namespace):
    if hasattr(namespace, "policy_xml_base_url") and namespace.policy_xml_base_url:
        if not is_http_url(namespace.policy_xml_base_url):
            raise InvalidArgumentValueError(
                f"Invalid policy XML base URL '{namespace.policy_xml_base_url}'. An http(s) URL is expected."
            )
