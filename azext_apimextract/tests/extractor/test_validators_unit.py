# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from argparse import Namespace

import pytest
from azure.cli.core.azclierror import InvalidArgumentValueError

from azext_apimextract.extractor._validators import (
    validate_policy_xml_base_url,
    validate_service_name,
)


@pytest.mark.parametrize(
    "name_pair",
    [
        ("contoso-apim", True),
        ("a", True),
        ("Apim01", True),
        ("a" * 50, True),
        ("a" * 51, False),
        ("1apim", False),
        ("apim-", False),
        ("apim_01", False),
        ("", True),
        (None, True),
    ],
)
@pytest.mark.parametrize("attr", ["service_name", "destination_service_name"])
def test_validate_service_name(name_pair, attr):
    name, is_valid = name_pair
    namespace = Namespace(**{attr: name})

    if is_valid:
        validate_service_name(namespace)
        return

    with pytest.raises(InvalidArgumentValueError):
        validate_service_name(namespace)


@pytest.mark.parametrize(
    "url_pair",
    [
        ("https://contoso.blob.core.windows.net/policies/", True),
        ("http://localhost:8080/", True),
        (None, True),
        ("contoso.blob.core.windows.net/policies/", False),
        ("file:///tmp/policies/", False),
    ],
)
def test_validate_policy_xml_base_url(url_pair):
    url, is_valid = url_pair
    namespace = Namespace(policy_xml_base_url=url)

    if is_valid:
        validate_policy_xml_base_url(namespace)
        return

    with pytest.raises(InvalidArgumentValueError):
        validate_policy_xml_base_url(namespace)

    validate_policy_xml_base_url(Namespace())
