# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

import os
import sys

import pytest
import responses


# Sets current working directory to the directory of the executing file
@pytest.fixture
def set_cwd(request):
    os.chdir(os.path.dirname(os.path.abspath(str(request.fspath))))


@pytest.fixture
def mocked_get_subscription_id(mocker):
    from .generators import get_zeroed_subscription

    patched = mocker.patch("azure.cli.core.commands.client_factory.get_subscription_id", autospec=True)
    patched.return_value = get_zeroed_subscription()
    yield patched


@pytest.fixture
def mocked_azcli_credential(mocker):
    from azure.core.credentials import AccessToken

    class StubCredential:
        def __init__(self):
            self.requested_scopes = []

        def get_token(self, *scopes, **kwargs):
            self.requested_scopes.append(scopes)
            return AccessToken("token", sys.maxsize)

    credential = StubCredential()
    mocker.patch("azext_apimextract.extractor.util.az_client.AZURE_CLI_CREDENTIAL", credential)
    yield credential


@pytest.fixture
def mocked_cmd(mocker, mocked_get_subscription_id, mocked_azcli_credential):
    class Stub:
        pass

    cloud = Stub()
    cloud.endpoints = Stub()
    cloud.endpoints.resource_manager = "https://management.azure.com/"
    cloud.endpoints.active_directory = "https://login.microsoftonline.com/"
    cloud.endpoints.active_directory_resource_id = "https://management.azure.com/"

    az_cli_mock = mocker.patch("azure.cli.core.AzCli", autospec=True, **{"data": {"command": "az"}, "cloud": cloud})
    config = {"cli_ctx": az_cli_mock}
    patched = mocker.patch("azure.cli.core.commands.AzCliCommand", autospec=True, **config)
    yield patched


@pytest.fixture
def mocked_responses():
    with responses.RequestsMock() as rsps:
        yield rsps
