# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------
"""
Help content for API Management extraction commands.
"""

from knack.help_files import helps

from .common import APIM_API_VERSION, ConfigKeys


def load_apim_extract_help():
    helps[
        "apim"
    ] = """
        type: group
        short-summary: Manage Azure API Management services.
    """

    helps[
        "apim extract"
    ] = """
        type: group
        short-summary: Extract API Management resources as ARM templates.
        long-summary: |
            Extraction reads the configuration of an existing API Management service
            and reproduces it in an infrastructure-as-code manner via ARM templates
            that can be deployed to the same or another service.
    """

    helps[
        "apim extract products"
    ] = f"""
        type: command
        short-summary: Extract products with their policies, tag and group associations.
        long-summary: |
          Generates a products template containing every product of the source service
          along with the product policy, product tag associations and product group
          associations. Group associations are not extracted for Consumption sku services.

          When --api-name is provided only the products linked to that API are extracted.

          When --to-dir is provided the template and a matching deployment parameters file
          are saved to the directory, otherwise the template is returned as output.

          When --policy-base-url is provided, product policies are written as XML files
          under the 'policies' sub-directory of --to-dir and linked from the template.

          Settings may also be provided via --config-file using the keys
          {', '.join(ConfigKeys.list())}.

          Resources are emitted against API version {APIM_API_VERSION}.

        examples:
        - name: Extract all products of a service and print the template.
          text: >
            az apim extract products -n myapim -g myresourcegroup
        - name: Extract all products of a service to a local directory.
          text: >
            az apim extract products -n myapim -g myresourcegroup --to-dir ./templates
        - name: Extract only the products linked to an API, targeting another service.
          text: >
            az apim extract products -n myapim -g myresourcegroup --api-name echo-api --dest-service-name myapim-prod --to-dir .
        - name: Extract products with linked policy files hosted in a storage container.
          text: >
            az apim extract products -n myapim -g myresourcegroup --to-dir . --policy-base-url https://mystorage.blob.core.windows.net/policies/ --policy-sas-token $SAS
        - name: Extract products using a configuration file, overwriting existing files and hiding progress displays.
          text: >
            az apim extract products --config-file ./extractor.yaml --replace --no-progress
    """
