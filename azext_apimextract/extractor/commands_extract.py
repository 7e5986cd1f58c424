# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from typing import Optional

from knack.log import get_logger

logger = get_logger(__name__)


def extract_products(
    cmd,
    service_name: Optional[str] = None,
    resource_group_name: Optional[str] = None,
    destination_service_name: Optional[str] = None,
    api_name: Optional[str] = None,
    to_dir: Optional[str] = None,
    policy_xml_base_url: Optional[str] = None,
    policy_xml_sas_token: Optional[str] = None,
    file_name_prefix: Optional[str] = None,
    config_file: Optional[str] = None,
    summary_mode: Optional[str] = None,
    replace: Optional[bool] = None,
    no_progress: Optional[bool] = None,
) -> Optional[dict]:
    from .providers.extraction import extract_products

    return extract_products(
        cmd=cmd,
        service_name=service_name,
        resource_group_name=resource_group_name,
        destination_service_name=destination_service_name,
        api_name=api_name,
        to_dir=to_dir,
        policy_xml_base_url=policy_xml_base_url,
        policy_xml_sas_token=policy_xml_sas_token,
        file_name_prefix=file_name_prefix,
        config_file=config_file,
        summary_mode=summary_mode,
        replace=replace,
        no_progress=no_progress,
    )
