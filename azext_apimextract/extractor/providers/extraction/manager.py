# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

import os
from typing import Dict, List, NamedTuple, Optional, Union

from azure.cli.core.azclierror import FileOperationError
from knack.log import get_logger
from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    TimeElapsedColumn,
)
from rich.table import Table, box

from ...common import (
    PARAMETERS_FILE_SUFFIX,
    POLICY_DIR_NAME,
    PRODUCTS_TEMPLATE_FILE_SUFFIX,
    ExtractSummaryMode,
)
from ...util import dump_content_to_file, to_safe_filename
from ...util.az_client import get_apim_mgmt_client
from ..templates import Template
from .parameters import ExtractorParameters
from .policy import PolicyExtractor
from .products import ProductExtractor

logger = get_logger(__name__)


DEFAULT_CONSOLE = Console()


class OutputFile(NamedTuple):
    content: Union[dict, str]
    file_name: str
    extension: str
    output_dir: str

    @property
    def path(self) -> str:
        output_dir = os.path.abspath(os.path.expanduser(self.output_dir))
        return os.path.join(output_dir, f"{self.file_name}.{self.extension}")


class ExtractionState:
    def __init__(self, extractor_parameters: ExtractorParameters, template: Template):
        self.extractor_parameters = extractor_parameters
        self.template = template
        self.resources: Dict[str, List[str]] = template.typed_resources.enumerate()

    def get_content(self) -> dict:
        return self.template.get()

    def get_parameters_content(self) -> dict:
        return self.template.get_parameters_content(self.extractor_parameters.get_parameter_values())

    def get_output_files(self, files_dir: str) -> List[OutputFile]:
        base_file_name = to_safe_filename(self.extractor_parameters.base_file_name)
        output_files = [
            OutputFile(self.get_content(), f"{base_file_name}{PRODUCTS_TEMPLATE_FILE_SUFFIX}", "json", files_dir),
            OutputFile(self.get_parameters_content(), f"{base_file_name}{PARAMETERS_FILE_SUFFIX}", "json", files_dir),
        ]
        for policy in self.template.typed_resources.policies:
            if policy.is_linked:
                policy_dir = policy.policy_dir or os.path.join(files_dir, POLICY_DIR_NAME)
                output_files.append(OutputFile(policy.policy_xml, policy.file_name, "xml", policy_dir))
        return output_files

    def write(self, files_dir: str, replace: bool = False) -> List[str]:
        """
        Writes the template, the parameters file and linked policy files. Nothing is written when
        any target already exists and replace is not set.
        """
        output_files = self.get_output_files(files_dir)
        if not replace:
            existing = [f.path for f in output_files if os.path.exists(f.path)]
            if existing:
                raise FileOperationError(
                    "The following files already exist. Use --replace to overwrite them:\n" + "\n".join(existing)
                )

        return [
            dump_content_to_file(
                content=f.content,
                file_name=f.file_name,
                extension=f.extension,
                output_dir=f.output_dir,
                replace=replace,
            )
            for f in output_files
        ]


class ExtractionManager:
    """
    Resolves the source service and runs the product extraction against it.
    """

    def __init__(
        self,
        cmd,
        extractor_parameters: ExtractorParameters,
        no_progress: Optional[bool] = None,
    ):
        self.cmd = cmd
        self.extractor_parameters = extractor_parameters
        self.no_progress = no_progress
        self.client = get_apim_mgmt_client(
            cmd=self.cmd,
            resource_group_name=self.extractor_parameters.resource_group_name,
            service_name=self.extractor_parameters.source_apim_name,
        )
        self.policy_extractor = PolicyExtractor(client=self.client)
        self.product_extractor = ProductExtractor(client=self.client, policy_extractor=self.policy_extractor)

    def analyze_service(self) -> ExtractionState:
        with self.client, Progress(
            SpinnerColumn("star"),
            *Progress.get_default_columns(),
            "Elapsed:",
            TimeElapsedColumn(),
            transient=True,
            disable=bool(self.no_progress),
        ) as progress:
            service_name = self.extractor_parameters.source_apim_name
            _ = progress.add_task(f"Extracting products of {service_name}...", total=None)
            self._resolve_sku()

            template = self.product_extractor.generate_products_template(
                single_api_name=self.extractor_parameters.single_api_name,
                files_dir=self.extractor_parameters.files_dir,
                extractor_parameters=self.extractor_parameters,
            )
            return ExtractionState(extractor_parameters=self.extractor_parameters, template=template)

    def _resolve_sku(self):
        service = self.client.service.get()
        self.extractor_parameters.current_sku = service.get("sku", {}).get("name")
        logger.info(
            "Service %s uses the %s sku.",
            self.extractor_parameters.source_apim_name,
            self.extractor_parameters.current_sku,
        )


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
    **_,
) -> Optional[dict]:
    extractor_parameters = (
        ExtractorParameters.from_config_file(config_file) if config_file else ExtractorParameters()
    )
    extractor_parameters.override(
        source_apim_name=service_name,
        resource_group_name=resource_group_name,
        destination_apim_name=destination_service_name,
        single_api_name=api_name,
        files_dir=to_dir,
        policy_xml_base_url=policy_xml_base_url,
        policy_xml_sas_token=policy_xml_sas_token,
        file_name_prefix=file_name_prefix,
    )
    extractor_parameters.validate()

    manager = ExtractionManager(
        cmd=cmd,
        extractor_parameters=extractor_parameters,
        no_progress=no_progress,
    )
    extraction_state = manager.analyze_service()

    if not no_progress:
        render_extract_table(
            extraction_state=extraction_state,
            detailed=summary_mode == ExtractSummaryMode.DETAILED.value,
        )

    if not extractor_parameters.files_dir:
        return extraction_state.get_content()

    written = extraction_state.write(files_dir=extractor_parameters.files_dir, replace=bool(replace))
    if not no_progress:
        DEFAULT_CONSOLE.print("Templates saved to:\n" + "\n".join(f"-> {path}" for path in written) + "\n")


def render_extract_table(extraction_state: ExtractionState, detailed: bool = False):
    table = get_default_table(include_name=detailed)
    total = 0
    for kind in extraction_state.resources:
        kind_len = len(extraction_state.resources[kind])
        total += kind_len
        row_content = [f"{kind}", f"{kind_len}"]
        if detailed:
            row_content.append("\n".join(extraction_state.resources[kind]))
        table.add_row(*row_content)

    table.title += f" of {extraction_state.extractor_parameters.source_apim_name}\nTotal resources {total}"
    DEFAULT_CONSOLE.print(table)


def get_default_table(include_name: bool = False) -> Table:
    table = Table(
        box=box.MINIMAL,
        expand=False,
        title="Products extraction",
        min_width=79,
        show_footer=True,
    )
    table.add_column("Resource Kind")
    table.add_column("#")
    if include_name:
        table.add_column("Name")

    return table
