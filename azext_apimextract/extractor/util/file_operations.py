# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

import json
import os
from pathlib import PurePath
from typing import Any, Callable, Optional, Union

import yaml
from azure.cli.core.azclierror import FileOperationError
from knack.log import get_logger

logger = get_logger(__name__)


def dump_content_to_file(
    content: Union[dict, list, str],
    file_name: str,
    extension: str,
    output_dir: Optional[str] = None,
    replace: bool = False,
) -> str:
    output_dir = normalize_dir(output_dir)
    file_path = os.path.join(output_dir, f"{file_name}.{extension}")
    if os.path.exists(file_path):
        if not replace:
            raise FileOperationError(f"File {file_path} already exists. Use --replace to overwrite it.")
        logger.warning(f"The file {file_path} will be overwritten.")

    if extension == "json":
        content = json.dumps(content, indent=2)
    elif extension in ["yaml", "yml"]:
        content = yaml.safe_dump(content, sort_keys=False)

    logger.debug("Writing %s", file_path)
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(content)

    return file_path


def normalize_dir(dir_path: Optional[str] = None) -> PurePath:
    if not dir_path:
        dir_path = "."
    if "~" in dir_path:
        dir_path = os.path.expanduser(dir_path)
    dir_path = os.path.abspath(dir_path)
    dir_pure_path = PurePath(dir_path)
    if not os.path.exists(str(dir_pure_path)):
        os.makedirs(dir_pure_path, exist_ok=True)

    return dir_pure_path


def read_file_content(file_path: str) -> str:
    from pathlib import Path

    logger.debug("Processing %s", file_path)
    pure_path = Path(os.path.abspath(os.path.expanduser(file_path)))

    if not pure_path.exists():
        raise FileOperationError(f"{file_path} does not exist.")

    if not pure_path.is_file():
        raise FileOperationError(f"{file_path} is not a file.")

    # Try with 'utf-8-sig' first, so that BOM in WinOS won't cause trouble.
    for encoding in ["utf-8-sig", "utf-8"]:
        try:
            logger.debug("Reading %s as %s", file_path, encoding)
            return pure_path.read_text(encoding=encoding)
        except (UnicodeError, UnicodeDecodeError):
            pass

    raise FileOperationError(f"Failed to decode file {file_path}.")


def deserialize_file_content(file_path: str) -> Any:
    """
    Loads a json or yaml document. Files with other extensions are tried as json first, then yaml.
    """
    extension = file_path.split(".")[-1].lower()
    content = read_file_content(file_path)
    if extension == "json":
        return _try_loading_as(loader=json.loads, content=content, error_type=json.JSONDecodeError)
    if extension in ["yaml", "yml"]:
        return _try_loading_as(loader=yaml.safe_load, content=content, error_type=yaml.YAMLError)

    result = _try_loading_as(
        loader=json.loads, content=content, error_type=json.JSONDecodeError, raise_error=False
    )
    if result is None:
        result = _try_loading_as(loader=yaml.safe_load, content=content, error_type=yaml.YAMLError)
    if result is None:
        raise FileOperationError(f"File contents for {file_path} cannot be read.")
    return result


def _try_loading_as(loader: Callable, content: str, error_type: Exception, raise_error: bool = True) -> Optional[Any]:
    try:
        return loader(content)
    except error_type as e:
        if raise_error:
            raise FileOperationError(e)
