# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from .common import (
    is_http_url,
    none_if_empty,
    to_safe_filename,
)
from .file_operations import (
    deserialize_file_content,
    dump_content_to_file,
    normalize_dir,
    read_file_content,
)

__all__ = [
    "deserialize_file_content",
    "dump_content_to_file",
    "is_http_url",
    "none_if_empty",
    "normalize_dir",
    "read_file_content",
    "to_safe_filename",
]
