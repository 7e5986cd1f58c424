# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

"""
common: Defines common utility functions and components.

"""

import re
from typing import Optional

from knack.log import get_logger

logger = get_logger(__name__)

_UNSAFE_FILENAME_CHARS_RE = re.compile(r'[<>:"/\\|?*\s]')


def to_safe_filename(name: str) -> str:
    """
    Replaces characters that are not allowed in file names across platforms.
    """
    return _UNSAFE_FILENAME_CHARS_RE.sub("_", name)


def is_http_url(value: Optional[str]) -> bool:
    if not isinstance(value, str):
        return False
    return value.lower().startswith(("https://", "http://"))


def none_if_empty(value: Optional[str]) -> Optional[str]:
    if isinstance(value, str) and not value.strip():
        return None
    return value
