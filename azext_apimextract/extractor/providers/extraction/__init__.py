# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from .manager import ExtractionManager, ExtractionState, extract_products
from .parameters import ExtractorParameters
from .policy import PolicyExtractor
from .products import ProductExtractor

__all__ = [
    "ExtractionManager",
    "ExtractionState",
    "ExtractorParameters",
    "PolicyExtractor",
    "ProductExtractor",
    "extract_products",
]
