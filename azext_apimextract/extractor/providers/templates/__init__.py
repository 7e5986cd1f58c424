# coding=utf-8
# ----------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License file in the project root for license information.
# ----------------------------------------------------------------------------------------------

from .builder import Template, TemplateBuilder
from .resources import (
    GroupTemplateResource,
    PolicyTemplateResource,
    ProductApiTemplateResource,
    ProductTemplateResource,
    ProductTemplateResources,
    TagTemplateResource,
)

__all__ = [
    "GroupTemplateResource",
    "PolicyTemplateResource",
    "ProductApiTemplateResource",
    "ProductTemplateResource",
    "ProductTemplateResources",
    "TagTemplateResource",
    "Template",
    "TemplateBuilder",
]
