# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil

"""
Message templates: parsing, caching and rendering.
"""

from __future__ import annotations

from stencil.templates.cache import MessageTemplateCache
from stencil.templates.parser import MessageTemplateParser
from stencil.templates.template import EMPTY_TEMPLATE, MessageTemplate
from stencil.templates.tokens import PropertyToken, TextToken

__all__ = [
    "EMPTY_TEMPLATE",
    "MessageTemplate",
    "MessageTemplateCache",
    "MessageTemplateParser",
    "PropertyToken",
    "TextToken",
]
