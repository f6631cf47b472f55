# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil

"""
Capture of property values and binding of message templates.
"""

from __future__ import annotations

from stencil.capture.binder import (
    BoundTemplate,
    MessageTemplateBinder,
    PropertyBinder,
    normalize_values,
)
from stencil.capture.converter import PropertyValueConverter
from stencil.capture.errors import BindingError

__all__ = [
    "BindingError",
    "BoundTemplate",
    "MessageTemplateBinder",
    "PropertyBinder",
    "PropertyValueConverter",
    "normalize_values",
]
