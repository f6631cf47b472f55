# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil

"""
Error handling for stencil.
"""

from __future__ import annotations

from stencil.errors.base import (
    INTERNAL,
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    StencilError,
)
from stencil.errors.registry import registry
from stencil.errors.result import Failure, Result, Success

__all__ = [
    # Error categories
    "ErrorCode",
    "ErrorCategory",
    "ErrorSeverity",
    "INTERNAL",
    "INTERNAL_ERROR",
    "registry",
    # Base errors
    "StencilError",
    # Results
    "Result",
    "Success",
    "Failure",
]
