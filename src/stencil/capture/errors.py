# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Binding errors.

These never propagate out of logging call sites; the binder returns them
inside ``Failure`` results.
"""

from __future__ import annotations

from typing import Any, Final

from stencil.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, StencilError

BINDING = ErrorCategory.get_or_create("BINDING")
TEMPLATE_MISSING: Final = ErrorCode.get_or_create("TEMPLATE_MISSING", BINDING)
PROPERTY_NAME_INVALID: Final = ErrorCode.get_or_create("PROPERTY_NAME_INVALID", BINDING)
BINDING_FAULT: Final = ErrorCode.get_or_create("BINDING_FAULT", BINDING)


class BindingError(StencilError):
    """Raised (as a value) when a template or property cannot be bound."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = BINDING_FAULT,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message, code=code, severity=severity, context=context, **kwargs
        )

    @classmethod
    def wrap(cls, exception: Exception, message: str | None = None) -> BindingError:
        """Wrap an unexpected exception raised while binding."""
        error = cls(
            message or f"Binding failed: {exception}",
            code=BINDING_FAULT,
            original_type=type(exception).__name__,
            original_message=str(exception),
        )
        error.__cause__ = exception
        return error
