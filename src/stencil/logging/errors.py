# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Errors raised while setting up logging.

Unlike binding errors these do propagate: they surface invalid settings or an
invalid level list at configuration and class-definition time, never from a
logging call.
"""

from __future__ import annotations

import traceback
from typing import Any, Final, TypeVar

from stencil.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, StencilError

LOGGING = ErrorCategory.get_or_create("LOGGING")
LOGGING_ERROR: Final = ErrorCode.get_or_create("LOGGING_ERROR", LOGGING)
LOGGING_CONFIGURATION: Final = ErrorCode.get_or_create("LOGGING_CONFIGURATION", LOGGING)
LEVEL_GENERATION: Final = ErrorCode.get_or_create("LEVEL_GENERATION", LOGGING)

T = TypeVar("T", bound="LoggingError")


class LoggingError(StencilError):
    """Base exception for logging setup errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = LOGGING_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )

    @classmethod
    def wrap(
        cls: type[T],
        exception: Exception,
        message: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> T:
        """Wrap an existing error.

        Args:
            exception: The original exception to wrap
            message: Human-readable error message (defaults to exception message)
            context: Additional contextual information

        Returns:
            A new instance of the LoggingError subclass
        """
        merged_context = dict(context or {})
        merged_context.update(
            {
                "original_type": type(exception).__name__,
                "original_message": str(exception),
                "traceback": traceback.format_exception(
                    type(exception), exception, exception.__traceback__
                ),
            }
        )
        error = cls(message or f"Error occurred: {exception}", context=merged_context)
        error.__cause__ = exception
        return error


class LoggingConfigurationError(LoggingError):
    """Logging settings could not be loaded or validated."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("code", LOGGING_CONFIGURATION)
        super().__init__(message, **kwargs)


class GeneratorError(LoggingError):
    """The level list given to the level-method generator is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("code", LEVEL_GENERATION)
        super().__init__(message, **kwargs)
