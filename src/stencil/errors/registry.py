# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""Unified error registry for stencil error codes and categories."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stencil.errors.base import ErrorCategory, ErrorCode


class ErrorRegistry:
    """Singleton registry for all error codes and categories."""

    _instance: ErrorRegistry | None = None
    _lock = threading.RLock()

    _categories: dict[str, ErrorCategory]
    _codes: dict[str, ErrorCode]

    def __new__(cls) -> ErrorRegistry:
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def get_category(
        self, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        """Get or create a category.

        Args:
            name: The category name
            parent: Optional parent category, only used on creation

        Returns:
            The registered ErrorCategory
        """
        with self._lock:
            category = self._categories.get(name)
            if category is None:
                from stencil.errors.base import ErrorCategory

                category = ErrorCategory(name, parent)
                self._categories[name] = category
            return category

    def get_code(self, code: str, category_name: str = "INTERNAL") -> ErrorCode:
        """Get or create an error code within a category.

        Args:
            code: The error code
            category_name: The category name (defaults to INTERNAL)

        Returns:
            The registered ErrorCode
        """
        with self._lock:
            key = f"{category_name}.{code}"
            error_code = self._codes.get(key)
            if error_code is None:
                from stencil.errors.base import ErrorCode

                error_code = ErrorCode(code, self.get_category(category_name))
                self._codes[key] = error_code
            return error_code

    def lookup_code(self, code: str) -> ErrorCode | None:
        """Look up an error code by bare or qualified name without creating it."""
        with self._lock:
            if code in self._codes:
                return self._codes[code]
            for error_code in self._codes.values():
                if error_code.code == code:
                    return error_code
            return None


registry = ErrorRegistry()
