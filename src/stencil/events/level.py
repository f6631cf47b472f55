# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""Log event levels."""

from __future__ import annotations

import logging
from enum import IntEnum


class LogEventLevel(IntEnum):
    """Ordered severity of a log event, from least to most severe."""

    VERBOSE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    def to_stdlib_level(self) -> int:
        """Convert to standard library logging level.

        Returns:
            Standard library logging level integer
        """
        return _STDLIB_LEVELS[self]

    @classmethod
    def from_string(cls, value: str) -> LogEventLevel:
        """Convert a string to a LogEventLevel.

        Accepts level names case-insensitively, plus the common short forms
        ``info``, ``warn``, ``critical`` and ``trace``.

        Args:
            value: String representation of level

        Returns:
            LogEventLevel enum value

        Raises:
            ValueError: If the string doesn't match a valid level
        """
        name = value.strip().upper()
        name = _ALIASES.get(name, name)
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Invalid log level: {value}") from None


_STDLIB_LEVELS: dict[LogEventLevel, int] = {
    LogEventLevel.VERBOSE: logging.DEBUG,
    LogEventLevel.DEBUG: logging.DEBUG,
    LogEventLevel.INFORMATION: logging.INFO,
    LogEventLevel.WARNING: logging.WARNING,
    LogEventLevel.ERROR: logging.ERROR,
    LogEventLevel.FATAL: logging.CRITICAL,
}

_ALIASES = {
    "TRACE": "VERBOSE",
    "INFO": "INFORMATION",
    "WARN": "WARNING",
    "CRITICAL": "FATAL",
}
