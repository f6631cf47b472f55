# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""A minimum level that can be changed while loggers are in use."""

from __future__ import annotations

from stencil.events.level import LogEventLevel


class LoggingLevelSwitch:
    """
    Holds the minimum enabled level for one or more loggers.

    Reads and writes of a single attribute are atomic, so loggers on other
    threads observe a change on their next call without locking.
    """

    def __init__(self, minimum_level: LogEventLevel = LogEventLevel.INFORMATION) -> None:
        self.minimum_level = minimum_level

    @property
    def minimum_level(self) -> LogEventLevel:
        return self._minimum_level

    @minimum_level.setter
    def minimum_level(self, level: LogEventLevel) -> None:
        if not isinstance(level, LogEventLevel):
            raise TypeError(f"Expected LogEventLevel, got {type(level).__name__}")
        self._minimum_level = level

    def __repr__(self) -> str:
        return f"LoggingLevelSwitch({self._minimum_level.name})"
