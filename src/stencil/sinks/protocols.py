# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""The boundary between loggers and the sinks receiving their events."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stencil.events.event import LogEvent


@runtime_checkable
class LogEventSink(Protocol):
    """Receives fully bound log events."""

    def emit(self, log_event: LogEvent) -> None:
        """Accept one event. Loggers call this once per enabled, bound write."""
        ...
