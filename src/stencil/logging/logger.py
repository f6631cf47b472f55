# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
The default logger implementation.

A ``Logger`` gates events by a minimum level, binds them with capture limits
taken from ``LoggingSettings`` and hands each one to a single sink.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stencil.capture.binder import BoundTemplate, MessageTemplateBinder
from stencil.diagnostics import self_log
from stencil.events.level import LogEventLevel
from stencil.logging.base import BaseLogger
from stencil.logging.config import LoggingSettings
from stencil.logging.level_switch import LoggingLevelSwitch
from stencil.sinks.stdlib import StdlibLoggingSink

if TYPE_CHECKING:
    from stencil.capture.errors import BindingError
    from stencil.errors.result import Result
    from stencil.events.event import LogEvent
    from stencil.events.property import LogEventProperty
    from stencil.sinks.protocols import LogEventSink


class Logger(BaseLogger):
    """Logger writing to a sink, filtered by a minimum level."""

    def __init__(
        self,
        sink: LogEventSink | None = None,
        minimum_level: LogEventLevel | LoggingLevelSwitch | None = None,
        settings: LoggingSettings | None = None,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            sink: Receiver of bound events; events are discarded when None
            minimum_level: Least severe enabled level, or a switch holding it;
                defaults to the level in ``settings``
            settings: Capture limits and default level (loads from environment if None)
        """
        self._settings = settings or LoggingSettings.load()
        self._sink = sink

        if isinstance(minimum_level, LoggingLevelSwitch):
            self._level_switch = minimum_level
        elif minimum_level is not None:
            self._level_switch = LoggingLevelSwitch(minimum_level)
        else:
            self._level_switch = LoggingLevelSwitch(self._settings.level)

        self._binder = MessageTemplateBinder(self._settings.create_converter())

    @property
    def level_switch(self) -> LoggingLevelSwitch:
        return self._level_switch

    @property
    def sink(self) -> LogEventSink | None:
        return self._sink

    def set_level(self, level: LogEventLevel) -> None:
        """Set the logger's minimum level.

        Args:
            level: New minimum level
        """
        self._level_switch.minimum_level = level

    def is_enabled(self, level: LogEventLevel) -> bool:
        return level >= self._level_switch.minimum_level

    def bind_message_template(
        self, message_template: str | None, property_values: Any
    ) -> Result[BoundTemplate, BindingError]:
        return self._binder.bind(message_template, property_values)

    def bind_property(
        self, property_name: str | None, value: Any, destructure_objects: bool = False
    ) -> Result[LogEventProperty, BindingError]:
        return self._binder.bind_property(property_name, value, destructure_objects)

    def write_event(self, log_event: LogEvent) -> None:
        """Dispatch ``log_event`` to the sink if its level is enabled."""
        if self._sink is None or not self.is_enabled(log_event.level):
            return
        try:
            self._sink.emit(log_event)
        except Exception as exc:
            self_log.write_exception(
                f"Sink {type(self._sink).__name__} failed to emit event", exc
            )


def get_logger(name: str = "stencil", level: LogEventLevel | None = None) -> Logger:
    """Get a logger forwarding to the standard library logger ``name``.

    Args:
        name: Standard library logger name (typically __name__)
        level: Optional minimum level override

    Returns:
        Configured logger instance
    """
    settings = LoggingSettings.load()
    return Logger(
        sink=StdlibLoggingSink(name),
        minimum_level=level,
        settings=settings,
    )
