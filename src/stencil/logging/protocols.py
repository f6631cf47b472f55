# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil

"""
Logger interface definitions for stencil.

Methods on loggers never raise: invalid input is ignored or reported through
``Failure`` results, and unexpected faults are sent to self-diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from stencil.capture.binder import BoundTemplate
    from stencil.capture.errors import BindingError
    from stencil.errors.result import Result
    from stencil.events.event import LogEvent
    from stencil.events.level import LogEventLevel
    from stencil.events.property import LogEventProperty


class LoggerProtocol(Protocol):
    """
    Protocol defining the interface for stencil loggers.

    This protocol is NOT runtime_checkable and should be used
    for static type checking only.
    """

    def for_context(
        self, property_name: str, value: Any, destructure_objects: bool = False
    ) -> LoggerProtocol:
        """Create a logger that enriches events with the specified property."""
        ...

    def for_source(self, source: type | None) -> LoggerProtocol:
        """Create a logger that marks events as coming from ``source``."""
        ...

    def write_event(self, log_event: LogEvent) -> None:
        """Write an already bound event."""
        ...

    def write(
        self,
        level: LogEventLevel,
        message_template: str | None,
        *property_values: Any,
        exception: BaseException | None = None,
    ) -> None:
        """Bind and write an event at ``level``."""
        ...

    def is_enabled(self, level: LogEventLevel) -> bool:
        """Whether events at ``level`` are passed through to sinks."""
        ...

    def bind_message_template(
        self, message_template: str | None, property_values: Any
    ) -> Result[BoundTemplate, BindingError]:
        """Bind values to a message template using the configured capture rules."""
        ...

    def bind_property(
        self, property_name: str | None, value: Any, destructure_objects: bool = False
    ) -> Result[LogEventProperty, BindingError]:
        """Capture a single property using the configured capture rules."""
        ...

    def verbose(
        self,
        message_template: str | None,
        *property_values: Any,
        exception: BaseException | None = None,
    ) -> None: ...

    def debug(
        self,
        message_template: str | None,
        *property_values: Any,
        exception: BaseException | None = None,
    ) -> None: ...

    def information(
        self,
        message_template: str | None,
        *property_values: Any,
        exception: BaseException | None = None,
    ) -> None: ...

    def warning(
        self,
        message_template: str | None,
        *property_values: Any,
        exception: BaseException | None = None,
    ) -> None: ...

    def error(
        self,
        message_template: str | None,
        *property_values: Any,
        exception: BaseException | None = None,
    ) -> None: ...

    def fatal(
        self,
        message_template: str | None,
        *property_values: Any,
        exception: BaseException | None = None,
    ) -> None: ...
