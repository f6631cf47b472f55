# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Shared default behaviour for loggers.

``BaseLogger`` implements every logger operation except ``write_event``.
Subclasses override individual operations (typically ``is_enabled`` and the
two ``bind_*`` methods) where they are configured differently; anything not
overridden binds with a module-wide default binder and treats every level as
enabled.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from stencil.capture.binder import BoundTemplate, MessageTemplateBinder
from stencil.diagnostics import self_log
from stencil.events.event import LogEvent
from stencil.events.level import LogEventLevel
from stencil.events.property import LogEventProperty
from stencil.logging.generate import ALL_LEVELS, generate_level_methods
from stencil.tracing.context import get_trace_context

if TYPE_CHECKING:
    from stencil.capture.errors import BindingError
    from stencil.errors.result import Result

SOURCE_CONTEXT_PROPERTY_NAME = "SourceContext"

_default_binder = MessageTemplateBinder()


@generate_level_methods(ALL_LEVELS)
class BaseLogger(ABC):
    """Abstract logger supplying default implementations of the logger interface."""

    @abstractmethod
    def write_event(self, log_event: LogEvent) -> None:
        """Write an already bound event to the log."""

    def is_enabled(self, level: LogEventLevel) -> bool:
        """Determine if events at the specified level will be passed to sinks.

        Returns:
            Always True; configured loggers narrow this
        """
        return True

    def write(
        self,
        level: LogEventLevel,
        message_template: str | None,
        *property_values: Any,
        exception: BaseException | None = None,
    ) -> None:
        """Write a log event with the specified level and associated exception.

        No binding work is done when ``level`` is disabled. The event is dropped
        silently if binding fails. Faults raised by the level check, binding or
        sinks are reported to self-diagnostics instead of the caller.

        Args:
            level: The level of the event
            message_template: Message template describing the event
            *property_values: Objects positionally formatted into the template
            exception: Exception related to the event
        """
        try:
            if not self.is_enabled(level):
                return
            if message_template is None:
                return

            timestamp = datetime.now(UTC)
            result = self.bind_message_template(message_template, property_values)
            if not result.is_success:
                return
            template, properties = result.value
            trace = get_trace_context()
            log_event = LogEvent.from_properties(
                timestamp,
                level,
                template,
                properties,
                exception=exception,
                trace_id=trace.trace_id,
                span_id=trace.span_id,
            )
            self.write_event(log_event)
        except Exception as exc:
            self_log.write_exception(
                f"Failed to write event for template {message_template!r}", exc
            )

    def bind_message_template(
        self, message_template: str | None, property_values: Any
    ) -> Result[BoundTemplate, BindingError]:
        """Bind a set of values to a message template.

        Example:
            >>> result = logger.bind_message_template("Hello, {Name}!", ["World"])
            >>> template, properties = result.value
            >>> template.render({p.name: p.value for p in properties})
            'Hello, World!'

        Returns:
            Success with the parsed template and its properties, or Failure if
            the template is absent
        """
        return _default_binder.bind(message_template, property_values)

    def bind_property(
        self, property_name: str | None, value: Any, destructure_objects: bool = False
    ) -> Result[LogEventProperty, BindingError]:
        """Capture a single property value.

        Args:
            property_name: The name of the property; must be non-empty
            value: The property value
            destructure_objects: Capture composite values as structures rather
                than as scalars or simple sequences
        """
        return _default_binder.bind_property(property_name, value, destructure_objects)

    def for_context(
        self, property_name: str, value: Any, destructure_objects: bool = False
    ) -> BaseLogger:
        """Create a logger that enriches events with the specified property.

        An invalid property name yields this logger unchanged.
        """
        result = self.bind_property(property_name, value, destructure_objects)
        if not result.is_success:
            return self
        return ContextualLogger(self, (result.value,))

    def for_source(self, source: type | None) -> BaseLogger:
        """Create a logger that marks events as coming from ``source``.

        The ``SourceContext`` property is set to the type's dotted path.
        """
        if source is None:
            return self
        return self.for_context(
            SOURCE_CONTEXT_PROPERTY_NAME, f"{source.__module__}.{source.__qualname__}"
        )


class ContextualLogger(BaseLogger):
    """
    Adds fixed properties to the events of a parent logger.

    Properties bound from the message template take precedence over
    context properties with the same name.
    """

    def __init__(
        self, parent: BaseLogger, properties: Iterable[LogEventProperty]
    ) -> None:
        self._parent = parent
        self._properties = tuple(properties)

    @property
    def properties(self) -> tuple[LogEventProperty, ...]:
        return self._properties

    def is_enabled(self, level: LogEventLevel) -> bool:
        return self._parent.is_enabled(level)

    def bind_message_template(
        self, message_template: str | None, property_values: Any
    ) -> Result[BoundTemplate, BindingError]:
        return self._parent.bind_message_template(message_template, property_values)

    def bind_property(
        self, property_name: str | None, value: Any, destructure_objects: bool = False
    ) -> Result[LogEventProperty, BindingError]:
        return self._parent.bind_property(property_name, value, destructure_objects)

    def for_context(
        self, property_name: str, value: Any, destructure_objects: bool = False
    ) -> BaseLogger:
        result = self.bind_property(property_name, value, destructure_objects)
        if not result.is_success:
            return self
        # Newest context first so it wins over outer scopes
        return ContextualLogger(self._parent, (result.value, *self._properties))

    def write_event(self, log_event: LogEvent) -> None:
        properties = dict(log_event.properties)
        for prop in self._properties:
            properties.setdefault(prop.name, prop.value)
        self._parent.write_event(dataclasses.replace(log_event, properties=properties))
