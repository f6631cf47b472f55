# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""The bound log event handed to sinks."""

from __future__ import annotations

import traceback
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any

from stencil.events.level import LogEventLevel
from stencil.events.property import LogEventProperty
from stencil.events.values import LogEventPropertyValue
from stencil.templates.template import MessageTemplate


@dataclass(frozen=True)
class LogEvent:
    """
    An immutable, fully bound log event.

    Attributes:
        timestamp: When the event was written
        level: Severity of the event
        message_template: The parsed template the message renders from
        properties: Captured values keyed by property name, in binding order
        exception: Exception associated with the event, if any
        trace_id: Ambient trace identifier at write time, if any
        span_id: Ambient span identifier at write time, if any
    """

    timestamp: datetime
    level: LogEventLevel
    message_template: MessageTemplate
    properties: Mapping[str, LogEventPropertyValue] = field(
        default_factory=dict
    )
    exception: BaseException | None = None
    trace_id: str | None = None
    span_id: str | None = None

    def __post_init__(self) -> None:
        # Snapshot so later changes to the caller's mapping are not observed
        object.__setattr__(
            self, "properties", MappingProxyType(dict(self.properties))
        )

    @classmethod
    def from_properties(
        cls,
        timestamp: datetime,
        level: LogEventLevel,
        message_template: MessageTemplate,
        properties: Iterable[LogEventProperty],
        exception: BaseException | None = None,
        trace_id: str | None = None,
        span_id: str | None = None,
    ) -> LogEvent:
        """Build an event from bound properties; the first property bound under a name wins."""
        values: dict[str, LogEventPropertyValue] = {}
        for prop in properties:
            values.setdefault(prop.name, prop.value)
        return cls(
            timestamp=timestamp,
            level=level,
            message_template=message_template,
            properties=values,
            exception=exception,
            trace_id=trace_id,
            span_id=span_id,
        )

    def render_message(self) -> str:
        """Render the message template against this event's properties."""
        return self.message_template.render(self.properties)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain representation suitable for JSON serialization."""
        data: dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.name.capitalize(),
            "message_template": self.message_template.text,
            "message": self.render_message(),
            "properties": {
                name: value.to_primitive() for name, value in self.properties.items()
            },
        }
        if self.exception is not None:
            data["exception"] = "".join(
                traceback.format_exception(
                    type(self.exception), self.exception, self.exception.__traceback__
                )
            )
        if self.trace_id is not None:
            data["trace_id"] = self.trace_id
        if self.span_id is not None:
            data["span_id"] = self.span_id
        return data
