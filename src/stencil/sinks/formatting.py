# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Formatting of stdlib log records that carry stencil events.

``StdlibLoggingSink`` attaches the originating ``LogEvent`` to each record it
creates; ``StructuredFormatter`` uses it to output either the rendered message
followed by its properties, or a JSON document.
"""

from __future__ import annotations

import datetime
import enum
import json
import logging
import uuid
from typing import Any

from stencil.events.event import LogEvent

EVENT_ATTRIBUTE = "stencil_event"


class LogEventJsonEncoder(json.JSONEncoder):
    """JSON encoder that handles the scalar types captured in events.

    Unserializable objects fall back to their string form so encoding never
    fails on an exotic property value.
    """

    def default(self, obj: Any) -> Any:
        try:
            if isinstance(obj, (datetime.datetime, datetime.date, datetime.time)):
                return obj.isoformat()
            if isinstance(obj, datetime.timedelta):
                return obj.total_seconds()
            if isinstance(obj, uuid.UUID):
                return str(obj)
            if isinstance(obj, enum.Enum):
                return obj.value
            if isinstance(obj, bytes):
                return obj.hex()
            return str(obj)
        except Exception as e:
            return f"<Unserializable {obj.__class__.__name__}: {e}>"


class StructuredFormatter(logging.Formatter):
    """Formatter for records produced by ``StdlibLoggingSink``."""

    def __init__(self, json_format: bool = False, include_timestamp: bool = True) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format records as JSON
            include_timestamp: Whether to include timestamps
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp

        fmt = "[%(levelname)s] %(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        log_event = getattr(record, EVENT_ATTRIBUTE, None)
        if not isinstance(log_event, LogEvent):
            return super().format(record)
        if self.json_format:
            return self._format_json(log_event)
        return self._format_text(record, log_event)

    def _format_json(self, log_event: LogEvent) -> str:
        data = log_event.to_dict()
        if not self.include_timestamp:
            data.pop("timestamp", None)
        return json.dumps(data, cls=LogEventJsonEncoder, ensure_ascii=False)

    def _format_text(self, record: logging.LogRecord, log_event: LogEvent) -> str:
        message = super().format(record)
        rendered = {
            token.property_name
            for token in log_event.message_template.property_tokens
        }
        extra = {k: v for k, v in log_event.properties.items() if k not in rendered}
        if not extra:
            return message
        ctx_str = " ".join(f"{k}={v.render(nested=True)}" for k, v in extra.items())
        # The traceback, if any, stays at the end
        if record.exc_info and record.exc_text and message.endswith(record.exc_text):
            head = message[: -len(record.exc_text)].rstrip("\n")
            return f"{head} {ctx_str}\n{record.exc_text}"
        return f"{message} {ctx_str}"
