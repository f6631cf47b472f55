# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil

"""
stencil: structured logging with message templates.

    >>> from stencil import Logger, LogEventLevel
    >>> log = Logger(sink, minimum_level=LogEventLevel.INFORMATION)
    >>> log.information("Hello, {Thing}!", "World")
"""

from __future__ import annotations

from stencil.capture import BindingError, BoundTemplate, MessageTemplateBinder
from stencil.events import (
    LogEvent,
    LogEventLevel,
    LogEventProperty,
    LogEventPropertyValue,
)
from stencil.logging import (
    BaseLogger,
    Logger,
    LoggerProtocol,
    LoggingLevelSwitch,
    LoggingSettings,
    get_logger,
)
from stencil.sinks import LogEventSink
from stencil.templates import MessageTemplate

__version__ = "0.1.0"

__all__ = [
    "BaseLogger",
    "BindingError",
    "BoundTemplate",
    "LogEvent",
    "LogEventLevel",
    "LogEventProperty",
    "LogEventPropertyValue",
    "LogEventSink",
    "Logger",
    "LoggerProtocol",
    "LoggingLevelSwitch",
    "LoggingSettings",
    "MessageTemplate",
    "MessageTemplateBinder",
    "get_logger",
]
