# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""Bridge from stencil events to the standard library ``logging`` module."""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

from stencil.sinks.formatting import EVENT_ATTRIBUTE, StructuredFormatter

if TYPE_CHECKING:
    from stencil.events.event import LogEvent
    from stencil.logging.config import LoggingSettings


class StdlibLoggingSink:
    """Emits each event as a record on a standard library logger.

    The record message is the rendered template and the event itself is
    attached as ``record.stencil_event``.
    """

    def __init__(self, name: str | logging.Logger = "stencil") -> None:
        if isinstance(name, str):
            self.logger = logging.getLogger(name)
        else:
            self.logger = name

    def emit(self, log_event: LogEvent) -> None:
        level = log_event.level.to_stdlib_level()
        if not self.logger.isEnabledFor(level):
            return
        exc_info = None
        if log_event.exception is not None:
            exception = log_event.exception
            exc_info = (type(exception), exception, exception.__traceback__)
        self.logger.log(
            level,
            "%s",
            log_event.render_message(),
            exc_info=exc_info,
            extra={EVENT_ATTRIBUTE: log_event},
        )


def configure_console(
    name: str = "stencil",
    settings: LoggingSettings | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a stream handler with a ``StructuredFormatter`` to logger ``name``.

    Existing handlers are replaced and propagation is turned off, so calling
    this twice does not duplicate output.

    Args:
        name: Standard library logger name
        settings: Formatting options (defaults are used if None)
        stream: Output stream, stdout if None

    Returns:
        The configured standard library logger
    """
    json_format = settings.json_format if settings is not None else False
    include_timestamp = settings.include_timestamp if settings is not None else True

    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        StructuredFormatter(json_format=json_format, include_timestamp=include_timestamp)
    )
    handler.setLevel(logging.NOTSET)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger
