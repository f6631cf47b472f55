# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Self-diagnostics for stencil.

Problems that must not surface at logging call sites (dropped events, values
that could not be captured, failing sinks) are reported here instead. Messages
go to the standard library logger ``stencil.selflog``, which carries only a
``NullHandler`` until an application configures it, and optionally to a
callable registered with :func:`enable`. Nothing in this module raises.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime

LOGGER_NAME = "stencil.selflog"

_logger = logging.getLogger(LOGGER_NAME)
_logger.addHandler(logging.NullHandler())

_output: Callable[[str], None] | None = None
_lock = threading.Lock()


def enable(output: Callable[[str], None]) -> None:
    """Route self-diagnostic messages to ``output`` as well as to ``stencil.selflog``.

    Args:
        output: Callable receiving each timestamped message line,
            e.g. ``sys.stderr.write`` or ``list.append``
    """
    global _output
    if output is None:
        raise TypeError("output must be a callable")
    with _lock:
        _output = output


def disable() -> None:
    """Stop routing messages to the callable registered with :func:`enable`."""
    global _output
    with _lock:
        _output = None


def write(message: str, *args: object) -> None:
    """Report a diagnostic message using ``%``-style arguments."""
    try:
        _logger.debug(message, *args)
        output = _output
        if output is None:
            return
        text = message % args if args else message
        output(f"{datetime.now(UTC).isoformat()} {text}")
    except Exception:
        pass


def write_exception(message: str, exception: BaseException) -> None:
    """Report a diagnostic message together with the exception that caused it."""
    try:
        _logger.debug(message, exc_info=exception)
        output = _output
        if output is None:
            return
        output(
            f"{datetime.now(UTC).isoformat()} {message}: "
            f"{type(exception).__name__}: {exception}"
        )
    except Exception:
        pass
