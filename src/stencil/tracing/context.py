# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Ambient trace correlation for log events.

The write path reads the current trace and span identifiers from context
variables; it never creates them. Applications (or middleware) establish them
with :func:`set_trace_context` or :func:`trace_span`.
"""

from __future__ import annotations

import contextlib
import contextvars
import uuid
from collections.abc import Iterator
from typing import NamedTuple

trace_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "stencil_trace_id", default=None
)
span_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "stencil_span_id", default=None
)


class TraceContext(NamedTuple):
    """Snapshot of the ambient correlation identifiers."""

    trace_id: str | None
    span_id: str | None


def get_trace_context() -> TraceContext:
    """Return the current trace and span identifiers; absent ones are None."""
    return TraceContext(trace_id_var.get(), span_id_var.get())


def set_trace_context(trace_id: str | None = None, span_id: str | None = None) -> None:
    """Set the current trace context.

    Args:
        trace_id: The trace ID, left unchanged when None
        span_id: The current span ID, left unchanged when None
    """
    if trace_id is not None:
        trace_id_var.set(trace_id)
    if span_id is not None:
        span_id_var.set(span_id)


@contextlib.contextmanager
def trace_span(trace_id: str | None = None) -> Iterator[TraceContext]:
    """Run a block inside a new span.

    The span joins the current trace, or starts one (using ``trace_id`` if
    given) when none is active. The previous context is restored on exit.

    Yields:
        The trace context for the new span
    """
    current_trace_id = trace_id_var.get() or trace_id or uuid.uuid4().hex
    current_span_id = uuid.uuid4().hex[:16]

    token_trace = trace_id_var.set(current_trace_id)
    token_span = span_id_var.set(current_span_id)
    try:
        yield TraceContext(current_trace_id, current_span_id)
    finally:
        trace_id_var.reset(token_trace)
        span_id_var.reset(token_span)
