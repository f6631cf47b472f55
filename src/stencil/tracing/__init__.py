"""
Trace correlation context for stencil.

Log events record the trace and span identifiers active when they are written.
"""

from __future__ import annotations

from stencil.tracing.context import (
    TraceContext,
    get_trace_context,
    set_trace_context,
    trace_span,
)

__all__ = [
    "TraceContext",
    "get_trace_context",
    "set_trace_context",
    "trace_span",
]
