# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil

"""
Sink boundary and the standard library ``logging`` bridge.
"""

from __future__ import annotations

from stencil.sinks.formatting import LogEventJsonEncoder, StructuredFormatter
from stencil.sinks.protocols import LogEventSink
from stencil.sinks.stdlib import StdlibLoggingSink, configure_console

__all__ = [
    "LogEventSink",
    "LogEventJsonEncoder",
    "StdlibLoggingSink",
    "StructuredFormatter",
    "configure_console",
]
