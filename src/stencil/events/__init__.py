# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil

"""
Log events, levels and captured property values.
"""

from __future__ import annotations

from stencil.events.level import LogEventLevel
from stencil.events.values import (
    DEPTH_EXCEEDED,
    MISSING,
    DepthExceededValue,
    DictionaryValue,
    LogEventPropertyValue,
    MissingValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)
from stencil.events.property import CaptureMode, LogEventProperty
from stencil.events.event import LogEvent

__all__ = [
    "LogEventLevel",
    "LogEvent",
    "LogEventProperty",
    "CaptureMode",
    # Values
    "LogEventPropertyValue",
    "ScalarValue",
    "SequenceValue",
    "StructureValue",
    "DictionaryValue",
    "MissingValue",
    "DepthExceededValue",
    "MISSING",
    "DEPTH_EXCEEDED",
]
