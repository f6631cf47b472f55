# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Conversion of arbitrary Python objects into captured property values.

Rules, applied recursively:

* ``None`` and well-known immutable types are captured as scalars.
* Mappings become dictionary values; other collections and generators
  become sequences. Other iterators (open files, streams, endless counters)
  are not consumed.
* With destructuring requested, dataclasses, pydantic models, named tuples
  and plain objects are captured member by member as structures.
* Anything else is captured as its ``str()`` form.

Nesting deeper than ``maximum_destructuring_depth`` is replaced by the
``DEPTH_EXCEEDED`` marker, so cyclic object graphs terminate.
"""

from __future__ import annotations

import dataclasses
import datetime
import decimal
import enum
import itertools
import pathlib
import types
import uuid
from collections.abc import Collection, Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from stencil.diagnostics import self_log
from stencil.events.property import CaptureMode, LogEventProperty
from stencil.events.values import (
    DEPTH_EXCEEDED,
    DictionaryValue,
    LogEventPropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)

DEFAULT_MAXIMUM_DESTRUCTURING_DEPTH = 10

SCALAR_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bool,
    int,
    float,
    complex,
    decimal.Decimal,
    datetime.datetime,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    enum.Enum,
    pathlib.PurePath,
)


class PropertyValueConverter:
    """Captures values according to configured limits."""

    def __init__(
        self,
        maximum_destructuring_depth: int = DEFAULT_MAXIMUM_DESTRUCTURING_DEPTH,
        maximum_string_length: int | None = None,
        maximum_collection_count: int | None = None,
    ) -> None:
        """
        Args:
            maximum_destructuring_depth: Nesting levels captured below the top-level value
            maximum_string_length: Strings longer than this are truncated
            maximum_collection_count: Sequences and mappings are cut to this many elements
        """
        if maximum_destructuring_depth < 1:
            raise ValueError("maximum_destructuring_depth must be at least 1")
        self.maximum_destructuring_depth = maximum_destructuring_depth
        self.maximum_string_length = maximum_string_length
        self.maximum_collection_count = maximum_collection_count

    def create_property(
        self,
        name: str,
        value: Any,
        capture: CaptureMode = CaptureMode.DEFAULT,
    ) -> LogEventProperty:
        """Capture ``value`` under ``name``."""
        return LogEventProperty(name, self.create_value(value, capture), capture)

    def create_value(
        self, value: Any, capture: CaptureMode = CaptureMode.DEFAULT
    ) -> LogEventPropertyValue:
        """Capture ``value`` using the given capture mode."""
        return self._capture(value, capture, 0)

    def _capture(
        self, value: Any, capture: CaptureMode, depth: int
    ) -> LogEventPropertyValue:
        if isinstance(value, LogEventPropertyValue):
            return value

        if depth > self.maximum_destructuring_depth:
            self_log.write(
                "Maximum destructuring depth %d reached", self.maximum_destructuring_depth
            )
            return DEPTH_EXCEEDED

        if value is None:
            return ScalarValue(None)

        if capture is CaptureMode.STRINGIFY:
            return ScalarValue(self._truncate(self._stringify(value)))

        if isinstance(value, str):
            return ScalarValue(self._truncate(value))

        if isinstance(value, SCALAR_TYPES):
            return ScalarValue(value)

        if isinstance(value, bytearray):
            return ScalarValue(bytes(value))

        if isinstance(value, Mapping):
            return self._capture_mapping(value, capture, depth)

        if capture is CaptureMode.DESTRUCTURE:
            members = self._structured_members(value)
            if members is not None:
                return self._capture_structure(value, members, capture, depth)

        if isinstance(value, (Collection, types.GeneratorType)):
            return SequenceValue(
                tuple(
                    self._capture(item, capture, depth + 1)
                    for item in self._limit(value)
                )
            )

        if capture is CaptureMode.DESTRUCTURE:
            return self._capture_structure(
                value, self._public_attributes(value), capture, depth
            )

        return ScalarValue(self._truncate(self._stringify(value)))

    def _capture_mapping(
        self, value: Mapping[Any, Any], capture: CaptureMode, depth: int
    ) -> DictionaryValue:
        elements: list[tuple[ScalarValue, LogEventPropertyValue]] = []
        for key in self._limit(value.keys()):
            if isinstance(key, SCALAR_TYPES):
                captured_key = ScalarValue(key)
            else:
                captured_key = ScalarValue(self._stringify(key))
            elements.append(
                (captured_key, self._capture(value[key], capture, depth + 1))
            )
        return DictionaryValue(tuple(elements))

    def _capture_structure(
        self,
        value: Any,
        members: list[str],
        capture: CaptureMode,
        depth: int,
    ) -> StructureValue:
        properties: list[LogEventProperty] = []
        for name in members:
            try:
                member = getattr(value, name)
            except Exception as exc:
                captured: LogEventPropertyValue = ScalarValue(
                    f"The property accessor threw an exception: {type(exc).__name__}"
                )
            else:
                captured = self._capture(member, capture, depth + 1)
            properties.append(LogEventProperty(name, captured))
        return StructureValue(tuple(properties), type(value).__name__)

    @staticmethod
    def _structured_members(value: Any) -> list[str] | None:
        if isinstance(value, BaseModel):
            return list(type(value).model_fields)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return [f.name for f in dataclasses.fields(value)]
        if isinstance(value, tuple) and hasattr(value, "_fields"):
            return list(value._fields)
        return None

    @staticmethod
    def _public_attributes(value: Any) -> list[str]:
        names: list[str] = []
        try:
            names.extend(vars(value))
        except TypeError:
            pass
        for cls in type(value).__mro__:
            slots = cls.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            names.extend(s for s in slots if s not in names)
        return [n for n in names if not n.startswith("_")]

    def _limit(self, items: Iterable[Any]) -> Iterable[Any]:
        if self.maximum_collection_count is None:
            return items
        return itertools.islice(items, self.maximum_collection_count)

    def _truncate(self, text: str) -> str:
        limit = self.maximum_string_length
        if limit is None or len(text) <= limit:
            return text
        return text[: limit - 1] + "…"

    @staticmethod
    def _stringify(value: Any) -> str:
        try:
            return str(value)
        except Exception as exc:
            return f"<{type(value).__name__}: str() raised {type(exc).__name__}>"
