# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Captured property values.

A captured value is an immutable snapshot of whatever the caller passed to a
logging method. Four shapes exist (scalar, sequence, structure and
dictionary), nesting recursively, plus two markers used by the binder when a
placeholder had no value or capture stopped at the depth limit.

Scalars honour Python format specifiers, strings included, so
``{Name:>10}`` pads. The ``l`` specifier renders strings without the quotes
used for nested values.
"""

from __future__ import annotations

import builtins
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from stencil.events.property import LogEventProperty


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class LogEventPropertyValue(ABC):
    """Base class for all captured values."""

    @abstractmethod
    def render(self, format: str | None = None, *, nested: bool = False) -> str:
        """Render the value as text.

        Args:
            format: Optional format specifier from the placeholder
            nested: Whether the value sits inside another value; nested
                strings are quoted

        Returns:
            The rendered text
        """

    @abstractmethod
    def to_primitive(self) -> Any:
        """Return a plain Python representation (dicts, lists, scalars)."""

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class ScalarValue(LogEventPropertyValue):
    """A single atomic value: number, string, date, enum member and so on."""

    value: Any

    def render(self, format: str | None = None, *, nested: bool = False) -> str:
        value = self.value
        if value is None:
            return "null"
        if isinstance(value, str):
            if format == "l":
                return value
            if nested:
                return _quote(value)
        if format:
            try:
                return builtins.format(value, format)
            except (TypeError, ValueError):
                pass
        return str(value)

    def to_primitive(self) -> Any:
        return self.value


@dataclass(frozen=True)
class SequenceValue(LogEventPropertyValue):
    """An ordered collection of captured values."""

    elements: tuple[LogEventPropertyValue, ...] = ()

    def render(self, format: str | None = None, *, nested: bool = False) -> str:
        return (
            "["
            + ", ".join(e.render(format, nested=True) for e in self.elements)
            + "]"
        )

    def to_primitive(self) -> list[Any]:
        return [e.to_primitive() for e in self.elements]


@dataclass(frozen=True)
class StructureValue(LogEventPropertyValue):
    """A destructured object: named member values and an optional type tag."""

    properties: tuple[LogEventProperty, ...] = ()
    type_tag: str | None = None

    def render(self, format: str | None = None, *, nested: bool = False) -> str:
        members = ", ".join(
            f"{p.name}: {p.value.render(format, nested=True)}" for p in self.properties
        )
        body = f"{{ {members} }}" if members else "{ }"
        if self.type_tag:
            return f"{self.type_tag} {body}"
        return body

    def to_primitive(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.type_tag:
            result["_typeTag"] = self.type_tag
        for prop in self.properties:
            result[prop.name] = prop.value.to_primitive()
        return result


@dataclass(frozen=True)
class DictionaryValue(LogEventPropertyValue):
    """A mapping from scalar keys to captured values."""

    elements: tuple[tuple[ScalarValue, LogEventPropertyValue], ...] = ()

    def render(self, format: str | None = None, *, nested: bool = False) -> str:
        items = ", ".join(
            f"{k.render(nested=True)}: {v.render(format, nested=True)}"
            for k, v in self.elements
        )
        return "{" + items + "}"

    def to_primitive(self) -> dict[str, Any]:
        return {str(k.value): v.to_primitive() for k, v in self.elements}


@dataclass(frozen=True)
class MissingValue(LogEventPropertyValue):
    """Bound to placeholders for which the caller supplied no value."""

    def render(self, format: str | None = None, *, nested: bool = False) -> str:
        return ""

    def to_primitive(self) -> None:
        return None

    def __repr__(self) -> str:
        return "MISSING"


@dataclass(frozen=True)
class DepthExceededValue(LogEventPropertyValue):
    """Stands in for members below the maximum destructuring depth."""

    def render(self, format: str | None = None, *, nested: bool = False) -> str:
        return "..."

    def to_primitive(self) -> str:
        return "..."

    def __repr__(self) -> str:
        return "DEPTH_EXCEEDED"


MISSING = MissingValue()
DEPTH_EXCEEDED = DepthExceededValue()
