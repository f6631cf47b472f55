# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""Tokens making up a parsed message template."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from stencil.events.property import CaptureMode
from stencil.events.values import MissingValue

if TYPE_CHECKING:
    from stencil.events.values import LogEventPropertyValue


@dataclass(frozen=True)
class TextToken:
    """A span of literal text."""

    text: str
    start_index: int = 0

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class PropertyToken:
    """A property placeholder such as ``{Name}``, ``{@Order}`` or ``{0,-8:x}``.

    Attributes:
        property_name: Name of the property, without the capture hint
        raw_text: The placeholder exactly as it appeared, braces included
        format: Format specifier following ``:``, if any
        alignment: Field width from ``,``; negative widths pad on the right
        capture: Capture hint given by a leading ``@`` or ``$``
        start_index: Offset of the opening brace in the template
    """

    property_name: str
    raw_text: str
    format: str | None = None
    alignment: int | None = None
    capture: CaptureMode = CaptureMode.DEFAULT
    start_index: int = 0

    @property
    def is_positional(self) -> bool:
        return self.property_name.isascii() and self.property_name.isdigit()

    @property
    def position(self) -> int | None:
        """Zero-based index for positional placeholders, otherwise None."""
        if self.is_positional:
            return int(self.property_name)
        return None

    def render(self, value: LogEventPropertyValue | None) -> str:
        """Render ``value`` into this placeholder.

        Unbound and missing values render as the original placeholder text.
        """
        if value is None or isinstance(value, MissingValue):
            return self.raw_text
        text = value.render(self.format)
        if self.alignment is None:
            return text
        width = abs(self.alignment)
        if self.alignment < 0:
            return text.ljust(width)
        return text.rjust(width)


Token = TextToken | PropertyToken
