# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""Parsed message templates."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property

from stencil.events.values import LogEventPropertyValue
from stencil.templates.tokens import PropertyToken, TextToken, Token


@dataclass(frozen=True)
class MessageTemplate:
    """
    A message template split into literal text and property placeholders.

    Instances are immutable; the same template text always parses into an
    equal token sequence.
    """

    text: str
    tokens: tuple[Token, ...]

    @cached_property
    def property_tokens(self) -> tuple[PropertyToken, ...]:
        return tuple(t for t in self.tokens if isinstance(t, PropertyToken))

    @cached_property
    def is_positional(self) -> bool:
        """True when every placeholder is positional, e.g. ``{0} and {1}``."""
        props = self.property_tokens
        return bool(props) and all(t.is_positional for t in props)

    def render(self, properties: Mapping[str, LogEventPropertyValue]) -> str:
        """Render the template, substituting values by property name.

        Args:
            properties: Captured values keyed by property name

        Returns:
            The rendered message text
        """
        parts: list[str] = []
        for token in self.tokens:
            if isinstance(token, TextToken):
                parts.append(token.text)
            else:
                parts.append(token.render(properties.get(token.property_name)))
        return "".join(parts)

    def __str__(self) -> str:
        return self.text


EMPTY_TEMPLATE = MessageTemplate("", ())
