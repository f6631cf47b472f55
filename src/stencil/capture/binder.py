# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Binding of message templates to supplied values.

Binding rules:

* When every placeholder is positional (``{0} and {1}``), each is bound to the
  value at its index.
* Otherwise placeholders, positional ones included, consume values in template
  order.
* Placeholders without a value are bound to ``MISSING``; surplus values are
  ignored and reported to self-diagnostics.
* A property name is bound once. Later placeholders with the same name still
  consume a value, but the first bound value is kept.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple

from stencil.capture.converter import PropertyValueConverter
from stencil.capture.errors import (
    PROPERTY_NAME_INVALID,
    TEMPLATE_MISSING,
    BindingError,
)
from stencil.diagnostics import self_log
from stencil.errors.result import Failure, Result, Success
from stencil.events.property import CaptureMode, LogEventProperty
from stencil.events.values import MISSING
from stencil.templates.cache import MessageTemplateCache
from stencil.templates.template import MessageTemplate


class BoundTemplate(NamedTuple):
    """A parsed template and the properties bound to its placeholders."""

    template: MessageTemplate
    properties: tuple[LogEventProperty, ...]


def normalize_values(property_values: Any) -> tuple[Any, ...]:
    """Coerce the values argument of a logging call into a tuple.

    ``None`` means no values. A list or tuple is used as is. Any other object
    was most likely meant as the only value, so it is wrapped.
    """
    if property_values is None:
        return ()
    if isinstance(property_values, (list, tuple)):
        return tuple(property_values)
    return (property_values,)


class PropertyBinder:
    """Matches supplied values to the placeholders of a parsed template."""

    def __init__(self, converter: PropertyValueConverter) -> None:
        self._converter = converter

    def construct_properties(
        self, template: MessageTemplate, values: Sequence[Any]
    ) -> tuple[LogEventProperty, ...]:
        tokens = template.property_tokens
        if not tokens:
            if values:
                self_log.write(
                    "Template %r has no placeholders but %d values were supplied",
                    template.text,
                    len(values),
                )
            return ()
        if template.is_positional:
            return self._construct_positional(template, values)
        return self._construct_named(template, values)

    def _construct_positional(
        self, template: MessageTemplate, values: Sequence[Any]
    ) -> tuple[LogEventProperty, ...]:
        bound: dict[str, LogEventProperty] = {}
        used: set[int] = set()
        for token in template.property_tokens:
            if token.property_name in bound:
                continue
            position = token.position
            if position is not None and position < len(values):
                used.add(position)
                bound[token.property_name] = self._converter.create_property(
                    token.property_name, values[position], token.capture
                )
            else:
                bound[token.property_name] = LogEventProperty(
                    token.property_name, MISSING, token.capture
                )
        if len(used) < len(values):
            self_log.write(
                "Template %r ignored %d unreferenced positional values",
                template.text,
                len(values) - len(used),
            )
        return tuple(bound.values())

    def _construct_named(
        self, template: MessageTemplate, values: Sequence[Any]
    ) -> tuple[LogEventProperty, ...]:
        bound: dict[str, LogEventProperty] = {}
        tokens = template.property_tokens
        for index, token in enumerate(tokens):
            if index < len(values):
                if token.property_name in bound:
                    continue
                bound[token.property_name] = self._converter.create_property(
                    token.property_name, values[index], token.capture
                )
            elif token.property_name not in bound:
                bound[token.property_name] = LogEventProperty(
                    token.property_name, MISSING, token.capture
                )
        if len(values) > len(tokens):
            self_log.write(
                "Template %r ignored %d surplus values",
                template.text,
                len(values) - len(tokens),
            )
        return tuple(bound.values())


class MessageTemplateBinder:
    """
    Parses templates and binds values to them.

    Neither entry point raises: problems are returned as ``Failure`` results
    carrying a ``BindingError``.
    """

    def __init__(
        self,
        converter: PropertyValueConverter | None = None,
        cache: MessageTemplateCache | None = None,
    ) -> None:
        self.converter = converter or PropertyValueConverter()
        self.cache = cache or MessageTemplateCache()
        self._property_binder = PropertyBinder(self.converter)

    def bind(
        self, message_template: str | None, property_values: Any = None
    ) -> Result[BoundTemplate, BindingError]:
        """Parse ``message_template`` and bind ``property_values`` to it.

        Args:
            message_template: Template text such as ``"Hello, {Name}!"``
            property_values: Values in placeholder order; a single non-sequence
                value is treated as a one-element sequence

        Returns:
            Success with the bound template, or Failure when the template is
            absent or binding failed unexpectedly
        """
        if message_template is None:
            return Failure(
                BindingError("No message template was supplied", code=TEMPLATE_MISSING)
            )
        try:
            template = self.cache.parse(message_template)
            properties = self._property_binder.construct_properties(
                template, normalize_values(property_values)
            )
            return Success(BoundTemplate(template, properties))
        except Exception as exc:
            self_log.write_exception(
                f"Failed to bind message template {message_template!r}", exc
            )
            return Failure(BindingError.wrap(exc))

    def bind_property(
        self, property_name: str | None, value: Any, destructure_objects: bool = False
    ) -> Result[LogEventProperty, BindingError]:
        """Capture a single named value using the same rules as template binding.

        Args:
            property_name: Name of the property; must be non-empty
            value: The value to capture
            destructure_objects: Capture composite values as structures
                rather than as their string form

        Returns:
            Success with the property, or Failure when the name is invalid
        """
        if not LogEventProperty.is_valid_name(property_name):
            return Failure(
                BindingError(
                    "Property name must be a non-empty string",
                    code=PROPERTY_NAME_INVALID,
                    property_name=property_name,
                )
            )
        capture = CaptureMode.DESTRUCTURE if destructure_objects else CaptureMode.DEFAULT
        try:
            return Success(self.converter.create_property(property_name, value, capture))
        except Exception as exc:
            self_log.write_exception(f"Failed to bind property {property_name!r}", exc)
            return Failure(BindingError.wrap(exc))
