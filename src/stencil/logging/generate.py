# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Generation of level-specific logging methods.

Rather than hand-writing ``debug``, ``information``, ``warning`` and so on for
every logger class, a class is decorated with the list of levels it should
expose::

    @generate_level_methods("Verbose,Debug,Information,Warning,Error,Fatal")
    class BaseLogger: ...

For each level the decorator adds ``<level>(message_template, *values,
exception=None)``, which forwards to ``write``, and ``is_<level>_enabled()``,
which forwards to ``is_enabled``. Methods already defined on the class body
are left alone. The work happens once, when the class is created.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from stencil.events.level import LogEventLevel
from stencil.logging.errors import GeneratorError

ALL_LEVELS = "Verbose,Debug,Information,Warning,Error,Fatal"

C = TypeVar("C", bound=type)


def parse_level_list(levels: str) -> tuple[LogEventLevel, ...]:
    """Parse a comma-separated list of level names.

    Raises:
        GeneratorError: If the list is empty, names an unknown level or
            repeats a level
    """
    if not isinstance(levels, str) or not levels.strip():
        raise GeneratorError("Level list must be a non-empty string", levels=levels)

    parsed: list[LogEventLevel] = []
    for raw in levels.split(","):
        name = raw.strip()
        try:
            level = LogEventLevel[name.upper()]
        except KeyError:
            raise GeneratorError(f"Unknown level name: {name!r}", levels=levels) from None
        if level in parsed:
            raise GeneratorError(f"Level listed twice: {name!r}", levels=levels)
        parsed.append(level)
    return tuple(parsed)


def _write_method(level: LogEventLevel) -> Callable[..., None]:
    def method(
        self: Any,
        message_template: str | None,
        *property_values: Any,
        exception: BaseException | None = None,
    ) -> None:
        self.write(level, message_template, *property_values, exception=exception)

    method.__doc__ = (
        f"Write a log event with the {level.name.capitalize()} level.\n\n"
        "Args:\n"
        "    message_template: Message template describing the event\n"
        "    *property_values: Values bound to the template's placeholders\n"
        "    exception: Exception related to the event\n"
    )
    return method


def _enabled_method(level: LogEventLevel) -> Callable[..., bool]:
    def method(self: Any) -> bool:
        return self.is_enabled(level)

    method.__doc__ = f"Whether events at the {level.name.capitalize()} level are enabled."
    return method


def _attach(cls: type, name: str, method: Callable[..., Any]) -> None:
    method.__name__ = name
    method.__qualname__ = f"{cls.__qualname__}.{name}"
    method.__module__ = cls.__module__
    setattr(cls, name, method)


def generate_level_methods(levels: str = ALL_LEVELS) -> Callable[[C], C]:
    """Class decorator adding one convenience method per listed level.

    Args:
        levels: Comma-separated level names, e.g. ``"Debug,Information"``

    Returns:
        The decorator

    Raises:
        GeneratorError: If ``levels`` is invalid
    """
    parsed = parse_level_list(levels)

    def decorate(cls: C) -> C:
        for level in parsed:
            name = level.name.lower()
            if name not in cls.__dict__:
                _attach(cls, name, _write_method(level))
            enabled_name = f"is_{name}_enabled"
            if enabled_name not in cls.__dict__:
                _attach(cls, enabled_name, _enabled_method(level))
        cls.generated_levels = parsed
        return cls

    return decorate
