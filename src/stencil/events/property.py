# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""Named, captured properties attached to log events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stencil.events.values import LogEventPropertyValue


class CaptureMode(str, Enum):
    """How a value was (or should be) captured."""

    DEFAULT = "default"
    STRINGIFY = "stringify"
    DESTRUCTURE = "destructure"


@dataclass(frozen=True)
class LogEventProperty:
    """A property name paired with its captured value."""

    name: str
    value: LogEventPropertyValue
    capture: CaptureMode = CaptureMode.DEFAULT

    def __post_init__(self) -> None:
        if not self.is_valid_name(self.name):
            raise ValueError(f"Property name must be a non-empty string: {self.name!r}")

    @staticmethod
    def is_valid_name(name: object) -> bool:
        """Check whether ``name`` can be used as a property name."""
        return isinstance(name, str) and bool(name.strip())
