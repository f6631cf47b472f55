# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Result objects for functional error handling.

The binding layer reports failures as values rather than raising, so logging
call sites can branch on ``is_success`` and drop the event otherwise.
"""

from __future__ import annotations

import traceback
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

T = TypeVar("T")
E = TypeVar("E", bound=Exception)
U = TypeVar("U")


class Result(Generic[T, E], ABC):
    """Abstract base class for Result monad."""

    @property
    @abstractmethod
    def is_success(self) -> bool: ...

    @property
    @abstractmethod
    def is_failure(self) -> bool: ...

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> Result[U, E]: ...

    @abstractmethod
    def unwrap(self) -> T: ...

    @abstractmethod
    def unwrap_or(self, default: T) -> T: ...

    def __bool__(self) -> bool:
        return self.is_success


@dataclass(frozen=True)
class Success(Result[T, E], Generic[T, E]):
    """
    Represents a successful result with a value.

    Attributes:
        value: The successful result value
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        """
        Map the value of a successful result.

        Args:
            func: The function to apply to the value

        Returns:
            A new Success with the mapped value, or a Failure if ``func`` raised
        """
        try:
            return Success(func(self.value))
        except Exception as e:
            return Failure(cast("E", e))

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Result[T, E], Generic[T, E]):
    """
    Represents a failed result with an error.

    Attributes:
        error: The error that caused the failure
        traceback: Formatted traceback of the error, when it was raised
    """

    error: E
    traceback: str | None = None

    def __post_init__(self) -> None:
        if self.traceback is None and self.error.__traceback__ is not None:
            # frozen dataclass
            object.__setattr__(
                self,
                "traceback",
                "".join(
                    traceback.format_exception(
                        type(self.error), self.error, self.error.__traceback__
                    )
                ),
            )

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> None:
        return None

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        return cast("Failure[U, E]", self)

    def unwrap(self) -> T:
        """
        Unwrap a failed result.

        Raises:
            E: The wrapped error
        """
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def to_dict(self) -> dict[str, Any]:
        to_dict = getattr(self.error, "to_dict", None)
        if callable(to_dict):
            return {"status": "error", "error": to_dict()}
        return {"status": "error", "error": {"message": str(self.error)}}

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"
