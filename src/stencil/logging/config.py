# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil
"""
Configuration for stencil loggers.

Settings load from ``STENCIL_LOGGING_*`` environment variables.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stencil.capture.converter import (
    DEFAULT_MAXIMUM_DESTRUCTURING_DEPTH,
    PropertyValueConverter,
)
from stencil.events.level import LogEventLevel
from stencil.logging.errors import LoggingConfigurationError


class LoggingSettings(BaseSettings):
    """
    Configuration settings for stencil loggers.
    Loads from environment variables using Pydantic v2's env support.
    """

    model_config = SettingsConfigDict(
        env_prefix="STENCIL_LOGGING_",
        extra="ignore",
        case_sensitive=False,
        frozen=False,
    )

    minimum_level: str = Field(
        default="Verbose", description="Least severe level passed to sinks"
    )
    maximum_destructuring_depth: int = Field(
        default=DEFAULT_MAXIMUM_DESTRUCTURING_DEPTH,
        ge=1,
        description="Nesting levels captured below a property value",
    )
    maximum_string_length: int | None = Field(
        default=None, ge=2, description="Truncate captured strings beyond this length"
    )
    maximum_collection_count: int | None = Field(
        default=None, ge=1, description="Truncate captured collections beyond this count"
    )
    json_format: bool = Field(default=False, description="Format stdlib output as JSON")
    include_timestamp: bool = Field(
        default=True, description="Include timestamp in formatted output"
    )

    @field_validator("minimum_level", mode="before")
    @classmethod
    def validate_minimum_level(cls, v: Any) -> str:
        """Validate the level name and normalize it, e.g. ``info`` to ``Information``."""
        if isinstance(v, LogEventLevel):
            return v.name.capitalize()
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        return LogEventLevel.from_string(v).name.capitalize()

    @property
    def level(self) -> LogEventLevel:
        return LogEventLevel.from_string(self.minimum_level)

    def create_converter(self) -> PropertyValueConverter:
        """Build a value converter honouring the capture limits."""
        return PropertyValueConverter(
            maximum_destructuring_depth=self.maximum_destructuring_depth,
            maximum_string_length=self.maximum_string_length,
            maximum_collection_count=self.maximum_collection_count,
        )

    @classmethod
    def load(cls) -> LoggingSettings:
        """
        Load logging settings from environment variables or defaults.

        Returns:
            LoggingSettings: Loaded and validated settings instance.

        Raises:
            LoggingConfigurationError: If an environment value is invalid
        """
        try:
            return cls()
        except ValidationError as exc:
            raise LoggingConfigurationError.wrap(
                exc, message="Invalid logging settings"
            ) from exc
