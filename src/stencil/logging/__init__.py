# SPDX-FileCopyrightText: 2024-present stencil contributors
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stencil

"""
Public API for stencil loggers.

This module exports the logger interface, the shared default behaviour, the
configured ``Logger`` and its settings.
"""

from __future__ import annotations

from stencil.logging.base import (
    SOURCE_CONTEXT_PROPERTY_NAME,
    BaseLogger,
    ContextualLogger,
)
from stencil.logging.config import LoggingSettings
from stencil.logging.errors import (
    GeneratorError,
    LoggingConfigurationError,
    LoggingError,
)
from stencil.logging.generate import ALL_LEVELS, generate_level_methods
from stencil.logging.level_switch import LoggingLevelSwitch
from stencil.logging.logger import Logger, get_logger
from stencil.logging.protocols import LoggerProtocol

__all__ = [
    # Core interfaces
    "LoggerProtocol",
    "BaseLogger",
    "ContextualLogger",
    "SOURCE_CONTEXT_PROPERTY_NAME",
    # Implementation
    "Logger",
    "LoggingLevelSwitch",
    # Level methods
    "ALL_LEVELS",
    "generate_level_methods",
    # Errors
    "LoggingError",
    "LoggingConfigurationError",
    "GeneratorError",
    # Settings
    "LoggingSettings",
    # Factory functions
    "get_logger",
]
