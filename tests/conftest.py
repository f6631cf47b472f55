"""Top-level pytest configuration for stencil."""

from __future__ import annotations

import pytest

# Import for side effects so error codes are registered before tests run
import stencil.capture.errors
import stencil.logging.errors
from stencil.diagnostics import self_log
from stencil.events.event import LogEvent
from stencil.logging.config import LoggingSettings

LOGGING_ENV_KEYS = [
    "STENCIL_LOGGING_MINIMUM_LEVEL",
    "STENCIL_LOGGING_MAXIMUM_DESTRUCTURING_DEPTH",
    "STENCIL_LOGGING_MAXIMUM_STRING_LENGTH",
    "STENCIL_LOGGING_MAXIMUM_COLLECTION_COUNT",
    "STENCIL_LOGGING_JSON_FORMAT",
    "STENCIL_LOGGING_INCLUDE_TIMESTAMP",
]


class CollectingSink:
    """Sink that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[LogEvent] = []

    def emit(self, log_event: LogEvent) -> None:
        self.events.append(log_event)

    @property
    def single(self) -> LogEvent:
        assert len(self.events) == 1, f"expected one event, got {len(self.events)}"
        return self.events[0]


@pytest.fixture(autouse=True)
def clear_logging_env(monkeypatch):
    for key in LOGGING_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()


@pytest.fixture
def settings() -> LoggingSettings:
    return LoggingSettings()


@pytest.fixture
def self_log_messages():
    messages: list[str] = []
    self_log.enable(messages.append)
    yield messages
    self_log.disable()
