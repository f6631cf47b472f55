import logging

import pytest

from stencil.events.level import LogEventLevel


def test_levels_are_ordered():
    assert (
        LogEventLevel.VERBOSE
        < LogEventLevel.DEBUG
        < LogEventLevel.INFORMATION
        < LogEventLevel.WARNING
        < LogEventLevel.ERROR
        < LogEventLevel.FATAL
    )


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Verbose", LogEventLevel.VERBOSE),
        ("debug", LogEventLevel.DEBUG),
        ("INFORMATION", LogEventLevel.INFORMATION),
        ("info", LogEventLevel.INFORMATION),
        ("warn", LogEventLevel.WARNING),
        (" Error ", LogEventLevel.ERROR),
        ("critical", LogEventLevel.FATAL),
        ("trace", LogEventLevel.VERBOSE),
    ],
)
def test_from_string(text, expected):
    assert LogEventLevel.from_string(text) is expected


def test_from_string_invalid():
    with pytest.raises(ValueError, match="Invalid log level"):
        LogEventLevel.from_string("loud")


@pytest.mark.parametrize(
    "level,expected",
    [
        (LogEventLevel.VERBOSE, logging.DEBUG),
        (LogEventLevel.DEBUG, logging.DEBUG),
        (LogEventLevel.INFORMATION, logging.INFO),
        (LogEventLevel.WARNING, logging.WARNING),
        (LogEventLevel.ERROR, logging.ERROR),
        (LogEventLevel.FATAL, logging.CRITICAL),
    ],
)
def test_to_stdlib_level(level, expected):
    assert level.to_stdlib_level() == expected
