import pytest

from stencil.events.level import LogEventLevel
from stencil.logging.config import LoggingSettings
from stencil.logging.errors import LOGGING_CONFIGURATION, LoggingConfigurationError


@pytest.mark.parametrize(
    "env,expected",
    [
        ({}, LoggingSettings()),
        ({"MINIMUM_LEVEL": "debug"}, LoggingSettings(minimum_level="Debug")),
        ({"MAXIMUM_DESTRUCTURING_DEPTH": "3"}, LoggingSettings(maximum_destructuring_depth=3)),
        ({"MAXIMUM_STRING_LENGTH": "100"}, LoggingSettings(maximum_string_length=100)),
        ({"MAXIMUM_COLLECTION_COUNT": "5"}, LoggingSettings(maximum_collection_count=5)),
        ({"JSON_FORMAT": "true"}, LoggingSettings(json_format=True)),
        ({"INCLUDE_TIMESTAMP": "false"}, LoggingSettings(include_timestamp=False)),
    ],
)
def test_logging_settings_env(monkeypatch, env, expected):
    for k, v in env.items():
        monkeypatch.setenv(f"STENCIL_LOGGING_{k}", v)
    settings = LoggingSettings.load()
    for field in LoggingSettings.model_fields:
        assert getattr(settings, field) == getattr(expected, field)


def test_logging_settings_defaults():
    settings = LoggingSettings()
    assert settings.minimum_level == "Verbose"
    assert settings.level is LogEventLevel.VERBOSE
    assert settings.maximum_destructuring_depth == 10
    assert settings.maximum_string_length is None
    assert settings.maximum_collection_count is None
    assert settings.json_format is False
    assert settings.include_timestamp is True


@pytest.mark.parametrize(
    "value,expected",
    [
        ("info", "Information"),
        ("WARN", "Warning"),
        (LogEventLevel.FATAL, "Fatal"),
    ],
)
def test_minimum_level_normalized(value, expected):
    assert LoggingSettings(minimum_level=value).minimum_level == expected


@pytest.mark.parametrize(
    "data",
    [
        {"minimum_level": "loud"},
        {"minimum_level": 3},
        {"maximum_destructuring_depth": 0},
        {"maximum_string_length": 1},
        {"maximum_collection_count": 0},
        {"json_format": "notabool"},
    ],
)
def test_logging_settings_validation(data):
    with pytest.raises(ValueError):
        LoggingSettings.model_validate(data)


def test_load_wraps_invalid_environment(monkeypatch):
    monkeypatch.setenv("STENCIL_LOGGING_MINIMUM_LEVEL", "loud")
    with pytest.raises(LoggingConfigurationError) as exc_info:
        LoggingSettings.load()
    assert exc_info.value.code == LOGGING_CONFIGURATION
    assert exc_info.value.context["original_type"] == "ValidationError"


def test_create_converter_uses_limits():
    converter = LoggingSettings(
        maximum_destructuring_depth=4,
        maximum_string_length=20,
        maximum_collection_count=7,
    ).create_converter()
    assert converter.maximum_destructuring_depth == 4
    assert converter.maximum_string_length == 20
    assert converter.maximum_collection_count == 7
