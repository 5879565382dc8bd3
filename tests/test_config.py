"""
Tests for settings loading and validation.
"""

import pytest
from pydantic import ValidationError

from memsizer.config import EstimatorSettings, MonitoringSettings, TypesenseSettings
from memsizer.exceptions import ConfigurationError
from memsizer.utils.logging import setup_logging


def test_typesense_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("TYPESENSE_HOST", "search.example.com")
    monkeypatch.setenv("TYPESENSE_PORT", "443")
    monkeypatch.setenv("TYPESENSE_PROTOCOL", "HTTPS")
    monkeypatch.setenv("TYPESENSE_API_KEY", "xyz")

    config = TypesenseSettings()

    assert config.host == "search.example.com"
    assert config.port == 443
    assert config.protocol == "https"
    assert config.api_key == "xyz"


def test_invalid_protocol(monkeypatch) -> None:
    monkeypatch.setenv("TYPESENSE_PROTOCOL", "ftp")

    with pytest.raises(ValidationError):
        TypesenseSettings()


def test_estimator_defaults(monkeypatch) -> None:
    for name in ("ESTIMATOR_SAFETY_MULTIPLIER", "ESTIMATOR_LEGACY_ARRAY_WIDTHS",
                 "ESTIMATOR_MAX_CONCURRENCY", "ESTIMATOR_FAIL_FAST"):
        monkeypatch.delenv(name, raising=False)

    config = EstimatorSettings()

    assert config.safety_multiplier == 3.2
    assert config.legacy_array_widths is False
    assert config.max_concurrency == 4
    assert config.fail_fast is False


@pytest.mark.parametrize(
    "name, value",
    [
        ("ESTIMATOR_SAFETY_MULTIPLIER", "0"),
        ("ESTIMATOR_MAX_CONCURRENCY", "0"),
    ],
)
def test_invalid_estimator_settings(monkeypatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        EstimatorSettings()


def test_invalid_log_format(monkeypatch) -> None:
    monkeypatch.setenv("LOG_FORMAT", "xml")

    with pytest.raises(ValidationError):
        MonitoringSettings()


def test_log_level_is_normalized(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")

    assert MonitoringSettings().log_level == "WARNING"


def test_invalid_log_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        MonitoringSettings()


def test_setup_logging_rejects_unknown_level() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        setup_logging(log_level="loud")

    assert exc_info.value.details["log_level"] == "loud"
