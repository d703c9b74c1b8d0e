from __future__ import annotations

import logging

import pytest

from openmeteo_lambda.settings import (
    DEFAULT_BASE_URL,
    ImproperlyConfigured,
    Settings,
    configure_logging,
    env,
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("OPEN_METEO_BASE_URL", "OPEN_METEO_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.from_env()

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == 10.0
    assert settings.log_level == "INFO"


def test_values_are_read_from_environment(clean_env):
    clean_env.setenv("OPEN_METEO_BASE_URL", "https://meteo.internal/v1/forecast")
    clean_env.setenv("OPEN_METEO_TIMEOUT", "2.5")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings == Settings(base_url="https://meteo.internal/v1/forecast", timeout=2.5, log_level="DEBUG")


@pytest.mark.parametrize(
    "name, value",
    [
        ("OPEN_METEO_TIMEOUT", "soon"),
        ("OPEN_METEO_TIMEOUT", "0"),
        ("OPEN_METEO_TIMEOUT", "-1"),
        ("OPEN_METEO_BASE_URL", "   "),
        ("LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_values_are_rejected(clean_env, name, value):
    clean_env.setenv(name, value)

    with pytest.raises(ImproperlyConfigured):
        Settings.from_env()


def test_env_requires_value_without_default(clean_env):
    clean_env.delenv("WEATHER_PROXY_UNSET", raising=False)

    with pytest.raises(ImproperlyConfigured):
        env("WEATHER_PROXY_UNSET")
    assert env("WEATHER_PROXY_UNSET", "fallback") == "fallback"


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("warning")
        assert root.level == logging.WARNING
        assert root.handlers
    finally:
        root.setLevel(previous)
