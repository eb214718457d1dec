from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from mayacal.boot.logging import configure_logging, resolve_level
from mayacal.runtime_config import RuntimeSettings, load_settings


def test_defaults():
    settings = load_settings()
    assert settings.timezone == "UTC"
    assert settings.output == "text"
    assert settings.extended is False
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MAYACAL_OUTPUT", "JSON")
    monkeypatch.setenv("MAYACAL_EXTENDED", "true")
    monkeypatch.setenv("MAYACAL_TIMEZONE", "America/Merida")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.output == "json"
    assert settings.extended is True
    assert settings.timezone == "America/Merida"
    assert settings.log_level == "debug"


def test_blank_timezone_falls_back_to_utc(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MAYACAL_TIMEZONE", "")
    assert load_settings().timezone == "UTC"


def test_unknown_timezone_rejected():
    with pytest.raises(ValidationError):
        RuntimeSettings(timezone="Mars/Olympus_Mons")


def test_unknown_output_rejected():
    with pytest.raises(ValidationError):
        RuntimeSettings(output="yaml")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        (" info ", logging.INFO),
        ("15", 15),
        ("", logging.WARNING),
        (None, logging.WARNING),
        ("not-a-level", logging.WARNING),
        (logging.ERROR, logging.ERROR),
    ],
)
def test_resolve_level(value, expected):
    assert resolve_level(value) == expected


@pytest.mark.parametrize(
    ("log_level", "expected"),
    [("DEBUG", logging.DEBUG), ("error", logging.ERROR), ("bogus", logging.WARNING)],
)
def test_configure_logging_applies_settings_level(log_level, expected):
    try:
        assert configure_logging(RuntimeSettings(log_level=log_level)) == expected
        assert logging.getLogger().level == expected
    finally:
        configure_logging(RuntimeSettings(log_level="WARNING"))


def test_configure_logging_loads_settings_when_none_given(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "error")
    try:
        assert configure_logging() == logging.ERROR
        assert logging.getLogger().level == logging.ERROR
    finally:
        configure_logging(RuntimeSettings(log_level="WARNING"))
