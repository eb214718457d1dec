"""Pytest configuration for mayacal."""

from __future__ import annotations

import pytest

from mayacal.runtime_config import RuntimeSettings

_SETTINGS_ENV = ("LOG_LEVEL", "MAYACAL_TIMEZONE", "MAYACAL_OUTPUT", "MAYACAL_EXTENDED")


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def text_settings() -> RuntimeSettings:
    return RuntimeSettings(log_level="WARNING", timezone="UTC", output="text", extended=False)
