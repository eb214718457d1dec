"""Runtime configuration loaded from environment variables and .env files."""

from __future__ import annotations

from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_FILE = Path(__file__).resolve().parent.parent / ".env"


class RuntimeSettings(BaseSettings):
    """Runtime configuration resolved from the process environment."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    timezone: str = Field(default="UTC", alias="MAYACAL_TIMEZONE")
    output: Literal["text", "json"] = Field(default="text", alias="MAYACAL_OUTPUT")
    extended: bool = Field(default=False, alias="MAYACAL_EXTENDED")

    @field_validator("timezone", mode="before")
    @classmethod
    def _validate_timezone(cls, value: str | None) -> str:
        if value is None or value == "":
            return "UTC"
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone {value!r}") from exc
        return value

    @field_validator("output", mode="before")
    @classmethod
    def _normalise_output(cls, value: str | None) -> str:
        if value is None or value == "":
            return "text"
        return str(value).strip().lower()


def load_settings() -> RuntimeSettings:
    """Return settings freshly resolved from the current environment."""

    return RuntimeSettings()


__all__ = ["RuntimeSettings", "load_settings"]
