"""Binding configuration loaded from environment variables and .env files."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["BindingSettings", "get_settings", "reset_settings"]


class BindingSettings(BaseSettings):
    """Settings that seed the default ephemeris context."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    se_ephe_path: Path | None = Field(default=None, alias="SE_EPHE_PATH")
    swe_eph_path: Path | None = Field(default=None, alias="SWE_EPH_PATH")
    jpl_file: str | None = Field(default=None, alias="SWEBIND_JPL_FILE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("se_ephe_path", "swe_eph_path", mode="before")
    @classmethod
    def _expand_optional_path(cls, value: Path | str | None) -> Path | None:
        if value in {None, ""}:
            return None
        return Path(value).expanduser()

    @field_validator("jpl_file", mode="before")
    @classmethod
    def _blank_jpl_file(cls, value: str | None) -> str | None:
        if value is None or not str(value).strip():
            return None
        return str(value).strip()

    @model_validator(mode="after")
    def _propagate_ephemeris_alias(self) -> "BindingSettings":
        if self.se_ephe_path is None and self.swe_eph_path is not None:
            object.__setattr__(self, "se_ephe_path", self.swe_eph_path)
        return self


@lru_cache(maxsize=1)
def get_settings() -> BindingSettings:
    """Return the process-wide settings instance."""

    return BindingSettings()


def reset_settings() -> None:
    """For tests: re-read the environment on next :func:`get_settings` call."""

    get_settings.cache_clear()
