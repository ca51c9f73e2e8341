"""Library settings with env variable support.

These settings only shape diagnostics (how the optional accessor family
reports values it discards). They never change what an accessor returns.

Prefix: TYPEDENV_ (e.g., TYPEDENV_LOG_MALFORMED=false)
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from typedenv.enums import LogSeverity


class EnvSettings(BaseSettings):
    """Settings for typedenv's own logging behaviour."""

    model_config = SettingsConfigDict(
        env_prefix="TYPEDENV_",
        extra="ignore",
    )

    log_malformed: bool = Field(
        default=True,
        description=(
            "Log a record when the optional family discards a present but malformed value."
        ),
    )
    malformed_log_level: LogSeverity = Field(
        default=LogSeverity.DEBUG,
        description="Level of the record emitted for a discarded malformed value.",
    )
    redact_values: bool = Field(
        default=True,
        description=(
            "Pass values through redaction before logging them. "
            "Disable only when values are known to be non-sensitive."
        ),
    )
    max_value_chars: int = Field(
        default=64,
        ge=1,
        description="Maximum characters of a value preview included in a log record.",
    )

    @field_validator("malformed_log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> object:
        # Accept "WARNING" as well as "warning", like logging level names.
        return value.strip().lower() if isinstance(value, str) else value

    @property
    def malformed_log_levelno(self) -> int:
        """Numeric logging level for malformed_log_level."""
        return getattr(logging, self.malformed_log_level.value.upper(), logging.DEBUG)


@lru_cache(maxsize=1)
def get_settings() -> EnvSettings:
    """Return the process-wide settings, loaded on first use."""
    return EnvSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the env."""
    get_settings.cache_clear()
