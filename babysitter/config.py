# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("AppSettings", "MissingPolicy", "settings")

MissingPolicy = Literal["ignore", "warn", "raise"]


class AppSettings(BaseSettings, frozen=True):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="BABYSITTER_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    MISSING_REMOVE_POLICY: MissingPolicy = Field(
        default="warn",
        description=(
            "What `remove` does with an element that is not in the "
            "container: return silently, log a warning, or raise "
            "ItemNotFoundError. The container is never mutated."
        ),
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Level applied to the `babysitter` package logger.",
    )

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None

    @field_validator("LOG_LEVEL", mode="before")
    def _normalize_log_level(cls, value: Any) -> str:
        value = str(value).upper()
        if value not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Invalid log level: {value}")
        return value


settings = AppSettings()
AppSettings._instance = settings
