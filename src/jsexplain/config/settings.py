"""Presentation settings, built from command-line flags.

Only explicit values and the defaults below are used. Environment variables,
.env files and secret directories are never read.

Nothing here changes what an error message is explained as, only how the
result is shown.
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from jsexplain.config.constants import DEFAULT_LOG_LEVEL, FORMAT_TEXT, LOG_LEVELS


class Settings(BaseSettings):
    """All explain-error configuration in one place."""

    model_config = SettingsConfigDict(extra="ignore")

    color: bool = True
    output_format: Literal["text", "json"] = FORMAT_TEXT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level
