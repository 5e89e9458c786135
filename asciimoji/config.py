"""Runtime configuration based on environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchSettings(BaseModel):
    delay_seconds: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Throttle applied inside each search attempt before scanning.",
    )


class UISettings(BaseModel):
    placeholder: str = "Search emojis..."
    default_action: Literal["paste", "copy"] = "paste"
    close_on_select: bool = True


class LookupSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ASCIIMOJI_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"
    log_file: Path = Field(
        default=Path("logs/asciimoji.log"),
        description="Log destination; the terminal itself is owned by the UI.",
    )
    dataset_path: Path | None = Field(
        default=None,
        description="JSON object mapping keyword to rendered text; bundled dataset when unset.",
    )

    search: SearchSettings = Field(default_factory=SearchSettings)
    ui: UISettings = Field(default_factory=UISettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        if isinstance(value, str):
            value = value.strip().upper()
            if value not in logging.getLevelNamesMapping():
                raise ValueError(f"unknown log level: {value}")
        return value

    @property
    def log_level_value(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache
def get_settings() -> LookupSettings:
    """Return cached settings instance."""

    return LookupSettings()


__all__ = [
    "LookupSettings",
    "SearchSettings",
    "UISettings",
    "get_settings",
]
