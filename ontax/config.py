from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ontax.core.breakdown import DEFAULT_FIELD, BreakdownField

ENV_BOOL_TRUE = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ENV_BOOL_TRUE


class Settings(BaseModel):
    default_field: BreakdownField = Field(
        default_factory=lambda: os.getenv("ONTAX_DEFAULT_FIELD", DEFAULT_FIELD.value)
    )
    log_level: str = Field(default_factory=lambda: os.getenv("ONTAX_LOG_LEVEL", "INFO"))
    log_dir: str = Field(default_factory=lambda: os.getenv("ONTAX_LOG_DIR", "logs"))
    file_logging: bool = Field(default_factory=lambda: _env_bool("ONTAX_FILE_LOGGING", False))
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("default_field", mode="before")
    @classmethod
    def _normalize_field(cls, value: object) -> object:
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized not in {f.value for f in BreakdownField}:
                raise ValueError(f"ONTAX_DEFAULT_FIELD must name a breakdown field, got {value}")
            return normalized
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        upper = (value or "INFO").upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"ONTAX_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {upper}")
        return upper

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
