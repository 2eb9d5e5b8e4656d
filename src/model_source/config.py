"""Configuration for the model source provider."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from model_source.constants import DEFAULT_LOADER_IMAGE


class LogLevel(str, Enum):
    """Logging levels accepted by the entry point."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ModelSourceConfig(BaseSettings):
    """Runtime configuration for model loading.

    Loaded from environment variables with MODEL_SOURCE_ prefix
    or from a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MODEL_SOURCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    loader_image: str = Field(
        default=DEFAULT_LOADER_IMAGE,
        description="Image of the init container that downloads models",
    )
    loader_image_pull_policy: str | None = Field(
        default=None,
        description="Pull policy for the loader image (Always, IfNotPresent, Never)",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level for the command-line entry point",
    )


@lru_cache
def get_config() -> ModelSourceConfig:
    """Return the process-wide configuration."""
    return ModelSourceConfig()
