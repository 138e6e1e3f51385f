"""
Configuration management for sql_metamodel.

Environment-based settings using Pydantic BaseSettings. Every field can be
overridden with an ``SQLMM_`` prefixed environment variable or an entry in a
``.env`` file at the project root (``SQLMM_ENV_FILE`` points elsewhere).
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("SQLMM_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Fields:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_TO_FILE: Also write logs to a daily rotating file
    - LOG_FILE_DIR: Directory for log files
    - TYPE_NAME_STYLE: How Python types are printed in accessor diagnostics,
      "flat" (qualified name only) or "full" (module prefixed)
    - DATABASE_URL: SQLAlchemy URL used by ``create_engine()``
    """

    LOG_LEVEL: str = Field(default="INFO", description="Logging level (uppercase)")
    LOG_TO_FILE: bool = Field(default=False, description="Enable file logging")
    LOG_FILE_DIR: str = Field(default="logs", description="Directory for log files")
    TYPE_NAME_STYLE: Literal["flat", "full"] = Field(
        default="flat",
        description="Type name rendering in accessor diagnostics",
    )
    DATABASE_URL: str = Field(
        default="sqlite://",
        description="SQLAlchemy database URL",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got: {value}"
            )
        return level

    model_config = SettingsConfigDict(
        env_prefix="SQLMM_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused; tests call ``get_settings.cache_clear()``
    after changing the environment.
    """
    return Settings()
