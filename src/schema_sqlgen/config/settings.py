"""
Configuration management for schema-sqlgen.

Settings are read from environment variables with the ``SQLGEN_`` prefix and,
when present, from a ``.env`` file in the working directory (or the file named
by ``SQLGEN_ENV_FILE``). For example ``SQLGEN_INCLUDE_SCHEMA=true`` turns on
schema qualification for writers built with ``ConstraintWriter.from_settings``.
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SETTINGS_ENV_FILE = Path(os.getenv("SQLGEN_ENV_FILE", ".env")).expanduser()


class Settings(BaseSettings):
    """
    Generation settings with environment variable support.

    Fields:
    - dialect: Default target dialect name (must be registered)
    - include_schema: Schema-qualify table references in generated DDL
    - log_level: Logging level name
    - log_to_file: Also write logs to a daily rotated file
    - log_file_dir: Directory for log files
    """

    dialect: str = Field(
        default="sqlserver",
        description="Default target dialect for generated DDL",
    )
    include_schema: bool = Field(
        default=False,
        description="Prefix table names with their escaped schema owner",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(
        default=False, description="Enable file logging in addition to stdout"
    )
    log_file_dir: str = Field(default="logs", description="Directory for log files")

    @field_validator("dialect")
    @classmethod
    def normalize_dialect(cls, value: str) -> str:
        """Dialect names are registered lowercase; resolution happens at use."""
        return value.strip().lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level '{value}'")
        return level

    model_config = SettingsConfigDict(
        env_prefix="SQLGEN_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get the cached settings instance.

    Settings are loaded once per process; call ``get_settings.cache_clear()``
    after changing the environment (tests do this through a fixture).

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
