"""
Base configuration settings.
"""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration for all environments."""

    model_config = SettingsConfigDict(
        env_prefix="DECIMAL_UNITS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "decimal-units"
    app_version: str = "1.0.0"
    debug: bool = False

    # Arithmetic
    decimal_precision: int = Field(38, ge=1)  # significant digits

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level != "TRACE" and not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return fmt
