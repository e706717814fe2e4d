"""
Production environment configuration.
"""

from pydantic_settings import SettingsConfigDict

from .base import BaseConfig


class ProductionConfig(BaseConfig):
    """Production configuration."""

    model_config = SettingsConfigDict(env_file=".env.production")

    debug: bool = False
    log_level: str = "WARNING"
    log_format: str = "json"
