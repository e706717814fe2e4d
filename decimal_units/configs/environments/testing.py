"""
Testing environment configuration.
"""

from pydantic_settings import SettingsConfigDict

from .base import BaseConfig


class TestingConfig(BaseConfig):
    """Testing configuration."""

    model_config = SettingsConfigDict(env_file=".env.testing")

    debug: bool = True
    log_level: str = "DEBUG"
