"""
Settings factory and configuration management.
"""

import os
from typing import Type
from functools import lru_cache

from .environments.base import BaseConfig
from .environments.development import DevelopmentConfig
from .environments.production import ProductionConfig
from .environments.testing import TestingConfig

ENVIRONMENT_VARIABLE = "DECIMAL_UNITS_ENVIRONMENT"


def get_config_class() -> Type[BaseConfig]:
    """Get configuration class based on environment."""
    env = os.getenv(ENVIRONMENT_VARIABLE, "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
        "test": TestingConfig,  # Alias for testing
    }

    return config_map.get(env, DevelopmentConfig)


@lru_cache()
def get_settings() -> BaseConfig:
    """Get cached settings instance."""
    config_class = get_config_class()
    return config_class()


def reload_settings() -> BaseConfig:
    """Drop the cached settings and build them again from the environment."""
    get_settings.cache_clear()
    return get_settings()
