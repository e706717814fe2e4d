"""
Configuration for decimal-units.
"""

from .settings import get_config_class, get_settings, reload_settings, ENVIRONMENT_VARIABLE
from .environments import BaseConfig, DevelopmentConfig, ProductionConfig, TestingConfig

__all__ = [
    "get_config_class", "get_settings", "reload_settings", "ENVIRONMENT_VARIABLE",
    "BaseConfig", "DevelopmentConfig", "ProductionConfig", "TestingConfig"
]
