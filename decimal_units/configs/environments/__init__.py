"""
Per-environment configuration classes.
"""

from .base import BaseConfig
from .development import DevelopmentConfig
from .production import ProductionConfig
from .testing import TestingConfig

__all__ = ["BaseConfig", "DevelopmentConfig", "ProductionConfig", "TestingConfig"]
