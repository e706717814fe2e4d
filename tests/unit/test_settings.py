"""
Unit tests for configuration management.
"""

import pytest
from pydantic import ValidationError

from decimal_units.configs import environments, get_config_class, get_settings, reload_settings


class TestConfigSelection:
    """Test environment-based settings selection."""

    @pytest.mark.parametrize("env, expected", [
        ("development", environments.DevelopmentConfig),
        ("production", environments.ProductionConfig),
        ("testing", environments.TestingConfig),
        ("test", environments.TestingConfig),
        ("TESTING", environments.TestingConfig),
        ("staging", environments.DevelopmentConfig),
    ])
    def test_config_class(self, settings_env, env, expected):
        """Test each environment name maps to its config class."""
        settings_env.setenv("DECIMAL_UNITS_ENVIRONMENT", env)
        assert get_config_class() is expected

    def test_default_environment(self, settings_env):
        """Test development is the default environment."""
        settings_env.delenv("DECIMAL_UNITS_ENVIRONMENT", raising=False)
        assert get_config_class() is environments.DevelopmentConfig

    def test_settings_are_cached(self):
        """Test get_settings returns one shared instance."""
        assert get_settings() is get_settings()

    def test_reload_settings(self, settings_env):
        """Test reload_settings picks up environment changes."""
        settings_env.setenv("DECIMAL_UNITS_ENVIRONMENT", "production")
        settings = reload_settings()
        assert isinstance(settings, environments.ProductionConfig)
        assert settings.log_format == "json"
        assert get_settings() is settings


class TestBaseConfig:
    """Test settings fields and validation."""

    def test_defaults(self, settings_env):
        """Test base defaults."""
        settings_env.delenv("DECIMAL_UNITS_DECIMAL_PRECISION", raising=False)
        config = environments.BaseConfig()
        assert config.decimal_precision == 38
        assert config.log_level == "INFO"
        assert config.log_format == "text"
        assert config.log_file is None

    def test_testing_overrides(self, test_settings):
        """Test the testing environment defaults."""
        assert test_settings.debug is True
        assert test_settings.log_level == "DEBUG"

    def test_environment_variables(self, settings_env):
        """Test values are read from prefixed environment variables."""
        settings_env.setenv("DECIMAL_UNITS_DECIMAL_PRECISION", "50")
        settings_env.setenv("DECIMAL_UNITS_LOG_LEVEL", "warning")
        config = environments.BaseConfig()
        assert config.decimal_precision == 50
        assert config.log_level == "WARNING"

    def test_log_level_validation(self):
        """Test log levels are normalized and checked."""
        assert environments.BaseConfig(log_level="debug").log_level == "DEBUG"
        assert environments.BaseConfig(log_level="trace").log_level == "TRACE"

        with pytest.raises(ValidationError):
            environments.BaseConfig(log_level="LOUD")

    def test_log_format_validation(self):
        """Test log format values."""
        assert environments.BaseConfig(log_format="JSON").log_format == "json"

        with pytest.raises(ValidationError):
            environments.BaseConfig(log_format="xml")

    def test_precision_validation(self):
        """Test precision must be positive."""
        with pytest.raises(ValidationError):
            environments.BaseConfig(decimal_precision=0)
