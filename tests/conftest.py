"""
Pytest configuration and shared fixtures.
"""

import logging

import pytest

from decimal_units.configs import reload_settings, ENVIRONMENT_VARIABLE
from decimal_units.domain.value_objects import LinearUnit
from decimal_units.utils.logging import PACKAGE_LOGGER


@pytest.fixture(scope="session", autouse=True)
def test_settings():
    """Test settings configuration."""
    patcher = pytest.MonkeyPatch()
    patcher.setenv(ENVIRONMENT_VARIABLE, "testing")
    yield reload_settings()
    patcher.undo()
    reload_settings()


@pytest.fixture
def settings_env():
    """Patch environment variables, then rebuild cached settings on teardown."""
    patcher = pytest.MonkeyPatch()
    yield patcher
    patcher.undo()
    reload_settings()


@pytest.fixture
def clean_package_logger():
    """Restore the package logger after a test installed handlers."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    original_handlers = list(package_logger.handlers)
    original_level = package_logger.level
    yield package_logger
    for handler in list(package_logger.handlers):
        if handler not in original_handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(original_level)


@pytest.fixture
def meter() -> LinearUnit:
    return LinearUnit("meter", 1, "length", symbol="m")


@pytest.fixture
def centimeter() -> LinearUnit:
    return LinearUnit("centimeter", "0.01", "length", symbol="cm")


@pytest.fixture
def kilometer() -> LinearUnit:
    return LinearUnit("kilometer", 1000, "length", symbol="km")


@pytest.fixture
def second() -> LinearUnit:
    return LinearUnit("second", 1, "time", symbol="s")


@pytest.fixture
def minute() -> LinearUnit:
    return LinearUnit("minute", 60, "time", symbol="min")
