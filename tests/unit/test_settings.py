"""
Unit tests for engine/settings.py and engine/logging_config.py
"""

import logging

import pytest
from pydantic import ValidationError

from domain.models import WeightUnit
from engine.logging_config import ENGINE_LOGGERS, configure_logging
from engine.settings import Settings, get_settings


# Environment variables a developer shell might set which we need to clear for default tests
ENGINE_ENV_VARS = [
    "GZCLP_ENVIRONMENT",
    "GZCLP_WEIGHT_UNIT",
    "GZCLP_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear engine environment variables to test true defaults."""
    for var in ENGINE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        """Default environment should be development."""
        settings = Settings(_env_file=None)
        assert settings.environment == "development"

    def test_weight_unit_default(self, clean_env):
        """Weights flow in kg unless configured otherwise."""
        settings = Settings(_env_file=None)
        assert settings.weight_unit == WeightUnit.KG

    def test_log_level_default(self, clean_env):
        """Log level defaults to INFO."""
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test that Settings reads prefixed environment variables."""

    def test_weight_unit_from_env(self, clean_env, monkeypatch):
        """GZCLP_WEIGHT_UNIT selects the unit."""
        monkeypatch.setenv("GZCLP_WEIGHT_UNIT", "lbs")
        settings = Settings(_env_file=None)
        assert settings.weight_unit == WeightUnit.LBS

    def test_unprefixed_vars_ignored(self, clean_env, monkeypatch):
        """Only prefixed variables are read."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        settings = Settings(_env_file=None)
        assert settings.environment == "development"


@pytest.mark.unit
class TestSettingsValidation:
    """Test field validators."""

    def test_environment_case_insensitive(self, clean_env):
        """Environment is normalized to lowercase."""
        settings = Settings(environment="PRODUCTION", _env_file=None)
        assert settings.environment == "production"
        assert settings.is_production is True

    def test_invalid_environment(self, clean_env):
        """Unknown environments are rejected."""
        with pytest.raises(ValidationError):
            Settings(environment="qa", _env_file=None)

    def test_log_level_normalized(self, clean_env):
        """Log level is normalized to uppercase."""
        settings = Settings(log_level="debug", _env_file=None)
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self, clean_env):
        """Unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="VERBOSE", _env_file=None)

    def test_invalid_weight_unit(self, clean_env):
        """Only kg and lbs are supported."""
        with pytest.raises(ValidationError):
            Settings(weight_unit="stone", _env_file=None)

    def test_is_test(self, clean_env):
        """is_test reflects the test environment."""
        assert Settings(environment="test", _env_file=None).is_test is True


@pytest.mark.unit
class TestGetSettings:
    """Test the cached accessor."""

    def test_cached(self, clean_env):
        """get_settings returns the same instance until the cache is cleared."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


@pytest.mark.unit
class TestConfigureLogging:
    """Test logging configuration."""

    def test_sets_engine_logger_levels(self, clean_env):
        """Engine loggers take the configured level."""
        previous = {name: logging.getLogger(name).level for name in ENGINE_LOGGERS}
        try:
            configure_logging(Settings(log_level="DEBUG", _env_file=None))
            for name in ENGINE_LOGGERS:
                assert logging.getLogger(name).level == logging.DEBUG
        finally:
            for name, level in previous.items():
                logging.getLogger(name).setLevel(level)
