"""
Tests for configuration and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from log_config import LOGGER_NAME, configure_logging
from settings import DrillConfig, get_config, set_config


@pytest.fixture(autouse=True)
def reset_config():
    set_config(None)
    yield
    set_config(None)


class TestDrillConfig:
    """Tests for DrillConfig()."""

    def test_defaults(self, monkeypatch):
        for name in ("DRILL_HOST", "DRILL_PORT", "DRILL_CORS_ORIGINS", "DRILL_RANDOM_SEED",
                     "DRILL_LOG_LEVEL", "DRILL_DEBUG"):
            monkeypatch.delenv(name, raising=False)
        config = DrillConfig()
        assert config.host == "0.0.0.0"
        assert config.port == 8000
        assert config.cors_origins == ["*"]
        assert config.random_seed is None
        assert config.log_level == "INFO"
        assert config.debug is False

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("DRILL_PORT", "9001")
        monkeypatch.setenv("DRILL_CORS_ORIGINS", "http://a.test, http://b.test")
        monkeypatch.setenv("DRILL_RANDOM_SEED", "42")
        monkeypatch.setenv("DRILL_LOG_LEVEL", "debug")
        monkeypatch.setenv("DRILL_DEBUG", "yes")
        config = DrillConfig()
        assert config.port == 9001
        assert config.cors_origins == ["http://a.test", "http://b.test"]
        assert config.random_seed == 42
        assert config.log_level == "DEBUG"
        assert config.debug is True

    @pytest.mark.parametrize("raw", ["abc", "0", "70000"])
    def test_bad_port(self, monkeypatch, raw):
        """A malformed port fails instead of falling back to the default."""
        monkeypatch.setenv("DRILL_PORT", raw)
        with pytest.raises(ValidationError):
            DrillConfig()

    def test_bad_seed(self, monkeypatch):
        monkeypatch.setenv("DRILL_RANDOM_SEED", "seed")
        with pytest.raises(ValidationError):
            DrillConfig()

    def test_empty_seed_is_unset(self, monkeypatch):
        monkeypatch.setenv("DRILL_RANDOM_SEED", "")
        assert DrillConfig().random_seed is None

    def test_single_origin(self, monkeypatch):
        monkeypatch.setenv("DRILL_CORS_ORIGINS", "http://a.test")
        assert DrillConfig().cors_origins == ["http://a.test"]

    def test_singleton(self):
        assert get_config() is get_config()

    def test_set_config(self):
        config = DrillConfig(port=1234)
        set_config(config)
        assert get_config() is config


class TestLogging:
    """Tests for configure_logging()."""

    def test_level_from_config(self):
        set_config(DrillConfig(log_level="WARNING"))
        logger = configure_logging(force=True)
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.WARNING
        assert logging.getLogger("services").level == logging.WARNING

    def test_unknown_level(self):
        set_config(DrillConfig(log_level="LOUD"))
        assert configure_logging(force=True).level == logging.INFO
