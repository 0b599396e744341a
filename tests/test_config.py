"""Tests for EnumerationConfig."""

import logging

import pytest

from topogen.config import EnumerationConfig, get_config, reset_config
from topogen.errors import ConfigurationError


class TestEnumerationConfig:
    """Tests for defaults, validation and environment loading."""

    def test_defaults(self) -> None:
        config = EnumerationConfig()
        assert config.check_cycles is True
        assert config.delta_strategy == "threaded"
        assert config.state_strategy == "scanning"
        assert config.log_level == "WARNING"
        assert config.log_level_number == logging.WARNING
        assert config.log_json is False

    def test_from_env_defaults(self) -> None:
        assert EnumerationConfig.from_env() == EnumerationConfig()

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOPOGEN_CHECK_CYCLES", "no")
        monkeypatch.setenv("TOPOGEN_DELTA_STRATEGY", "Scanning")
        monkeypatch.setenv("TOPOGEN_STATE_STRATEGY", "threaded")
        monkeypatch.setenv("TOPOGEN_LOG_LEVEL", "debug")
        monkeypatch.setenv("TOPOGEN_LOG_JSON", "1")
        config = EnumerationConfig.from_env()
        assert config.check_cycles is False
        assert config.delta_strategy == "scanning"
        assert config.state_strategy == "threaded"
        assert config.log_level == "DEBUG"
        assert config.log_level_number == logging.DEBUG
        assert config.log_json is True

    def test_invalid_strategy(self) -> None:
        with pytest.raises(ConfigurationError):
            EnumerationConfig(delta_strategy="fast")

    def test_invalid_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOPOGEN_CHECK_CYCLES", "maybe")
        with pytest.raises(ConfigurationError):
            EnumerationConfig.from_env()

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ConfigurationError):
            EnumerationConfig(log_level="chatty")


class TestConfigSingleton:
    """Tests for get_config/reset_config."""

    def test_cached(self) -> None:
        assert get_config() is get_config()

    def test_reset_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_config()
        monkeypatch.setenv("TOPOGEN_STATE_STRATEGY", "threaded")
        assert get_config() is first
        reset_config()
        assert get_config().state_strategy == "threaded"
