"""Tests for environment-based configuration."""

import logging

import pytest
from pydantic import ValidationError

from src.exchange.config import PACKAGE_LOGGER, AdapterConfig, ExchangeConfig


class TestExchangeConfig:
    """Test configuration loading."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults keep lenient side classification."""
        monkeypatch.delenv("EXCHANGE_ADAPTER_STRICT_SIDE_CLASSIFICATION", raising=False)
        monkeypatch.delenv("EXCHANGE_LOG_LEVEL", raising=False)
        cfg = ExchangeConfig.from_env()

        assert cfg.adapters.strict_side_classification is False
        assert cfg.log_level == "INFO"
        assert cfg.debug is False

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults."""
        monkeypatch.setenv("EXCHANGE_ADAPTER_STRICT_SIDE_CLASSIFICATION", "true")
        monkeypatch.setenv("EXCHANGE_LOG_LEVEL", "WARNING")
        cfg = ExchangeConfig.from_env()

        assert cfg.adapters.strict_side_classification is True
        assert cfg.log_level == "WARNING"

    def test_invalid_log_level(self) -> None:
        """Unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            ExchangeConfig(adapters=AdapterConfig(), log_level="LOUD")

    def test_configure_logging(self) -> None:
        """The package logger takes the configured level; debug overrides it."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        previous_level = package_logger.level
        try:
            ExchangeConfig(adapters=AdapterConfig(), log_level="ERROR").configure_logging()
            assert package_logger.level == logging.ERROR

            ExchangeConfig(
                adapters=AdapterConfig(), log_level="ERROR", debug=True
            ).configure_logging()
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous_level)
