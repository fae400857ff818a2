"""
Exchange adapter configuration using Pydantic Settings.

This module provides environment-based configuration for callers of the
adapter layer. The adapters never read it themselves; callers pass the
relevant values explicitly, e.g. ``strict_sides=config.adapters.strict_side_classification``.
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_LOGGER = "src.exchange"


class AdapterConfig(BaseSettings):
    """Adapter behaviour configuration."""

    model_config = SettingsConfigDict(env_prefix="EXCHANGE_ADAPTER_")

    strict_side_classification: bool = Field(
        default=False,
        description="Reject unknown side tokens instead of treating them as ask",
    )


class ExchangeConfig(BaseSettings):
    """Root configuration combining all sub-configs."""

    model_config = SettingsConfigDict(env_prefix="EXCHANGE_")

    # Sub-configurations
    adapters: AdapterConfig = Field(default_factory=AdapterConfig)

    # Global settings
    debug: bool = False
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    @classmethod
    def from_env(cls) -> "ExchangeConfig":
        """
        Load configuration from environment variables.

        Returns:
            Configured ExchangeConfig instance

        """
        return cls(adapters=AdapterConfig())

    def configure_logging(self) -> logging.Logger:
        """
        Apply the configured level to the package logger.

        DEBUG overrides ``log_level`` when ``debug`` is set.

        Returns:
            The package logger

        """
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(logging.DEBUG if self.debug else self.log_level)
        return package_logger


# Global config instance
config = ExchangeConfig.from_env()
