"""Test configuration and fixtures for the entire test suite."""

import pytest
from dotenv import load_dotenv

from src.exchange.domain.currency import BTC_HKD, BTC_USD, DOGE_BTC
from src.exchange.model import CurrencyPairMetaData, ExchangeMetaData


@pytest.fixture(scope="session", autouse=True)
def load_env() -> None:
    """Load EXCHANGE_* overrides from a local .env file, if present."""
    load_dotenv()


@pytest.fixture
def anx_metadata() -> ExchangeMetaData:
    """Price scales for the pairs the ANX fixtures trade."""
    return ExchangeMetaData.from_pairs(
        {
            BTC_USD: CurrencyPairMetaData(price_scale=2, min_amount="0.01"),
            BTC_HKD: CurrencyPairMetaData(price_scale=2),
            DOGE_BTC: CurrencyPairMetaData(price_scale=8),
        }
    )
