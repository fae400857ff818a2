"""Exchange data normalization package."""

from src.exchange.domain import CurrencyPair
from src.exchange.enums import OrderSide

__all__ = ["CurrencyPair", "OrderSide"]
