"""
Errors raised by the exchange adapter layer.

Every error is raised synchronously by the adapter call that detects it and
propagates to the caller unchanged. Each class also derives from the closest
builtin exception so callers can catch by category.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.exchange.domain.currency import CurrencyPair


class ExchangeAdapterError(Exception):
    """Base class for all adapter errors."""


class MalformedCurrencyPairError(ExchangeAdapterError, ValueError):
    """A combined pair code is neither six characters nor a known alias."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Unrecognized currency pair {code}")


class FillPriceUndefinedError(ExchangeAdapterError, ZeroDivisionError):
    """The traded-currency fill amount is zero, so no price exists."""

    def __init__(self, settlement_amount: Decimal) -> None:
        self.settlement_amount = settlement_amount
        super().__init__(
            f"Cannot derive fill price for settlement amount {settlement_amount}: "
            "traded amount is zero"
        )


class UnknownPairScaleError(ExchangeAdapterError, LookupError):
    """No price scale is declared for a currency pair."""

    def __init__(self, pair: CurrencyPair) -> None:
        self.pair = pair
        super().__init__(f"No price scale declared for currency pair {pair}")


class UnrecognizedSideError(ExchangeAdapterError, ValueError):
    """A side token is neither the bid nor the ask marker (strict mode only)."""

    def __init__(self, token: str | None) -> None:
        self.token = token
        super().__init__(f"Invalid order side: {token!r}")


class TimestampOutOfRangeError(ExchangeAdapterError, OverflowError):
    """An epoch-millisecond value lies outside the datetime range."""

    def __init__(self, millis: int) -> None:
        self.millis = millis
        super().__init__(
            f"Epoch milliseconds {millis} cannot be represented as a datetime"
        )
