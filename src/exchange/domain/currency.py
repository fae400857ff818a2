"""
Currency pair primitive.

A currency pair identifies a tradable market as an ordered (base, counter)
tuple. Codes are kept exactly as the exchange supplied them.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class CurrencyPair(BaseModel):
    """
    Ordered (base, counter) currency pair.

    Frozen, so instances are hashable and usable as dictionary keys.
    Equality is by (base, counter).
    """

    base: str = Field(..., min_length=1, description="Traded currency code")
    counter: str = Field(..., min_length=1, description="Pricing currency code")

    model_config = ConfigDict(frozen=True)

    SEPARATOR: ClassVar[str] = "/"

    @classmethod
    def from_symbol(cls, symbol: str) -> CurrencyPair:
        """
        Build a pair from its "BASE/COUNTER" symbol.

        Raises:
            ValueError: If the symbol has no separator

        """
        base, sep, counter = symbol.partition(cls.SEPARATOR)
        if not sep:
            raise ValueError(f"Currency pair symbol must contain '/': {symbol}")
        return cls(base=base, counter=counter)

    @property
    def symbol(self) -> str:
        """Get the "BASE/COUNTER" symbol."""
        return f"{self.base}{self.SEPARATOR}{self.counter}"

    def __str__(self) -> str:
        """String representation."""
        return self.symbol


BTC_USD = CurrencyPair(base="BTC", counter="USD")
BTC_EUR = CurrencyPair(base="BTC", counter="EUR")
BTC_HKD = CurrencyPair(base="BTC", counter="HKD")
LTC_BTC = CurrencyPair(base="LTC", counter="BTC")
DOGE_BTC = CurrencyPair(base="DOGE", counter="BTC")
