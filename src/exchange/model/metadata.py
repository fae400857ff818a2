"""
Exchange metadata.

Holds per-pair trading rules declared by the exchange. ExchangeMetaData
satisfies PairScaleLookup and is the usual source of price scales for user
trade adaptation.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.exchange.domain.currency import CurrencyPair
from src.exchange.errors import UnknownPairScaleError


class CurrencyPairMetaData(BaseModel):
    """Trading rules for a single pair."""

    price_scale: int = Field(ge=0, description="Fractional digits of the price")
    min_amount: Decimal | None = Field(default=None, ge=0)
    max_amount: Decimal | None = Field(default=None, ge=0)

    model_config = ConfigDict(frozen=True)


class ExchangeMetaData(BaseModel):
    """
    Metadata of every pair an exchange lists.

    Pairs are keyed by their "BASE/COUNTER" symbol.
    """

    currency_pairs: dict[str, CurrencyPairMetaData] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_pairs(
        cls, pairs: dict[CurrencyPair, CurrencyPairMetaData]
    ) -> "ExchangeMetaData":
        """Build metadata from a pair-keyed mapping."""
        return cls(currency_pairs={pair.symbol: meta for pair, meta in pairs.items()})

    def get(self, pair: CurrencyPair) -> CurrencyPairMetaData | None:
        """Get the metadata of a pair, or None if unknown."""
        return self.currency_pairs.get(pair.symbol)

    def scale_for(self, pair: CurrencyPair) -> int:
        """
        Get the declared price scale of a pair.

        Raises:
            UnknownPairScaleError: If the pair is not listed

        """
        meta = self.get(pair)
        if meta is None:
            raise UnknownPairScaleError(pair)
        return meta.price_scale
