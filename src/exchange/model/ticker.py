"""
Ticker domain model.

This model represents a market ticker independent of the exchange that
produced it. Exchange-specific ticker payloads are transformed into it at the
adapter boundary.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.exchange.domain.currency import CurrencyPair


class Ticker(BaseModel):
    """
    Canonical market ticker.

    The model is frozen for immutability and thread safety.
    """

    currency_pair: CurrencyPair
    last: Decimal = Field(description="Last trade price")
    bid: Decimal = Field(description="Best bid price")
    ask: Decimal = Field(description="Best ask price")
    high: Decimal = Field(description="Session high")
    low: Decimal = Field(description="Session low")
    volume: Decimal = Field(ge=0, description="Traded volume in base currency")
    timestamp: datetime

    model_config = ConfigDict(frozen=True)

    @property
    def spread(self) -> Decimal:
        """Calculate bid-ask spread."""
        return self.ask - self.bid

    @property
    def mid_price(self) -> Decimal:
        """Calculate mid price between bid and ask."""
        return (self.bid + self.ask) / Decimal("2")
