"""
Public trade domain models.

Exchange-specific trade formats are transformed into these models at the
adapter boundary.
"""

from collections.abc import Iterator
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.exchange.domain.currency import CurrencyPair
from src.exchange.domain.timestamps import from_epoch_millis
from src.exchange.enums import OrderSide, TradeSortType


class Trade(BaseModel):
    """
    Domain model for a public market trade.

    The model is frozen for immutability and thread safety.
    """

    side: OrderSide = Field(description="Trade side (BID or ASK)")
    amount: Decimal = Field(ge=0, description="Trade size in base currency")
    currency_pair: CurrencyPair
    price: Decimal = Field(description="Executed trade price")
    timestamp_millis: int = Field(description="Execution time in epoch milliseconds")
    trade_id: str = Field(description="Unique trade identifier from exchange")

    model_config = ConfigDict(frozen=True)

    @property
    def timestamp(self) -> datetime:
        """
        Execution time as an aware UTC datetime.

        Raises:
            TimestampOutOfRangeError: If ``timestamp_millis`` is past year 9999

        """
        return from_epoch_millis(self.timestamp_millis)

    @property
    def value(self) -> Decimal:
        """Calculate trade value (price * amount)."""
        return self.price * self.amount

    @property
    def is_buy(self) -> bool:
        """Check if this is a buy trade."""
        return self.side == OrderSide.BID


class Trades(BaseModel):
    """
    Ordered collection of public trades.

    ``latest_trade_id`` is the largest numeric trade identifier observed in
    the collection, 0 when it is empty.
    """

    trades: tuple[Trade, ...] = ()
    latest_trade_id: int = Field(default=0, ge=0)
    sort_type: TradeSortType = TradeSortType.SORT_BY_ID

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        """Get the number of trades."""
        return len(self.trades)

    def __iter__(self) -> Iterator[Trade]:  # type: ignore[override]
        """Iterate through trades in input order."""
        return iter(self.trades)
