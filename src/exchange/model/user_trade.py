"""
User fill domain models.

A user trade is one execution of the account's own order. Fee fields are
left unset by the adapters: fees come from the wallet history, which a
single trade result does not carry.
"""

from collections.abc import Iterator
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.exchange.domain.currency import CurrencyPair
from src.exchange.enums import OrderSide, TradeSortType


class UserTrade(BaseModel):
    """Domain model for a fill of the account's own order."""

    side: OrderSide
    amount: Decimal = Field(ge=0, description="Filled amount in traded currency")
    currency_pair: CurrencyPair
    price: Decimal = Field(description="Settlement amount / traded amount")
    timestamp: datetime
    trade_id: str
    order_id: str
    fee_amount: Decimal | None = None
    fee_currency: str | None = None

    model_config = ConfigDict(frozen=True)


class UserTrades(BaseModel):
    """
    Collection of user fills.

    ``most_recent_timestamp_of_first_element`` holds the epoch-millisecond
    timestamp of the first fill (0 when empty). It is not a trade id and not
    a maximum.
    """

    trades: tuple[UserTrade, ...] = ()
    most_recent_timestamp_of_first_element: int = 0
    sort_type: TradeSortType = TradeSortType.SORT_BY_TIMESTAMP

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        """Get the number of fills."""
        return len(self.trades)

    def __iter__(self) -> Iterator[UserTrade]:  # type: ignore[override]
        """Iterate through fills in input order."""
        return iter(self.trades)
