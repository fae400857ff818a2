"""Limit order domain model."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.exchange.domain.currency import CurrencyPair
from src.exchange.enums import OrderSide


class LimitOrder(BaseModel):
    """
    A resting limit order.

    Order-book snapshots produce orders without an identifier; open-order
    listings carry the exchange's order id.
    """

    side: OrderSide
    amount: Decimal = Field(ge=0, description="Order size in base currency")
    currency_pair: CurrencyPair
    order_id: str | None = Field(default=None, description="Exchange order id")
    timestamp: datetime
    limit_price: Decimal

    model_config = ConfigDict(frozen=True)
