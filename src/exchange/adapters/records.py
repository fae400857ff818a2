"""
Normalized input records.

Each exchange front-end turns its own wire DTOs into these records, tagged
with the exchange they came from. The core adapters consume only these
records, so every exchange quirk stays in its front-end.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.exchange.enums import Exchange


class ExchangeRecord(BaseModel):
    """Base for all normalized records."""

    exchange: Exchange

    model_config = ConfigDict(frozen=True)


class TickerRecord(ExchangeRecord):
    """
    Ticker values with the currencies they are quoted in.

    The pair is taken from the volume and average currencies, which is how
    the source payload carries it.
    """

    last: Decimal
    bid: Decimal
    ask: Decimal
    high: Decimal
    low: Decimal
    volume: Decimal
    volume_currency: str
    average_currency: str
    now_micros: int = Field(ge=0, description="Epoch microseconds")


class BookEntryRecord(ExchangeRecord):
    """One depth-snapshot entry."""

    amount: Decimal
    price: Decimal
    stamp_millis: int = Field(ge=0)


class OpenOrderRecord(ExchangeRecord):
    """One open order of the account."""

    order_id: str
    item: str
    currency: str
    side_token: str
    amount: Decimal
    price: Decimal
    date_millis: int = Field(ge=0)


class WalletRecord(ExchangeRecord):
    """Holdings of one currency."""

    currency: str | None = None
    balance: Decimal
    available_balance: Decimal


class AccountRecord(ExchangeRecord):
    """Account identity, fee percentage and per-currency wallets."""

    login: str
    trade_fee_percent: Decimal
    wallets: dict[str, WalletRecord | None] = Field(default_factory=dict)


class TradeRecord(ExchangeRecord):
    """One public trade."""

    tid: int = Field(ge=0)
    item: str
    price_currency: str
    side_token: str
    amount: Decimal
    price: Decimal


class TradeResultRecord(ExchangeRecord):
    """One fill of the account's own order."""

    trade_id: str
    order_id: str
    timestamp: datetime
    currency_pair_code: str
    side_token: str
    traded_currency_fill_amount: Decimal
    settlement_currency_fill_amount: Decimal
