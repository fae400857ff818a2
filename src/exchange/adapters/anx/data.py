"""
ANX v2 API Pydantic Models.

This module implements Pydantic models that parse ANX v2 JSON payloads and
turn them into the normalized records consumed by the core adapters.

Key design principles:
- Pydantic models inherit ONLY from BaseModel
- Raw fields store exchange data as-is (with _raw suffix where renamed)
- ``to_record()`` is the only way exchange data leaves this module
- No domain decisions are made here; the core adapters make them
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.exchange.adapters.records import (
    AccountRecord,
    BookEntryRecord,
    OpenOrderRecord,
    TickerRecord,
    TradeRecord,
    TradeResultRecord,
    WalletRecord,
)
from src.exchange.domain.timestamps import from_epoch_millis
from src.exchange.enums import Exchange


class ANXValue(BaseModel):
    """
    Amount with its currency, as ANX embeds it.

    Example: {"value": "725.38123", "currency": "USD", "display": "$725.38"}
    """

    value: Decimal
    currency: str | None = None
    display: str | None = None
    display_short: str | None = Field(default=None, alias="displayShort")
    value_int: int | None = Field(default=None, alias="valueInt")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# Market Data Models
class ANXTicker(BaseModel):
    """Ticker payload from the money/ticker endpoint."""

    high: ANXValue
    low: ANXValue
    avg: ANXValue
    vwap: ANXValue | None = None
    vol: ANXValue
    last: ANXValue
    buy: ANXValue
    sell: ANXValue
    now: int = Field(description="Epoch microseconds")
    data_update_time: int | None = Field(default=None, alias="dataUpdateTime")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_record(self) -> TickerRecord:
        """Convert to a normalized ticker record."""
        return TickerRecord(
            exchange=Exchange.ANX,
            last=self.last.value,
            bid=self.buy.value,
            ask=self.sell.value,
            high=self.high.value,
            low=self.low.value,
            volume=self.vol.value,
            volume_currency=self.vol.currency or "",
            average_currency=self.avg.currency or "",
            now_micros=self.now,
        )


class ANXOrder(BaseModel):
    """Single price level of a depth snapshot."""

    price: Decimal
    amount: Decimal
    price_int: int | None = None
    amount_int: int | None = None
    stamp: int

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_record(self) -> BookEntryRecord:
        """Convert to a normalized depth entry."""
        return BookEntryRecord(
            exchange=Exchange.ANX,
            amount=self.amount,
            price=self.price,
            stamp_millis=self.stamp,
        )


class ANXDepth(BaseModel):
    """Depth snapshot from the money/depth/full endpoint."""

    now: int | None = None
    data_update_time: int | None = Field(default=None, alias="dataUpdateTime")
    asks: list[ANXOrder] = Field(default_factory=list)
    bids: list[ANXOrder] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ANXTrade(BaseModel):
    """Public trade from the money/trade/fetch endpoint."""

    amount: Decimal
    amount_int: int | None = None
    date: int | None = None
    item: str
    price: Decimal
    price_int: int | None = None
    price_currency: str
    tid: int
    trade_type: str
    primary: str | None = None
    properties: str | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_record(self) -> TradeRecord:
        """Convert to a normalized trade record."""
        return TradeRecord(
            exchange=Exchange.ANX,
            tid=self.tid,
            item=self.item,
            price_currency=self.price_currency,
            side_token=self.trade_type,
            amount=self.amount,
            price=self.price,
        )


# Trade Models
class ANXOpenOrder(BaseModel):
    """Open order from the money/orders endpoint."""

    oid: str
    currency: str
    item: str
    type_raw: str = Field(alias="type")
    amount: ANXValue
    effective_amount: ANXValue | None = None
    price: ANXValue
    status: str | None = None
    date: int
    priority: int | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_record(self) -> OpenOrderRecord:
        """Convert to a normalized open-order record."""
        return OpenOrderRecord(
            exchange=Exchange.ANX,
            order_id=self.oid,
            item=self.item,
            currency=self.currency,
            side_token=self.type_raw,
            amount=self.amount.value,
            price=self.price.value,
            date_millis=self.date,
        )


class ANXTradeResult(BaseModel):
    """Fill of an own order from the trade list endpoint."""

    trade_id: str = Field(alias="tradeId")
    order_id: str = Field(alias="orderId")
    timestamp_raw: int = Field(alias="timestamp", description="Epoch milliseconds")
    traded_currency_fill_amount: Decimal = Field(alias="tradedCurrencyFillAmount")
    settlement_currency_fill_amount: Decimal = Field(
        alias="settlementCurrencyFillAmount"
    )
    settlement_currency_fill_amount_unrounded: Decimal | None = Field(
        default=None, alias="settlementCurrencyFillAmountUnrounded"
    )
    side: str
    currency_pair: str = Field(alias="ccyPair")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @property
    def timestamp(self) -> datetime:
        """Get fill timestamp."""
        return from_epoch_millis(self.timestamp_raw)

    def to_record(self) -> TradeResultRecord:
        """Convert to a normalized trade result record."""
        return TradeResultRecord(
            exchange=Exchange.ANX,
            trade_id=self.trade_id,
            order_id=self.order_id,
            timestamp=self.timestamp,
            currency_pair_code=self.currency_pair,
            side_token=self.side,
            traded_currency_fill_amount=self.traded_currency_fill_amount,
            settlement_currency_fill_amount=self.settlement_currency_fill_amount,
        )


# Account Models
class ANXWallet(BaseModel):
    """
    Holdings of one currency.

    ANX lists every currency it supports; a wallet whose balance has no
    currency is one the account never held.
    """

    balance: ANXValue = Field(alias="Balance")
    available_balance: ANXValue = Field(alias="Available_Balance")
    daily_withdrawal_limit: ANXValue | None = Field(
        default=None, alias="Daily_Withdrawal_Limit"
    )
    max_withdraw: ANXValue | None = Field(default=None, alias="Max_Withdraw")
    monthly_withdraw_limit: ANXValue | None = Field(
        default=None, alias="Monthly_Withdraw_Limit"
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_record(self) -> WalletRecord:
        """Convert to a normalized wallet record."""
        return WalletRecord(
            exchange=Exchange.ANX,
            currency=self.balance.currency,
            balance=self.balance.value,
            available_balance=self.available_balance.value,
        )


class ANXAccountInfo(BaseModel):
    """Account info from the money/info endpoint."""

    login: str = Field(alias="Login")
    index: str | None = Field(default=None, alias="Index")
    id: str | None = Field(default=None, alias="Id")
    rights: list[str] = Field(default_factory=list, alias="Rights")
    language: str | None = Field(default=None, alias="Language")
    created: str | None = Field(default=None, alias="Created")
    last_login: str | None = Field(default=None, alias="Last_Login")
    wallets: dict[str, ANXWallet | None] = Field(
        default_factory=dict, alias="Wallets"
    )
    trade_fee: Decimal = Field(alias="Trade_Fee", description="Percentage")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_record(self) -> AccountRecord:
        """Convert to a normalized account record."""
        return AccountRecord(
            exchange=Exchange.ANX,
            login=self.login,
            trade_fee_percent=self.trade_fee,
            wallets={
                code: wallet.to_record() if wallet is not None else None
                for code, wallet in self.wallets.items()
            },
        )
