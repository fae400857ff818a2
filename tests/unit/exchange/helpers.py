"""Test helpers for exchange adapter tests."""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from src.exchange.adapters.anx.data import ANXAccountInfo, ANXTicker, ANXTrade
from src.exchange.adapters.records import TradeRecord, TradeResultRecord
from src.exchange.domain.currency import CurrencyPair
from src.exchange.enums import Exchange
from src.exchange.errors import UnknownPairScaleError


def anx_value(value: str, currency: str | None = "USD") -> dict[str, Any]:
    """Build an embedded ANX value object."""
    data: dict[str, Any] = {"value": value, "display": value}
    if currency is not None:
        data["currency"] = currency
    return data


class StaticScaleLookup:
    """PairScaleLookup backed by a plain dict."""

    def __init__(self, scales: dict[CurrencyPair, int]) -> None:
        """Initialize with pair scales."""
        self._scales = dict(scales)

    def scale_for(self, pair: CurrencyPair) -> int:
        """Get the scale of a pair."""
        try:
            return self._scales[pair]
        except KeyError:
            raise UnknownPairScaleError(pair) from None


def trade_record(
    tid: int, side: str = "bid", amount: str = "1", price: str = "100"
) -> TradeRecord:
    """Create a normalized public trade record."""
    return TradeRecord(
        exchange=Exchange.ANX,
        tid=tid,
        item="BTC",
        price_currency="USD",
        side_token=side,
        amount=Decimal(amount),
        price=Decimal(price),
    )


def trade_result_record(
    pair_code: str = "BTCUSD",
    traded: str = "2",
    settled: str = "201",
    side: str = "bid",
    timestamp: datetime | None = None,
    trade_id: str = "t-1",
) -> TradeResultRecord:
    """Create a normalized user trade result record."""
    return TradeResultRecord(
        exchange=Exchange.ANX,
        trade_id=trade_id,
        order_id="o-1",
        timestamp=timestamp or datetime(2014, 2, 24, 17, 44, tzinfo=UTC),
        currency_pair_code=pair_code,
        side_token=side,
        traded_currency_fill_amount=Decimal(traded),
        settlement_currency_fill_amount=Decimal(settled),
    )


class TickerBuilder:
    """Builder for ANX ticker payloads."""

    def __init__(self) -> None:
        """Initialize with sensible defaults."""
        self._data: dict[str, Any] = {
            "high": anx_value("725.38123"),
            "low": anx_value("380.00000"),
            "avg": anx_value("429.55"),
            "vwap": anx_value("429.55"),
            "vol": anx_value("30.12345678", "BTC"),
            "last": anx_value("411.90000"),
            "buy": anx_value("411.00000"),
            "sell": anx_value("412.00000"),
            "now": "1393263840383016",
        }

    def with_pair(self, base: str, counter: str) -> "TickerBuilder":
        """Set the volume and average currencies."""
        self._data["vol"]["currency"] = base
        self._data["avg"]["currency"] = counter
        return self

    def with_spread(self, bid: str, ask: str) -> "TickerBuilder":
        """Set buy and sell prices."""
        self._data["buy"] = anx_value(bid)
        self._data["sell"] = anx_value(ask)
        return self

    def with_now(self, micros: int) -> "TickerBuilder":
        """Set the epoch-microsecond timestamp."""
        self._data["now"] = str(micros)
        return self

    def build_json(self) -> dict[str, Any]:
        """Build as raw JSON data."""
        return self._data

    def build(self) -> ANXTicker:
        """Build as ANXTicker model."""
        return ANXTicker.model_validate(self._data)


class TradeBuilder:
    """Builder for ANX public trade payloads."""

    def __init__(self) -> None:
        """Initialize with sensible defaults."""
        self._data: dict[str, Any] = {
            "amount": "0.5",
            "amount_int": "50000000",
            "date": 1393263840,
            "item": "BTC",
            "price": "411.9",
            "price_int": "41190000",
            "price_currency": "USD",
            "tid": 1393263840383016,
            "trade_type": "bid",
            "primary": "Y",
            "properties": "limit",
        }

    def with_tid(self, tid: int) -> "TradeBuilder":
        """Set the trade id."""
        self._data["tid"] = tid
        return self

    def with_side(self, side: str) -> "TradeBuilder":
        """Set the trade type token."""
        self._data["trade_type"] = side
        return self

    def build_json(self) -> dict[str, Any]:
        """Build as raw JSON data."""
        return self._data

    def build(self) -> ANXTrade:
        """Build as ANXTrade model."""
        return ANXTrade.model_validate(self._data)


class AccountInfoBuilder:
    """Builder for ANX account info payloads."""

    def __init__(self) -> None:
        """Initialize with sensible defaults."""
        self._data: dict[str, Any] = {
            "Login": "test@anxpro.com",
            "Index": "0",
            "Rights": ["trade", "get_info"],
            "Language": "en_US",
            "Wallets": {},
            "Trade_Fee": "0.6",
        }

    def with_fee(self, fee: str) -> "AccountInfoBuilder":
        """Set the trade fee percentage."""
        self._data["Trade_Fee"] = fee
        return self

    def with_wallet(
        self, code: str, balance: str, available: str
    ) -> "AccountInfoBuilder":
        """Add a held currency."""
        self._data["Wallets"][code] = {
            "Balance": anx_value(balance, code),
            "Available_Balance": anx_value(available, code),
        }
        return self

    def with_unheld_wallet(self, code: str) -> "AccountInfoBuilder":
        """Add a currency the account never held (no currency field)."""
        self._data["Wallets"][code] = {
            "Balance": anx_value("0", None),
            "Available_Balance": anx_value("0", None),
        }
        return self

    def with_null_wallet(self, code: str) -> "AccountInfoBuilder":
        """Add a null wallet entry."""
        self._data["Wallets"][code] = None
        return self

    def build_json(self) -> dict[str, Any]:
        """Build as raw JSON data."""
        return self._data

    def build(self) -> ANXAccountInfo:
        """Build as ANXAccountInfo model."""
        return ANXAccountInfo.model_validate(self._data)
