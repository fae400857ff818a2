"""
Exchange-agnostic entity adapters.

Pure functions that turn normalized records into canonical domain entities.
They keep no state and perform no I/O. List adapters are all-or-nothing:
if any element fails, the error propagates and no partial result is
returned.

Side tokens are matched case-insensitively for order-book and open-order
data and exactly for trade data. Unknown tokens fall back to the ask side
unless ``strict_sides`` is set.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from decimal import Decimal

from src.exchange.adapters.records import (
    AccountRecord,
    BookEntryRecord,
    OpenOrderRecord,
    TickerRecord,
    TradeRecord,
    TradeResultRecord,
    WalletRecord,
)
from src.exchange.domain.conversions import compute_fill_price, percent_to_factor
from src.exchange.domain.pairs import resolve_pair, resolve_pair_from_combined_code
from src.exchange.domain.timestamps import (
    from_epoch_micros_truncated,
    from_epoch_millis,
    to_epoch_millis,
)
from src.exchange.enums import OrderSide, TradeSortType
from src.exchange.model import (
    AccountInfo,
    Balance,
    LimitOrder,
    Ticker,
    Trade,
    Trades,
    UserTrade,
    UserTrades,
    Wallet,
)
from src.exchange.protocols import PairScaleLookup

logger = logging.getLogger(__name__)


# =============================================================================
# MARKET DATA
# =============================================================================


def adapt_ticker(record: TickerRecord) -> Ticker:
    """Adapt a ticker record."""
    return Ticker(
        currency_pair=resolve_pair(record.volume_currency, record.average_currency),
        last=record.last,
        bid=record.bid,
        ask=record.ask,
        high=record.high,
        low=record.low,
        volume=record.volume,
        timestamp=from_epoch_micros_truncated(record.now_micros),
    )


def adapt_order(
    amount: Decimal,
    price: Decimal,
    traded_code: str,
    counter_code: str,
    side_token: str,
    order_id: str | None,
    timestamp: datetime,
    *,
    strict_sides: bool = False,
) -> LimitOrder:
    """
    Build a single limit order.

    Args:
        amount: Order size in traded currency
        price: Limit price
        traded_code: Traded (base) currency code
        counter_code: Counter currency code
        side_token: Exchange side string, matched case-insensitively
        order_id: Exchange order id, None for depth entries
        timestamp: Order timestamp
        strict_sides: Reject unknown side tokens instead of defaulting to ask

    Returns:
        LimitOrder

    """
    return LimitOrder(
        side=OrderSide.from_token(side_token, ignore_case=True, strict=strict_sides),
        amount=amount,
        currency_pair=resolve_pair(traded_code, counter_code),
        order_id=order_id,
        timestamp=timestamp,
        limit_price=price,
    )


def adapt_orders(
    entries: Iterable[BookEntryRecord],
    traded_code: str,
    counter_code: str,
    side_token: str,
    order_id: str | None,
    *,
    strict_sides: bool = False,
) -> list[LimitOrder]:
    """
    Adapt one side of a depth snapshot.

    Side, pair and id are shared by every entry; amount, price and
    timestamp come from each entry.
    """
    return [
        adapt_order(
            entry.amount,
            entry.price,
            traded_code,
            counter_code,
            side_token,
            order_id,
            from_epoch_millis(entry.stamp_millis),
            strict_sides=strict_sides,
        )
        for entry in entries
    ]


def adapt_open_orders(
    records: Iterable[OpenOrderRecord], *, strict_sides: bool = False
) -> list[LimitOrder]:
    """Adapt an open-order listing; each entry carries its own pair, side and id."""
    return [
        adapt_order(
            record.amount,
            record.price,
            record.item,
            record.currency,
            record.side_token,
            record.order_id,
            from_epoch_millis(record.date_millis),
            strict_sides=strict_sides,
        )
        for record in records
    ]


def adapt_trade(record: TradeRecord, *, strict_sides: bool = False) -> Trade:
    """
    Adapt a public trade.

    The trade id doubles as the timestamp and is kept as raw epoch
    milliseconds; ``Trade.timestamp`` converts it on access.
    """
    return Trade(
        side=OrderSide.from_token(
            record.side_token, ignore_case=False, strict=strict_sides
        ),
        amount=record.amount,
        currency_pair=resolve_pair(record.item, record.price_currency),
        price=record.price,
        timestamp_millis=record.tid,
        trade_id=str(record.tid),
    )


def adapt_trades(
    records: Iterable[TradeRecord], *, strict_sides: bool = False
) -> Trades:
    """Adapt public trades, tracking the largest trade id seen."""
    trades: list[Trade] = []
    latest_tid = 0
    for record in records:
        if record.tid > latest_tid:
            latest_tid = record.tid
        trades.append(adapt_trade(record, strict_sides=strict_sides))

    logger.debug(f"Adapted {len(trades)} trades, latest tid {latest_tid}")
    return Trades(
        trades=tuple(trades),
        latest_trade_id=latest_tid,
        sort_type=TradeSortType.SORT_BY_ID,
    )


# =============================================================================
# ACCOUNT DATA
# =============================================================================


def adapt_balance(record: WalletRecord | None) -> Balance | None:
    """
    Adapt a wallet entry.

    Returns None for an absent entry, or one without a currency, rather than
    a zero balance.
    """
    if record is None or not record.currency:
        return None
    return Balance(
        currency=record.currency,
        total=record.balance,
        available=record.available_balance,
    )


def adapt_wallet(records: Mapping[str, WalletRecord | None]) -> Wallet:
    """Adapt every held currency into a wallet, skipping absent entries."""
    balances = []
    for record in records.values():
        balance = adapt_balance(record)
        if balance is not None:
            balances.append(balance)
    return Wallet(balances=tuple(balances))


def adapt_account_info(record: AccountRecord) -> AccountInfo:
    """Adapt account info; the fee percentage becomes a factor."""
    return AccountInfo(
        username=record.login,
        trading_fee=percent_to_factor(record.trade_fee_percent),
        wallet=adapt_wallet(record.wallets),
    )


def adapt_user_trade(
    record: TradeResultRecord,
    lookup: PairScaleLookup,
    *,
    strict_sides: bool = False,
) -> UserTrade:
    """
    Adapt a fill of the account's own order.

    The price is settlement amount over traded amount, rounded half-to-even
    to the pair's declared scale. Fees are left unset.

    Raises:
        MalformedCurrencyPairError: If the pair code cannot be resolved
        UnknownPairScaleError: If the lookup has no scale for the pair
        FillPriceUndefinedError: If the traded amount is zero

    """
    currency_pair = resolve_pair_from_combined_code(record.currency_pair_code)
    price = compute_fill_price(
        record.settlement_currency_fill_amount,
        record.traded_currency_fill_amount,
        lookup.scale_for(currency_pair),
    )
    return UserTrade(
        side=OrderSide.from_token(
            record.side_token, ignore_case=False, strict=strict_sides
        ),
        amount=record.traded_currency_fill_amount,
        currency_pair=currency_pair,
        price=price,
        timestamp=record.timestamp,
        trade_id=record.trade_id,
        order_id=record.order_id,
    )


def adapt_user_trades(
    records: list[TradeResultRecord],
    lookup: PairScaleLookup,
    *,
    strict_sides: bool = False,
) -> UserTrades:
    """
    Adapt fills of the account's own orders.

    The collection's marker is the first fill's timestamp in epoch
    milliseconds, or 0 when there are none.
    """
    trades = [
        adapt_user_trade(record, lookup, strict_sides=strict_sides)
        for record in records
    ]
    first_timestamp = to_epoch_millis(records[0].timestamp) if trades else 0

    logger.debug(f"Adapted {len(trades)} user trades")
    return UserTrades(
        trades=tuple(trades),
        most_recent_timestamp_of_first_element=first_timestamp,
        sort_type=TradeSortType.SORT_BY_TIMESTAMP,
    )
