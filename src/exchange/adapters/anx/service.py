"""
ANX adapter entry points.

Thin composition of the ANX wire models and the core adapters: parse,
normalize to records, then adapt. Every domain decision lives in the core
adapters.
"""

import logging
from collections.abc import Iterable

from src.exchange.adapters import core
from src.exchange.adapters.anx.data import (
    ANXAccountInfo,
    ANXDepth,
    ANXOpenOrder,
    ANXTicker,
    ANXTrade,
    ANXTradeResult,
)
from src.exchange.enums import SIDE_ASK, SIDE_BID
from src.exchange.model import AccountInfo, LimitOrder, Ticker, Trades, UserTrades
from src.exchange.protocols import PairScaleLookup

logger = logging.getLogger(__name__)


def adapt_anx_ticker(ticker: ANXTicker) -> Ticker:
    """Adapt an ANX ticker."""
    return core.adapt_ticker(ticker.to_record())


def adapt_depth(
    depth: ANXDepth,
    traded_code: str,
    counter_code: str,
    *,
    strict_sides: bool = False,
) -> tuple[list[LimitOrder], list[LimitOrder]]:
    """
    Adapt a depth snapshot into (asks, bids).

    Depth entries carry no pair, so the caller supplies it.
    """
    asks = core.adapt_orders(
        [order.to_record() for order in depth.asks],
        traded_code,
        counter_code,
        SIDE_ASK,
        None,
        strict_sides=strict_sides,
    )
    bids = core.adapt_orders(
        [order.to_record() for order in depth.bids],
        traded_code,
        counter_code,
        SIDE_BID,
        None,
        strict_sides=strict_sides,
    )
    logger.debug(
        f"Adapted {traded_code}/{counter_code} depth: "
        f"{len(asks)} asks, {len(bids)} bids"
    )
    return asks, bids


def adapt_anx_trades(
    trades: Iterable[ANXTrade], *, strict_sides: bool = False
) -> Trades:
    """Adapt ANX public trades."""
    return core.adapt_trades(
        [trade.to_record() for trade in trades], strict_sides=strict_sides
    )


def adapt_anx_open_orders(
    orders: Iterable[ANXOpenOrder], *, strict_sides: bool = False
) -> list[LimitOrder]:
    """Adapt ANX open orders."""
    return core.adapt_open_orders(
        [order.to_record() for order in orders], strict_sides=strict_sides
    )


def adapt_anx_account_info(account_info: ANXAccountInfo) -> AccountInfo:
    """Adapt ANX account info."""
    return core.adapt_account_info(account_info.to_record())


def adapt_anx_user_trades(
    results: Iterable[ANXTradeResult],
    lookup: PairScaleLookup,
    *,
    strict_sides: bool = False,
) -> UserTrades:
    """Adapt ANX trade results using the pair scales from ``lookup``."""
    return core.adapt_user_trades(
        [result.to_record() for result in results],
        lookup,
        strict_sides=strict_sides,
    )
