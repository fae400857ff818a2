"""ANX v2 exchange front-end."""

from src.exchange.adapters.anx.data import (
    ANXAccountInfo,
    ANXDepth,
    ANXOpenOrder,
    ANXOrder,
    ANXTicker,
    ANXTrade,
    ANXTradeResult,
    ANXValue,
    ANXWallet,
)
from src.exchange.adapters.anx.service import (
    adapt_anx_account_info,
    adapt_anx_open_orders,
    adapt_anx_ticker,
    adapt_anx_trades,
    adapt_anx_user_trades,
    adapt_depth,
)

__all__ = [
    "ANXAccountInfo",
    "ANXDepth",
    "ANXOpenOrder",
    "ANXOrder",
    "ANXTicker",
    "ANXTrade",
    "ANXTradeResult",
    "ANXValue",
    "ANXWallet",
    "adapt_anx_account_info",
    "adapt_anx_open_orders",
    "adapt_anx_ticker",
    "adapt_anx_trades",
    "adapt_anx_user_trades",
    "adapt_depth",
]
