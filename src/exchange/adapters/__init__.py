"""
============================

Exchange Data Adapters.

============================

This package turns exchange-specific data into the unified domain model.
Per-exchange front-ends (e.g. ``anx``) parse wire payloads into normalized
records; ``core`` adapts those records into domain entities.

"""

from src.exchange.adapters.core import (
    adapt_account_info,
    adapt_balance,
    adapt_open_orders,
    adapt_order,
    adapt_orders,
    adapt_ticker,
    adapt_trade,
    adapt_trades,
    adapt_user_trade,
    adapt_user_trades,
    adapt_wallet,
)

__all__ = [
    "adapt_account_info",
    "adapt_balance",
    "adapt_open_orders",
    "adapt_order",
    "adapt_orders",
    "adapt_ticker",
    "adapt_trade",
    "adapt_trades",
    "adapt_user_trade",
    "adapt_user_trades",
    "adapt_wallet",
]
