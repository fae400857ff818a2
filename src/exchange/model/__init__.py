"""Unified exchange domain models."""

from src.exchange.model.account import AccountInfo, Balance, Wallet
from src.exchange.model.metadata import CurrencyPairMetaData, ExchangeMetaData
from src.exchange.model.order import LimitOrder
from src.exchange.model.ticker import Ticker
from src.exchange.model.trade import Trade, Trades
from src.exchange.model.user_trade import UserTrade, UserTrades

__all__ = [
    "AccountInfo",
    "Balance",
    "CurrencyPairMetaData",
    "ExchangeMetaData",
    "LimitOrder",
    "Ticker",
    "Trade",
    "Trades",
    "UserTrade",
    "UserTrades",
    "Wallet",
]
