"""Exchange adapter protocols."""

from src.exchange.protocols.market import PairScaleLookup

__all__ = ["PairScaleLookup"]
