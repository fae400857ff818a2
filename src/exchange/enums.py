"""
Enums for the unified exchange model.

This module defines the standardized enum values shared by every adapter.
They form the vocabulary that exchange-specific tokens are normalized into,
so downstream code never sees an exchange's own spelling.

"""

from __future__ import annotations

import enum
import logging

from src.exchange.errors import UnrecognizedSideError

logger = logging.getLogger(__name__)

SIDE_BID = "bid"
SIDE_ASK = "ask"


# =============================================================================
# EXCHANGE ENUMS
# =============================================================================


class Exchange(str, enum.Enum):
    """
    Supported exchange identifiers.

    Used to tag normalized input records with the exchange they came from.
    """

    ANX = "anx"


# =============================================================================
# ORDER ENUMS
# =============================================================================


class OrderSide(str, enum.Enum):
    """
    Canonical order side.

    BID is the buy side, ASK is the sell side. Applies to resting orders,
    public trades and user fills alike.
    """

    BID = "bid"  # Buy side
    ASK = "ask"  # Sell side

    @classmethod
    def from_token(
        cls,
        token: str | None,
        *,
        ignore_case: bool,
        strict: bool = False,
        bid_token: str = SIDE_BID,
    ) -> OrderSide:
        """
        Classify an exchange side token.

        Order-book and open-order payloads are matched case-insensitively,
        trade payloads exactly. Anything that is not the bid marker is the
        ask side unless ``strict`` is set.

        Args:
            token: Exchange side string (e.g., "bid", "ask", "BID")
            ignore_case: Compare with the bid marker case-insensitively
            strict: Reject tokens that are neither the bid nor the ask marker
            bid_token: The exchange's bid marker

        Returns:
            Canonical OrderSide

        Raises:
            UnrecognizedSideError: If ``strict`` and the token is unknown

        """
        if token is not None and _matches(token, bid_token, ignore_case):
            return cls.BID

        if token is None or not _matches(token, SIDE_ASK, ignore_case):
            if strict:
                raise UnrecognizedSideError(token)
            logger.warning(f"Unrecognized side token {token!r}, treating as ask")

        return cls.ASK


def _matches(token: str, marker: str, ignore_case: bool) -> bool:
    if ignore_case:
        return token.lower() == marker.lower()
    return token == marker


# =============================================================================
# COLLECTION ENUMS
# =============================================================================


class TradeSortType(str, enum.Enum):
    """Declared ordering of a trade collection."""

    SORT_BY_ID = "sort_by_id"
    SORT_BY_TIMESTAMP = "sort_by_timestamp"
