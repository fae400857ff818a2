"""
Protocols consumed by the adapter layer.

Collaborators are typed structurally: any object with the right methods
satisfies the protocol without inheriting from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.exchange.domain.currency import CurrencyPair


@runtime_checkable
class PairScaleLookup(Protocol):
    """
    Protocol for currency-pair price precision metadata.

    Semantic Role: Read-only precision reference
    Relationships:
    - Consumed by: user trade adaptation (fill price rounding)
    - Provided by: exchange metadata, test doubles
    - Semantic Guarantees: Never mutated by the adapter layer
    """

    def scale_for(self, pair: CurrencyPair) -> int:
        """
        Get the declared price scale of a pair.

        Args:
            pair: Currency pair to look up

        Returns:
            Number of fractional digits valid for the pair's price

        Raises:
            UnknownPairScaleError: If the pair is not known

        """
        ...
