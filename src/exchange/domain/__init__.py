"""
Exchange Domain Layer.

This package contains the shared rules every entity adapter leans on:
currency pair resolution, exact percent/factor shifts, scale-aware fill
price rounding, and epoch timestamp normalization.

Key principles:
- Monetary values are always Decimal
- Pair codes pass through verbatim unless a known alias applies
- Nothing here holds state; every function reads only its arguments
"""

from src.exchange.domain.conversions import (
    PERCENT_DECIMAL_SHIFT,
    compute_fill_price,
    factor_to_percent,
    percent_to_factor,
)
from src.exchange.domain.currency import (
    BTC_EUR,
    BTC_HKD,
    BTC_USD,
    DOGE_BTC,
    LTC_BTC,
    CurrencyPair,
)
from src.exchange.domain.pairs import (
    PAIR_ALIASES,
    resolve_pair,
    resolve_pair_from_combined_code,
)
from src.exchange.domain.timestamps import (
    from_epoch_micros_truncated,
    from_epoch_millis,
    to_epoch_millis,
)

__all__ = [
    "BTC_EUR",
    "BTC_HKD",
    "BTC_USD",
    "DOGE_BTC",
    "LTC_BTC",
    "PAIR_ALIASES",
    "PERCENT_DECIMAL_SHIFT",
    "CurrencyPair",
    "compute_fill_price",
    "factor_to_percent",
    "from_epoch_micros_truncated",
    "from_epoch_millis",
    "percent_to_factor",
    "resolve_pair",
    "resolve_pair_from_combined_code",
    "to_epoch_millis",
]
