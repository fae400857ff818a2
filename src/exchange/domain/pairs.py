"""Currency pair resolution from exchange identifiers."""

from src.exchange.domain.currency import DOGE_BTC, CurrencyPair
from src.exchange.errors import MalformedCurrencyPairError

COMBINED_CODE_LENGTH = 6

# Combined codes whose natural 3+3 split is wrong. Keys are upper case.
PAIR_ALIASES: dict[str, CurrencyPair] = {
    "DOGEBTC": DOGE_BTC,
}


def resolve_pair(traded_code: str, counter_code: str) -> CurrencyPair:
    """Build a pair from two already separated currency codes."""
    return CurrencyPair(base=traded_code, counter=counter_code)


def resolve_pair_from_combined_code(code: str) -> CurrencyPair:
    """
    Resolve a combined pair code such as "BTCUSD".

    Aliases match case-insensitively; any other code must be exactly six
    characters and is split 3+3 with its case preserved.

    Raises:
        MalformedCurrencyPairError: If the code is not an alias and not six characters

    """
    alias = PAIR_ALIASES.get(code.upper())
    if alias is not None:
        return alias
    if len(code) != COMBINED_CODE_LENGTH:
        raise MalformedCurrencyPairError(code)
    return CurrencyPair(base=code[:3], counter=code[3:])
