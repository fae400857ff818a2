"""Tests for currency pair resolution."""

import pytest
from pydantic import ValidationError

from src.exchange.domain.currency import BTC_USD, DOGE_BTC, CurrencyPair
from src.exchange.domain.pairs import resolve_pair, resolve_pair_from_combined_code
from src.exchange.errors import MalformedCurrencyPairError


class TestCurrencyPair:
    """Test CurrencyPair primitive behavior."""

    def test_equality_by_components(self) -> None:
        """Pairs with the same base and counter are equal and hash alike."""
        pair = CurrencyPair(base="BTC", counter="USD")
        assert pair == BTC_USD
        assert {pair: 1}[BTC_USD] == 1

    def test_order_matters(self) -> None:
        """(BTC, USD) and (USD, BTC) are different markets."""
        assert CurrencyPair(base="USD", counter="BTC") != BTC_USD

    def test_empty_codes_rejected(self) -> None:
        """Both components must be non-empty."""
        with pytest.raises(ValidationError):
            CurrencyPair(base="", counter="USD")

    def test_symbol_round_trip(self) -> None:
        """Symbol formatting and parsing agree."""
        assert str(BTC_USD) == "BTC/USD"
        assert CurrencyPair.from_symbol("DOGE/BTC") == DOGE_BTC

    def test_from_symbol_requires_separator(self) -> None:
        """A symbol without '/' is rejected."""
        with pytest.raises(ValueError, match="must contain"):
            CurrencyPair.from_symbol("BTCUSD")

    def test_immutable(self) -> None:
        """Pairs cannot be modified."""
        with pytest.raises(ValidationError):
            BTC_USD.base = "LTC"  # type: ignore[misc]


class TestResolvePair:
    """Test resolution from separated codes."""

    def test_passes_codes_through(self) -> None:
        """Codes are used verbatim, including case."""
        pair = resolve_pair("btc", "Usd")
        assert pair.base == "btc"
        assert pair.counter == "Usd"


class TestResolvePairFromCombinedCode:
    """Test resolution from combined codes."""

    @pytest.mark.parametrize(
        ("code", "base", "counter"),
        [("BTCUSD", "BTC", "USD"), ("LTCBTC", "LTC", "BTC"), ("btchkd", "btc", "hkd")],
    )
    def test_six_character_split(self, code: str, base: str, counter: str) -> None:
        """Six-character codes split 3+3 with case preserved."""
        assert resolve_pair_from_combined_code(code) == CurrencyPair(
            base=base, counter=counter
        )

    @pytest.mark.parametrize("code", ["DOGEBTC", "dogebtc", "DogeBtc"])
    def test_alias_is_case_insensitive(self, code: str) -> None:
        """The DOGE/BTC alias matches regardless of case."""
        assert resolve_pair_from_combined_code(code) == DOGE_BTC

    @pytest.mark.parametrize("code", ["AB", "", "BTCUSDT", "DOGE"])
    def test_malformed_code(self, code: str) -> None:
        """Codes of the wrong length that are not aliases fail."""
        with pytest.raises(
            MalformedCurrencyPairError, match="Unrecognized currency pair"
        ) as exc:
            resolve_pair_from_combined_code(code)
        assert exc.value.code == code

    def test_six_characters_always_split(self) -> None:
        """A six-character code splits even when it looks like a truncated alias."""
        assert resolve_pair_from_combined_code("DOGEBT") == CurrencyPair(
            base="DOG", counter="EBT"
        )

    def test_malformed_is_value_error(self) -> None:
        """Callers can catch the failure as a ValueError."""
        with pytest.raises(ValueError):
            resolve_pair_from_combined_code("AB")
