"""
Account domain models.

Balances are grouped into a wallet, and the wallet together with the login
and trading fee forms the account info.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.exchange.domain.conversions import factor_to_percent


class Balance(BaseModel):
    """Holdings of a single currency."""

    currency: str = Field(..., min_length=1)
    total: Decimal = Field(description="Total amount held")
    available: Decimal = Field(description="Amount not reserved by open orders")

    model_config = ConfigDict(frozen=True)

    @property
    def reserved(self) -> Decimal:
        """Amount reserved by open orders."""
        return self.total - self.available


class Wallet(BaseModel):
    """Balances of every currency the account holds."""

    balances: tuple[Balance, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def currencies(self) -> list[str]:
        """Get the held currency codes."""
        return [balance.currency for balance in self.balances]

    def get(self, currency: str) -> Balance | None:
        """Get the balance of a currency, or None if not held."""
        for balance in self.balances:
            if balance.currency == currency:
                return balance
        return None

    def __len__(self) -> int:
        """Get the number of balances."""
        return len(self.balances)


class AccountInfo(BaseModel):
    """Account identity, trading fee and wallet."""

    username: str
    trading_fee: Decimal = Field(description="Fee as a factor (0.006 = 0.6%)")
    wallet: Wallet

    model_config = ConfigDict(frozen=True)

    @property
    def trading_fee_percent(self) -> Decimal:
        """Trading fee expressed as a percentage."""
        return factor_to_percent(self.trading_fee)
