"""
Decimal and unit conversions.

Percent/factor shifts are exact decimal-point moves, never divisions, so no
rounding can creep in. Fill prices are the only place a division happens and
are rounded half-to-even to the pair's declared scale, which keeps repeated
aggregation of fills free of systematic bias.
"""

from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from src.exchange.errors import FillPriceUndefinedError

PERCENT_DECIMAL_SHIFT = 2


def _shift_point(value: Decimal, places: int) -> Decimal:
    """Move the decimal point by ``places`` without context rounding."""
    if not value.is_finite():
        return value
    sign, digits, exponent = value.as_tuple()
    return Decimal((sign, digits, exponent + places))


def percent_to_factor(percent: Decimal) -> Decimal:
    """Convert a percentage to a factor (0.25 -> 0.0025)."""
    return _shift_point(percent, -PERCENT_DECIMAL_SHIFT)


def factor_to_percent(factor: Decimal) -> Decimal:
    """Convert a factor to a percentage (0.0025 -> 0.25)."""
    return _shift_point(factor, PERCENT_DECIMAL_SHIFT)


def compute_fill_price(
    settlement_amount: Decimal, traded_amount: Decimal, scale: int
) -> Decimal:
    """
    Derive a fill price from settled and traded amounts.

    Args:
        settlement_amount: Amount of counter currency settled
        traded_amount: Amount of traded currency filled
        scale: Number of fractional digits of the result

    Returns:
        settlement_amount / traded_amount, rounded half-to-even at ``scale``

    Raises:
        FillPriceUndefinedError: If traded_amount is zero

    """
    if traded_amount == 0:
        raise FillPriceUndefinedError(settlement_amount)

    exponent = Decimal(1).scaleb(-scale)
    with localcontext() as ctx:
        # Integer digits of the quotient plus ``scale`` plus guard digits
        magnitude = settlement_amount.adjusted() - traded_amount.adjusted()
        integer_digits = max(magnitude, 0) + 2
        ctx.prec = max(
            ctx.prec,
            integer_digits
            + scale
            + len(settlement_amount.as_tuple().digits)
            + len(traded_amount.as_tuple().digits)
            + 28,
        )
        quotient = settlement_amount / traded_amount
        return quotient.quantize(exponent, rounding=ROUND_HALF_EVEN)
