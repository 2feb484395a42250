"""Decimal helpers shared by the rate graph and the aggregator.

Amounts may be of any magnitude, so arithmetic that must stay exact widens
the context precision instead of relying on the default 28 digits.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

REPORTING_CURRENCY = "EUR"


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a numeric value to Decimal without float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def multiply(value: Decimal, factor: Decimal) -> Decimal:
    """Multiply two Decimals exactly."""
    digits = len(value.as_tuple().digits) + len(factor.as_tuple().digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits)
        return value * factor


def exact_sum(values: Iterable[Decimal]) -> Decimal:
    """Add Decimals exactly, starting from zero."""
    values = list(values)
    total = Decimal("0")
    if not values:
        return total
    highest = max(v.adjusted() for v in values)
    lowest = min(min(int(v.as_tuple().exponent) for v in values), 0)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, highest - lowest + len(str(len(values))) + 1)
        return sum(values, total)


def round_half_even(value: Decimal, places: int = 2) -> Decimal:
    """Round to a fixed number of decimals, ties going to the even digit.

    >>> round_half_even(Decimal("22.125"))
    Decimal('22.12')
    >>> round_half_even(Decimal("22.135"))
    Decimal('22.14')
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 1)
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)
