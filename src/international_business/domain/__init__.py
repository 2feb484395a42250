from international_business.domain.money import (
    REPORTING_CURRENCY,
    round_half_even,
    to_decimal,
)
from international_business.domain.rates import Rate
from international_business.domain.transactions import Transaction

__all__ = [
    "REPORTING_CURRENCY",
    "Rate",
    "Transaction",
    "round_half_even",
    "to_decimal",
]
