"""Sales transaction domain model."""

from dataclasses import dataclass, replace
from decimal import Decimal

from international_business.domain.money import to_decimal


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single sale of a SKU, in the currency it was booked in."""

    sku: str
    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))

    def in_currency(self, amount: Decimal, currency: str) -> "Transaction":
        """Return a copy of this transaction restated in another currency."""
        return replace(self, amount=amount, currency=currency)
