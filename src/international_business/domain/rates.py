"""Exchange rate domain model for currency conversion."""

from dataclasses import dataclass
from decimal import Decimal

from international_business.domain.money import to_decimal


@dataclass(frozen=True, slots=True)
class Rate:
    """Immutable directed exchange rate: 1 from_currency == rate to_currency.

    Currency codes are opaque and compared verbatim. The value is not
    validated here; a zero rate only becomes an error when the rate graph
    has to invert it.
    """

    from_currency: str
    to_currency: str
    rate: Decimal

    def __post_init__(self) -> None:
        """Coerce rate to Decimal."""
        object.__setattr__(self, "rate", to_decimal(self.rate))

    @property
    def pair(self) -> str:
        """Return currency pair string like 'USD/EUR'."""
        return f"{self.from_currency}/{self.to_currency}"
