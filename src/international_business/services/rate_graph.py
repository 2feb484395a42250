"""Currency conversion over a sparse table of exchange rates.

The table lists only some currency pairs. Resolving an arbitrary pair walks
the graph depth-first: a direct rate wins, then the inverse of the reverse
rate, then chains through intermediate currencies. Every tier takes the
first matching rate in load order, so with redundant or conflicting rates
the result depends on that order. It is not a shortest-path search.
"""

from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal

from international_business.domain.money import (
    REPORTING_CURRENCY,
    multiply,
    round_half_even,
)
from international_business.domain.rates import Rate
from international_business.exceptions import MalformedRateError, NoConversionPathError
from international_business.services.interfaces import RateService

_ONE = Decimal("1")


class RateGraph(RateService):
    def __init__(self, rates: Iterable[Rate]) -> None:
        self._rates = tuple(rates)
        # source currency -> outgoing rates, load order kept and duplicates retained
        outgoing: dict[str, list[Rate]] = defaultdict(list)
        for rate in self._rates:
            outgoing[rate.from_currency].append(rate)
        self._outgoing = {code: tuple(edges) for code, edges in outgoing.items()}

    @property
    def rates(self) -> tuple[Rate, ...]:
        """Every rate in the table, in load order."""
        return self._rates

    def convert(self, amount: Decimal, from_currency: str) -> Decimal:
        """Convert an amount to EUR, rounded half-even to cents.

        EUR amounts are returned untouched.
        """
        if from_currency == REPORTING_CURRENCY:
            return amount
        factor = self.find_rate(from_currency, REPORTING_CURRENCY)
        return round_half_even(multiply(amount, factor))

    def find_rate(self, from_currency: str, to_currency: str) -> Decimal:
        """Return how many units of to_currency one unit of from_currency is worth.

        Raises:
            NoConversionPathError: If no chain of rates links the two currencies.
            MalformedRateError: If the only usable rate is a zero to be inverted.
        """
        factor = self._resolve(from_currency, to_currency, set())
        if factor is None:
            raise NoConversionPathError(from_currency, to_currency)
        return factor

    def _first_edge(self, from_currency: str, to_currency: str) -> Rate | None:
        for rate in self._outgoing.get(from_currency, ()):
            if rate.to_currency == to_currency:
                return rate
        return None

    def _resolve(
        self, from_currency: str, to_currency: str, visited: set[str]
    ) -> Decimal | None:
        if from_currency == to_currency:
            return _ONE

        direct = self._first_edge(from_currency, to_currency)
        if direct is not None:
            return direct.rate

        inverse = self._first_edge(to_currency, from_currency)
        if inverse is not None:
            if inverse.rate == 0:
                raise MalformedRateError(
                    inverse.from_currency, inverse.to_currency, inverse.rate
                )
            return _ONE / inverse.rate

        visited.add(from_currency)
        for rate in self._outgoing.get(from_currency, ()):
            # earlier branches may have visited this currency already
            if rate.to_currency in visited:
                continue
            factor = self._resolve(rate.to_currency, to_currency, visited)
            if factor:
                return rate.rate * factor
        return None
