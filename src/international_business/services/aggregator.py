"""Per-SKU aggregation of sales transactions in EUR."""

from collections.abc import Iterable
from decimal import Decimal

from international_business.domain.money import (
    REPORTING_CURRENCY,
    exact_sum,
    round_half_even,
)
from international_business.domain.transactions import Transaction
from international_business.services.interfaces import RateService, TransactionService


class TransactionAggregator(TransactionService):
    """Filters transactions by SKU and restates them in EUR.

    Conversion failures from the rate service propagate to the caller.
    """

    def __init__(
        self, transactions: Iterable[Transaction], rate_service: RateService
    ) -> None:
        self._transactions = tuple(transactions)
        self._rate_service = rate_service

    def all_transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    def transactions_by_sku(self, sku: str) -> list[Transaction]:
        converted = []
        for transaction in self._transactions:
            if transaction.sku != sku:
                continue
            amount = self._rate_service.convert(
                transaction.amount, transaction.currency
            )
            converted.append(
                transaction.in_currency(round_half_even(amount), REPORTING_CURRENCY)
            )
        return converted

    def total_in_eur_by_sku(self, sku: str) -> Decimal:
        total = exact_sum(t.amount for t in self.transactions_by_sku(sku))
        return round_half_even(total)
