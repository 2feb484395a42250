from abc import ABC, abstractmethod
from decimal import Decimal

from international_business.domain.rates import Rate
from international_business.domain.transactions import Transaction


class RateService(ABC):
    @property
    @abstractmethod
    def rates(self) -> tuple[Rate, ...]:
        pass

    @abstractmethod
    def find_rate(self, from_currency: str, to_currency: str) -> Decimal:
        pass

    @abstractmethod
    def convert(self, amount: Decimal, from_currency: str) -> Decimal:
        pass


class TransactionService(ABC):
    @abstractmethod
    def all_transactions(self) -> tuple[Transaction, ...]:
        pass

    @abstractmethod
    def transactions_by_sku(self, sku: str) -> list[Transaction]:
        pass

    @abstractmethod
    def total_in_eur_by_sku(self, sku: str) -> Decimal:
        pass
