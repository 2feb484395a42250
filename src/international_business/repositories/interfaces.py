from abc import ABC, abstractmethod

from international_business.domain.rates import Rate
from international_business.domain.transactions import Transaction


class RateRepository(ABC):
    """Repository interface for the exchange rate table."""

    @abstractmethod
    def list_all(self) -> tuple[Rate, ...]:
        """Return every rate, in source order."""
        pass


class TransactionRepository(ABC):
    """Repository interface for sales transactions."""

    @abstractmethod
    def list_all(self) -> tuple[Transaction, ...]:
        """Return every transaction, in source order."""
        pass
