"""Dependency injection container for International Business.

Builds the rate graph and the transaction aggregator from the configured
data files. Both are created on first access and then reused; the loaded
rates and transactions are never modified afterwards.

Usage:
    from international_business.container import get_container

    container = get_container()
    total = container.transaction_aggregator.total_in_eur_by_sku("T2006")
"""

from functools import cached_property, lru_cache

from international_business.config import Settings, get_settings
from international_business.logging_config import get_logger
from international_business.repositories.interfaces import (
    RateRepository,
    TransactionRepository,
)
from international_business.repositories.json_files import (
    JsonRateRepository,
    JsonTransactionRepository,
)
from international_business.services.aggregator import TransactionAggregator
from international_business.services.interfaces import RateService, TransactionService
from international_business.services.rate_graph import RateGraph

logger = get_logger(__name__)


class Container:
    """Dependency injection container.

    Can be configured with custom settings for testing:

        test_settings = Settings(rates_file=tmp / "rates.json")
        container = Container(settings=test_settings)
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        logger.debug(
            "container_created",
            rates_file=str(self._settings.rates_file),
            transactions_file=str(self._settings.transactions_file),
            environment=self._settings.environment.value,
        )

    @property
    def settings(self) -> Settings:
        """Get application settings."""
        return self._settings

    @cached_property
    def rate_repository(self) -> RateRepository:
        return JsonRateRepository(self._settings.rates_file)

    @cached_property
    def transaction_repository(self) -> TransactionRepository:
        return JsonTransactionRepository(self._settings.transactions_file)

    @cached_property
    def rate_graph(self) -> RateGraph:
        """Get the rate graph built from the full rate table."""
        rates = self.rate_repository.list_all()
        logger.info("rate_graph_ready", rate_count=len(rates))
        return RateGraph(rates)

    @cached_property
    def transaction_aggregator(self) -> TransactionAggregator:
        """Get the aggregator over every loaded transaction."""
        transactions = self.transaction_repository.list_all()
        logger.info("transaction_aggregator_ready", transaction_count=len(transactions))
        return TransactionAggregator(transactions, self.rate_graph)


_container: Container | None = None


@lru_cache
def get_container() -> Container:
    """Get the global container singleton.

    For testing, create a Container directly with custom settings instead
    of using this function.
    """
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Reset the global container so the next access reloads the data files."""
    global _container
    _container = None
    get_container.cache_clear()


# FastAPI dependency functions
def get_rate_service() -> RateService:
    """FastAPI dependency for the rate graph."""
    return get_container().rate_graph


def get_transaction_service() -> TransactionService:
    """FastAPI dependency for the transaction aggregator."""
    return get_container().transaction_aggregator
