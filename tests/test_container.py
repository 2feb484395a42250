"""Tests for the dependency injection container."""

from decimal import Decimal
from pathlib import Path

import pytest

from international_business.config import Settings
from international_business.container import Container, get_container, reset_container
from international_business.exceptions import DataSourceNotFoundError
from international_business.services.aggregator import TransactionAggregator
from international_business.services.rate_graph import RateGraph


@pytest.fixture
def container(data_files: tuple[Path, Path]) -> Container:
    rates, transactions = data_files
    return Container(
        settings=Settings(_env_file=None, rates_file=rates, transactions_file=transactions)
    )


class TestContainer:
    """Tests for Container wiring."""

    def test_builds_rate_graph_from_rates_file(self, container: Container) -> None:
        assert isinstance(container.rate_graph, RateGraph)
        assert len(container.rate_graph.rates) == 3

    def test_aggregator_uses_container_rate_graph(self, container: Container) -> None:
        aggregator = container.transaction_aggregator

        assert isinstance(aggregator, TransactionAggregator)
        assert aggregator.total_in_eur_by_sku("M1") == Decimal("52.00")
        assert aggregator.total_in_eur_by_sku("B2") == Decimal("12.79")
        assert aggregator.total_in_eur_by_sku("G3") == Decimal("10.00")

    def test_services_are_cached(self, container: Container) -> None:
        assert container.rate_graph is container.rate_graph
        assert container.transaction_aggregator is container.transaction_aggregator

    def test_missing_rates_file(self, tmp_path: Path) -> None:
        container = Container(
            settings=Settings(
                _env_file=None,
                rates_file=tmp_path / "missing.json",
                transactions_file=tmp_path / "missing.json",
            )
        )
        with pytest.raises(DataSourceNotFoundError):
            _ = container.rate_graph


class TestGlobalContainer:
    """Tests for the container singleton."""

    def test_reset_container_creates_new_instance(self) -> None:
        reset_container()
        try:
            first = get_container()
            assert get_container() is first
            reset_container()
            assert get_container() is not first
        finally:
            reset_container()
