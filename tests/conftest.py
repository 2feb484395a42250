import json
from collections.abc import Callable
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest

from international_business.domain.rates import Rate
from international_business.domain.transactions import Transaction
from international_business.services.aggregator import TransactionAggregator
from international_business.services.rate_graph import RateGraph


@pytest.fixture
def sample_rates() -> list[Rate]:
    return [
        Rate(from_currency="USD", to_currency="EUR", rate=Decimal("1.1")),
        Rate(from_currency="CAD", to_currency="USD", rate=Decimal("0.75")),
        Rate(from_currency="EUR", to_currency="GBP", rate=Decimal("0.8")),
    ]


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    return [
        Transaction(sku="M1", amount=Decimal("20.00"), currency="USD"),
        Transaction(sku="B2", amount=Decimal("15.50"), currency="CAD"),
        Transaction(sku="M1", amount=Decimal("30.00"), currency="EUR"),
        Transaction(sku="G3", amount=Decimal("8.00"), currency="GBP"),
    ]


@pytest.fixture
def rate_graph(sample_rates: list[Rate]) -> RateGraph:
    return RateGraph(sample_rates)


@pytest.fixture
def aggregator(
    sample_transactions: list[Transaction], rate_graph: RateGraph
) -> TransactionAggregator:
    return TransactionAggregator(sample_transactions, rate_graph)


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON payload under tmp_path and return its path."""

    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def data_files(write_json: Callable[[str, Any], Path]) -> tuple[Path, Path]:
    """Rates and transactions files matching sample_rates/sample_transactions."""
    rates = write_json(
        "rates.json",
        [
            {"from": "USD", "to": "EUR", "rate": "1.1"},
            {"from": "CAD", "to": "USD", "rate": "0.75"},
            {"from": "EUR", "to": "GBP", "rate": "0.8"},
        ],
    )
    transactions = write_json(
        "transactions.json",
        [
            {"sku": "M1", "amount": "20.00", "currency": "USD"},
            {"sku": "B2", "amount": "15.50", "currency": "CAD"},
            {"sku": "M1", "amount": "30.00", "currency": "EUR"},
            {"sku": "G3", "amount": "8.00", "currency": "GBP"},
        ],
    )
    return rates, transactions
