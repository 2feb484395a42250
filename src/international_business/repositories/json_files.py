"""JSON file repositories for rates and transactions.

Rates are stored as ``[{"from": "USD", "to": "EUR", "rate": 0.9}, ...]`` and
transactions as ``[{"sku": "T2006", "amount": 10.00, "currency": "USD"}, ...]``.
Numbers may also be given as strings. Files are read once and cached.
"""

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from international_business.domain.rates import Rate
from international_business.domain.transactions import Transaction
from international_business.exceptions import (
    DataSourceNotFoundError,
    InvalidDataSourceError,
)
from international_business.logging_config import get_logger
from international_business.repositories.interfaces import (
    RateRepository,
    TransactionRepository,
)

logger = get_logger(__name__)


def _read_records(path: Path) -> list[dict[str, Any]]:
    if not path.exists():
        logger.warning("data_source_missing", path=str(path))
        raise DataSourceNotFoundError(path)

    logger.info("reading_data_source", path=str(path))
    try:
        payload = json.loads(path.read_text(encoding="utf-8"), parse_float=Decimal)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("data_source_unreadable", path=str(path), error=str(e))
        raise InvalidDataSourceError(path, str(e)) from e

    if not isinstance(payload, list):
        raise InvalidDataSourceError(path, "expected a JSON array")
    for index, record in enumerate(payload):
        if not isinstance(record, dict):
            raise InvalidDataSourceError(path, f"entry {index} is not an object")
    return payload


def _field(path: Path, record: dict[str, Any], index: int, key: str) -> Any:
    try:
        return record[key]
    except KeyError:
        raise InvalidDataSourceError(path, f"entry {index} is missing '{key}'") from None


def _text_field(path: Path, record: dict[str, Any], index: int, key: str) -> str:
    value = _field(path, record, index, key)
    if not isinstance(value, str):
        raise InvalidDataSourceError(path, f"entry {index} has non-string '{key}'")
    return value


def _decimal_field(path: Path, record: dict[str, Any], index: int, key: str) -> Decimal:
    value = _field(path, record, index, key)
    if isinstance(value, bool) or not isinstance(value, (int, str, Decimal)):
        raise InvalidDataSourceError(path, f"entry {index} has non-numeric '{key}'")
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise InvalidDataSourceError(
            path, f"entry {index} has non-numeric '{key}': {value!r}"
        ) from None
    if not result.is_finite():
        raise InvalidDataSourceError(path, f"entry {index} has non-finite '{key}'")
    return result


class JsonRateRepository(RateRepository):
    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._rates: tuple[Rate, ...] | None = None

    def list_all(self) -> tuple[Rate, ...]:
        if self._rates is None:
            self._rates = self._load()
        return self._rates

    def _load(self) -> tuple[Rate, ...]:
        records = _read_records(self._path)
        rates = tuple(
            Rate(
                from_currency=_text_field(self._path, record, i, "from"),
                to_currency=_text_field(self._path, record, i, "to"),
                rate=_decimal_field(self._path, record, i, "rate"),
            )
            for i, record in enumerate(records)
        )
        logger.info("rates_loaded", path=str(self._path), count=len(rates))
        return rates


class JsonTransactionRepository(TransactionRepository):
    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._transactions: tuple[Transaction, ...] | None = None

    def list_all(self) -> tuple[Transaction, ...]:
        if self._transactions is None:
            self._transactions = self._load()
        return self._transactions

    def _load(self) -> tuple[Transaction, ...]:
        records = _read_records(self._path)
        transactions = tuple(
            Transaction(
                sku=_text_field(self._path, record, i, "sku"),
                amount=_decimal_field(self._path, record, i, "amount"),
                currency=_text_field(self._path, record, i, "currency"),
            )
            for i, record in enumerate(records)
        )
        logger.info(
            "transactions_loaded", path=str(self._path), count=len(transactions)
        )
        return transactions
