from international_business.repositories.interfaces import (
    RateRepository,
    TransactionRepository,
)
from international_business.repositories.json_files import (
    JsonRateRepository,
    JsonTransactionRepository,
)

__all__ = [
    "JsonRateRepository",
    "JsonTransactionRepository",
    "RateRepository",
    "TransactionRepository",
]
