from international_business.domain.money import REPORTING_CURRENCY
from international_business.domain.rates import Rate
from international_business.domain.transactions import Transaction
from international_business.services.aggregator import TransactionAggregator
from international_business.services.rate_graph import RateGraph

__all__ = [
    "REPORTING_CURRENCY",
    "Rate",
    "RateGraph",
    "Transaction",
    "TransactionAggregator",
]

__version__ = "0.1.0"
