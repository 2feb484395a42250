from international_business.services.aggregator import TransactionAggregator
from international_business.services.interfaces import RateService, TransactionService
from international_business.services.rate_graph import RateGraph

__all__ = [
    "RateGraph",
    "RateService",
    "TransactionAggregator",
    "TransactionService",
]
