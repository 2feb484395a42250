"""API routes for International Business."""

from typing import Annotated

from fastapi import APIRouter, Depends

from international_business.api.schemas import (
    HealthResponse,
    RateResponse,
    SkuTransactionsResponse,
    TransactionResponse,
)
from international_business.config import get_settings
from international_business.container import (
    get_rate_service,
    get_transaction_service,
)
from international_business.domain.rates import Rate
from international_business.domain.transactions import Transaction
from international_business.exceptions import SkuNotFoundError
from international_business.logging_config import get_logger, log_context
from international_business.services.interfaces import RateService, TransactionService

logger = get_logger(__name__)

health_router = APIRouter(tags=["health"])
transaction_router = APIRouter(prefix="/api/transactions", tags=["transactions"])


def _rate_to_response(rate: Rate) -> RateResponse:
    return RateResponse(
        from_currency=rate.from_currency,
        to_currency=rate.to_currency,
        rate=str(rate.rate),
    )


def _transaction_to_response(transaction: Transaction) -> TransactionResponse:
    return TransactionResponse(
        sku=transaction.sku,
        amount=str(transaction.amount),
        currency=transaction.currency,
    )


@health_router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=get_settings().app_version)


@transaction_router.get("", response_model=list[TransactionResponse])
def list_transactions(
    service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> list[TransactionResponse]:
    """List every transaction in its original currency."""
    transactions = service.all_transactions()
    logger.info("transactions_listed", count=len(transactions))
    return [_transaction_to_response(t) for t in transactions]


@transaction_router.get("/rates", response_model=list[RateResponse])
def list_rates(
    service: Annotated[RateService, Depends(get_rate_service)],
) -> list[RateResponse]:
    """List every exchange rate in the table."""
    rates = service.rates
    logger.info("rates_listed", count=len(rates))
    return [_rate_to_response(r) for r in rates]


@transaction_router.get("/{sku}", response_model=SkuTransactionsResponse)
def get_transactions_by_sku(
    sku: str,
    service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> SkuTransactionsResponse:
    """Get a SKU's transactions converted to EUR and their total."""
    with log_context(sku=sku):
        transactions = service.transactions_by_sku(sku)
        if not transactions:
            raise SkuNotFoundError(sku)

        total = service.total_in_eur_by_sku(sku)
        logger.info(
            "sku_transactions_converted",
            count=len(transactions),
            total_amount_in_eur=str(total),
        )
    return SkuTransactionsResponse(
        sku=sku,
        transactions=[_transaction_to_response(t) for t in transactions],
        total_amount_in_eur=str(total),
    )
