"""Pydantic v2 schemas for API response models.

Decimal amounts and rates are serialised as strings so no precision is lost.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Schema for health check response."""

    status: str
    version: str


class RateResponse(BaseModel):
    """Schema for a single exchange rate."""

    from_currency: str
    to_currency: str
    rate: str


class TransactionResponse(BaseModel):
    """Schema for a single transaction."""

    sku: str
    amount: str
    currency: str


class SkuTransactionsResponse(BaseModel):
    """Schema for a SKU's transactions converted to EUR plus their total."""

    sku: str
    transactions: list[TransactionResponse]
    total_amount_in_eur: str
