"""Domain exception hierarchy for International Business.

All domain-specific exceptions inherit from InternationalBusinessError.
This allows catching all application errors with a single base class
while preserving specificity for individual error types.
"""

from decimal import Decimal
from pathlib import Path
from typing import Any


class InternationalBusinessError(Exception):
    """Base exception for all International Business errors.

    Includes an error_code and status_code for API responses plus
    optional extra context.
    """

    error_code: str = "IB_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        if status_code:
            self.status_code = status_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Conversion Errors
# =============================================================================


class ConversionError(InternationalBusinessError):
    """Base exception for currency conversion errors."""

    error_code = "CONVERSION_ERROR"
    status_code = 422


class NoConversionPathError(ConversionError):
    """Raised when no chain of rates connects two currencies."""

    error_code = "NO_CONVERSION_PATH"

    def __init__(self, from_currency: str, to_currency: str) -> None:
        super().__init__(
            f"No conversion path from {from_currency} to {to_currency}",
            context={"from_currency": from_currency, "to_currency": to_currency},
        )
        self.from_currency = from_currency
        self.to_currency = to_currency


class MalformedRateError(ConversionError):
    """Raised when a rate cannot be inverted because its value is zero."""

    error_code = "MALFORMED_RATE"
    status_code = 500

    def __init__(self, from_currency: str, to_currency: str, rate: Decimal) -> None:
        super().__init__(
            f"Rate {from_currency}/{to_currency} = {rate} cannot be inverted",
            context={
                "from_currency": from_currency,
                "to_currency": to_currency,
                "rate": str(rate),
            },
        )


# =============================================================================
# Data Source Errors
# =============================================================================


class DataSourceError(InternationalBusinessError):
    """Base exception for rate and transaction source errors."""

    error_code = "DATA_SOURCE_ERROR"
    status_code = 500


class DataSourceNotFoundError(DataSourceError):
    """Raised when a data file does not exist."""

    error_code = "DATA_SOURCE_NOT_FOUND"

    def __init__(self, path: Path | str) -> None:
        super().__init__(
            f"Data source not found: {path}",
            context={"path": str(path)},
        )


class InvalidDataSourceError(DataSourceError):
    """Raised when a data file cannot be parsed into rates or transactions."""

    error_code = "INVALID_DATA_SOURCE"

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(
            f"Invalid data source {path}: {reason}",
            context={"path": str(path), "reason": reason},
        )


# =============================================================================
# Transaction Errors
# =============================================================================


class SkuNotFoundError(InternationalBusinessError):
    """Raised when no transaction exists for a SKU."""

    error_code = "SKU_NOT_FOUND"
    status_code = 404

    def __init__(self, sku: str) -> None:
        super().__init__(
            f"No transactions found for SKU: {sku}",
            context={"sku": sku},
        )
