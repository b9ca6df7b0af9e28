"""Domain exception hierarchy for InvoNest.

All domain-specific exceptions inherit from InvoNestError.
This allows catching all application errors with a single base class
while preserving specificity for individual error types.
"""

from collections.abc import Sequence
from typing import Any


class InvoNestError(Exception):
    """Base exception for all InvoNest errors.

    All domain exceptions should inherit from this class.
    Includes optional error_code for API responses and extra context.
    """

    error_code: str = "INVONEST_ERROR"
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
            "success": False,
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Calculation Errors
# =============================================================================


class CalculationError(InvoNestError):
    """Base exception for conditions where no invoice calculation is available.

    These are recoverable: callers treat them as "not ready to calculate".
    """

    error_code = "CALCULATION_ERROR"
    status_code = 400


class InsufficientInputError(CalculationError):
    """Raised when no line item passes the minimal validity filter."""

    error_code = "INSUFFICIENT_INPUT"

    def __init__(self, submitted: int, excluded_indexes: Sequence[int] = ()) -> None:
        super().__init__(
            "At least one line item with a positive quantity and a "
            "non-negative rate is required",
            context={
                "submitted_items": submitted,
                "excluded_items": list(excluded_indexes),
            },
        )
        self.excluded_indexes = tuple(excluded_indexes)


class MissingStateError(CalculationError):
    """Raised when seller or buyer state is absent, so no tax regime applies."""

    error_code = "STATE_REQUIRED"

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            f"State is required for GST calculation: {', '.join(missing)}",
            context={"missing": missing},
        )


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(InvoNestError):
    """Base exception for validation errors."""

    error_code = "VALIDATION_ERROR"
    status_code = 422


class InvalidGSTINError(ValidationError):
    """Raised when a GSTIN does not match the 15-character format."""

    error_code = "INVALID_GSTIN"

    def __init__(self, gstin: str) -> None:
        super().__init__(
            f"Invalid GST number format: {gstin}",
            context={"gstin": gstin},
        )


class InvalidAmountError(ValidationError):
    """Raised when an invalid monetary amount is provided."""

    error_code = "INVALID_AMOUNT"

    def __init__(self, amount: str, reason: str) -> None:
        super().__init__(
            f"Invalid amount '{amount}': {reason}",
            context={"amount": amount, "reason": reason},
        )


class InvalidInvoiceNumberError(ValidationError):
    """Raised when an invoice number does not follow INV-YYYYMM-NNNN."""

    error_code = "INVALID_INVOICE_NUMBER"

    def __init__(self, invoice_number: str) -> None:
        super().__init__(
            f"Invalid invoice number: {invoice_number}",
            context={"invoice_number": invoice_number},
        )
