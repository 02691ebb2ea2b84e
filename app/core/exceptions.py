"""
Base exception classes for application-wide error handling.

This module provides the root of the exception hierarchy used by the
Stripe client app:
- Consistent, serializable error payloads for callers
- Machine-readable error codes
- Structured details for debugging

Exception Hierarchy:
    BaseApplicationError (base)
    ├── ValidationError - Input rejected before any remote call
    └── ExternalServiceError - Third-party service failures

Usage:
    from core.exceptions import ValidationError, ExternalServiceError

    # Raise with message only
    raise ValidationError("Amount must be an integer")

    # Raise with error code and details
    raise ValidationError(
        "Amount must be an integer",
        error_code="INVALID_AMOUNT",
        details={"amount_cents": "abc"},
    )

    # Convert to dict for an API response
    try:
        ...
    except BaseApplicationError as e:
        return JsonResponse(e.to_dict(), status=400)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable code for client-side handling
        details: Additional error context (field errors, remote codes, etc.)
    """

    default_error_code: str = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (defaults to class default)
            details: Additional error context
        """
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for an API response.

        Returns:
            Dict with error, error_code, and (when present) details keys

        Example:
            {
                "error": "No such coupon: 'SAVE99'",
                "error_code": "STRIPE_RESOURCE_NOT_FOUND",
                "details": {"stripe_code": "resource_missing"}
            }
        """
        result: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class ValidationError(BaseApplicationError):
    """
    Raised when input validation fails.

    Use for input that must never reach a remote service:
    - Values that cannot be coerced to the required type
    - Values outside an enumerated set

    Example:
        raise ValidationError(
            "Unknown refund reason",
            error_code="INVALID_REFUND_REASON",
            details={"reason": "changed_mind"},
        )
    """

    default_error_code: str = "VALIDATION_ERROR"


class ExternalServiceError(BaseApplicationError):
    """
    Raised when an external service call fails.

    Use for:
    - Third-party API rejections (Stripe)
    - Network failures talking to a third party
    - Unexpected external service responses

    Note:
        Log the original error for debugging but don't expose
        internal details to clients in production.
    """

    default_error_code: str = "EXTERNAL_SERVICE_ERROR"
