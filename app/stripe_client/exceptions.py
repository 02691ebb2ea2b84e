"""
Exceptions raised by the Stripe client.

Every error surfacing from StripeClient belongs to one of two families:
input that was rejected locally and never sent, and rejections coming
back from Stripe.

Exception Hierarchy:
    PaymentValidationError (core.ValidationError) - Rejected before any remote call
    StripeError (core.ExternalServiceError) - Base for all Stripe rejections
    ├── StripeCardDeclinedError - Card declined (permanent)
    ├── StripeInvalidRequestError - Invalid request params (permanent)
    │   ├── StripeResourceNotFoundError - Unknown coupon/plan/charge id
    │   └── StripeInvalidAccountError - Invalid connected account
    ├── StripeAuthenticationError - API key rejected (permanent)
    ├── StripeRateLimitError - Rate limited (transient)
    └── StripeAPIUnavailableError - Network or server failure (transient)

Usage:
    from stripe_client.exceptions import StripeError, StripeResourceNotFoundError

    try:
        coupon = client.retrieve_coupon("SAVE10")
    except StripeResourceNotFoundError:
        coupon = None
    except StripeError as e:
        logger.error("Coupon lookup failed", extra=e.details)
        raise
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.exceptions import ExternalServiceError, ValidationError

if TYPE_CHECKING:
    from typing import Any


# =============================================================================
# Local Validation
# =============================================================================


class PaymentValidationError(ValidationError):
    """
    Raised when a request cannot be built from the given arguments.

    Use for:
    - Non-numeric charge or refund amounts
    - Refund reasons outside the supported set

    Example:
        raise PaymentValidationError(
            "amount_cents must be an integer",
            details={"amount_cents": "ten"},
        )
    """

    default_error_code: str = "PAYMENT_VALIDATION_ERROR"


# =============================================================================
# Stripe Rejections
# =============================================================================


class StripeError(ExternalServiceError):
    """
    Base exception for all Stripe-related errors.

    Attributes:
        stripe_code: Stripe's error code (e.g. resource_missing)
        decline_code: Card decline code, for card errors
        http_status: HTTP status returned by Stripe, when known
        request_id: Stripe request id, for support tickets
        is_retryable: Whether the same request may succeed later

    Example:
        try:
            client.create_charge(5000, "usd", "tok_visa")
        except StripeError as e:
            if e.is_retryable:
                schedule_retry()
            else:
                notify_user(e.message)
    """

    default_error_code: str = "STRIPE_ERROR"
    is_retryable: bool = False

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        stripe_code: str | None = None,
        decline_code: str | None = None,
        http_status: int | None = None,
        request_id: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if stripe_code:
            details["stripe_code"] = stripe_code
        if decline_code:
            details["decline_code"] = decline_code
        if http_status:
            details["http_status"] = http_status
        if request_id:
            details["request_id"] = request_id
        super().__init__(message, error_code=error_code, details=details)
        self.stripe_code = stripe_code
        self.decline_code = decline_code
        self.http_status = http_status
        self.request_id = request_id


# -----------------------------------------------------------------------------
# Permanent Errors (do not retry)
# -----------------------------------------------------------------------------


class StripeCardDeclinedError(StripeError):
    """
    Card was declined by the issuing bank.

    The decline_code attribute contains the specific reason
    (generic_decline, insufficient_funds, expired_card, ...).
    """

    default_error_code: str = "CARD_DECLINED"


class StripeInvalidRequestError(StripeError):
    """
    Stripe rejected the request parameters.

    Possible causes:
    - Invalid or already used payment token
    - Charge already fully refunded
    - Refund amount greater than the charge
    """

    default_error_code: str = "INVALID_STRIPE_REQUEST"


class StripeResourceNotFoundError(StripeInvalidRequestError):
    """
    The referenced Stripe object does not exist.

    Raised for unknown coupon, plan, customer or charge ids
    (Stripe code "resource_missing").
    """

    default_error_code: str = "STRIPE_RESOURCE_NOT_FOUND"


class StripeInvalidAccountError(StripeInvalidRequestError):
    """
    Invalid Stripe Connect account.

    Raised when the connected account a charge is scoped to
    does not exist or cannot accept charges.
    """

    default_error_code: str = "INVALID_STRIPE_ACCOUNT"


class StripeAuthenticationError(StripeError):
    """
    The API key was rejected or lacks permission.

    An operational problem: check STRIPE_SECRET_KEY.
    """

    default_error_code: str = "STRIPE_AUTHENTICATION_FAILED"


# -----------------------------------------------------------------------------
# Transient Errors (safe to retry with backoff)
# -----------------------------------------------------------------------------


class StripeRateLimitError(StripeError):
    """Rate limited by the Stripe API."""

    default_error_code: str = "STRIPE_RATE_LIMITED"
    is_retryable: bool = True


class StripeAPIUnavailableError(StripeError):
    """
    Stripe could not be reached or failed server-side.

    This covers network connectivity issues and Stripe 5xx responses.

    IMPORTANT: A create request may have succeeded on Stripe's side.
    Pass an idempotency_key when the caller intends to retry.
    """

    default_error_code: str = "STRIPE_UNAVAILABLE"
    is_retryable: bool = True


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Local validation
    "PaymentValidationError",
    # Stripe-specific
    "StripeError",
    "StripeCardDeclinedError",
    "StripeInvalidRequestError",
    "StripeResourceNotFoundError",
    "StripeInvalidAccountError",
    "StripeAuthenticationError",
    "StripeRateLimitError",
    "StripeAPIUnavailableError",
]
