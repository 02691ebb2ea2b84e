"""
Pre-authenticated Stripe client.

This module provides the StripeClient class, a thin facade over the
stripe SDK exposing the operations the application needs: coupon and
plan lookup, subscribing a new customer to a plan, creating charges
and refunding them.

Features:
- Credential owned by the instance, sent as a per-request option
  (stripe.api_key is never mutated)
- Request payloads built by the dataclasses in stripe_client.types
- Automatic error translation to stripe_client.exceptions
- Structured logging with timing metrics

Configuration (via settings, for from_settings/get_stripe_client):
- STRIPE_SECRET_KEY: Stripe API secret key
- STRIPE_API_VERSION: Optional API version pin

Usage:
    from stripe_client.client import StripeClient, get_stripe_client

    client = StripeClient("sk_test_xxx")
    customer = client.subscribe_customer_to_plan(
        plan_id="plan_basic",
        payment_token="tok_visa",
        customer_email="a@example.com",
        coupon_id="SAVE10",
    )

    # One shared, settings-configured client per process
    charge = get_stripe_client().create_charge(
        amount_cents=5000,
        currency="eur",
        payment_token="tok_visa",
        connected_account_id="acct_123",
        application_fee_cents=500,
    )
"""

from __future__ import annotations

import functools
import logging
import time
from typing import TYPE_CHECKING, Any

import stripe
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from stripe_client.exceptions import (
    StripeAPIUnavailableError,
    StripeAuthenticationError,
    StripeCardDeclinedError,
    StripeError,
    StripeInvalidAccountError,
    StripeInvalidRequestError,
    StripeRateLimitError,
    StripeResourceNotFoundError,
)
from stripe_client.types import (
    CreateChargeParams,
    CreateCustomerParams,
    CreateRefundParams,
    CreateSubscriptionParams,
    RefundReason,
)

if TYPE_CHECKING:
    from collections.abc import Callable

# Request parameters that identify a connected account rather than a resource
ACCOUNT_PARAMS = frozenset({"account", "destination", "stripe_account"})


class StripeClient:
    """
    Facade over the stripe SDK bound to a single API key.

    Instances hold no state besides the credential and are safe to share
    between threads. Every call is forwarded to Stripe as-is; there is no
    caching and no retry loop.

    Usage:
        client = StripeClient(settings.STRIPE_SECRET_KEY)
        coupon = client.retrieve_coupon("SAVE10")
        refund = client.refund_charge("ch_123", amount_cents=1000)
    """

    def __init__(self, api_key: str, api_version: str | None = None):
        """
        Bind the client to an API key.

        The key is not validated here; a rejected key surfaces as
        StripeAuthenticationError on the first remote call.

        Args:
            api_key: Stripe secret key (sk_live_xxx / sk_test_xxx)
            api_version: Optional Stripe API version to pin requests to
        """
        self._api_key = api_key
        self._api_version = api_version or None

    @classmethod
    def from_settings(cls) -> StripeClient:
        """
        Build a client from Django settings.

        Raises:
            ImproperlyConfigured: If STRIPE_SECRET_KEY is missing or empty
        """
        api_key = getattr(settings, "STRIPE_SECRET_KEY", "")
        if not api_key:
            raise ImproperlyConfigured("STRIPE_SECRET_KEY must be set to use StripeClient")
        return cls(
            api_key=api_key,
            api_version=getattr(settings, "STRIPE_API_VERSION", None),
        )

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Get logger for this client."""
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(api_key='...{self._api_key[-4:]}')"

    # =========================================================================
    # Lookups
    # =========================================================================

    def retrieve_coupon(self, coupon_id: str) -> stripe.Coupon:
        """
        Retrieve a Coupon by its ID.

        Args:
            coupon_id: The coupon ID

        Returns:
            The stripe.Coupon, unmodified

        Raises:
            StripeResourceNotFoundError: If the coupon does not exist
        """
        log_context = {
            "operation": "retrieve_coupon",
            "coupon_id": coupon_id,
        }
        return self._call(
            stripe.Coupon.retrieve,
            log_context,
            coupon_id,
            level=logging.DEBUG,
            **self._request_options(),
        )

    def retrieve_plan(self, plan_id: str) -> stripe.Plan:
        """
        Retrieve a Plan by its ID.

        Args:
            plan_id: The plan ID as defined in the Stripe dashboard

        Returns:
            The stripe.Plan, unmodified

        Raises:
            StripeResourceNotFoundError: If the plan does not exist
        """
        log_context = {
            "operation": "retrieve_plan",
            "plan_id": plan_id,
        }
        return self._call(
            stripe.Plan.retrieve,
            log_context,
            plan_id,
            level=logging.DEBUG,
            **self._request_options(),
        )

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def subscribe_customer_to_plan(
        self,
        plan_id: str,
        payment_token: str,
        customer_email: str,
        coupon_id: str | None = None,
    ) -> stripe.Customer:
        """
        Create a new Customer and subscribe it to an existing Plan.

        The Subscription is created but not returned. If the subscription
        call fails the Customer is left in place on Stripe; its ID is
        logged and the error propagates.

        Args:
            plan_id: The plan ID as defined in the Stripe dashboard
            payment_token: Token returned by the client-side payment form
            customer_email: The customer email
            coupon_id: Optional coupon ID, applied only when non-empty

        Returns:
            The created stripe.Customer

        Raises:
            StripeCardDeclinedError: If the payment token is declined
            StripeResourceNotFoundError: If the plan or coupon does not exist
            StripeError: For any other Stripe rejection
        """
        customer_params = CreateCustomerParams(
            source=payment_token,
            email=customer_email,
        )
        customer = self._call(
            stripe.Customer.create,
            {"operation": "create_customer", "plan_id": plan_id},
            **customer_params.to_params(),
            **self._request_options(),
        )

        subscription_params = CreateSubscriptionParams(
            customer_id=customer.id,
            plan_id=plan_id,
            coupon_id=coupon_id,
        )
        try:
            self._call(
                stripe.Subscription.create,
                {
                    "operation": "create_subscription",
                    "customer_id": customer.id,
                    "plan_id": plan_id,
                    "coupon_id": coupon_id or None,
                },
                **subscription_params.to_params(),
                **self._request_options(),
            )
        except StripeError:
            self.get_logger().error(
                "Subscription failed; customer left without subscription",
                extra={"customer_id": customer.id, "plan_id": plan_id},
            )
            raise

        return customer

    # =========================================================================
    # Charges & Refunds
    # =========================================================================

    def create_charge(
        self,
        amount_cents: int,
        currency: str,
        payment_token: str,
        connected_account_id: str | None = None,
        application_fee_cents: int | None = None,
        description: str = "",
        idempotency_key: str | None = None,
    ) -> stripe.Charge:
        """
        Create a Charge from a payment token, optionally on a connected account.

        Args:
            amount_cents: The charge amount in cents
            currency: The charge currency
            payment_token: Token returned by the client-side payment form
            connected_account_id: Connected Stripe account ID (acct_xxx)
            application_fee_cents: Platform fee in cents; omitted unless positive
            description: Optional charge description
            idempotency_key: Optional key for safe retries

        Returns:
            The created stripe.Charge

        Raises:
            PaymentValidationError: If amount_cents is not numeric
            StripeCardDeclinedError: If the payment is declined
            StripeInvalidAccountError: If the connected account is invalid
        """
        params = CreateChargeParams(
            amount_cents=amount_cents,
            currency=currency,
            source=payment_token,
            description=description,
            application_fee_cents=application_fee_cents,
            connected_account_id=connected_account_id,
            idempotency_key=idempotency_key,
        )
        log_context = {
            "operation": "create_charge",
            "amount_cents": params.amount_cents,
            "currency": currency,
            "application_fee_cents": params.application_fee,
            "connected_account_id": connected_account_id or None,
            "idempotency_key": idempotency_key,
        }
        return self._call(
            stripe.Charge.create,
            log_context,
            **params.to_params(),
            **self._request_options(),
            **params.request_options(),
        )

    def refund_charge(
        self,
        charge_id: str,
        amount_cents: int | None = None,
        metadata: dict[str, str] | None = None,
        reason: RefundReason | str = RefundReason.REQUESTED_BY_CUSTOMER,
        refund_application_fee: bool = True,
        reverse_transfer: bool = False,
        idempotency_key: str | None = None,
    ) -> stripe.Refund:
        """
        Create a Refund on an existing Charge.

        Args:
            charge_id: The charge ID (ch_xxx)
            amount_cents: Amount to refund in cents; falsy refunds the full charge
            metadata: Optional string key-value pairs about the refund
            reason: requested_by_customer, duplicate or fraudulent
            refund_application_fee: Whether the application fee is refunded too
            reverse_transfer: Whether the transfer is reversed
            idempotency_key: Optional key for safe retries

        Returns:
            The created stripe.Refund

        Raises:
            PaymentValidationError: If reason or amount_cents is invalid
            StripeResourceNotFoundError: If the charge does not exist
            StripeInvalidRequestError: If the charge is already refunded
        """
        params = CreateRefundParams(
            charge_id=charge_id,
            amount_cents=amount_cents,
            metadata=metadata or {},
            reason=reason,
            refund_application_fee=refund_application_fee,
            reverse_transfer=reverse_transfer,
            idempotency_key=idempotency_key,
        )
        log_context = {
            "operation": "refund_charge",
            "charge_id": charge_id,
            "amount_cents": params.amount_cents,
            "reason": params.reason.value,
            "idempotency_key": idempotency_key,
        }
        return self._call(
            stripe.Refund.create,
            log_context,
            **params.to_params(),
            **self._request_options(),
            **params.request_options(),
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _request_options(self) -> dict[str, Any]:
        """Per-request authentication options."""
        options: dict[str, Any] = {"api_key": self._api_key}
        if self._api_version:
            options["stripe_version"] = self._api_version
        return options

    def _call(
        self,
        func: Callable[..., Any],
        log_context: dict[str, Any],
        *args: Any,
        level: int = logging.INFO,
        **kwargs: Any,
    ) -> Any:
        """
        Invoke a stripe SDK function with timing, logging and error translation.

        Raises:
            StripeError: Translated from any stripe.StripeError
        """
        logger = self.get_logger()
        start_time = time.time()
        logger.log(level, "Starting Stripe operation", extra=log_context)

        try:
            result = func(*args, **kwargs)
        except stripe.StripeError as e:
            duration_ms = (time.time() - start_time) * 1000
            raise self._translate_stripe_error(e, log_context, duration_ms) from e

        duration_ms = (time.time() - start_time) * 1000
        logger.log(
            level,
            "Stripe operation completed",
            extra={
                **log_context,
                "object_id": getattr(result, "id", None),
                "duration_ms": duration_ms,
            },
        )
        return result

    @classmethod
    def _translate_stripe_error(
        cls,
        error: stripe.StripeError,
        log_context: dict[str, Any],
        duration_ms: float,
    ) -> StripeError:
        """
        Translate a stripe SDK exception to a domain exception.

        Args:
            error: The stripe exception
            log_context: Logging context dict
            duration_ms: Operation duration for logging

        Returns:
            The StripeError subclass matching the error category
        """
        logger = cls.get_logger()

        log_context = {
            **log_context,
            "duration_ms": duration_ms,
            "stripe_code": error.code,
            "http_status": error.http_status,
            "request_id": error.request_id,
        }
        message = str(error.user_message or error)
        common = {
            "stripe_code": error.code,
            "http_status": error.http_status,
            "request_id": error.request_id,
        }

        if isinstance(error, stripe.CardError):
            decline_code = getattr(error, "decline_code", None) or getattr(
                getattr(error, "error", None), "decline_code", None
            )
            logger.warning(
                "Card error from Stripe",
                extra={**log_context, "decline_code": decline_code},
            )
            return StripeCardDeclinedError(message, decline_code=decline_code, **common)

        if isinstance(error, stripe.InvalidRequestError):
            logger.error("Invalid request to Stripe", extra=log_context)
            if error.code == "account_invalid" or error.param in ACCOUNT_PARAMS:
                return StripeInvalidAccountError(message, **common)
            if error.code == "resource_missing":
                return StripeResourceNotFoundError(message, **common)
            return StripeInvalidRequestError(message, **common)

        if isinstance(error, (stripe.AuthenticationError, stripe.PermissionError)):
            logger.critical(
                "Stripe authentication failed - check API key",
                extra=log_context,
            )
            return StripeAuthenticationError(message, **common)

        if isinstance(error, stripe.RateLimitError):
            logger.warning("Rate limited by Stripe", extra=log_context)
            return StripeRateLimitError(message, **common)

        if isinstance(error, (stripe.APIConnectionError, stripe.APIError)):
            logger.error("Stripe unavailable", extra=log_context, exc_info=True)
            return StripeAPIUnavailableError(message, **common)

        logger.error(
            f"Unexpected error from Stripe: {type(error).__name__}",
            extra=log_context,
            exc_info=True,
        )
        return StripeError(message, **common)


@functools.lru_cache(maxsize=None)
def get_stripe_client() -> StripeClient:
    """
    Return the process-wide client built from Django settings.

    The instance is created on first use. Call get_stripe_client.cache_clear()
    to rebuild it after the settings change.
    """
    return StripeClient.from_settings()
