"""
Request types for Stripe client operations.

Each dataclass holds the arguments of one outbound Stripe call. Optional
fields are explicit (None or a falsy default means "absent"), and
to_params() serializes only the fields that are present, so Stripe
applies its own defaults for everything omitted.

Request options (connected account, idempotency key) are kept apart from
the body: request_options() returns them separately and they are never
part of to_params().

Types:
    RefundReason: Supported refund reasons
    CreateCustomerParams: Body of Customer.create
    CreateSubscriptionParams: Body of Subscription.create
    CreateChargeParams: Body and options of Charge.create
    CreateRefundParams: Body and options of Refund.create

Usage:
    from stripe_client.types import CreateChargeParams

    params = CreateChargeParams(
        amount_cents=5000,
        currency="usd",
        source="tok_visa",
        application_fee_cents=500,
        connected_account_id="acct_123",
    )
    params.to_params()
    # {"amount": 5000, "currency": "usd", "source": "tok_visa",
    #  "description": "", "application_fee": 500}
    params.request_options()
    # {"stripe_account": "acct_123"}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from django.db import models

from core.helpers import to_int, to_strict_int
from stripe_client.exceptions import PaymentValidationError


class RefundReason(models.TextChoices):
    """Reasons Stripe accepts for a refund."""

    REQUESTED_BY_CUSTOMER = "requested_by_customer", "Requested by customer"
    DUPLICATE = "duplicate", "Duplicate"
    FRAUDULENT = "fraudulent", "Fraudulent"


@dataclass
class CreateCustomerParams:
    """
    Parameters for creating a Stripe Customer.

    Attributes:
        source: Payment token returned by the client-side payment form
        email: Customer email address
    """

    source: str
    email: str

    def to_params(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "email": self.email,
        }


@dataclass
class CreateSubscriptionParams:
    """
    Parameters for subscribing an existing Customer to a Plan.

    Attributes:
        customer_id: Stripe Customer ID (cus_xxx)
        plan_id: Plan ID as defined in the Stripe dashboard
        coupon_id: Optional coupon ID, sent only when non-empty
    """

    customer_id: str
    plan_id: str
    coupon_id: str | None = None

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {
            "customer": self.customer_id,
            "plan": self.plan_id,
        }
        if self.coupon_id:
            params["coupon"] = self.coupon_id
        return params


@dataclass
class CreateChargeParams:
    """
    Parameters for creating a Stripe Charge.

    Attributes:
        amount_cents: Charge amount in the smallest currency unit
        currency: ISO 4217 currency code
        source: Payment token returned by the client-side payment form
        description: Charge description (always sent, may be empty)
        application_fee_cents: Platform fee in cents; sent only when it
            coerces to a positive integer
        connected_account_id: Connected account the charge is made on
            (acct_xxx); sent as a request option
        idempotency_key: Optional key for safe retries; sent as a request option

    Raises:
        PaymentValidationError: If amount_cents is not numeric
    """

    amount_cents: int
    currency: str
    source: str
    description: str = ""
    application_fee_cents: int | None = None
    connected_account_id: str | None = None
    idempotency_key: str | None = None

    def __post_init__(self) -> None:
        """Coerce amount_cents to an integer."""
        try:
            self.amount_cents = to_strict_int(self.amount_cents)
        except ValueError:
            raise PaymentValidationError(
                "amount_cents must be an integer",
                error_code="INVALID_AMOUNT",
                details={"amount_cents": repr(self.amount_cents)},
            ) from None

    @property
    def application_fee(self) -> int | None:
        """Fee to send, or None when the fee must be omitted."""
        if not self.application_fee_cents:
            return None
        fee = to_int(self.application_fee_cents)
        return fee if fee > 0 else None

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {
            "amount": self.amount_cents,
            "currency": self.currency,
            "source": self.source,
            "description": self.description,
        }
        fee = self.application_fee
        if fee is not None:
            params["application_fee"] = fee
        return params

    def request_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self.connected_account_id:
            options["stripe_account"] = self.connected_account_id
        if self.idempotency_key:
            options["idempotency_key"] = self.idempotency_key
        return options


@dataclass
class CreateRefundParams:
    """
    Parameters for refunding an existing Charge.

    Attributes:
        charge_id: Stripe Charge ID (ch_xxx)
        amount_cents: Amount to refund; a falsy amount refunds the full charge
        metadata: String key-value pairs attached to the refund
        reason: One of RefundReason (default: requested_by_customer)
        refund_application_fee: Whether the application fee is refunded too
        reverse_transfer: Whether the transfer to the connected account is reversed
        idempotency_key: Optional key for safe retries; sent as a request option

    Raises:
        PaymentValidationError: If reason is unknown or amount_cents is
            truthy but not numeric
    """

    charge_id: str
    amount_cents: int | None = None
    metadata: dict[str, str] = field(default_factory=dict)
    reason: RefundReason | str = RefundReason.REQUESTED_BY_CUSTOMER
    refund_application_fee: bool = True
    reverse_transfer: bool = False
    idempotency_key: str | None = None

    def __post_init__(self) -> None:
        """Validate reason and coerce the amount and flags."""
        try:
            self.reason = RefundReason(self.reason)
        except ValueError:
            raise PaymentValidationError(
                f"Unknown refund reason: {self.reason!r}",
                error_code="INVALID_REFUND_REASON",
                details={
                    "reason": str(self.reason),
                    "allowed": list(RefundReason.values),
                },
            ) from None

        if not self.amount_cents:
            self.amount_cents = None
        else:
            try:
                self.amount_cents = to_strict_int(self.amount_cents)
            except ValueError:
                raise PaymentValidationError(
                    "amount_cents must be an integer",
                    error_code="INVALID_AMOUNT",
                    details={"amount_cents": repr(self.amount_cents)},
                ) from None

        self.metadata = dict(self.metadata or {})
        self.refund_application_fee = bool(self.refund_application_fee)
        self.reverse_transfer = bool(self.reverse_transfer)

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {
            "charge": self.charge_id,
            "metadata": self.metadata,
            "reason": self.reason.value,
            "refund_application_fee": self.refund_application_fee,
            "reverse_transfer": self.reverse_transfer,
        }
        if self.amount_cents is not None:
            params["amount"] = self.amount_cents
        return params

    def request_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self.idempotency_key:
            options["idempotency_key"] = self.idempotency_key
        return options
