"""
Protocol for payment gateway implementations.

Service code that charges, refunds or subscribes customers should depend
on PaymentGateway rather than on StripeClient directly, so tests can pass
a fake gateway without patching the stripe SDK.

Usage:
    from stripe_client.protocols import PaymentGateway

    def checkout(gateway: PaymentGateway, token: str, amount_cents: int):
        return gateway.create_charge(amount_cents, "usd", token)

    class FakeGateway:
        def retrieve_coupon(self, coupon_id): ...
        def retrieve_plan(self, plan_id): ...
        def subscribe_customer_to_plan(self, plan_id, payment_token, customer_email, coupon_id=None): ...
        def create_charge(self, amount_cents, currency, payment_token, **kwargs): ...
        def refund_charge(self, charge_id, **kwargs): ...

    # FakeGateway is a valid PaymentGateway
    # even without explicit inheritance (duck typing)
    gateway: PaymentGateway = FakeGateway()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any


@runtime_checkable
class PaymentGateway(Protocol):
    """
    Protocol for the five payment operations.

    Return values are the provider's objects, unmodified.
    """

    def retrieve_coupon(self, coupon_id: str) -> Any:
        """
        Retrieve a coupon by its ID.

        Raises:
            StripeResourceNotFoundError: If the coupon does not exist
        """
        ...

    def retrieve_plan(self, plan_id: str) -> Any:
        """
        Retrieve a plan by its ID.

        Raises:
            StripeResourceNotFoundError: If the plan does not exist
        """
        ...

    def subscribe_customer_to_plan(
        self,
        plan_id: str,
        payment_token: str,
        customer_email: str,
        coupon_id: str | None = None,
    ) -> Any:
        """
        Create a customer and subscribe it to a plan.

        Returns:
            The created customer (not the subscription)
        """
        ...

    def create_charge(
        self,
        amount_cents: int,
        currency: str,
        payment_token: str,
        connected_account_id: str | None = None,
        application_fee_cents: int | None = None,
        description: str = "",
        idempotency_key: str | None = None,
    ) -> Any:
        """Create a charge, optionally on a connected account."""
        ...

    def refund_charge(
        self,
        charge_id: str,
        amount_cents: int | None = None,
        metadata: dict[str, str] | None = None,
        reason: str = "requested_by_customer",
        refund_application_fee: bool = True,
        reverse_transfer: bool = False,
        idempotency_key: str | None = None,
    ) -> Any:
        """Refund a charge, fully when amount_cents is falsy."""
        ...
