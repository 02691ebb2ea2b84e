"""
Stripe client app.

A reusable Django app exposing a pre-authenticated Stripe client with
helpers for the handful of Stripe operations the application needs:
- Coupon and plan lookup
- Subscribing a new customer to a plan
- Charges, optionally on a connected account with an application fee
- Refunds

Related modules:
    - client: StripeClient and get_stripe_client
    - types: Request dataclasses
    - exceptions: Error hierarchy
    - protocols: PaymentGateway interface

Usage:
    from stripe_client.client import get_stripe_client

    client = get_stripe_client()
    customer = client.subscribe_customer_to_plan("plan_basic", "tok_visa", "a@example.com")
    charge = client.create_charge(5000, "usd", "tok_visa")
    refund = client.refund_charge(charge.id)

Note:
    Modules are not imported here so that importing the package does not
    require configured Django settings. Import from the submodules directly.
"""
