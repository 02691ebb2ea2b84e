"""
Pytest fixtures for Stripe client tests.

This module provides fixtures for testing the Stripe client, including
mock Stripe API responses, error conditions, and patched SDK resources.

Sections:
    - Client Fixtures
    - Mock Stripe Response Fixtures
    - Mock Stripe Error Fixtures
    - Mock Stripe Resource Fixtures
"""

from dataclasses import dataclass
from typing import Any
from unittest.mock import patch

import pytest
import stripe

from stripe_client.client import StripeClient

TEST_API_KEY = "sk_test_4eC39HqLyjWDarjtT1zdp7dc"


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def api_key():
    """API key the client under test is bound to."""
    return TEST_API_KEY


@pytest.fixture
def stripe_client(api_key):
    """StripeClient bound to the test API key."""
    return StripeClient(api_key)


# =============================================================================
# Mock Stripe Response Fixtures
# =============================================================================


@dataclass
class MockStripeObject:
    """Mock Stripe API object with attribute access and to_dict support."""

    data: dict[str, Any]

    def __getattr__(self, name: str) -> Any:
        if name == "data":
            return self.__dict__["data"]
        return self.data.get(name)

    def to_dict(self) -> dict[str, Any]:
        return self.data


@pytest.fixture
def mock_coupon():
    """Create a mock Coupon response."""

    def _create(id: str = "SAVE10", percent_off: int = 10) -> MockStripeObject:
        return MockStripeObject(
            {
                "id": id,
                "object": "coupon",
                "percent_off": percent_off,
                "duration": "once",
                "valid": True,
            }
        )

    return _create


@pytest.fixture
def mock_plan():
    """Create a mock Plan response."""

    def _create(id: str = "plan_basic", amount: int = 999) -> MockStripeObject:
        return MockStripeObject(
            {
                "id": id,
                "object": "plan",
                "amount": amount,
                "currency": "usd",
                "interval": "month",
            }
        )

    return _create


@pytest.fixture
def mock_customer():
    """Create a mock Customer response."""

    def _create(
        id: str = "cus_test123456",
        email: str = "a@example.com",
    ) -> MockStripeObject:
        return MockStripeObject(
            {
                "id": id,
                "object": "customer",
                "email": email,
                "default_source": "card_test123",
            }
        )

    return _create


@pytest.fixture
def mock_subscription():
    """Create a mock Subscription response."""

    def _create(
        id: str = "sub_test123456",
        customer: str = "cus_test123456",
        plan: str = "plan_basic",
    ) -> MockStripeObject:
        return MockStripeObject(
            {
                "id": id,
                "object": "subscription",
                "customer": customer,
                "plan": {"id": plan},
                "status": "active",
            }
        )

    return _create


@pytest.fixture
def mock_charge():
    """Create a mock Charge response."""

    def _create(
        id: str = "ch_test123456",
        amount: int = 5000,
        currency: str = "usd",
        status: str = "succeeded",
    ) -> MockStripeObject:
        return MockStripeObject(
            {
                "id": id,
                "object": "charge",
                "amount": amount,
                "currency": currency,
                "status": status,
                "paid": True,
            }
        )

    return _create


@pytest.fixture
def mock_refund():
    """Create a mock Refund response."""

    def _create(
        id: str = "re_test123456",
        amount: int = 5000,
        charge: str = "ch_test123456",
        status: str = "succeeded",
    ) -> MockStripeObject:
        return MockStripeObject(
            {
                "id": id,
                "object": "refund",
                "amount": amount,
                "charge": charge,
                "currency": "usd",
                "status": status,
            }
        )

    return _create


# =============================================================================
# Mock Stripe Error Fixtures
# =============================================================================


@pytest.fixture
def card_error():
    """Create a Stripe CardError."""

    def _create(
        message: str = "Your card was declined.",
        code: str = "card_declined",
        decline_code: str | None = "generic_decline",
    ) -> stripe.CardError:
        error = stripe.CardError(
            message=message,
            param=None,
            code=code,
            http_status=402,
        )
        error.decline_code = decline_code
        return error

    return _create


@pytest.fixture
def invalid_request_error():
    """Create a Stripe InvalidRequestError."""

    def _create(
        message: str = "No such coupon: 'SAVE99'",
        param: str | None = "id",
        code: str | None = "resource_missing",
        request_id: str | None = None,
    ) -> stripe.InvalidRequestError:
        return stripe.InvalidRequestError(
            message=message,
            param=param,
            code=code,
            http_status=404 if code == "resource_missing" else 400,
            headers={"request-id": request_id} if request_id else None,
        )

    return _create


@pytest.fixture
def rate_limit_error():
    """Create a Stripe RateLimitError."""
    return stripe.RateLimitError(
        message="Too many requests hit the API too quickly.",
        http_status=429,
    )


@pytest.fixture
def api_connection_error():
    """Create a Stripe APIConnectionError."""
    return stripe.APIConnectionError(
        message="Could not connect to Stripe.",
    )


@pytest.fixture
def api_error():
    """Create a Stripe APIError."""
    return stripe.APIError(
        message="Something went wrong on Stripe's end.",
        http_status=500,
    )


@pytest.fixture
def authentication_error():
    """Create a Stripe AuthenticationError."""
    return stripe.AuthenticationError(
        message="Invalid API Key provided: sk_test_****1234",
        http_status=401,
    )


@pytest.fixture
def permission_error():
    """Create a Stripe PermissionError."""
    return stripe.PermissionError(
        message="The provided key does not have access to account 'acct_other'.",
        http_status=403,
    )


# =============================================================================
# Mock Stripe Resource Fixtures
# =============================================================================


@pytest.fixture
def mock_stripe_coupon(mock_coupon):
    """Mock stripe.Coupon API."""
    with patch("stripe.Coupon") as mock:
        mock.retrieve.return_value = mock_coupon()
        yield mock


@pytest.fixture
def mock_stripe_plan(mock_plan):
    """Mock stripe.Plan API."""
    with patch("stripe.Plan") as mock:
        mock.retrieve.return_value = mock_plan()
        yield mock


@pytest.fixture
def mock_stripe_customer(mock_customer):
    """Mock stripe.Customer API."""
    with patch("stripe.Customer") as mock:
        mock.create.return_value = mock_customer()
        yield mock


@pytest.fixture
def mock_stripe_subscription(mock_subscription):
    """Mock stripe.Subscription API."""
    with patch("stripe.Subscription") as mock:
        mock.create.return_value = mock_subscription()
        yield mock


@pytest.fixture
def mock_stripe_charge(mock_charge):
    """Mock stripe.Charge API."""
    with patch("stripe.Charge") as mock:
        mock.create.return_value = mock_charge()
        yield mock


@pytest.fixture
def mock_stripe_refund(mock_refund):
    """Mock stripe.Refund API."""
    with patch("stripe.Refund") as mock:
        mock.create.return_value = mock_refund()
        yield mock
