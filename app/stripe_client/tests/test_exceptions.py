"""
Tests for the Stripe client exception hierarchy.
"""

import pytest

from core.exceptions import BaseApplicationError, ExternalServiceError, ValidationError
from stripe_client.exceptions import (
    PaymentValidationError,
    StripeAPIUnavailableError,
    StripeAuthenticationError,
    StripeCardDeclinedError,
    StripeError,
    StripeInvalidAccountError,
    StripeInvalidRequestError,
    StripeRateLimitError,
    StripeResourceNotFoundError,
)


class TestHierarchy:
    """Tests for exception inheritance."""

    def test_validation_is_not_a_stripe_error(self):
        """Local validation failures and Stripe rejections are separate families."""
        assert issubclass(PaymentValidationError, ValidationError)
        assert not issubclass(PaymentValidationError, StripeError)

    @pytest.mark.parametrize(
        "exc_class",
        [
            StripeCardDeclinedError,
            StripeInvalidRequestError,
            StripeResourceNotFoundError,
            StripeInvalidAccountError,
            StripeAuthenticationError,
            StripeRateLimitError,
            StripeAPIUnavailableError,
        ],
    )
    def test_stripe_errors_share_base(self, exc_class):
        assert issubclass(exc_class, StripeError)
        assert issubclass(exc_class, ExternalServiceError)
        assert issubclass(exc_class, BaseApplicationError)

    def test_not_found_is_invalid_request(self):
        assert issubclass(StripeResourceNotFoundError, StripeInvalidRequestError)

    @pytest.mark.parametrize(
        "exc_class, retryable",
        [
            (StripeCardDeclinedError, False),
            (StripeInvalidRequestError, False),
            (StripeAuthenticationError, False),
            (StripeRateLimitError, True),
            (StripeAPIUnavailableError, True),
        ],
    )
    def test_is_retryable(self, exc_class, retryable):
        assert exc_class("boom").is_retryable is retryable


class TestStripeError:
    """Tests for StripeError attributes."""

    def test_codes_copied_into_details(self):
        error = StripeCardDeclinedError(
            "Your card was declined.",
            stripe_code="card_declined",
            decline_code="insufficient_funds",
            http_status=402,
            request_id="req_123",
        )

        assert error.details == {
            "stripe_code": "card_declined",
            "decline_code": "insufficient_funds",
            "http_status": 402,
            "request_id": "req_123",
        }
        assert error.error_code == "CARD_DECLINED"

    def test_empty_details_when_no_codes(self):
        error = StripeAPIUnavailableError("Could not connect to Stripe.")

        assert error.details == {}
        assert error.to_dict() == {
            "error": "Could not connect to Stripe.",
            "error_code": "STRIPE_UNAVAILABLE",
        }

    def test_str_includes_error_code(self):
        error = StripeResourceNotFoundError("No such coupon: 'SAVE99'")

        assert str(error) == "[STRIPE_RESOURCE_NOT_FOUND] No such coupon: 'SAVE99'"
