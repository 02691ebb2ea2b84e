"""
Core - shared infrastructure for the Stripe client app.

This package contains generic code with no Stripe-specific knowledge:

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes
    - ValidationError: Input validation failures
    - ExternalServiceError: Third-party service failures

Helpers (import from core.helpers):
    - to_int: Lenient integer coercion with a default
    - to_strict_int: Integer coercion that raises on non-numeric input

Usage:
    from core.exceptions import ValidationError
    from core.helpers import to_int

Note:
    - Business logic should NOT go here. Stripe-specific code lives in stripe_client.
"""

# Exceptions (no Django dependencies)
from .exceptions import (
    BaseApplicationError,
    ExternalServiceError,
    ValidationError,
)

# Helpers (no Django dependencies)
from .helpers import to_int, to_strict_int

__all__ = [
    # Exceptions
    "BaseApplicationError",
    "ValidationError",
    "ExternalServiceError",
    # Helpers
    "to_int",
    "to_strict_int",
]
