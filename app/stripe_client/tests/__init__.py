"""
Tests for the stripe_client app.

This package contains test modules for:
- test_client.py: StripeClient operations and error translation
- test_types.py: Request dataclasses
- test_exceptions.py: Exception hierarchy
- test_signals.py: Cache reset on settings change
"""
