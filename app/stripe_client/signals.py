"""
Django signals for the Stripe client app.

Keeps the process-wide client returned by get_stripe_client() in step
with settings: when a STRIPE_* setting changes (override_settings in
tests, for instance) the cached client is dropped and rebuilt on next use.

Related files:
    - client.py: get_stripe_client
    - apps.py: Signal registration
"""

from __future__ import annotations

import logging

# Test-time hook: setting_changed is only sent by override_settings.
from django.test.signals import setting_changed

logger = logging.getLogger(__name__)

CLIENT_SETTINGS = frozenset({"STRIPE_SECRET_KEY", "STRIPE_API_VERSION"})


def connect_signals():
    """
    Connect all signal handlers.

    Called from StripeClientConfig.ready().
    """
    setting_changed.connect(
        reset_client_on_setting_change,
        dispatch_uid="stripe_client_reset_on_setting_change",
    )

    logger.debug("Stripe client signals connected")


def reset_client_on_setting_change(sender, setting, **kwargs):
    """Drop the cached client when one of its settings changes."""
    if setting not in CLIENT_SETTINGS:
        return

    from stripe_client.client import get_stripe_client

    get_stripe_client.cache_clear()
    logger.debug("Stripe client reset", extra={"setting": setting})
