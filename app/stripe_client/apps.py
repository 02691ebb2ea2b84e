"""Django app configuration for the Stripe client app."""

from django.apps import AppConfig


class StripeClientConfig(AppConfig):
    """Configuration for the stripe_client app."""

    name = "stripe_client"
    verbose_name = "Stripe Client"

    def ready(self) -> None:
        """Connect signal handlers when app is ready."""
        from stripe_client.signals import connect_signals

        connect_signals()
