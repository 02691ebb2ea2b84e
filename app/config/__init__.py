# =============================================================================
# Django Project Configuration Package
# =============================================================================
# Settings used to run and test the stripe_client app standalone.
# Projects embedding the app use their own settings module and only need
# "stripe_client" in INSTALLED_APPS plus the STRIPE_* settings.
# =============================================================================
