"""
Root pytest configuration for the Stripe client app.

This module configures pytest-django and provides project-wide fixtures.
App-specific fixtures are defined in each app's tests/conftest.py.
"""

import os

import django
import pytest

# Ensure Django settings are configured before any tests run
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")


def pytest_configure():
    """Configure Django settings before tests run."""
    django.setup()


def pytest_collection_modifyitems(items):
    """
    Auto-mark tests based on filename patterns.

    Mapping:
    - test_client.py → integration (facade + stripe SDK boundary, mocked)
    - test_types.py, test_exceptions.py, test_helpers.py, etc. → unit
    - Unmatched files → unit

    Explicit markers on test functions/classes take precedence.
    """
    integration_patterns = [
        "test_client.py",
        "test_signals.py",
    ]

    for item in items:
        existing_markers = {m.name for m in item.iter_markers()}
        if existing_markers & {"unit", "integration"}:
            continue

        filename = str(item.fspath).split("/")[-1]

        if any(pattern in filename for pattern in integration_patterns):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def stripe_settings(settings):
    """Configure test Stripe credentials for the duration of a test."""
    settings.STRIPE_SECRET_KEY = "sk_test_settings123"
    settings.STRIPE_API_VERSION = ""
    return settings
