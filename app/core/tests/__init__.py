"""
Tests for core infrastructure.

This package contains test modules for:
- test_exceptions.py: BaseApplicationError hierarchy
- test_helpers.py: Integer coercion helpers
"""
