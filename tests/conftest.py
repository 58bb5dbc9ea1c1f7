"""Shared fixtures for prime_check tests."""

import pytest

from prime_check.core.memo import clear_caches, configure_caches


@pytest.fixture(autouse=True)
def fresh_caches():
    """Start every test with empty, unbounded process-wide caches."""
    configure_caches(None)
    clear_caches()
    yield
    configure_caches(None)
    clear_caches()
