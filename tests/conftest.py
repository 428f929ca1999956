"""
Pytest configuration for py-multi-context-auth tests.
"""

import pytest


def make_request(headers=None, cookies=None):
    """Build a plain-mapping request in the shape the library accepts."""
    return {"headers": headers or {}, "cookies": cookies or {}}


@pytest.fixture
def request_factory():
    """Fixture returning a builder for plain-mapping requests."""
    return make_request


@pytest.fixture
def customer_request():
    """Request from the customer origin carrying a customer access cookie."""
    return make_request(
        headers={"origin": "https://customer.example.com"},
        cookies={"customer_access_token": "customer-token"},
    )


@pytest.fixture
def custom_origins():
    return {"customer": ["http://custom-customer.com"]}
