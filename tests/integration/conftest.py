"""
Fixtures for flow tests over the in-memory storefront.
"""

import pytest

from tests.fakes import fake_expect
from tests.integration.storefront import FakeStorefront

PAGE_MODULES_WITH_EXPECT = (
    "storefront_qa.pages.inventory",
    "storefront_qa.pages.cart",
    "storefront_qa.pages.checkout",
    "storefront_qa.pages.navigation",
    "storefront_qa.pages.product_details",
)


@pytest.fixture(autouse=True)
def _fake_expect(monkeypatch):
    """Route readiness checks through assertions over fake locators."""
    for module in PAGE_MODULES_WITH_EXPECT:
        monkeypatch.setattr(f"{module}.expect", fake_expect)


@pytest.fixture
def storefront():
    """Provide a fresh storefront with nobody logged in."""
    return FakeStorefront()
