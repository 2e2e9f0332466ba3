"""
Pytest configuration and fixtures.
"""

import pytest


@pytest.fixture
def settings():
    """Provide test settings."""
    from storefront_qa.config import Settings, BrowserSettings, LocatorSettings
    
    return Settings(
        browser=BrowserSettings(
            base_url="https://www.saucedemo.com",
            headless=True,
        ),
        locators=LocatorSettings(strict_pairs=False),
    )


@pytest.fixture
def registry():
    """Provide the storefront selector registry."""
    from storefront_qa.locators import DEFAULT_REGISTRY
    
    return DEFAULT_REGISTRY


@pytest.fixture
def resolver(registry):
    """Provide a resolver with the default (lenient) pairing policy."""
    from storefront_qa.locators import LocatorResolver
    
    return LocatorResolver(registry=registry)


@pytest.fixture(autouse=True)
def _reset_global_settings():
    """Keep the settings singleton from leaking between tests."""
    from storefront_qa.config import reset_settings
    
    reset_settings()
    yield
    reset_settings()
