"""
storefront-qa - Browser-driven functional checks for a web storefront.

The core is the locator resolver: page objects describe each element as an
ordered list of fallback selectors, and the resolver picks the first one
that is usable on the page as it is right now.

Example:
    >>> from storefront_qa import BrowserSession, LocatorResolver, load_config
    >>> from storefront_qa.pages import LoginPage
    >>> settings = load_config()
    >>> async with BrowserSession(settings.browser) as page:
    ...     login = LoginPage(page, LocatorResolver.from_settings(settings))
    ...     await login.goto()
    ...     await login.login_as("standard_user", "secret_sauce")
"""

__version__ = "0.1.0"

# Public API exports
from storefront_qa.config import Settings, load_config, get_settings
from storefront_qa.locators import (
    DEFAULT_REGISTRY,
    LocatorResolver,
    ResolvedLocator,
    SelectorRegistry,
    union_query,
)
from storefront_qa.browsers import BrowserSession

__all__ = [
    "Settings",
    "load_config",
    "get_settings",
    "DEFAULT_REGISTRY",
    "LocatorResolver",
    "ResolvedLocator",
    "SelectorRegistry",
    "union_query",
    "BrowserSession",
    "__version__",
]
