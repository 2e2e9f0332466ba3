"""
Exceptions module - Custom exception hierarchy.

This module defines all custom exceptions used throughout storefront-qa,
providing clear error types for different failure scenarios.
"""

from storefront_qa.exceptions.base import (
    StorefrontQAError,
    ConfigurationError,
)
from storefront_qa.exceptions.browser import (
    BrowserError,
    BrowserLaunchError,
    NavigationError,
)
from storefront_qa.exceptions.locators import (
    LocatorError,
    LocatorNotFoundError,
    CollectionMismatchError,
)

__all__ = [
    # Base exceptions
    "StorefrontQAError",
    "ConfigurationError",
    # Browser exceptions
    "BrowserError",
    "BrowserLaunchError",
    "NavigationError",
    # Locator exceptions
    "LocatorError",
    "LocatorNotFoundError",
    "CollectionMismatchError",
]
