"""
Browsers module - Playwright session management.
"""

from storefront_qa.browsers.session import BrowserSession

__all__ = [
    "BrowserSession",
]
