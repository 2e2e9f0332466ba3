"""
Locator resolution exceptions.
"""

from typing import Sequence

from storefront_qa.exceptions.base import StorefrontQAError


class LocatorError(StorefrontQAError):
    """Base exception for element resolution errors."""
    pass


class LocatorNotFoundError(LocatorError):
    """
    No expression in a locator list yielded a usable element.
    
    Raised only by required resolution. The full expression list is kept
    so the failing step names every variant that was tried.
    """
    
    def __init__(self, expressions: Sequence[str], require_interactive: bool = False):
        self.expressions = tuple(expressions)
        self.require_interactive = require_interactive
        gate = "visible and enabled" if require_interactive else "visible"
        super().__init__(
            f"No {gate} element found for: {', '.join(self.expressions)}",
        )


class CollectionMismatchError(LocatorError):
    """
    Two row-aligned batch reads returned different lengths.
    
    Only raised in strict mode; the default policy logs and truncates.
    """
    
    def __init__(self, label: str, left_count: int, right_count: int):
        super().__init__(
            f"{label}: mismatched counts: {left_count} vs {right_count}",
            {"left_count": left_count, "right_count": right_count},
        )
        self.label = label
        self.left_count = left_count
        self.right_count = right_count
