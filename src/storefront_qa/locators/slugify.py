"""
Item-name slugs as used by the storefront's ``data-test`` attributes.
"""

import re

_NON_SLUG_CHARS = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_DASH_RUNS = re.compile(r"-+")


def slugify_item_name(item_name: str) -> str:
    """
    Convert a product display name to the kebab-case form used in data-test values.
    
    Example:
        >>> slugify_item_name("Sauce Labs Backpack")
        'sauce-labs-backpack'
        >>> slugify_item_name("Test.allTheThings() T-Shirt (Red)")
        'testallthethings-t-shirt-red'
    """
    slug = item_name.strip().lower()
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    return _DASH_RUNS.sub("-", slug)
