"""
Locators module - fallback-aware element resolution.

Usage:
    from storefront_qa.locators import LocatorResolver
    
    resolver = LocatorResolver()
    names = await resolver.read_texts(page, "products.item_name")
    badge = await resolver.read_text(page, "cart.cart_badge")
"""

from storefront_qa.locators.registry import (
    DEFAULT_REGISTRY,
    ExpressionList,
    ProductMeta,
    ProductSelectors,
    SelectorRegistry,
    build_product_selectors,
    to_expression_list,
)
from storefront_qa.locators.slugify import slugify_item_name
from storefront_qa.locators.union import CombinedExpression, union_query
from storefront_qa.locators.pairing import pair_columns
from storefront_qa.locators.resolver import LocatorResolver, ResolvedLocator

__all__ = [
    "DEFAULT_REGISTRY",
    "ExpressionList",
    "ProductMeta",
    "ProductSelectors",
    "SelectorRegistry",
    "build_product_selectors",
    "to_expression_list",
    "slugify_item_name",
    "CombinedExpression",
    "union_query",
    "pair_columns",
    "LocatorResolver",
    "ResolvedLocator",
]
