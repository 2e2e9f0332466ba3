"""
Pages module - page objects for the storefront flows.

Page objects are thin call sequences over the locator resolver.
"""

from storefront_qa.pages.base import BasePage, LineItem
from storefront_qa.pages.login import LoginPage
from storefront_qa.pages.inventory import InventoryPage
from storefront_qa.pages.cart import CartPage
from storefront_qa.pages.checkout import (
    CheckoutStepOnePage,
    CheckoutStepTwoPage,
    CheckoutCompletePage,
)
from storefront_qa.pages.navigation import NavigationPage
from storefront_qa.pages.product_details import ProductDetailsPage

__all__ = [
    "BasePage",
    "LineItem",
    "LoginPage",
    "InventoryPage",
    "CartPage",
    "CheckoutStepOnePage",
    "CheckoutStepTwoPage",
    "CheckoutCompletePage",
    "NavigationPage",
    "ProductDetailsPage",
]
