"""
Cart page.
"""

from typing import List, Optional
import logging

from playwright.async_api import expect

from storefront_qa.pages.base import BasePage, LineItem

logger = logging.getLogger(__name__)


class CartPage(BasePage):
    """Page object for /cart.html."""
    
    path = "/cart.html"
    
    async def expect_loaded(self) -> None:
        """Check the page title rather than the badge, which is absent for an empty cart."""
        title = await self.resolver.resolve_required(self.page, "navigation.title")
        await expect(title.locator).to_have_text("Your Cart")
    
    async def get_item_count(self) -> int:
        """Number shown in the cart badge; 0 when the badge is absent."""
        text = await self.resolver.read_text(self.page, "cart.cart_badge")
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            logger.warning(f"Unexpected cart badge text: {text!r}")
            return 0
    
    async def get_cart_items(self, strict: Optional[bool] = None) -> List[LineItem]:
        """
        Read every cart row as a name/price pair.
        
        Args:
            strict: Raise CollectionMismatchError when the name and price
                counts differ instead of warning and truncating
        """
        return await self._read_line_items("CartPage.get_cart_items", strict)
    
    async def checkout(self) -> None:
        await self._click("cart.checkout_button")
    
    async def continue_shopping(self) -> None:
        await self._click("cart.continue_shopping_button")
    
    async def remove_from_cart(self, product_key: str) -> None:
        """Remove a product row using its remove button."""
        product = self.resolver.registry.product(product_key)
        await self._click(product.remove_from_cart, require_interactive=True)
