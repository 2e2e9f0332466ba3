"""
Product details page (/inventory-item.html).
"""

from typing import Optional

from playwright.async_api import expect

from storefront_qa.pages.base import BasePage


class ProductDetailsPage(BasePage):
    """Details view; name/price/description expressions are shared with the grid."""
    
    path = "/inventory-item.html"
    
    async def goto_by_id(self, query: str) -> None:
        """Direct navigation, e.g. ``goto_by_id("id=4")``."""
        await self._navigate(f"{self.path}?{query}")
    
    async def expect_loaded(self, product_key: str) -> None:
        """The product image and the back button must both be visible."""
        product = self.resolver.registry.product(product_key)
        image = await self.resolver.resolve_required(self.page, product.image)
        await expect(image.locator).to_be_visible()
        await self.resolver.resolve_required(self.page, "checkout_overview.back_home_button")
    
    async def expect_name_matches(self, product_key: str) -> None:
        display_name = self.resolver.registry.product(product_key).display_name
        names = self.resolver.resolve_collection(self.page, "products.item_name")
        await names.filter(has_text=display_name).first.wait_for(state="visible")
    
    async def back_to_products(self) -> None:
        await self._click("checkout_overview.back_home_button", require_interactive=True)
    
    async def go_to_cart(self) -> None:
        await self._click("cart.cart_link")
    
    async def add_to_cart(self, product_key: str) -> None:
        product = self.resolver.registry.product(product_key)
        await self._click(product.add_to_cart, require_interactive=True)
    
    async def remove_from_cart(self, product_key: str) -> None:
        product = self.resolver.registry.product(product_key)
        await self._click(product.remove_from_cart, require_interactive=True)
    
    async def get_name(self) -> Optional[str]:
        return await self.resolver.read_text(self.page, "products.item_name")
    
    async def get_price(self) -> Optional[str]:
        return await self.resolver.read_text(self.page, "products.item_price")
    
    async def get_description(self) -> Optional[str]:
        return await self.resolver.read_text(self.page, "products.item_description")
