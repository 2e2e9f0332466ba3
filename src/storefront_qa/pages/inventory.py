"""
Inventory (product grid) page.
"""

from typing import List

from playwright.async_api import expect

from storefront_qa.pages.base import BasePage


class InventoryPage(BasePage):
    """
    Page object for /inventory.html.
    
    Single elements go through the resolver's fallbacks; product columns
    are read in one batch through union locators.
    """
    
    path = "/inventory.html"
    
    async def expect_loaded(self) -> None:
        """Wait until the product list container is visible."""
        product_list = await self.resolver.resolve_required(self.page, "products.list")
        await expect(product_list.locator).to_be_visible()
    
    async def get_product_names(self) -> List[str]:
        return await self.resolver.read_texts(self.page, "products.item_name")
    
    async def get_product_prices(self) -> List[str]:
        return await self.resolver.read_texts(self.page, "products.item_price")
    
    async def view_product_details(self, product_key: str) -> None:
        """Open the details page of a product by clicking its name."""
        display_name = self.resolver.registry.product(product_key).display_name
        names = self.resolver.resolve_collection(self.page, "products.item_name")
        await names.filter(has_text=display_name).first.click()
    
    async def add_to_cart(self, product_key: str) -> None:
        product = self.resolver.registry.product(product_key)
        await self._click(product.add_to_cart, require_interactive=True)
    
    async def remove_from_inventory(self, product_key: str) -> None:
        """Remove a product using the grid's remove button (not the cart page)."""
        product = self.resolver.registry.product(product_key)
        await self._click(product.remove_from_cart, require_interactive=True)
    
    async def sort_by(self, option: str) -> None:
        """
        Choose a sort order.
        
        Args:
            option: Option value ('az', 'za', 'lohi', 'hilo') or label
        """
        dropdown = await self.resolver.resolve_required(
            self.page, "products.sort_dropdown", require_interactive=True
        )
        await dropdown.locator.select_option(option)
    
    async def go_to_cart(self) -> None:
        await self._click("cart.cart_link")
