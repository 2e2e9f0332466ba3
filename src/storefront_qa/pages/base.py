"""
Base page object shared by all storefront pages.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional
import logging

from playwright.async_api import Error as PlaywrightError

from storefront_qa.exceptions import NavigationError
from storefront_qa.locators import LocatorResolver
from storefront_qa.locators.resolver import Expressions

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineItem:
    """A name/price row read from the cart or the checkout overview."""
    name: str
    price: str


class BasePage:
    """
    Common plumbing for page objects.
    
    Page objects hold no assertions beyond readiness checks; tests assert
    on what they return.
    """
    
    path: str = "/"
    
    def __init__(self, page: "Page", resolver: Optional[LocatorResolver] = None):
        self.page = page
        self.resolver = resolver or LocatorResolver()
    
    async def goto(self) -> None:
        """Navigate to this page's path, relative to the context base URL."""
        await self._navigate(self.path)
    
    async def _navigate(self, path: str) -> None:
        try:
            await self.page.goto(path)
        except PlaywrightError as e:
            raise NavigationError(f"Failed to navigate to {path}: {e}", url=path) from e
    
    async def _click(self, expressions: Expressions, require_interactive: bool = False) -> None:
        target = await self.resolver.resolve_required(
            self.page, expressions, require_interactive=require_interactive
        )
        await target.locator.click()
    
    async def _fill(self, expressions: Expressions, value: str) -> None:
        target = await self.resolver.resolve_required(self.page, expressions)
        await target.locator.fill(value)
    
    async def _read_line_items(self, label: str, strict: Optional[bool]) -> List[LineItem]:
        rows = self.resolver.resolve_collection(self.page, "cart.cart_item")
        if await rows.count() == 0:
            return []
        pairs = await self.resolver.read_text_pairs(
            rows,
            "products.item_name",
            "products.item_price",
            strict=strict,
            label=label,
        )
        return [LineItem(name=name, price=price) for name, price in pairs]
    
    async def title_text(self) -> Optional[str]:
        """Header title (e.g. 'Products', 'Your Cart'), or None if absent."""
        return await self.resolver.read_text(self.page, "navigation.title")
