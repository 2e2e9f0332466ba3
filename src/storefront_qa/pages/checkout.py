"""
Checkout pages: customer information, overview and completion.
"""

from typing import List, Optional, Pattern, Union

from playwright.async_api import expect

from storefront_qa.pages.base import BasePage, LineItem


class CheckoutStepOnePage(BasePage):
    """Checkout step one: "Your Information"."""
    
    path = "/checkout-step-one.html"
    
    async def expect_loaded(self) -> None:
        title = await self.resolver.resolve_required(self.page, "navigation.title")
        await expect(title.locator).to_have_text("Checkout: Your Information")
    
    async def fill_customer_info(self, first_name: str, last_name: str, postal_code: str) -> None:
        await self._fill("checkout_info.first_name", first_name)
        await self._fill("checkout_info.last_name", last_name)
        await self._fill("checkout_info.postal_code", postal_code)
    
    async def continue_checkout(self) -> None:
        """Continue to the overview step."""
        await self._click("checkout_info.continue_button", require_interactive=True)
    
    async def cancel(self) -> None:
        await self._click("checkout_info.cancel_button", require_interactive=True)
    
    async def get_inline_error(self) -> Optional[str]:
        return await self.resolver.read_text(self.page, "checkout_info.error")
    
    async def dismiss_inline_error(self) -> None:
        """Close the inline error; no-op when none is shown."""
        close_button = await self.resolver.resolve_optional(
            self.page, "checkout_info.error_close_button"
        )
        if close_button is None:
            return
        await close_button.locator.click()
    
    async def expect_inline_error_contains(self, text: Union[str, Pattern[str], None] = None) -> None:
        error = await self.resolver.resolve_required(self.page, "checkout_info.error")
        await expect(error.locator).to_be_visible()
        if text:
            await expect(error.locator).to_contain_text(text)


class CheckoutStepTwoPage(BasePage):
    """Checkout step two: "Overview"."""
    
    path = "/checkout-step-two.html"
    
    async def expect_loaded(self) -> None:
        title = await self.resolver.resolve_required(self.page, "navigation.title")
        await expect(title.locator).to_have_text("Checkout: Overview")
    
    async def get_overview_items(self, strict: Optional[bool] = None) -> List[LineItem]:
        """Line items shown in the overview, as name/price pairs."""
        return await self._read_line_items("CheckoutStepTwoPage.get_overview_items", strict)
    
    async def get_payment_info(self) -> Optional[str]:
        return await self.resolver.read_text(self.page, "checkout_overview.payment_info_value")
    
    async def get_shipping_info(self) -> Optional[str]:
        return await self.resolver.read_text(self.page, "checkout_overview.shipping_info_value")
    
    async def get_item_subtotal(self) -> Optional[str]:
        return await self.resolver.read_text(self.page, "checkout_overview.item_subtotal")
    
    async def get_tax(self) -> Optional[str]:
        return await self.resolver.read_text(self.page, "checkout_overview.item_tax")
    
    async def get_total(self) -> Optional[str]:
        return await self.resolver.read_text(self.page, "checkout_overview.item_total")
    
    async def finish(self) -> None:
        """Place the order."""
        await self._click("checkout_overview.finish_button", require_interactive=True)
    
    async def cancel(self) -> None:
        await self._click("checkout_info.cancel_button", require_interactive=True)


class CheckoutCompletePage(BasePage):
    """The "Thank you for your order" screen."""
    
    path = "/checkout-complete.html"
    
    async def expect_loaded(self) -> None:
        header = await self.resolver.resolve_required(self.page, "checkout_overview.complete_header")
        await expect(header.locator).to_be_visible()
    
    async def get_header_text(self) -> Optional[str]:
        return await self.resolver.read_text(self.page, "checkout_overview.complete_header")
    
    async def get_body_text(self) -> Optional[str]:
        return await self.resolver.read_text(self.page, "checkout_overview.complete_text")
    
    async def back_home(self) -> None:
        await self._click("checkout_overview.back_home_button", require_interactive=True)
