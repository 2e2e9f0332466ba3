"""
Burger-menu sidebar and footer navigation.
"""

from typing import Optional
import re

from playwright.async_api import expect

from storefront_qa.pages.base import BasePage

INVENTORY_URL = re.compile(r".*inventory\.html")
LOGIN_URL = re.compile(r"/(?:index\.html)?(?:\?.*)?$")


class NavigationPage(BasePage):
    """
    Navigation between app sections.
    
    Social links open a new tab; tests should wrap those clicks in
    ``context.expect_page()``.
    """
    
    async def open_sidebar(self) -> None:
        await self._click("navigation.burger_menu_button", require_interactive=True)
    
    async def close_sidebar(self) -> None:
        await self._click("navigation.close_menu")
    
    async def go_to_all_items(self) -> None:
        await self._click("navigation.all_items")
        await self.page.wait_for_url(INVENTORY_URL)
    
    async def go_to_about(self) -> None:
        """Leaves the storefront (same tab)."""
        await self._click("navigation.about")
    
    async def logout(self) -> None:
        """Log out and wait until the login form is back."""
        await self._click("navigation.logout")
        await self.page.wait_for_url(LOGIN_URL)
        username = await self.resolver.resolve_required(self.page, "login.username")
        await expect(username.locator).to_be_visible()
    
    async def reset_app_state(self) -> None:
        """No toast appears; verify through effects such as the cart badge."""
        await self._click("navigation.reset_app_state")
    
    async def go_to_twitter(self) -> None:
        await self._click("navigation.twitter_link")
    
    async def go_to_facebook(self) -> None:
        await self._click("navigation.facebook_link")
    
    async def go_to_linkedin(self) -> None:
        await self._click("navigation.linkedin_link")
    
    async def get_footer_text(self) -> Optional[str]:
        footer = await self.resolver.resolve_required(self.page, "navigation.footer")
        text = await footer.locator.text_content()
        return text.strip() if text is not None else None
