"""
Login page.
"""

from typing import Optional

from storefront_qa.pages.base import BasePage


class LoginPage(BasePage):
    """Page object for the storefront login form."""
    
    path = "/"
    
    async def login_as(self, username: str, password: str) -> None:
        """Fill username + password and submit."""
        await self._fill("login.username", username)
        await self._fill("login.password", password)
        await self._click("login.login_button", require_interactive=True)
    
    async def get_error_text(self) -> Optional[str]:
        """Trimmed error banner text, or None when no error is shown."""
        return await self.resolver.read_text(self.page, "login.error")
    
    async def is_loaded(self) -> bool:
        """True if the username field is currently visible."""
        return await self.resolver.resolve_optional(self.page, "login.username") is not None
