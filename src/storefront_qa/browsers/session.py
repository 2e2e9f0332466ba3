"""
Browser Session - Launch Playwright from the browser settings.

Example:
    >>> async with BrowserSession(settings.browser) as page:
    ...     await LoginPage(page, resolver).goto()
"""

from typing import Any, Optional
import logging

from playwright.async_api import async_playwright

from storefront_qa.config.settings import BrowserSettings
from storefront_qa.exceptions import BrowserLaunchError

logger = logging.getLogger(__name__)


class BrowserSession:
    """
    One browser, one context, one page.

    The context carries ``base_url`` so page objects navigate with
    relative paths.
    """

    def __init__(self, settings: Optional[BrowserSettings] = None):
        self.settings = settings or BrowserSettings()
        self._playwright: Any = None
        self._browser: Any = None
        self._context: Any = None
        self._page: Any = None

    @property
    def page(self) -> Any:
        if self._page is None:
            raise BrowserLaunchError("Browser session not started. Call start() first.")
        return self._page

    async def start(self) -> Any:
        """
        Launch the browser and open a page.

        Returns:
            The Playwright page

        Raises:
            BrowserLaunchError: If Playwright fails to start the browser
        """
        settings = self.settings
        try:
            self._playwright = await async_playwright().start()
            launcher = getattr(self._playwright, settings.browser_type)
            self._browser = await launcher.launch(
                headless=settings.headless,
                slow_mo=settings.slow_mo,
            )
            self._context = await self._browser.new_context(
                base_url=settings.base_url,
                viewport={"width": settings.viewport_width, "height": settings.viewport_height},
            )
            self._context.set_default_timeout(settings.timeout_ms)
            self._page = await self._context.new_page()
        except Exception as e:
            await self.close()
            raise BrowserLaunchError(
                f"Failed to launch {settings.browser_type}: {e}",
                {"browser_type": settings.browser_type},
            ) from e

        logger.info(
            f"Launched {settings.browser_type} browser "
            f"(headless={settings.headless}, base_url={settings.base_url})"
        )
        return self._page

    async def close(self) -> None:
        """Close the page's context, the browser and Playwright."""
        if self._context:
            await self._context.close()
            self._context = None
        if self._browser:
            await self._browser.close()
            self._browser = None
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None
        self._page = None
        logger.info("Browser closed")

    async def __aenter__(self) -> Any:
        return await self.start()

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
