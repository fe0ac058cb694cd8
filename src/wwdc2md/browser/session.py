"""Headless Chromium session for JavaScript-rendered reference pages."""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType
from typing import TYPE_CHECKING, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from ..errors import BrowserError
from ..models.config import BrowserConfig

if TYPE_CHECKING:
    from playwright.async_api import Browser, BrowserContext, Page, Playwright

logger = logging.getLogger(__name__)


class BrowserSession:
    """
    A single headless browser page, torn down on exit.

    The Playwright driver, browser, context and page are all owned by the
    session and released in __aexit__ whether rendering succeeded or not.

    Example:
        async with BrowserSession(wait_timeout=30.0) as session:
            html = await session.render("https://developer.apple.com/documentation/swiftui")
    """

    def __init__(
        self,
        headless: bool = True,
        user_agent: str | None = None,
        navigation_timeout: float = 30.0,
        wait_timeout: float = 30.0,
        wait_until: str = "load",
    ) -> None:
        """
        Initialize the session.

        Args:
            headless: Run browser in headless mode
            user_agent: Custom user agent string
            navigation_timeout: Page navigation timeout (seconds)
            wait_timeout: Timeout for the rendered-content selector (seconds)
            wait_until: Wait condition ('load', 'domcontentloaded', 'networkidle')
        """
        self._headless = headless
        self._user_agent = user_agent
        # Playwright takes milliseconds
        self._navigation_timeout = navigation_timeout * 1000
        self._wait_timeout = wait_timeout * 1000
        self._wait_until = wait_until

        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    async def __aenter__(self) -> BrowserSession:
        """Start Playwright and open a page."""
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(headless=self._headless)

            context_options: dict[str, object] = {"java_script_enabled": True}
            if self._user_agent:
                context_options["user_agent"] = self._user_agent
            self._context = await self._browser.new_context(**context_options)  # type: ignore[arg-type]
            self._context.set_default_timeout(self._navigation_timeout)
            self._page = await self._context.new_page()
        except PlaywrightError as e:
            await self.close()
            raise BrowserError(f"Failed to launch browser: {e}") from e

        logger.debug(f"Browser launched (headless={self._headless})")
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the page, browser and driver."""
        await self.close()

    async def close(self) -> None:
        """Release every browser resource that was acquired."""
        for resource, name in ((self._page, "page"), (self._context, "context"), (self._browser, "browser")):
            if resource is None:
                continue
            try:
                await resource.close()
            except PlaywrightError as e:
                logger.debug(f"Error closing {name}: {e}")
        self._page = None
        self._context = None
        self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None
            logger.debug("Browser shut down")

    async def render(self, url: str, wait_selector: str = "h1") -> str:
        """
        Navigate to a page and return its HTML once rendered.

        Args:
            url: URL to load
            wait_selector: CSS selector whose presence marks the page as rendered

        Returns:
            The rendered document markup

        Raises:
            BrowserError: On navigation failure, error status or wait timeout
        """
        if self._page is None:
            raise RuntimeError("Browser session not initialized. Use 'async with' context manager.")

        logger.info(f"Rendering {url}")
        try:
            response = await self._page.goto(
                url,
                wait_until=self._wait_until,  # type: ignore[arg-type]
                timeout=self._navigation_timeout,
            )
        except PlaywrightError as e:
            raise BrowserError(f"Navigation to {url} failed: {e}") from e

        if response is not None and response.status >= 400:
            raise BrowserError(f"Navigation to {url} failed: status={response.status}")

        try:
            await self._page.wait_for_selector(
                wait_selector,
                state="attached",
                timeout=self._wait_timeout,
            )
        except PlaywrightTimeoutError as e:
            raise BrowserError(
                f"Timed out after {self._wait_timeout / 1000:.0f}s waiting for '{wait_selector}' on {url}"
            ) from e
        except PlaywrightError as e:
            raise BrowserError(f"Waiting for '{wait_selector}' on {url} failed: {e}") from e

        html = await self._page.content()
        logger.debug(f"Rendered {url}: {len(html)} characters")
        return html


def render_page(
    url: str,
    config: Optional[BrowserConfig] = None,
    user_agent: Optional[str] = None,
) -> str:
    """
    Blocking wrapper that renders one page in a fresh browser session.

    WARNING: Do not call from within an existing event loop.

    Args:
        url: URL to render
        config: Browser settings (defaults apply when omitted)
        user_agent: Optional User-Agent override

    Returns:
        Rendered HTML
    """
    config = config or BrowserConfig()

    async def run() -> str:
        async with BrowserSession(
            headless=config.headless,
            user_agent=user_agent,
            navigation_timeout=config.navigation_timeout,
            wait_timeout=config.wait_timeout,
            wait_until=config.wait_until,
        ) as session:
            return await session.render(url, wait_selector=config.wait_selector)

    return asyncio.run(run())
