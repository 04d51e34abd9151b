"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser instance per worker process
    - A fresh, isolated context per scenario
    - Bounded timeouts applied to every new page and to `expect`
    - Settings from ConfigLoader (`ui.*`)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    expect,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)

from .config_loader import ConfigLoader


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages the browser instance and per-scenario contexts.

    Each context is isolated (cookies, localStorage, session), so a
    failing scenario cannot leak state into its siblings.

    Usage:
        async with BrowserManager() as manager:
            context = await manager.new_context()
            page = await manager.new_page(context)
            await page.goto("https://www.saucedemo.com")
            await manager.close_context(context)
    """

    DEFAULT_LAUNCH_ARGS: List[str] = [
        "--ignore-certificate-errors",
    ]

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
        config: Optional[ConfigLoader] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode (config `ui.headless` if None)
            browser_type: 'chromium', 'firefox' or 'webkit' (config `ui.browser` if None)
            config: Configuration source (process singleton if None)
        """
        self.config = config or ConfigLoader()
        self.headless = (
            headless if headless is not None
            else self.config.get("ui.headless", True)
        )
        self.browser_type = (browser_type or self.config.get("ui.browser", "chromium")).lower()
        if self.browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{self.browser_type}', "
                f"expected one of {', '.join(SUPPORTED_BROWSERS)}"
            )

        self.action_timeout: int = self.config.get("ui.action_timeout", 10000)
        self.navigation_timeout: int = self.config.get("ui.navigation_timeout", 30000)
        self.expect_timeout: int = self.config.get("ui.expect_timeout", 5000)

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    @property
    def context_options(self) -> Dict[str, Any]:
        """Options applied to every new context."""
        return {
            "viewport": {
                "width": self.config.get("ui.viewport_width", 1920),
                "height": self.config.get("ui.viewport_height", 1080),
            },
            "ignore_https_errors": True,
        }

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        if self._browser is not None:
            return

        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)

        self._browser = await browser_launcher.launch(
            headless=self.headless,
            slow_mo=self.config.get("ui.slow_mo", 0),
            args=self.DEFAULT_LAUNCH_ARGS,
        )
        expect.set_options(timeout=self.expect_timeout)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    async def close(self) -> None:
        """Close all contexts, the browser and Playwright."""
        try:
            for context in list(self._contexts):
                await self.close_context(context)
        finally:
            self._contexts.clear()
            try:
                if self._browser:
                    await self._browser.close()
                    self._browser = None
            finally:
                if self._playwright:
                    await self._playwright.stop()
                    self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new isolated browser context.

        Args:
            **options: Overrides for `context_options`

        Returns:
            New BrowserContext with default timeouts applied
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(**{**self.context_options, **options})
        context.set_default_timeout(self.action_timeout)
        context.set_default_navigation_timeout(self.navigation_timeout)
        self._contexts.append(context)
        logger.debug(f"Context created ({len(self._contexts)} open)")

        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context

        Returns:
            New Page
        """
        if context is None:
            context = await self.new_context(**context_options)

        return await context.new_page()

    async def close_context(self, context: BrowserContext) -> None:
        """Close a context and forget it."""
        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
]
