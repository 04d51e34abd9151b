"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation with explicit failure on unreachable targets
    - ElementReference declaration and interaction helpers
    - Screenshot and failure-capture utilities for Allure

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from .config_loader import ConfigLoader
from .element_ref import ElementReference, UIFrameworkError


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

DEFAULT_BASE_URL = "https://www.saucedemo.com"


class NavigationError(UIFrameworkError):
    """Raised when the target application cannot be reached."""
    pass


def mask_value(element_name: str, value: str) -> str:
    """Mask values typed into password fields."""
    if "password" in element_name.lower():
        return "*" * len(value)
    return value


class BasePage:
    """
    Base class for all page objects.

    The Playwright page is injected, never looked up globally, so every
    scenario can bind its own page object to its own isolated context.

    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/"

            def __init__(self, page):
                super().__init__(page)
                self._username = self.element("username field", data_test("username"))
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        action_timeout: Optional[float] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (config `ui.base_url` if empty)
            action_timeout: Element wait timeout in ms (config `ui.action_timeout` if None)
        """
        config = ConfigLoader()
        self.page = page
        if not base_url:
            base_url = config.get("ui.base_url", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")
        if action_timeout is None:
            action_timeout = config.get("ui.action_timeout", 10000)
        self.action_timeout = action_timeout

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    def element(self, name: str, selector: str) -> ElementReference:
        """Declare an element reference bound to this page."""
        return ElementReference(self.page, name, selector)

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'

        Raises:
            NavigationError: Target unreachable or navigation timed out
        """
        with allure.step(f"Navigate to {self.url}"):
            try:
                await self.page.goto(self.url, wait_until=wait_for)
            except PlaywrightError as e:
                logger.error(f"Navigation to {self.url} failed: {e.message}")
                raise NavigationError(
                    f"Could not navigate to {self.url}: {e.message}"
                ) from e
            logger.debug(f"Navigated to: {self.url}")

    # =========================================================================
    # Element Interactions
    # =========================================================================

    async def fill(self, element: ElementReference, value: str) -> None:
        """
        Fill an input element.

        An empty value is a legitimate input and clears the field.
        """
        shown = mask_value(element.name, value)
        with allure.step(f"Fill {element.name}: {shown!r}"):
            locator = await element.resolve(timeout=self.action_timeout)
            await locator.fill(value, timeout=self.action_timeout)
            logger.info(f"Filled {element.name} with {shown!r}")

    async def click(self, element: ElementReference) -> None:
        """Click an element once it is visible and unique."""
        with allure.step(f"Click: {element.name}"):
            locator = await element.resolve(timeout=self.action_timeout)
            await locator.click(timeout=self.action_timeout)
            logger.info(f"Clicked {element.name}")

    async def get_text(self, element: ElementReference) -> str:
        """Get text content of an element."""
        locator = await element.resolve(timeout=self.action_timeout)
        text = await locator.text_content() or ""
        logger.debug(f"Got text from {element.name}: {text!r}")
        return text

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """Attach a screenshot and the current URL to the report."""
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


async def capture_on_failure(page: Page, node) -> bool:
    """
    Capture failure details when the test call phase of `node` failed.

    `node.rep_call` is set by the `pytest_runtest_makereport` hook.

    Returns:
        True if details were captured
    """
    report = getattr(node, "rep_call", None)
    if report is None or not report.failed:
        return False

    await BasePage(page).capture_failure(node.name)
    return True


__all__ = [
    "BasePage",
    "NavigationError",
    "capture_on_failure",
    "mask_value",
]
