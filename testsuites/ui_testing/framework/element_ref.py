"""
================================================================================
Element Reference
================================================================================

Named, lazily-resolved handles to UI elements.

An ElementReference pairs a semantic name ("username field") with a stable
selector (a `data-test` attribute). Nothing is cached: every access builds a
fresh Playwright Locator against the live page, so references stay valid
across navigations.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class UIFrameworkError(Exception):
    """Base class for structural failures (not assertion mismatches)."""
    pass


class ElementNotFoundError(UIFrameworkError):
    """Raised when a selector does not resolve to exactly one visible element."""
    pass


def data_test(value: str) -> str:
    """Build a selector for the `data-test` attribute."""
    return f'[data-test="{value}"]'


class ElementReference:
    """
    Read-only handle to exactly one element on a page.

    Usage:
        >>> username = ElementReference(page, "username field", data_test("username"))
        >>> await username.locator.fill("standard_user")
        >>> await username.resolve(timeout=5000)  # strict visibility check
    """

    __slots__ = ("_page", "_name", "_selector")

    def __init__(self, page: Page, name: str, selector: str):
        """
        Args:
            page: Playwright Page the selector is resolved against
            name: Semantic role, used in logs and error messages
            selector: Playwright selector expected to match one element
        """
        self._page = page
        self._name = name
        self._selector = selector

    @property
    def name(self) -> str:
        return self._name

    @property
    def selector(self) -> str:
        return self._selector

    @property
    def locator(self) -> Locator:
        """Fresh Locator for this reference."""
        return self._page.locator(self._selector)

    async def resolve(self, timeout: float = 5000) -> Locator:
        """
        Wait for the element and check it is unique.

        Args:
            timeout: Maximum wait in milliseconds

        Returns:
            Locator matching exactly one visible element

        Raises:
            ElementNotFoundError: On timeout, or when the selector matches
                zero or more than one element
        """
        locator = self.locator
        try:
            await locator.first.wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeoutError as e:
            message = (
                f"Element '{self._name}' ({self._selector}) timed out after "
                f"{timeout}ms waiting to be visible"
            )
            logger.error(message)
            raise ElementNotFoundError(message) from e

        count = await locator.count()
        if count != 1:
            message = (
                f"Element '{self._name}' ({self._selector}) matched {count} "
                f"elements, expected exactly 1"
            )
            logger.error(message)
            raise ElementNotFoundError(message)

        logger.debug(f"Element '{self._name}' resolved: {self._selector}")
        return locator

    def __repr__(self) -> str:
        return f"ElementReference(name={self._name!r}, selector={self._selector!r})"


__all__ = [
    "ElementReference",
    "ElementNotFoundError",
    "UIFrameworkError",
    "data_test",
]
