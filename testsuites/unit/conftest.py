"""
Fixtures for framework unit tests.

The fakes stand in for Playwright's Page/Locator so page objects can be
exercised without a browser. Every interaction is recorded on `page.calls`
in the order it happened.
"""

from pathlib import Path
from typing import Dict, List, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest

from testsuites.ui_testing.framework.config_loader import ConfigLoader


class FakePage:
    """Minimal async Page double recording goto/fill/click order and writing screenshots."""

    def __init__(self, url: str = "about:blank"):
        self.url = url
        self.calls: List[Tuple[str, ...]] = []
        self.locators: Dict[str, MagicMock] = {}
        self.goto = AsyncMock(side_effect=self._goto)
        self.screenshot = AsyncMock(side_effect=self._screenshot)

    async def _goto(self, url, **kwargs):
        self.calls.append(("goto", url))
        self.url = url

    async def _screenshot(self, path=None, **kwargs):
        data = b"\x89PNG fake"
        if path:
            Path(path).write_bytes(data)
        return data

    def locator(self, selector: str) -> MagicMock:
        if selector not in self.locators:
            self.locators[selector] = self._make_locator(selector)
        return self.locators[selector]

    def _make_locator(self, selector: str) -> MagicMock:
        locator = MagicMock(name=f"locator({selector})")
        locator.first = locator
        locator.wait_for = AsyncMock()
        locator.count = AsyncMock(return_value=1)
        locator.text_content = AsyncMock(return_value="")

        async def fill(value, **kwargs):
            self.calls.append(("fill", selector, value))

        async def click(**kwargs):
            self.calls.append(("click", selector))

        locator.fill = AsyncMock(side_effect=fill)
        locator.click = AsyncMock(side_effect=click)
        return locator


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the ConfigLoader singleton around every test."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
