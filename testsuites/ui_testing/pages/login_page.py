"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Page object for the SauceDemo login form.

Design goals:
  - Element references are exposed read-only so scenarios can assert on them
    directly (e.g. error text) without extra accessor methods
  - `login()` only acts; asserting the outcome is the caller's job
  - `verify_login()` checks both success conditions before failing

================================================================================
"""

from __future__ import annotations

import re
from typing import List

import allure
from loguru import logger
from playwright.async_api import expect

from testsuites.ui_testing.data.login_data import (
    INVENTORY_PATH_FRAGMENT,
    ExpectedOutcome,
    OutcomeKind,
)
from testsuites.ui_testing.framework.element_ref import ElementReference, data_test
from testsuites.ui_testing.framework.page_base import BasePage, mask_value


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "/"

    def __init__(self, page, base_url: str = "", **kwargs):
        super().__init__(page, base_url=base_url, **kwargs)
        self._username_input = self.element("username field", data_test("username"))
        self._password_input = self.element("password field", data_test("password"))
        self._login_button = self.element("login button", data_test("login-button"))
        self._error_message = self.element("error message", data_test("error"))
        # Only rendered once authenticated
        self._app_logo = self.element("app logo", "div.app_logo")

    @property
    def username_input(self) -> ElementReference:
        return self._username_input

    @property
    def password_input(self) -> ElementReference:
        return self._password_input

    @property
    def login_button(self) -> ElementReference:
        return self._login_button

    @property
    def error_message(self) -> ElementReference:
        return self._error_message

    @property
    def app_logo(self) -> ElementReference:
        return self._app_logo

    async def login(self, username: str, password: str) -> None:
        """
        Fill both fields and submit the form.

        Args:
            username: Username to type; may be empty
            password: Password to type; may be empty
        """
        # Not a decorator: decorated steps record arguments, password included
        with allure.step(f"Login (username={username!r})"):
            logger.info(
                f"Logging in as {username!r} "
                f"(password {mask_value('password', password)!r})"
            )
            await self.fill(self._username_input, username)
            await self.fill(self._password_input, password)
            await self.click(self._login_button)

    @allure.step("Verify login succeeded")
    async def verify_login(self) -> None:
        """
        Assert the post-login view is shown.

        Both the logo visibility and the URL are checked; the AssertionError
        lists every condition that failed.
        """
        failures: List[str] = []

        try:
            await expect(self._app_logo.locator).to_be_visible()
        except AssertionError as e:
            failures.append(f"{self._app_logo.name} not visible: {e}")

        current_url = self.page.url
        if INVENTORY_PATH_FRAGMENT not in current_url:
            failures.append(
                f"URL {current_url!r} does not contain {INVENTORY_PATH_FRAGMENT!r}"
            )

        if failures:
            message = "Login verification failed:\n" + "\n".join(f"  - {f}" for f in failures)
            logger.error(message)
            raise AssertionError(message)

        logger.info(f"Login verified at {current_url}")

    async def get_error_text(self) -> str:
        """Text of the error message; fails if it is not displayed."""
        return (await self.get_text(self._error_message)).strip()

    async def expect_outcome(self, outcome: ExpectedOutcome) -> None:
        """
        Assert an ExpectedOutcome against the live page.

        Raises:
            AssertionError: Observed state does not match
            ValueError: VISIBLE outcome names an unknown element
        """
        with allure.step(f"Expect {outcome.kind.value}: {outcome.value}"):
            if outcome.kind is OutcomeKind.URL:
                await expect(self.page).to_have_url(re.compile(outcome.value))
            elif outcome.kind is OutcomeKind.VISIBLE:
                element = getattr(self, outcome.value, None)
                if not isinstance(element, ElementReference):
                    raise ValueError(f"Unknown element for visibility check: {outcome.value}")
                await expect(element.locator).to_be_visible()
            elif outcome.kind is OutcomeKind.ERROR_TEXT:
                await expect(self._error_message.locator).to_contain_text(outcome.value)
            else:
                raise ValueError(f"Unsupported outcome kind: {outcome.kind}")
