"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser management, page objects and failure capture.

Key Features:
- One browser per worker process (session scope)
- A fresh BrowserContext + Page per test, closed on teardown, so scenarios
  never share cookies, storage or navigation state
- Screenshot + URL attached to Allure when a test fails

All async fixtures run on the session event loop; tests must be marked
`@pytest.mark.asyncio(loop_scope="session")`.

================================================================================
"""

from typing import AsyncGenerator, Dict

import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Page

from testsuites.ui_testing.data.login_data import LOGIN_SCENARIOS, LoginScenario
from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.page_base import capture_on_failure
from testsuites.ui_testing.pages.login_page import LoginPage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Launches one browser for the worker, reducing launch overhead.
    """
    manager = BrowserManager()
    await manager.start()
    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = await browser_manager.new_context()
    yield context
    await browser_manager.close_context(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(context: BrowserContext, request: pytest.FixtureRequest) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    On a failed test call, captures a screenshot before the page closes.
    """
    page = await context.new_page()
    yield page

    try:
        await capture_on_failure(page, request.node)
    except Exception as e:
        # Reporting must not mask the original test failure
        logger.warning(f"Failed to capture screenshot on failure: {e}")

    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page) -> LoginPage:
    """Provides LoginPage bound to this test's page."""
    return LoginPage(page)


@pytest.fixture
def login_scenarios() -> Dict[str, LoginScenario]:
    """Provides the login acceptance table."""
    return LOGIN_SCENARIOS


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item (`rep_setup`, `rep_call`)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
