"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework.

Components:
    - element_ref: Named, lazily-resolved element references
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle and per-scenario isolation
    - config_loader: YAML/env configuration and Loguru setup

Author: Automation Team
License: MIT
================================================================================
"""

from .element_ref import ElementReference, ElementNotFoundError, UIFrameworkError, data_test
from .page_base import BasePage, NavigationError
from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, ConfigurationError, init_logger

__all__ = [
    "ElementReference",
    "ElementNotFoundError",
    "UIFrameworkError",
    "data_test",
    "BasePage",
    "NavigationError",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "init_logger",
]
