"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers, initializes logging and tags tests by directory.

================================================================================
"""

from pathlib import Path

import pytest

from testsuites.ui_testing.framework.config_loader import ConfigLoader, init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers and logging."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against the live application"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI tests driving a real browser"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests with no browser or network"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )

    init_logger()


def pytest_collection_modifyitems(config, items):
    """Tag collected tests by the directory they live in."""
    for item in items:
        parts = Path(str(item.fspath)).parts
        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)
        if "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    base_url = ConfigLoader().get("ui.base_url", "https://www.saucedemo.com")
    return [
        "",
        "=" * 60,
        "SauceDemo Login UI Suite",
        f"Target: {base_url}",
        "=" * 60,
        "",
    ]
