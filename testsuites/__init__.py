"""
Test suites package.

This repository intentionally keeps `testsuites` importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - CI/CD module imports

Layout:
  - ui_testing/: page objects, framework and live login scenarios
  - unit/: framework tests that need no browser or network
"""
