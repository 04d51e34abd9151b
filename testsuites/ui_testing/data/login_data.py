"""
================================================================================
Login Scenario Data
================================================================================

Credentials and expected outcomes for the login scenarios.

Each scenario pairs one set of credentials with the single observable
outcome it must produce. Values are literal; nothing here validates
credentials, which is the application's job.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


class OutcomeKind(str, Enum):
    """What an ExpectedOutcome is compared against."""

    URL = "url"                 # value is a regex the page URL must match
    VISIBLE = "visible"         # value is the name of a LoginPage element
    ERROR_TEXT = "error_text"   # value is a substring of the error message


@dataclass(frozen=True)
class Credentials:
    """Username/password pair. Empty strings are valid input."""

    username: str
    password: str = field(repr=False)

    @property
    def masked(self) -> str:
        return f"{self.username!r} / {'*' * len(self.password)}"


@dataclass(frozen=True)
class ExpectedOutcome:
    """The condition a scenario asserts after logging in."""

    kind: OutcomeKind
    value: str

    @classmethod
    def url_matches(cls, pattern: str) -> "ExpectedOutcome":
        return cls(OutcomeKind.URL, pattern)

    @classmethod
    def element_visible(cls, element_name: str) -> "ExpectedOutcome":
        return cls(OutcomeKind.VISIBLE, element_name)

    @classmethod
    def error_contains(cls, text: str) -> "ExpectedOutcome":
        return cls(OutcomeKind.ERROR_TEXT, text)


@dataclass(frozen=True)
class LoginScenario:
    name: str
    credentials: Credentials
    expected: ExpectedOutcome


# Post-login landing page
INVENTORY_URL_PATTERN = r"inventory\.html"
INVENTORY_PATH_FRAGMENT = "inventory"

# Error messages rendered by the login form
ERROR_CREDENTIALS_MISMATCH = "Username and password do not match"
ERROR_USERNAME_REQUIRED = "Username is required"
ERROR_LOCKED_OUT = "locked out"

VALID_USER = Credentials("standard_user", "secret_sauce")
INVALID_USER = Credentials("invalid_user", "wrong_pass")
EMPTY_USER = Credentials("", "")
LOCKED_OUT_USER = Credentials("locked_out_user", "secret_sauce")

LOGIN_SCENARIOS: Dict[str, LoginScenario] = {
    "valid_login": LoginScenario(
        name="Valid login",
        credentials=VALID_USER,
        expected=ExpectedOutcome.url_matches(INVENTORY_URL_PATTERN),
    ),
    "invalid_login": LoginScenario(
        name="Invalid login",
        credentials=INVALID_USER,
        expected=ExpectedOutcome.error_contains(ERROR_CREDENTIALS_MISMATCH),
    ),
    "empty_credentials": LoginScenario(
        name="Empty username and password",
        credentials=EMPTY_USER,
        expected=ExpectedOutcome.error_contains(ERROR_USERNAME_REQUIRED),
    ),
    "locked_out_user": LoginScenario(
        name="Locked out user",
        credentials=LOCKED_OUT_USER,
        expected=ExpectedOutcome.error_contains(ERROR_LOCKED_OUT),
    ),
}


__all__ = [
    "OutcomeKind",
    "Credentials",
    "ExpectedOutcome",
    "LoginScenario",
    "LOGIN_SCENARIOS",
    "INVENTORY_URL_PATTERN",
    "INVENTORY_PATH_FRAGMENT",
    "ERROR_CREDENTIALS_MISMATCH",
    "ERROR_USERNAME_REQUIRED",
    "ERROR_LOCKED_OUT",
    "VALID_USER",
    "INVALID_USER",
    "EMPTY_USER",
    "LOCKED_OUT_USER",
]
