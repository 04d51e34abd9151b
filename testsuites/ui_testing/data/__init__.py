"""Test data for UI scenarios."""

from .login_data import Credentials, ExpectedOutcome, LoginScenario, LOGIN_SCENARIOS, OutcomeKind

__all__ = [
    "Credentials",
    "ExpectedOutcome",
    "LoginScenario",
    "LOGIN_SCENARIOS",
    "OutcomeKind",
]
