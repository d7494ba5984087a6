"""Test configuration and fixtures.

Shared rule sets used across the validator, settings and schema tests.
"""

import pytest

from authrules.config.settings import Settings
from authrules.shared.validators.rules import Rules


@pytest.fixture
def password_rules() -> Rules:
    """Password rules requiring 8+ characters, an uppercase letter and a number."""
    return Rules(
        field_name="password",
        required=True,
        min_length=8,
        min_upper=1,
        min_numeric=1,
        allow_whitespace=True,
        use_regex_validation=True,
    )


@pytest.fixture
def email_rules() -> Rules:
    """Rules using the default email shape check."""
    return Rules(field_name="email", allow_whitespace=True)


@pytest.fixture
def make_settings(monkeypatch):
    """Factory fixture to build settings from environment overrides.

    Usage:
        settings = make_settings(PASSWORD_MIN_LENGTH="12")

    The .env file is ignored so only the given overrides apply.
    """

    def _factory(**env: str) -> Settings:
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return Settings(_env_file=None)

    return _factory
