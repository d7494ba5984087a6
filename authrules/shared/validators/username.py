"""Username validation functions."""

from authrules.config.settings import settings


def validate_username(username: str) -> str:
    """Validate a username against the configured username policy.

    Args:
        username: Username to validate

    Returns:
        The validated username

    Raises:
        ValueError: If the username violates the policy

    """
    errors = settings.get_username_rules().validate(username)
    if errors:
        raise ValueError("; ".join(errors.messages()))
    return username
