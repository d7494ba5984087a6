"""Password validation functions."""

from authrules.config.settings import settings


def validate_password_strength(password: str) -> str:
    """Validate password strength against the configured password policy.

    Default requirements:
    - Between 8 and 128 characters
    - At least one uppercase letter
    - At least one lowercase letter
    - At least one number

    Args:
        password: Password string to validate

    Returns:
        The validated password string

    Raises:
        ValueError: If password doesn't meet the policy, with every violation
            joined by "; "

    Examples:
        >>> validate_password_strength("SecurePass123")
        'SecurePass123'
        >>> validate_password_strength("weakpass1")
        Traceback (most recent call last):
        ...
        ValueError: Must contain at least 1 uppercase letter

    """
    errors = settings.get_password_rules().validate(password)
    if errors:
        raise ValueError("; ".join(errors.messages()))
    return password


def password_policy_hints() -> list[str]:
    """Describe the configured password policy for display to users."""
    return settings.get_password_rules().describe()
