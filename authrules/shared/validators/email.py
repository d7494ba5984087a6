"""Email address validation functions."""

from authrules.config.settings import settings


def validate_email_address(email: str) -> str:
    """Validate an email address against the configured email policy.

    Args:
        email: Email address to validate

    Returns:
        The validated email string

    Raises:
        ValueError: If the email violates the policy

    Examples:
        >>> validate_email_address("user@example.com")
        'user@example.com'
        >>> validate_email_address("not-an-email")
        Traceback (most recent call last):
        ...
        ValueError: Invalid email address

    """
    errors = settings.get_email_rules().validate(email)
    if errors:
        raise ValueError("; ".join(errors.messages()))
    return email
