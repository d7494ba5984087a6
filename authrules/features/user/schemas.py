"""User schemas (DTOs)."""

from pydantic import BaseModel, Field, field_validator

from authrules.shared.validators.email import validate_email_address
from authrules.shared.validators.password import validate_password_strength
from authrules.shared.validators.username import validate_username


# Request schemas
class UserRegisterRequest(BaseModel):
    """User registration request."""

    email: str
    username: str
    full_name: str = Field(..., min_length=1, max_length=200)
    password: str
    confirm_password: str

    @field_validator("email")
    @classmethod
    def email_format(cls, value: str) -> str:
        """Validate email using shared validator."""
        return validate_email_address(value)

    @field_validator("username")
    @classmethod
    def username_format(cls, value: str) -> str:
        """Validate username using shared validator."""
        return validate_username(value)

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        """Validate password strength using shared validator."""
        return validate_password_strength(value)

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value, info):
        """Validate that password and confirm_password match."""
        if "password" in info.data and value != info.data["password"]:
            raise ValueError("Passwords do not match")
        return value


class PasswordChangeRequest(BaseModel):
    """Password change request."""

    current_password: str = Field(..., min_length=1)
    new_password: str
    confirm_new_password: str

    @field_validator("new_password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        """Validate password strength using shared validator."""
        return validate_password_strength(value)

    @field_validator("confirm_new_password")
    @classmethod
    def passwords_match(cls, value, info):
        """Validate that new_password and confirm_new_password match."""
        if "new_password" in info.data and value != info.data["new_password"]:
            raise ValueError("New passwords do not match")
        return value
