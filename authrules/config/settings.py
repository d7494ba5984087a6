"""Application settings and configuration."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from authrules.shared.validators.errors import RulesConfigurationError
from authrules.shared.validators.rules import Rules

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application (hardcoded constants)
    app_name: str = "Auth Rules"
    app_version: str = "0.1.0"

    # Environment-specific settings
    environment: str = "development"  # development, staging, production

    # Logging
    log_level: str = "INFO"

    # Password policy
    password_min_length: int = 8
    password_max_length: int = 128
    password_min_letters: int = 0
    password_min_upper: int = 1
    password_min_lower: int = 1
    password_min_numeric: int = 1
    password_min_symbols: int = 0
    password_allow_whitespace: bool = True

    # Username policy
    username_min_length: int = 3
    username_max_length: int = 50
    username_pattern: str = r"^[a-zA-Z0-9._-]+$"
    username_pattern_error: str = "Must contain only letters, numbers, dots, hyphens and underscores"

    # Email policy
    email_max_length: int = 255

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "staging", "production"}
        env = str(v).lower()
        if env not in valid_envs:
            raise ValueError(f"Environment must be one of {valid_envs}, got {env}")
        return env

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = str(v).upper()
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}, got {level}")
        return level

    def get_password_rules(self) -> Rules:
        """Get password rules from the configured policy.

        Returns:
            Rules instance

        Raises:
            RulesConfigurationError: If the password policy is invalid.

        """
        try:
            return Rules.for_password(
                min_length=self.password_min_length,
                max_length=self.password_max_length,
                min_letters=self.password_min_letters,
                min_upper=self.password_min_upper,
                min_lower=self.password_min_lower,
                min_numeric=self.password_min_numeric,
                min_symbols=self.password_min_symbols,
                allow_whitespace=self.password_allow_whitespace,
            )
        except RulesConfigurationError as exc:
            logger.error(f"Failed to create password rules: {exc}")
            raise

    def get_username_rules(self) -> Rules:
        """Get username rules from the configured policy.

        Returns:
            Rules instance

        Raises:
            RulesConfigurationError: If the username policy is invalid.

        """
        try:
            return Rules.for_username(
                min_length=self.username_min_length,
                max_length=self.username_max_length,
                match_pattern=self.username_pattern or None,
                match_error_text=self.username_pattern_error,
            )
        except RulesConfigurationError as exc:
            logger.error(f"Failed to create username rules: {exc}")
            raise

    def get_email_rules(self) -> Rules:
        """Get email rules from the configured policy.

        Returns:
            Rules instance

        Raises:
            RulesConfigurationError: If the email policy is invalid.

        """
        try:
            return Rules.for_email(max_length=self.email_max_length)
        except RulesConfigurationError as exc:
            logger.error(f"Failed to create email rules: {exc}")
            raise


settings = Settings()
