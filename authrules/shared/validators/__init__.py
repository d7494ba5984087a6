"""Shared validators package for the application.

This package contains the rule-based field validation used across features
and schemas.

Available validators:
- rules.py: Rule sets, character tallying and the email shape check
- errors.py: Field error types
- form.py: Multi-field validation with confirmation fields
- password.py: Password policy validation
- username.py: Username policy validation
- email.py: Email policy validation
"""

from authrules.shared.validators.errors import ErrorList, FieldError, RulesConfigurationError
from authrules.shared.validators.form import FormValidator
from authrules.shared.validators.rules import CharacterTally, Rules, ShapeCheck, is_email_address, tally_characters

__all__ = [
    "CharacterTally",
    "ErrorList",
    "FieldError",
    "FormValidator",
    "Rules",
    "RulesConfigurationError",
    "ShapeCheck",
    "is_email_address",
    "tally_characters",
]
