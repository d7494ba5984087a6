"""Rule sets for validating free-form string fields.

A ``Rules`` instance describes what a valid value looks like for one field
(length bounds, minimum character-class counts, whitespace policy and a shape
check) and turns a candidate string into an ordered list of field errors.
Messages are English only, with a plain "s" suffix for plurals.

Usage:
    rules = Rules.for_password(min_length=8, min_upper=1, min_numeric=1)

    errors = rules.validate("abc")
    # [FieldError(name='password', message='Must be at least 8 characters'), ...]

    rules.describe()
    # ['Must be at least 8 characters', 'Must contain at least 1 uppercase letter', ...]
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from email_validator import validate_email

from authrules.shared.validators.errors import ErrorList, FieldError, RulesConfigurationError

logger = logging.getLogger(__name__)

BLANK_MESSAGE = "Cannot be blank"
INVALID_VALUE_MESSAGE = "Invalid value"
INVALID_EMAIL_MESSAGE = "Invalid email address"
NO_WHITESPACE_MESSAGE = "No whitespace permitted"

# Control characters str.isspace() reports as whitespace; tallied as symbols
INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


class ShapeCheck(StrEnum):
    """Content check applied before length and character-class checks."""

    CUSTOM = "custom"  # caller-supplied predicate
    REGEX = "regex"  # match_pattern, when one is set
    EMAIL = "email"  # single email address


@dataclass(frozen=True, slots=True)
class CharacterTally:
    """Counts of each character class in a string.

    Letters that are not uppercase (titlecase, modifier and uncased letters
    such as CJK ideographs) are counted as lowercase.
    """

    upper: int = 0
    lower: int = 0
    numeric: int = 0
    symbols: int = 0
    whitespace: int = 0

    @property
    def letters(self) -> int:
        return self.upper + self.lower


def tally_characters(value: str) -> CharacterTally:
    """Count uppercase, lowercase, numeric, symbol and whitespace characters.

    Classification is Unicode aware. Symbols are everything that is not a
    letter, decimal digit or whitespace, including punctuation, control
    characters and combining marks.

    Args:
        value: String to classify

    Returns:
        CharacterTally with the counts.

    """
    upper = lower = numeric = symbols = whitespace = 0
    for char in value:
        if char.isalpha():
            if char.isupper():
                upper += 1
            else:
                lower += 1
        elif char.isdecimal():
            numeric += 1
        elif char.isspace() and char not in INFORMATION_SEPARATORS:
            whitespace += 1
        else:
            symbols += 1
    return CharacterTally(upper=upper, lower=lower, numeric=numeric, symbols=symbols, whitespace=whitespace)


def is_email_address(candidate: str) -> bool:
    """Check that a string parses as a single email address.

    Uses the email-validator library without deliverability checks. Quoted
    local parts, domain literals, special-use domains and the display name
    form ``"Jane <jane@example.com>"`` are accepted; address lists are not.

    Args:
        candidate: String to check

    Returns:
        True if the parser accepts the string as one address.

    """
    try:
        validate_email(
            candidate,
            check_deliverability=False,
            allow_display_name=True,
            allow_quoted_local=True,
            allow_domain_literal=True,
            globally_deliverable=False,
            test_environment=True,
        )
    except ValueError:
        # EmailNotValidError, and codec errors raised on malformed input
        return False
    return True


def _count_message(count: int, noun: str) -> str:
    if count <= 0:
        return ""
    message = f"Must contain at least {count} {noun}"
    if count > 1:
        message += "s"
    return message


@dataclass(frozen=True, slots=True)
class Rules:
    """Validation rules for a single string field.

    Attributes:
        field_name: Name attached to every error produced
        required: Reject empty or whitespace-only values
        match_pattern: Regex used by the regex shape check (strings are compiled)
        match_error_text: Message emitted when match_pattern does not match
        min_length: Minimum length in UTF-8 bytes (0 = unbounded)
        max_length: Maximum length in UTF-8 bytes (0 = unbounded)
        min_letters: Minimum number of letters
        min_upper: Minimum number of uppercase letters
        min_lower: Minimum number of lowercase letters
        min_numeric: Minimum number of digits
        min_symbols: Minimum number of symbols
        allow_whitespace: Permit whitespace characters
        custom_validator: Predicate replacing the regex and email shape checks
        use_regex_validation: Use match_pattern instead of the email shape check

    Raises:
        RulesConfigurationError: If the configuration is inconsistent.

    """

    field_name: str
    required: bool = False
    match_pattern: re.Pattern[str] | str | None = None
    match_error_text: str = ""
    min_length: int = 0
    max_length: int = 0
    min_letters: int = 0
    min_upper: int = 0
    min_lower: int = 0
    min_numeric: int = 0
    min_symbols: int = 0
    allow_whitespace: bool = False
    custom_validator: Callable[[str], bool] | None = None
    use_regex_validation: bool = False

    def __post_init__(self) -> None:
        """Compile the match pattern and check thresholds.

        Raises:
            RulesConfigurationError: If any threshold is negative, the length
                bounds are inverted, or the pattern is unusable.

        """
        for name in ("min_length", "max_length", "min_letters", "min_upper", "min_lower", "min_numeric", "min_symbols"):
            if getattr(self, name) < 0:
                raise RulesConfigurationError(f"{self.field_name}: {name} cannot be negative")

        if self.min_length > 0 and self.max_length > 0 and self.min_length > self.max_length:
            raise RulesConfigurationError(
                f"{self.field_name}: min_length ({self.min_length}) exceeds max_length ({self.max_length})"
            )

        if isinstance(self.match_pattern, str):
            try:
                # Use object.__setattr__ because dataclass is frozen
                object.__setattr__(self, "match_pattern", re.compile(self.match_pattern))
            except re.error as exc:
                raise RulesConfigurationError(
                    f"{self.field_name}: invalid match pattern: {self.match_pattern}"
                ) from exc

        if self.match_pattern is not None and not self.match_error_text:
            raise RulesConfigurationError(f"{self.field_name}: match_error_text is required with match_pattern")

        if self.custom_validator is not None and not callable(self.custom_validator):
            raise RulesConfigurationError(f"{self.field_name}: custom_validator must be callable")

    @property
    def shape_check(self) -> ShapeCheck:
        """Shape check in effect: custom validator, then regex flag, then email."""
        if self.custom_validator is not None:
            return ShapeCheck.CUSTOM
        if self.use_regex_validation:
            return ShapeCheck.REGEX
        return ShapeCheck.EMAIL

    def validate(self, candidate: str) -> ErrorList:
        """Validate a candidate string against every rule.

        A required field that is blank yields the single "Cannot be blank"
        error. Otherwise all checks run and every violation is reported, in
        this order: shape, length, letters, uppercase, lowercase, numbers,
        symbols, whitespace.

        Args:
            candidate: String to validate (may be empty)

        Returns:
            ErrorList of violations, empty when the candidate is valid.

        """
        errors = ErrorList()

        if self.required and not candidate.strip():
            errors.append(FieldError(self.field_name, BLANK_MESSAGE))
            return errors

        shape_error = self._shape_error(candidate)
        if shape_error is not None:
            errors.append(FieldError(self.field_name, shape_error))

        length = len(candidate.encode("utf-8", "surrogatepass"))
        if (self.min_length > 0 and length < self.min_length) or (self.max_length > 0 and length > self.max_length):
            errors.append(FieldError(self.field_name, self._length_message()))

        tally = tally_characters(candidate)
        checks = (
            (tally.letters < self.min_letters, self._letters_message),
            (tally.upper < self.min_upper, self._upper_message),
            (tally.lower < self.min_lower, self._lower_message),
            (tally.numeric < self.min_numeric, self._numeric_message),
            (tally.symbols < self.min_symbols, self._symbols_message),
        )
        for failed, message in checks:
            if failed:
                errors.append(FieldError(self.field_name, message()))

        if not self.allow_whitespace and tally.whitespace > 0:
            errors.append(FieldError(self.field_name, NO_WHITESPACE_MESSAGE))

        return errors

    def is_valid(self, candidate: str) -> bool:
        """Return True if the candidate produces no errors."""
        return not self.validate(candidate)

    def describe(self) -> list[str]:
        """Describe the active rules, for showing policy hints to users.

        Returns:
            Messages for the match pattern, length, letter, uppercase,
            lowercase, number and symbol rules that are set, in that order.

        """
        descriptions = []
        if self.match_pattern is not None:
            descriptions.append(self.match_error_text)
        for message in (
            self._length_message(),
            self._letters_message(),
            self._upper_message(),
            self._lower_message(),
            self._numeric_message(),
            self._symbols_message(),
        ):
            if message:
                descriptions.append(message)
        return descriptions

    def log_configuration(self) -> None:
        """Log the effective rules for this field.

        Candidate values are never logged.
        """
        described = "; ".join(self.describe()) or "none"
        logger.info(
            f"Validation rules for '{self.field_name}':\n"
            f"  Required: {self.required}\n"
            f"  Shape check: {self.shape_check.value}\n"
            f"  Whitespace allowed: {self.allow_whitespace}\n"
            f"  Rules: {described}"
        )

    def _shape_error(self, candidate: str) -> str | None:
        match self.shape_check:
            case ShapeCheck.CUSTOM:
                if not self.custom_validator(candidate):
                    return INVALID_VALUE_MESSAGE
            case ShapeCheck.REGEX:
                if self.match_pattern is not None and not self.match_pattern.search(candidate):
                    return self.match_error_text
            case ShapeCheck.EMAIL:
                if not is_email_address(candidate):
                    return INVALID_EMAIL_MESSAGE
        return None

    def _length_message(self) -> str:
        if self.min_length > 0 and self.max_length > 0:
            return f"Must be between {self.min_length} and {self.max_length} characters"
        if self.min_length > 0:
            message = f"Must be at least {self.min_length} character"
            return message + "s" if self.min_length > 1 else message
        if self.max_length > 0:
            message = f"Must be at most {self.max_length} character"
            return message + "s" if self.max_length > 1 else message
        return ""

    def _letters_message(self) -> str:
        return _count_message(self.min_letters, "letter")

    def _upper_message(self) -> str:
        return _count_message(self.min_upper, "uppercase letter")

    def _lower_message(self) -> str:
        return _count_message(self.min_lower, "lowercase letter")

    def _numeric_message(self) -> str:
        return _count_message(self.min_numeric, "number")

    def _symbols_message(self) -> str:
        return _count_message(self.min_symbols, "symbol")

    @staticmethod
    def for_password(
        field_name: str = "password",
        min_length: int = 8,
        max_length: int = 0,
        min_letters: int = 0,
        min_upper: int = 0,
        min_lower: int = 0,
        min_numeric: int = 0,
        min_symbols: int = 0,
        allow_whitespace: bool = True,
    ) -> "Rules":
        """Create rules for a password field.

        Passwords have no shape check; only length and character classes apply.

        Returns:
            Rules instance.

        """
        return Rules(
            field_name=field_name,
            required=True,
            min_length=min_length,
            max_length=max_length,
            min_letters=min_letters,
            min_upper=min_upper,
            min_lower=min_lower,
            min_numeric=min_numeric,
            min_symbols=min_symbols,
            allow_whitespace=allow_whitespace,
            use_regex_validation=True,
        )

    @staticmethod
    def for_username(
        field_name: str = "username",
        min_length: int = 3,
        max_length: int = 50,
        match_pattern: re.Pattern[str] | str | None = None,
        match_error_text: str = "",
    ) -> "Rules":
        """Create rules for a username field.

        Usernames are checked against match_pattern (when given) and may not
        contain whitespace.

        Returns:
            Rules instance

        Raises:
            RulesConfigurationError: If the pattern is invalid.

        """
        return Rules(
            field_name=field_name,
            required=True,
            match_pattern=match_pattern,
            match_error_text=match_error_text,
            min_length=min_length,
            max_length=max_length,
            allow_whitespace=False,
            use_regex_validation=True,
        )

    @staticmethod
    def for_email(field_name: str = "email", max_length: int = 255) -> "Rules":
        """Create rules for an email address field.

        Returns:
            Rules instance.

        """
        return Rules(
            field_name=field_name,
            required=True,
            max_length=max_length,
            allow_whitespace=False,
        )
