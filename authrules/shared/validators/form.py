"""Form-level validation across several fields."""

from collections.abc import Mapping, Sequence

from authrules.shared.validators.errors import ErrorList, FieldError, RulesConfigurationError
from authrules.shared.validators.rules import Rules


class FormValidator:
    """Validate submitted form values against a rule set per field.

    Confirmation pairs such as ``("password", "confirm_password")`` require
    the second field to repeat the first whenever the first is filled in.

    Example:
        >>> validator = FormValidator(
        ...     ruleset=[Rules.for_password(min_length=8)],
        ...     confirm_fields=[("password", "confirm_password")],
        ... )
        >>> validator.validate({"password": "longenough", "confirm_password": "other"}).to_map()
        {'confirm_password': ['Does not match password']}
    """

    def __init__(
        self,
        ruleset: Sequence[Rules],
        confirm_fields: Sequence[tuple[str, str]] = (),
    ):
        """Initialize the form validator.

        Args:
            ruleset: Rules for each validated field, applied in order
            confirm_fields: (field, confirmation field) pairs

        Raises:
            RulesConfigurationError: If two rule sets target the same field.

        """
        seen: set[str] = set()
        for rules in ruleset:
            if rules.field_name in seen:
                raise RulesConfigurationError(f"Duplicate rules for field: {rules.field_name}")
            seen.add(rules.field_name)

        self.ruleset = tuple(ruleset)
        self.confirm_fields = tuple(confirm_fields)

    def validate(self, values: Mapping[str, str]) -> ErrorList:
        """Validate form values.

        Missing fields are validated as empty strings. Field rule errors come
        first, followed by confirmation mismatches.

        Args:
            values: Submitted values keyed by field name

        Returns:
            ErrorList of violations, empty when the form is valid.

        """
        errors = ErrorList()

        for rules in self.ruleset:
            errors.extend(rules.validate(values.get(rules.field_name, "")))

        for field, confirm in self.confirm_fields:
            value = values.get(field, "")
            if not value:
                continue
            if values.get(confirm, "") != value:
                errors.append(FieldError(confirm, f"Does not match {field}"))

        return errors

    def is_valid(self, values: Mapping[str, str]) -> bool:
        """Return True if the form values produce no errors."""
        return not self.validate(values)

    def describe(self) -> dict[str, list[str]]:
        """Describe the active rules of every field that has any."""
        return {rules.field_name: described for rules in self.ruleset if (described := rules.describe())}
