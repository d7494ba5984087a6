"""Field error types and configuration exceptions."""

from dataclasses import dataclass


class RulesConfigurationError(Exception):
    """Raised when a rule configuration is invalid or inconsistent."""

    pass


@dataclass(frozen=True, slots=True)
class FieldError:
    """A single validation failure attached to a named field.

    Attributes:
        name: Field name the error belongs to.
        message: Human-readable error message.

    """

    name: str
    message: str

    def __str__(self) -> str:
        return f"{self.name}: {self.message}"


class ErrorList(list[FieldError]):
    """Ordered collection of field errors.

    Errors keep the order in which the checks produced them. An empty list is
    falsy, so ``if errors:`` reads naturally at call sites.
    """

    def messages(self) -> list[str]:
        """Return the error messages in emission order."""
        return [error.message for error in self]

    def to_map(self) -> dict[str, list[str]]:
        """Group error messages by field name.

        Returns:
            Mapping of field name to its messages, in emission order.

        """
        grouped: dict[str, list[str]] = {}
        for error in self:
            grouped.setdefault(error.name, []).append(error.message)
        return grouped
