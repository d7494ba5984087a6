"""Tests for form-level validation."""

import pytest

from authrules.shared.validators.errors import ErrorList, FieldError, RulesConfigurationError
from authrules.shared.validators.form import FormValidator
from authrules.shared.validators.rules import Rules


@pytest.fixture
def register_form() -> FormValidator:
    """Registration form with email, username and password rules."""
    return FormValidator(
        ruleset=[
            Rules.for_email(),
            Rules.for_username(match_pattern=r"^[a-z0-9]+$", match_error_text="Letters and numbers only"),
            Rules.for_password(min_length=8, min_numeric=1),
        ],
        confirm_fields=[("password", "confirm_password")],
    )


class TestFormValidator:
    """Test multi-field validation."""

    def test_valid_form(self, register_form):
        """Test a complete valid form has no errors."""
        values = {
            "email": "user@example.com",
            "username": "alice",
            "password": "password1",
            "confirm_password": "password1",
        }
        assert register_form.validate(values) == []
        assert register_form.is_valid(values)

    def test_missing_fields_are_blank(self, register_form):
        """Test missing fields are validated as empty strings."""
        errors = register_form.validate({})
        assert errors.to_map() == {
            "email": ["Cannot be blank"],
            "username": ["Cannot be blank"],
            "password": ["Cannot be blank"],
        }

    def test_confirm_mismatch_reported_last(self, register_form):
        """Test confirmation mismatches follow field errors."""
        errors = register_form.validate(
            {
                "email": "user@example.com",
                "username": "Alice",
                "password": "password1",
                "confirm_password": "password2",
            }
        )
        assert errors == [
            FieldError("username", "Letters and numbers only"),
            FieldError("confirm_password", "Does not match password"),
        ]

    def test_empty_confirm_reported(self, register_form):
        """Test an empty confirmation is a mismatch."""
        errors = register_form.validate(
            {"email": "user@example.com", "username": "alice", "password": "password1"}
        )
        assert errors == [FieldError("confirm_password", "Does not match password")]

    def test_confirm_skipped_when_field_empty(self):
        """Test no confirmation error is reported when the main field is empty."""
        form = FormValidator(ruleset=[], confirm_fields=[("password", "confirm_password")])
        assert form.validate({"password": "", "confirm_password": "x"}) == []

    def test_duplicate_field_rules_rejected(self):
        """Test two rule sets for one field are rejected."""
        with pytest.raises(RulesConfigurationError, match="Duplicate rules for field: password"):
            FormValidator(ruleset=[Rules.for_password(), Rules.for_password()])

    def test_describe(self, register_form):
        """Test descriptions are grouped by field."""
        assert register_form.describe() == {
            "email": ["Must be at most 255 characters"],
            "username": ["Letters and numbers only", "Must be between 3 and 50 characters"],
            "password": ["Must be at least 8 characters", "Must contain at least 1 number"],
        }


class TestErrorList:
    """Test error list helpers."""

    def test_to_map_groups_by_field(self):
        """Test messages are grouped per field in order."""
        errors = ErrorList(
            [
                FieldError("password", "Must be at least 8 characters"),
                FieldError("email", "Invalid email address"),
                FieldError("password", "Must contain at least 1 number"),
            ]
        )
        assert errors.to_map() == {
            "password": ["Must be at least 8 characters", "Must contain at least 1 number"],
            "email": ["Invalid email address"],
        }

    def test_empty_list_is_falsy(self):
        """Test an empty error list is falsy."""
        assert not ErrorList()

    def test_field_error_str(self):
        """Test field errors render as 'name: message'."""
        assert str(FieldError("email", "Invalid email address")) == "email: Invalid email address"
