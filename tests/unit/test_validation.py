from __future__ import annotations

import pytest

from employee_directory.client.validation import (
    EMPLOYEE_RULES,
    RuleKind,
    sanitize_phone,
    validate_field,
    validate_form,
)


VALID_RECORD = {
    "name": "Jane Doe",
    "email": "jane.doe@acme.io",
    "position": "Engineer",
    "phone": "5551234567",
    "department": "Platform",
}


def test_name_length_boundaries():
    assert validate_field("name", "Al") is None
    assert validate_field("name", "A") == "Name must be at least 2 characters"
    assert validate_field("name", "A" * 50) is None
    assert validate_field("name", "A" * 51) == "Name must not exceed 50 characters"


def test_name_is_trimmed_before_length_check():
    assert validate_field("name", "  A  ") == "Name must be at least 2 characters"
    assert validate_field("name", "  Al  ") is None


def test_name_rejects_non_letters():
    assert validate_field("name", "R2 D2") == "Name can only contain letters and spaces"
    assert validate_field("name", "Mary Jane Watson") is None


def test_required_fields_treat_blank_and_none_as_missing():
    assert validate_field("name", "") == "Name is required"
    assert validate_field("name", "   ") == "Name is required"
    assert validate_field("name", None) == "Name is required"
    assert validate_field("email", None) == "Email is required"
    assert validate_field("position", "") == "Position is required"


def test_email_syntax():
    assert validate_field("email", "not-an-email") == "Please enter a valid email address"
    assert validate_field("email", "a@b.com") is None


@pytest.mark.parametrize("email", ["dev@foo.test", "admin@corp.local", "a@localhost", "a@b"])
def test_email_accepts_intranet_and_dotless_domains(email):
    assert validate_field("email", email) is None


@pytest.mark.parametrize("email", ["not-an-email", "a@", "@b.com", "a b@c.com", "a@@b.com"])
def test_email_rejects_malformed_addresses(email):
    assert validate_field("email", email) == "Please enter a valid email address"


def test_email_length_checked_before_syntax():
    long_email = "a" * 95 + "@b.com"
    assert validate_field("email", long_email) == "Email must not exceed 100 characters"


def test_phone_is_optional_but_exactly_ten_digits():
    assert validate_field("phone", "") is None
    assert validate_field("phone", None) is None
    assert validate_field("phone", "12345") == "Phone number must be exactly 10 digits"
    assert validate_field("phone", "123456789012") == "Phone number must be exactly 10 digits"
    assert validate_field("phone", "555-123-4567") == "Phone number must be exactly 10 digits"
    assert validate_field("phone", "5551234567") is None


def test_department_is_optional_with_length_bounds():
    assert validate_field("department", "") is None
    assert validate_field("department", "X") == "Department must be at least 2 characters"
    assert validate_field("department", "D" * 51) == "Department must not exceed 50 characters"
    assert validate_field("department", "HR") is None


def test_position_length_bounds():
    assert validate_field("position", "X") == "Position must be at least 2 characters"
    assert validate_field("position", "P" * 51) == "Position must not exceed 50 characters"


def test_unknown_field_raises():
    with pytest.raises(ValueError):
        validate_field("salary", "100")


def test_validate_form_reports_only_the_empty_name():
    result = validate_form(
        {"name": "", "email": "a@b.com", "position": "Eng", "phone": "", "department": ""}
    )
    assert result.is_valid is False
    assert result.errors == {"name": "Name is required"}


def test_validate_form_collects_every_error():
    result = validate_form(
        {"name": "J", "email": "nope", "position": "", "phone": "123", "department": "X"}
    )
    assert result.is_valid is False
    assert set(result.errors) == {"name", "email", "position", "phone", "department"}


def test_validate_form_accepts_valid_record():
    result = validate_form(VALID_RECORD)
    assert result.is_valid is True
    assert result.errors == {}


def test_validate_form_treats_missing_keys_as_absent():
    result = validate_form({"name": "Jane Doe", "email": "jane@acme.io", "position": "Engineer"})
    assert result.is_valid is True


def test_rule_table_declares_required_before_shape_rules():
    order = [RuleKind.REQUIRED, RuleKind.MIN_LENGTH, RuleKind.MAX_LENGTH, RuleKind.PATTERN, RuleKind.EMAIL]
    for rules in EMPLOYEE_RULES.values():
        positions = [order.index(rule.kind) for rule in rules]
        assert positions == sorted(positions)


def test_sanitize_phone_strips_non_digits():
    assert sanitize_phone("(555) 123-4567") == "5551234567"
    assert sanitize_phone(None) == ""
