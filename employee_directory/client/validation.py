"""Field rules for employee records.

The rules are plain data: every field maps to an ordered tuple of ``Rule``
records and a single evaluator walks them. For each field only the first
violated rule is reported.
"""
import enum
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

import email_validator
from email_validator import EmailNotValidError, validate_email


class RuleKind(enum.Enum):
    REQUIRED = "required"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    PATTERN = "pattern"
    EMAIL = "email"


@dataclass(frozen=True)
class Rule:
    kind: RuleKind
    message: str
    param: Any = None


@dataclass
class ValidationResult:
    is_valid: bool
    errors: Dict[str, str] = field(default_factory=dict)


EMPLOYEE_RULES: Dict[str, Tuple[Rule, ...]] = {
    "name": (
        Rule(RuleKind.REQUIRED, "Name is required"),
        Rule(RuleKind.MIN_LENGTH, "Name must be at least 2 characters", 2),
        Rule(RuleKind.MAX_LENGTH, "Name must not exceed 50 characters", 50),
        Rule(RuleKind.PATTERN, "Name can only contain letters and spaces", re.compile(r"[a-zA-Z\s]+")),
    ),
    "email": (
        Rule(RuleKind.REQUIRED, "Email is required"),
        Rule(RuleKind.MAX_LENGTH, "Email must not exceed 100 characters", 100),
        Rule(RuleKind.EMAIL, "Please enter a valid email address"),
    ),
    "position": (
        Rule(RuleKind.REQUIRED, "Position is required"),
        Rule(RuleKind.MIN_LENGTH, "Position must be at least 2 characters", 2),
        Rule(RuleKind.MAX_LENGTH, "Position must not exceed 50 characters", 50),
    ),
    "phone": (
        Rule(RuleKind.PATTERN, "Phone number must be exactly 10 digits", re.compile(r"[0-9]{10}")),
    ),
    "department": (
        Rule(RuleKind.MIN_LENGTH, "Department must be at least 2 characters", 2),
        Rule(RuleKind.MAX_LENGTH, "Department must not exceed 50 characters", 50),
    ),
}


# Directory addresses may live on intranet hosts; only the syntax is checked
for _name in ("local", "localhost"):
    if _name in email_validator.SPECIAL_USE_DOMAIN_NAMES:
        email_validator.SPECIAL_USE_DOMAIN_NAMES.remove(_name)


def _is_valid_email(value: str) -> bool:
    try:
        validate_email(
            value,
            check_deliverability=False,
            test_environment=True,
            globally_deliverable=False,
        )
    except EmailNotValidError:
        return False
    return True


def _passes(rule: Rule, value: str) -> bool:
    if rule.kind is RuleKind.REQUIRED:
        return bool(value)
    if rule.kind is RuleKind.MIN_LENGTH:
        return len(value) >= rule.param
    if rule.kind is RuleKind.MAX_LENGTH:
        return len(value) <= rule.param
    if rule.kind is RuleKind.PATTERN:
        return rule.param.fullmatch(value) is not None
    if rule.kind is RuleKind.EMAIL:
        return _is_valid_email(value)
    raise ValueError(f"Unsupported rule kind: {rule.kind}")


def _evaluate(rules: Tuple[Rule, ...], value: Any) -> Optional[str]:
    text = "" if value is None else str(value).strip()
    if not text:
        # Absent values only fail a REQUIRED rule; optional fields pass
        required = next((rule for rule in rules if rule.kind is RuleKind.REQUIRED), None)
        return required.message if required else None

    for rule in rules:
        if not _passes(rule, text):
            return rule.message
    return None


def validate_field(field_name: str, value: Any) -> Optional[str]:
    """Return the error message for one field, or None when the value is valid."""
    try:
        rules = EMPLOYEE_RULES[field_name]
    except KeyError:
        raise ValueError(f"Unknown employee field: {field_name}") from None
    return _evaluate(rules, value)


def validate_form(record: Mapping[str, Any]) -> ValidationResult:
    """Validate every field at once and collect all errors."""
    errors = {}
    for field_name, rules in EMPLOYEE_RULES.items():
        message = _evaluate(rules, record.get(field_name))
        if message:
            errors[field_name] = message
    return ValidationResult(is_valid=not errors, errors=errors)


def sanitize_phone(value: Optional[str]) -> str:
    """Keep only the digits of a phone input; run before validation."""
    if not value:
        return ""
    return re.sub(r"\D", "", str(value))
