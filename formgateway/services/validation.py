"""
Declarative field validation for form submissions.

A form declares a tuple of FieldRule objects. Each rule names the field,
the keys it may be read from, and an ordered list of constraints. Every
field is checked and every failing constraint produces its own
FieldViolation, in declaration order.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple
import re

from email_validator import validate_email, EmailNotValidError

from formgateway.models.forms import FieldViolation, ValidationOutcome

PHONE_PATTERN = r"^\+?[\d\s-]{10,}$"
YEARS_PATTERN = r"^\d{1,2}\+?$"


@dataclass(frozen=True)
class Required:
    message: str

    def check(self, value: str) -> Optional[str]:
        return self.message if not value else None


@dataclass(frozen=True)
class Length:
    min: int = 0
    max: Optional[int] = None
    message: str = ""

    def check(self, value: str) -> Optional[str]:
        if len(value) < self.min:
            return self.message
        if self.max is not None and len(value) > self.max:
            return self.message
        return None


@dataclass(frozen=True)
class Pattern:
    regex: str
    message: str

    def check(self, value: str) -> Optional[str]:
        return None if re.match(self.regex, value) else self.message


@dataclass(frozen=True)
class Email:
    """Syntax check; the validated value is trimmed and lowercased"""
    message: str

    def check(self, value: str) -> Optional[str]:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return self.message
        return None

    def normalize(self, value: str) -> str:
        return value.lower()


@dataclass(frozen=True)
class FieldRule:
    name: str
    label: str
    constraints: Tuple[Any, ...] = ()
    optional: bool = False
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def keys(self) -> Tuple[str, ...]:
        return (self.name,) + self.aliases


def required(name: str, label: str, min_length: int = 0, max_length: Optional[int] = None,
             message: Optional[str] = None, aliases: Tuple[str, ...] = ()) -> FieldRule:
    """Shorthand for the common "required text with bounds" rule"""
    constraints: List[Any] = [Required(message or f"{label} is required")]
    if min_length and max_length:
        constraints.append(Length(
            min_length, max_length,
            f"{label} must be between {min_length} and {max_length} characters",
        ))
    elif max_length:
        constraints.append(Length(0, max_length, f"{label} must not exceed {max_length} characters"))
    return FieldRule(name, label, tuple(constraints), aliases=aliases)


def optional(name: str, label: str, max_length: int) -> FieldRule:
    return FieldRule(
        name, label,
        (Length(0, max_length, f"{label} must not exceed {max_length} characters"),),
        optional=True,
    )


def email(name: str = "email", label: str = "Email") -> FieldRule:
    return FieldRule(name, label, (Email("Valid email is required"),))


def phone(name: str = "phone", label: str = "Phone") -> FieldRule:
    return FieldRule(name, label, (Pattern(PHONE_PATTERN, "Valid phone number is required"),))


def _read(raw: Mapping[str, Any], rule: FieldRule) -> Tuple[Optional[str], bool]:
    """
    Pull a field's value out of the raw body.

    Returns (value, ok). Missing keys and nulls read as "", numbers are
    stringified, anything else is not text and ok is False. The first
    non-blank of the rule's keys wins.
    """
    for key in rule.keys:
        value = raw.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            return None, False
        value = str(value).strip()
        if value:
            return value, True
    return "", True


def validate_submission(rules: Sequence[FieldRule], raw: Mapping[str, Any]) -> ValidationOutcome:
    """
    Validate a raw submission against a rule table.

    Args:
        rules: The form's field rules, in declaration order
        raw: Parsed request body

    Returns:
        ValidationOutcome with either the normalized record or every violation
    """
    record: Dict[str, str] = {}
    errors: List[FieldViolation] = []

    for rule in rules:
        value, ok = _read(raw, rule)
        if not ok:
            errors.append(FieldViolation(field=rule.name, message=f"{rule.label} must be text"))
            continue

        if rule.optional and not value:
            continue

        failed = False
        for constraint in rule.constraints:
            message = constraint.check(value)
            if message:
                errors.append(FieldViolation(field=rule.name, message=message))
                failed = True

        if failed:
            continue

        for constraint in rule.constraints:
            if hasattr(constraint, "normalize"):
                value = constraint.normalize(value)
        record[rule.name] = value

    if errors:
        return ValidationOutcome(errors=errors)
    return ValidationOutcome(record=record)
