"""
Contact Manager Backend — Declarative Request Validation
==========================================================

What:  Field-constraint checking for inbound request models, producing an
       ordered list of human-readable error messages.
How:   Each request type maps to an ordered tuple of `Rule`s. Every rule runs
       (no short-circuit) and failed rules contribute their message in
       declaration order.
Who:   Called by the contact routes after FastAPI has bound the payload.

Rule semantics:
    required  Fails on a missing value and on an empty or whitespace-only string.
    length    Skipped for a missing value; an empty string is measured, so an
              empty first name fails both `required` and `length`.
    shape     (email, phone) Skipped for missing or blank values; those are
              already reported by `required`.

The email shape is checked here rather than with pydantic's EmailStr because
the accepted set is the looser "one @ with text on both sides" rule (so `a@b`
passes), and a failure must surface as a rule message, not a binding error.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple, Type

from pydantic import BaseModel

from contact_manager.models.contact import (
    EMAIL_MAX_LENGTH,
    FIRST_NAME_MAX_LENGTH,
    LAST_NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
)
from contact_manager.schemas.contact import (
    CreateContactRequest,
    SearchContactRequest,
    UpdateContactRequest,
)

PHONE_MIN_LENGTH = 10
SEARCH_QUERY_MIN_LENGTH = 3
SEARCH_QUERY_MAX_LENGTH = 100

# Trailing extension such as "x123", "ext 45" or "ext.6"
_PHONE_EXTENSION = re.compile(r"\s*(?:ext\.?|x)\s*\d+$", re.IGNORECASE)
_PHONE_EXTRA_CHARS = "-.()"


class ValidationResult(NamedTuple):
    is_valid: bool
    errors: List[str]


@dataclass(frozen=True)
class Rule:
    """A single field constraint and the message reported when it fails."""

    field: str
    check: Callable[[Optional[str]], bool]
    message: str

    def passes(self, model: BaseModel) -> bool:
        return self.check(getattr(model, self.field, None))


# ══════════════════════════════════════════════════════════════════════════
# Checks
# ══════════════════════════════════════════════════════════════════════════


def is_present(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def length_between(minimum: int, maximum: int) -> Callable[[Optional[str]], bool]:
    def check(value: Optional[str]) -> bool:
        if value is None:
            return True
        return minimum <= len(value) <= maximum
    return check


def is_email(value: Optional[str]) -> bool:
    """
    Email shape: exactly one '@', neither first nor last, no line breaks.
    Deliverability is not checked.
    """
    if not is_present(value):
        return True
    if "\r" in value or "\n" in value:
        return False
    at = value.find("@")
    return 0 < at < len(value) - 1 and at == value.rfind("@")


def is_phone(value: Optional[str]) -> bool:
    """
    Phone shape: after dropping '+' signs and a trailing extension, at least
    one digit and only digits, whitespace and the characters - . ( ).
    """
    if not is_present(value):
        return True
    number = value.replace("+", "").rstrip()
    number = _PHONE_EXTENSION.sub("", number)
    if not any(c.isdigit() for c in number):
        return False
    return all(c.isdigit() or c.isspace() or c in _PHONE_EXTRA_CHARS for c in number)


def search_query_length(value: Optional[str]) -> bool:
    """Length of the trimmed query; an absent or blank query is allowed."""
    query = (value or "").strip()
    if not query:
        return True
    return SEARCH_QUERY_MIN_LENGTH <= len(query) <= SEARCH_QUERY_MAX_LENGTH


# ══════════════════════════════════════════════════════════════════════════
# Rule tables
# ══════════════════════════════════════════════════════════════════════════

CONTACT_RULES: Tuple[Rule, ...] = (
    Rule("first_name", is_present, "First name is required"),
    Rule(
        "first_name",
        length_between(1, FIRST_NAME_MAX_LENGTH),
        f"First name must be between 1 and {FIRST_NAME_MAX_LENGTH} characters",
    ),
    Rule("last_name", is_present, "Last name is required"),
    Rule(
        "last_name",
        length_between(1, LAST_NAME_MAX_LENGTH),
        f"Last name must be between 1 and {LAST_NAME_MAX_LENGTH} characters",
    ),
    Rule("email", is_present, "Email is required"),
    Rule("email", is_email, "Please provide a valid email address"),
    Rule(
        "email",
        length_between(0, EMAIL_MAX_LENGTH),
        f"Email must not exceed {EMAIL_MAX_LENGTH} characters",
    ),
    Rule("phone", is_present, "Phone number is required"),
    Rule("phone", is_phone, "Please provide a valid phone number"),
    Rule(
        "phone",
        length_between(PHONE_MIN_LENGTH, PHONE_MAX_LENGTH),
        f"Phone number must be between {PHONE_MIN_LENGTH} and {PHONE_MAX_LENGTH} characters",
    ),
)

SEARCH_RULES: Tuple[Rule, ...] = (
    Rule(
        "query",
        search_query_length,
        f"Search query must be between {SEARCH_QUERY_MIN_LENGTH} "
        f"and {SEARCH_QUERY_MAX_LENGTH} characters",
    ),
)

RULES_BY_MODEL: Dict[Type[BaseModel], Tuple[Rule, ...]] = {
    CreateContactRequest: CONTACT_RULES,
    UpdateContactRequest: CONTACT_RULES,
    SearchContactRequest: SEARCH_RULES,
}


def validate_model(model: BaseModel) -> ValidationResult:
    """
    Run every rule registered for the model's type.

    Returns:
        ValidationResult(is_valid, errors) with errors in rule order.

    Raises:
        TypeError: no rules are registered for the model's type.
    """
    rules = RULES_BY_MODEL.get(type(model))
    if rules is None:
        raise TypeError(f"No validation rules registered for {type(model).__name__}")

    errors = [rule.message for rule in rules if not rule.passes(model)]
    return ValidationResult(is_valid=not errors, errors=errors)
