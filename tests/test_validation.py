"""
Contact Manager Backend — Request Validation Tests
====================================================

What:  Tests for the declarative rule tables in contact_manager.validation.
How:   Pure functions over pydantic request models; no I/O.

What we test:
    ✅ Valid create/update requests produce no errors
    ✅ Required, length and shape rules with their exact messages
    ✅ Every failing rule is reported, in declaration order
    ✅ Search query length bounds (after trimming)
    ✅ Unregistered model types are rejected
"""

import pytest
from pydantic import BaseModel

from contact_manager.schemas.contact import (
    CreateContactRequest,
    SearchContactRequest,
    UpdateContactRequest,
)
from contact_manager.validation import is_email, is_phone, validate_model


def _create(**overrides) -> CreateContactRequest:
    fields = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane@example.com",
        "phone": "555-123-4567",
    }
    fields.update(overrides)
    return CreateContactRequest(**fields)


class TestContactRules:
    """Rules shared by create and update requests."""

    def test_valid_request_passes(self):
        result = validate_model(_create())
        assert result.is_valid
        assert result.errors == []

    def test_update_request_uses_same_rules(self):
        request = UpdateContactRequest(
            first_name="Jane", last_name="Doe", email="bad-email", phone="555-123-4567"
        )
        result = validate_model(request)
        assert result.errors == ["Please provide a valid email address"]

    def test_missing_first_name_reports_required_only(self):
        result = validate_model(_create(first_name=None))
        assert result.errors == ["First name is required"]

    def test_empty_first_name_reports_required_and_length(self):
        result = validate_model(_create(first_name=""))
        assert result.errors == [
            "First name is required",
            "First name must be between 1 and 64 characters",
        ]

    def test_whitespace_first_name_is_not_present(self):
        result = validate_model(_create(first_name="   "))
        assert "First name is required" in result.errors

    def test_first_name_length_bounds(self):
        assert validate_model(_create(first_name="J" * 64)).is_valid
        result = validate_model(_create(first_name="J" * 65))
        assert result.errors == ["First name must be between 1 and 64 characters"]

    def test_last_name_too_long(self):
        result = validate_model(_create(last_name="D" * 65))
        assert result.errors == ["Last name must be between 1 and 64 characters"]

    def test_email_too_long(self):
        email = "a" * 250 + "@x.com"  # 256 chars
        assert validate_model(_create(email=email)).is_valid
        result = validate_model(_create(email="a" + email))
        assert result.errors == ["Email must not exceed 256 characters"]

    def test_phone_too_short(self):
        result = validate_model(_create(phone="555-1234"))
        assert result.errors == ["Phone number must be between 10 and 256 characters"]

    def test_invalid_phone_characters(self):
        result = validate_model(_create(phone="555-CALL-NOW"))
        assert result.errors == ["Please provide a valid phone number"]

    def test_empty_payload_reports_every_required_field_in_order(self):
        result = validate_model(CreateContactRequest())
        assert not result.is_valid
        assert result.errors == [
            "First name is required",
            "Last name is required",
            "Email is required",
            "Phone number is required",
        ]

    def test_multiple_failures_are_all_reported(self):
        result = validate_model(_create(first_name=None, email="nope", phone="123"))
        assert result.errors == [
            "First name is required",
            "Please provide a valid email address",
            "Phone number must be between 10 and 256 characters",
        ]


class TestEmailShape:

    @pytest.mark.parametrize(
        "value",
        ["jane@example.com", "JANE.DOE@Example.COM", "a@b", "first+tag@sub.domain.org"],
    )
    def test_accepts(self, value):
        assert is_email(value)

    @pytest.mark.parametrize(
        "value",
        ["plainaddress", "@example.com", "jane@", "jane@@example.com", "a@b@c", "jane@ex\nample.com"],
    )
    def test_rejects(self, value):
        assert not is_email(value)

    def test_blank_left_to_required_rule(self):
        assert is_email(None)
        assert is_email("   ")


class TestPhoneShape:

    @pytest.mark.parametrize(
        "value",
        [
            "555-123-4567",
            "(555) 123-4567",
            "+1 555 123 4567",
            "555.123.4567",
            "555-123-4567 x89",
            "555-123-4567 ext. 12",
        ],
    )
    def test_accepts(self, value):
        assert is_phone(value)

    @pytest.mark.parametrize("value", ["call me maybe", "555-123-4567!", "---..()", "+"])
    def test_rejects(self, value):
        assert not is_phone(value)


class TestSearchRules:

    @pytest.mark.parametrize("query", [None, "", "   ", "abc", "q" * 100, "  jane  "])
    def test_accepted_queries(self, query):
        assert validate_model(SearchContactRequest(query=query)).is_valid

    @pytest.mark.parametrize("query", ["ab", " ab ", "q" * 101])
    def test_rejected_queries(self, query):
        result = validate_model(SearchContactRequest(query=query))
        assert result.errors == ["Search query must be between 3 and 100 characters"]

    def test_safe_query_trims(self):
        assert SearchContactRequest(query="  jane doe ").safe_query() == "jane doe"
        assert SearchContactRequest().safe_query() == ""


class TestUnregisteredModel:

    def test_unknown_type_raises_type_error(self):
        class Unrelated(BaseModel):
            value: str = "x"

        with pytest.raises(TypeError):
            validate_model(Unrelated())
