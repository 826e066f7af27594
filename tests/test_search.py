"""
Contact Manager Backend — Search Builder Tests
================================================

What:  Tests for query tokenization, the SQL filter and its Python twin.
"""

import pytest

from contact_manager.models.contact import Contact
from contact_manager.services.search import (
    build_search_filter,
    matches,
    safe_query,
    sort_key,
    tokenize,
)


def _contact(first: str, last: str, email: str) -> Contact:
    return Contact(first_name=first, last_name=last, email=email, phone="555-123-4567")


class TestTokenize:

    def test_splits_on_whitespace_runs(self):
        assert tokenize("  jane \t doe  ") == ["jane", "doe"]

    @pytest.mark.parametrize("query", [None, "", "    "])
    def test_blank_query_has_no_terms(self, query):
        assert tokenize(query) == []
        assert safe_query(query) == ""


class TestBuildSearchFilter:

    def test_blank_query_means_no_filter(self):
        assert build_search_filter("   ") is None

    def test_each_term_becomes_an_or_group(self):
        clause = str(build_search_filter("jane doe").compile())
        assert clause.count(" AND ") == 1
        assert clause.count(" OR ") == 4
        for column in ("first_name", "last_name", "email"):
            assert column in clause

    def test_terms_are_bound_parameters(self):
        compiled = build_search_filter("o'brien").compile()
        assert "o'brien" not in str(compiled)
        assert any("o'brien" in str(value) for value in compiled.params.values())


class TestMatches:

    def setup_method(self):
        self.jane = _contact("Jane", "Doe", "jane@example.com")
        self.john = _contact("John", "Smith", "jsmith@corp.org")

    def test_case_insensitive_substring(self):
        assert matches(self.jane, ["JAN"])
        assert matches(self.john, ["corp"])

    def test_every_term_must_match_some_field(self):
        assert matches(self.jane, ["jane", "doe"])
        assert not matches(self.jane, ["jane", "smith"])

    def test_terms_may_match_different_fields(self):
        assert matches(self.john, ["john", "corp.org"])

    def test_phone_is_not_searched(self):
        assert not matches(self.jane, ["555"])

    def test_no_terms_matches_everything(self):
        assert matches(self.jane, [])


def test_sort_key_orders_by_first_then_last_name():
    contacts = [
        _contact("John", "Smith", "a@x"),
        _contact("Alice", "Zed", "b@x"),
        _contact("Alice", "Adams", "c@x"),
    ]
    ordered = sorted(contacts, key=sort_key)
    assert [(c.first_name, c.last_name) for c in ordered] == [
        ("Alice", "Adams"),
        ("Alice", "Zed"),
        ("John", "Smith"),
    ]
