"""
Contact Manager Backend — Search Query Builder
================================================

What:  Turns a free-text query into a contact filter.
How:   The trimmed query is split on whitespace runs into terms. Each term
       becomes an OR-group of case-insensitive substring matches over
       first name, last name and email; all groups are AND-ed together.

           "jane doe"  →  (first ⊇ jane OR last ⊇ jane OR email ⊇ jane)
                          AND
                          (first ⊇ doe  OR last ⊇ doe  OR email ⊇ doe)

       An empty or whitespace-only query yields no filter (full listing).
Who:   SqlContactService uses the SQL filter. `matches` and `sort_key` are
       the same predicate and ordering in plain Python, for ContactService
       implementations that keep contacts in memory (the test suite's fake
       is one); tests check they select exactly what the SQL filter selects.

Query plan:
    SELECT ... FROM contacts
    WHERE (lower(first_name) LIKE lower(:p0) ESCAPE '/' OR ...) AND (...)
    ORDER BY first_name, last_name
    Terms are always bound parameters; LIKE wildcards inside a term are
    escaped so "%" and "_" match literally.
"""

from typing import Iterable, List, Optional, Tuple

from sqlalchemy import ColumnElement, and_, or_

from contact_manager.models.contact import Contact

# Columns a search term may match, in display order
SEARCH_COLUMNS = (Contact.first_name, Contact.last_name, Contact.email)

# Canonical result ordering for every listing
CANONICAL_ORDER = (Contact.first_name.asc(), Contact.last_name.asc())


def safe_query(raw: Optional[str]) -> str:
    """Trimmed form of a raw search string; empty when absent."""
    return (raw or "").strip()


def tokenize(query: Optional[str]) -> List[str]:
    """Split a query on whitespace runs, dropping empty tokens."""
    return safe_query(query).split()


def term_condition(term: str) -> ColumnElement[bool]:
    """OR-group matching one term against every searchable column."""
    return or_(*(column.icontains(term, autoescape=True) for column in SEARCH_COLUMNS))


def build_search_filter(query: Optional[str]) -> Optional[ColumnElement[bool]]:
    """
    Build the WHERE clause for a free-text query.

    Returns:
        None when the query has no terms ("no filter"), otherwise the AND of
        one OR-group per term.
    """
    terms = tokenize(query)
    if not terms:
        return None
    return and_(*(term_condition(term) for term in terms))


def _searchable_values(contact: Contact) -> Tuple[str, ...]:
    return tuple((value or "").lower() for value in (contact.first_name, contact.last_name, contact.email))


def matches(contact: Contact, terms: Iterable[str]) -> bool:
    """
    Python evaluation of the same predicate as `build_search_filter`.

    Every term must be a case-insensitive substring of at least one of the
    contact's first name, last name or email.
    """
    values = _searchable_values(contact)
    return all(any(term.lower() in value for value in values) for term in terms)


def sort_key(contact: Contact) -> Tuple[str, str]:
    """Python equivalent of CANONICAL_ORDER."""
    return (contact.first_name, contact.last_name)
