"""
Contact Manager Backend — Abstract Contact Service Interface
==============================================================

What:  Abstract base class defining the contract between the API layer and
       whatever stores contacts.
How:   Concrete implementations inherit from ContactService and implement
       every operation. The routes only ever see this interface (injected via
       `get_contact_service`), so an in-memory implementation can stand in for
       the SQL-backed one in tests.

Implementations:
    - SqlContactService: async SQLAlchemy against the `contacts` table
    - (tests) InMemoryContactService: list-backed fake in tests/conftest.py
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from contact_manager.models.contact import Contact


def normalize_contact(contact: Contact) -> Contact:
    """
    Trim every text field and lower-case the email, in place.

    Applied by implementations before persisting a create or an update.
    """
    contact.first_name = contact.first_name.strip()
    contact.last_name = contact.last_name.strip()
    contact.email = contact.email.strip().lower()
    contact.phone = contact.phone.strip()
    return contact


class ContactService(ABC):
    """
    Contract:
        - Listings are ordered by first name, then last name
        - Absence is signalled with None (get_by_id, update) or False (delete),
          never with an exception
        - Store faults surface as DatabaseError; nothing is retried
    """

    @abstractmethod
    async def get_all(self) -> List[Contact]:
        """Every contact in canonical order."""
        ...

    @abstractmethod
    async def search(self, query: Optional[str]) -> List[Contact]:
        """
        Contacts matching every whitespace-separated term of `query`.

        A None, empty or whitespace-only query returns exactly what
        `get_all()` returns.
        """
        ...

    @abstractmethod
    async def get_by_id(self, contact_id: int) -> Optional[Contact]:
        """The contact with the given id, or None."""
        ...

    @abstractmethod
    async def create(self, contact: Contact) -> Contact:
        """
        Normalize and persist a new contact.

        Returns:
            The persisted entity including its store-assigned id (> 0).
        """
        ...

    @abstractmethod
    async def update(self, contact_id: int, contact: Contact) -> Optional[Contact]:
        """
        Overwrite all four fields of an existing contact.

        Returns:
            The updated entity (id unchanged), or None when no contact has
            `contact_id`. Nothing is written in that case.
        """
        ...

    @abstractmethod
    async def delete(self, contact_id: int) -> bool:
        """Hard-delete by id. Returns whether a row was actually removed."""
        ...
