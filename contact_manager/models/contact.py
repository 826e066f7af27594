"""
Contact Manager Backend — Contact SQLAlchemy Model
====================================================

What:  ORM model representing the `contacts` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by SqlContactService for CRUD operations and by Alembic for schema management.

Table Design:
    - Integer autoincrement primary key, assigned by the store on insert
    - Four required text columns with VARCHAR limits matching request validation
    - Composite index on (first_name, last_name) backing the canonical
      "ORDER BY first_name, last_name" used by every listing
"""

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from contact_manager.database import Base

FIRST_NAME_MAX_LENGTH = 64
LAST_NAME_MAX_LENGTH = 64
EMAIL_MAX_LENGTH = 256
PHONE_MAX_LENGTH = 256

# Largest value the 32-bit Integer id column can hold
CONTACT_ID_MAX = 2**31 - 1


class Contact(Base):
    """
    A named individual with an email address and a phone number.

    Lifecycle:
        1. Built from a create request with no id (transient)
        2. Inserted; the store assigns `id` (> 0), which never changes afterwards
        3. Overwritten in place by an update request (all four fields)
        4. Hard-deleted by a delete request (no tombstone)
    """

    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    first_name: Mapped[str] = mapped_column(
        String(FIRST_NAME_MAX_LENGTH),
        nullable=False,
    )

    last_name: Mapped[str] = mapped_column(
        String(LAST_NAME_MAX_LENGTH),
        nullable=False,
    )

    email: Mapped[str] = mapped_column(
        String(EMAIL_MAX_LENGTH),
        nullable=False,
    )

    phone: Mapped[str] = mapped_column(
        String(PHONE_MAX_LENGTH),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_contacts_name", "first_name", "last_name"),
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return (
            f"<Contact(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}')>"
        )
