"""
Contact Manager Backend — SQL Contact Service
===============================================

What:  ContactService implementation backed by the `contacts` table.
How:   Each operation opens its own AsyncSession from the injected session
       factory, runs parameterized statements, and releases the session on
       exit whether the operation succeeded or failed.
Who:   Injected into the contact routes through `get_contact_service`.

Statements:
    get_all    SELECT ... ORDER BY first_name, last_name
    search     SELECT ... WHERE <search filter> ORDER BY first_name, last_name
    get_by_id  SELECT ... WHERE id = :id (ids beyond the column range are absent)
    create     INSERT ... (id returned by the store, same transaction)
    update     SELECT ... WHERE id = :id, then UPDATE ... WHERE id = :id
    delete     DELETE FROM contacts WHERE id = :id

Error Handling:
    Any exception raised while talking to the store is logged with full
    detail and re-raised as DatabaseError carrying a caller-safe message.
    Nothing is retried.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from contact_manager.database import async_session_factory
from contact_manager.exceptions import DatabaseError
from contact_manager.models.contact import CONTACT_ID_MAX, Contact
from contact_manager.services.contact_base import ContactService, normalize_contact
from contact_manager.services.search import CANONICAL_ORDER, build_search_filter

logger = logging.getLogger(__name__)


def storable_id(contact_id: int) -> bool:
    """
    Whether the id column can hold `contact_id` at all.

    Larger ids cannot name a row; drivers reject them with overflow errors,
    so they are answered as absent without a round trip.
    """
    return 0 < contact_id <= CONTACT_ID_MAX


class SqlContactService(ContactService):
    """
    Stateless apart from the session factory; safe to share across requests.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self, failure_message: str, **context: Any) -> AsyncIterator[AsyncSession]:
        """
        Scoped session for one operation.

        Store faults inside the block become DatabaseError(failure_message);
        the session is closed on every path.
        """
        try:
            async with self._session_factory() as session:
                yield session
        except DatabaseError:
            raise
        except Exception as e:
            logger.error(
                "Database error (%s): %s | Context: %s",
                failure_message,
                str(e),
                context,
                exc_info=True,
            )
            raise DatabaseError(
                message=failure_message,
                context={**context, "error_type": type(e).__name__},
            ) from e

    async def get_all(self) -> List[Contact]:
        async with self._session("An error occurred while retrieving contacts") as session:
            result = await session.execute(select(Contact).order_by(*CANONICAL_ORDER))
            contacts = list(result.scalars().all())

        logger.debug("Loaded %d contacts", len(contacts))
        return contacts

    async def search(self, query: Optional[str]) -> List[Contact]:
        condition = build_search_filter(query)
        if condition is None:
            return await self.get_all()

        async with self._session(
            "An error occurred while searching contacts", query=query
        ) as session:
            result = await session.execute(
                select(Contact).where(condition).order_by(*CANONICAL_ORDER)
            )
            contacts = list(result.scalars().all())

        logger.debug("Search '%s' matched %d contacts", query, len(contacts))
        return contacts

    async def get_by_id(self, contact_id: int) -> Optional[Contact]:
        if not storable_id(contact_id):
            return None

        async with self._session(
            "An error occurred while retrieving the contact", contact_id=contact_id
        ) as session:
            return await session.get(Contact, contact_id)

    async def create(self, contact: Contact) -> Contact:
        normalize_contact(contact)

        async with self._session("An error occurred while creating the contact") as session:
            async with session.begin():
                session.add(contact)

        logger.info("Contact %d created", contact.id)
        return contact

    async def update(self, contact_id: int, contact: Contact) -> Optional[Contact]:
        normalize_contact(contact)
        if not storable_id(contact_id):
            logger.debug("Update skipped: contact %d does not exist", contact_id)
            return None

        async with self._session(
            "An error occurred while updating the contact", contact_id=contact_id
        ) as session:
            async with session.begin():
                existing = await session.get(Contact, contact_id)
                if existing is None:
                    logger.debug("Update skipped: contact %d does not exist", contact_id)
                    return None

                existing.first_name = contact.first_name
                existing.last_name = contact.last_name
                existing.email = contact.email
                existing.phone = contact.phone

        logger.info("Contact %d updated", contact_id)
        return existing

    async def delete(self, contact_id: int) -> bool:
        if not storable_id(contact_id):
            return False

        async with self._session(
            "An error occurred while deleting the contact", contact_id=contact_id
        ) as session:
            async with session.begin():
                result = await session.execute(
                    delete(Contact).where(Contact.id == contact_id)
                )

        deleted = result.rowcount > 0
        if deleted:
            logger.info("Contact %d deleted", contact_id)
        return deleted


# ── Singleton Instance ────────────────────────────────────────────────────
contact_service = SqlContactService(async_session_factory)


def get_contact_service() -> ContactService:
    """
    FastAPI dependency returning the active ContactService.

    Tests replace it through `app.dependency_overrides[get_contact_service]`.
    """
    return contact_service
