"""
Contact Manager Backend — Test Configuration (conftest.py)
============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── contact_store: InMemoryContactService (no database needed)
    ├── sqlite_session_factory: session factory over a fresh SQLite file
    ├── sql_service: SqlContactService bound to that factory
    ├── contact_payload: a valid create/update request body
    ├── test_client: HTTPX AsyncClient with the in-memory store injected
    └── sql_client: HTTPX AsyncClient with SqlContactService injected
"""

import os
import tempfile
from typing import AsyncGenerator, List, Optional

# Point the application at SQLite BEFORE any contact_manager import
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="contacts_test_"), "test.db")
)
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from contact_manager.database import Base, create_session_factory
from contact_manager.models.contact import Contact
from contact_manager.services.contact_base import ContactService, normalize_contact
from contact_manager.services.contact_service import SqlContactService, get_contact_service
from contact_manager.services.search import matches, sort_key, tokenize


# ══════════════════════════════════════════════════════════════════════════
# In-memory ContactService
# ══════════════════════════════════════════════════════════════════════════


def _copy(contact: Contact) -> Contact:
    return Contact(
        id=contact.id,
        first_name=contact.first_name,
        last_name=contact.last_name,
        email=contact.email,
        phone=contact.phone,
    )


class InMemoryContactService(ContactService):
    """
    List-backed ContactService with the same ordering, search and
    normalization behavior as SqlContactService.

    `calls` records every operation name so tests can assert that rejected
    requests never reached the store.
    """

    def __init__(self):
        self._contacts: List[Contact] = []
        self._next_id = 1
        self.calls: List[str] = []

    async def get_all(self) -> List[Contact]:
        self.calls.append("get_all")
        return [_copy(c) for c in sorted(self._contacts, key=sort_key)]

    async def search(self, query: Optional[str]) -> List[Contact]:
        self.calls.append("search")
        terms = tokenize(query)
        return [
            _copy(c) for c in sorted(self._contacts, key=sort_key) if matches(c, terms)
        ]

    async def get_by_id(self, contact_id: int) -> Optional[Contact]:
        self.calls.append("get_by_id")
        existing = self._find(contact_id)
        return _copy(existing) if existing else None

    async def create(self, contact: Contact) -> Contact:
        self.calls.append("create")
        stored = normalize_contact(_copy(contact))
        stored.id = self._next_id
        self._next_id += 1
        self._contacts.append(stored)
        return _copy(stored)

    async def update(self, contact_id: int, contact: Contact) -> Optional[Contact]:
        self.calls.append("update")
        existing = self._find(contact_id)
        if existing is None:
            return None
        incoming = normalize_contact(_copy(contact))
        existing.first_name = incoming.first_name
        existing.last_name = incoming.last_name
        existing.email = incoming.email
        existing.phone = incoming.phone
        return _copy(existing)

    async def delete(self, contact_id: int) -> bool:
        self.calls.append("delete")
        existing = self._find(contact_id)
        if existing is None:
            return False
        self._contacts.remove(existing)
        return True

    def _find(self, contact_id: int) -> Optional[Contact]:
        return next((c for c in self._contacts if c.id == contact_id), None)


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════


@pytest.fixture
def contact_store() -> InMemoryContactService:
    return InMemoryContactService()


@pytest.fixture
def contact_payload():
    """A request body that passes every validation rule."""
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane.doe@example.com",
        "phone": "555-123-4567",
    }


@pytest_asyncio.fixture
async def sqlite_session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """
    Session factory over a fresh SQLite database with the contacts table created.

    Each test gets its own file, so ids always start at 1.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'contacts.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield create_session_factory(engine)

    await engine.dispose()


@pytest.fixture
def sql_service(sqlite_session_factory) -> SqlContactService:
    return SqlContactService(sqlite_session_factory)


@pytest_asyncio.fixture
async def test_client(contact_store):
    """
    HTTPX AsyncClient talking to the FastAPI app through ASGITransport,
    with the in-memory store injected in place of the SQL service.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/contacts")
            assert response.status_code == 200
    """
    from contact_manager.main import app

    app.dependency_overrides[get_contact_service] = lambda: contact_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def sql_client(sql_service):
    """Like `test_client`, but backed by SqlContactService over a fresh SQLite file."""
    from contact_manager.main import app

    app.dependency_overrides[get_contact_service] = lambda: sql_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
