# Services package init
"""
Contact Manager Backend — Services Layer
==========================================

What:  Contact persistence and search, between routes (HTTP) and the store.

Service Inventory:
    - ContactService (abstract, contact_base.py): the operations routes depend on
    - SqlContactService (contact_service.py): SQLAlchemy implementation
    - search.py: query tokenization and the multi-term search predicate

Routes receive the service through FastAPI dependency injection
(`get_contact_service`), so tests can substitute an in-memory fake.
"""
