"""
Contact Manager Backend — Contact Route Handlers
==================================================

What:  The /contacts HTTP surface (list, search, get, create, update, delete, ping).
How:   Each handler binds the request, runs domain validation, checks the id,
       calls the injected ContactService, and wraps the outcome in ApiResponse.
Who:   Called by the browser client's contact service module.

Request pipeline (every step before the service call is store-free):
    1. Model binding (FastAPI/pydantic)   → 400 per-field errors
    2. Domain validation (validation.py)  → 400 "Validation failed" + errors
    3. Id sanity (positive integer)       → 400 "Contact ID must be a positive integer"
    4. Service call                       → 500 on store fault (DatabaseError)
    5. Absence                            → 404 "Contact with ID {id} was not found"
    6. Success                            → 200 / 201 with envelope

Route order matters: /ping and /search are declared before /{contact_id}.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from contact_manager.exceptions import InvalidIdError, NotFoundError, ValidationError
from contact_manager.schemas.contact import (
    ApiResponse,
    ContactResponse,
    CreateContactRequest,
    SearchContactRequest,
    UpdateContactRequest,
)
from contact_manager.services.contact_base import ContactService
from contact_manager.services.contact_service import get_contact_service
from contact_manager.validation import validate_model

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contacts", tags=["Contacts"])

_ERROR_RESPONSES = {
    400: {"description": "Invalid request or contact ID", "model": ApiResponse[None]},
    500: {"description": "Server error", "model": ApiResponse[None]},
}
_NOT_FOUND_RESPONSE = {404: {"description": "Contact not found", "model": ApiResponse[None]}}


def _ensure_valid(request: BaseModel) -> None:
    result = validate_model(request)
    if not result.is_valid:
        logger.warning("Request validation failed: %s", ", ".join(result.errors))
        raise ValidationError(result.errors)


def _ensure_positive_id(contact_id: int) -> None:
    if contact_id <= 0:
        logger.warning("Invalid contact ID provided: %d", contact_id)
        raise InvalidIdError(contact_id)


def _not_found(contact_id: int) -> NotFoundError:
    logger.warning("Contact not found with ID: %d", contact_id)
    return NotFoundError(resource="Contact", resource_id=contact_id)


@router.get(
    "",
    response_model=ApiResponse[List[ContactResponse]],
    responses={500: _ERROR_RESPONSES[500]},
    summary="List all contacts",
    description="Returns every contact ordered by first name, then last name.",
)
async def list_contacts(
    service: ContactService = Depends(get_contact_service),
) -> ApiResponse[List[ContactResponse]]:
    logger.info("Getting all contacts")

    contacts = await service.get_all()

    logger.info("Retrieved %d contacts", len(contacts))
    return ApiResponse[List[ContactResponse]].success_result(
        ContactResponse.from_contacts(contacts),
        f"Retrieved {len(contacts)} contacts successfully",
    )


@router.get(
    "/ping",
    response_class=PlainTextResponse,
    summary="Liveness probe",
)
async def ping() -> str:
    logger.info("Ping received")
    return "Pong"


@router.get(
    "/search",
    response_model=ApiResponse[List[ContactResponse]],
    responses=_ERROR_RESPONSES,
    summary="Search contacts",
    description=(
        "Case-insensitive substring search over first name, last name and email. "
        "Every whitespace-separated term must match at least one field. "
        "An empty query returns the full list."
    ),
)
async def search_contacts(
    query: Optional[str] = Query(
        default=None,
        description="Free-text query (3-100 characters after trimming); omit for all contacts",
    ),
    service: ContactService = Depends(get_contact_service),
) -> ApiResponse[List[ContactResponse]]:
    search_request = SearchContactRequest(query=query)
    _ensure_valid(search_request)

    safe_query = search_request.safe_query()
    logger.info("Searching contacts with query: '%s'", safe_query)

    contacts = await service.search(safe_query)

    logger.info("Search returned %d contacts for query '%s'", len(contacts), safe_query)
    return ApiResponse[List[ContactResponse]].success_result(
        ContactResponse.from_contacts(contacts),
        f"Found {len(contacts)} contacts matching the search criteria",
    )


@router.get(
    "/{contact_id}",
    response_model=ApiResponse[ContactResponse],
    responses={**_ERROR_RESPONSES, **_NOT_FOUND_RESPONSE},
    summary="Get a single contact by ID",
)
async def get_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> ApiResponse[ContactResponse]:
    _ensure_positive_id(contact_id)
    logger.info("Getting contact with ID: %d", contact_id)

    contact = await service.get_by_id(contact_id)
    if contact is None:
        raise _not_found(contact_id)

    return ApiResponse[ContactResponse].success_result(
        ContactResponse.from_contact(contact),
        "Contact retrieved successfully",
    )


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[ContactResponse],
    responses={201: {"description": "Contact created"}, **_ERROR_RESPONSES},
    summary="Create a contact",
    description=(
        "Creates a contact from firstName, lastName, email and phone. "
        "Fields are trimmed and the email is lower-cased before storage."
    ),
)
async def create_contact(
    request: CreateContactRequest,
    response: Response,
    service: ContactService = Depends(get_contact_service),
) -> ApiResponse[ContactResponse]:
    _ensure_valid(request)

    logger.info("Creating new contact")
    created = await service.create(request.to_contact())

    response.headers["Location"] = f"{router.prefix}/{created.id}"
    logger.info("Created contact with ID: %d", created.id)

    return ApiResponse[ContactResponse].success_result(
        ContactResponse.from_contact(created),
        "Contact created successfully",
    )


@router.put(
    "/{contact_id}",
    response_model=ApiResponse[ContactResponse],
    responses={**_ERROR_RESPONSES, **_NOT_FOUND_RESPONSE},
    summary="Update a contact",
    description="Overwrites all fields of an existing contact. The ID from the path always wins.",
)
async def update_contact(
    contact_id: int,
    request: UpdateContactRequest,
    service: ContactService = Depends(get_contact_service),
) -> ApiResponse[ContactResponse]:
    _ensure_valid(request)
    _ensure_positive_id(contact_id)

    logger.info("Updating contact with ID: %d", contact_id)
    updated = await service.update(contact_id, request.to_contact(contact_id))
    if updated is None:
        raise _not_found(contact_id)

    logger.info("Updated contact with ID: %d", contact_id)
    return ApiResponse[ContactResponse].success_result(
        ContactResponse.from_contact(updated),
        "Contact updated successfully",
    )


@router.delete(
    "/{contact_id}",
    response_model=ApiResponse[None],
    responses={**_ERROR_RESPONSES, **_NOT_FOUND_RESPONSE},
    summary="Delete a contact",
)
async def delete_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> ApiResponse[None]:
    _ensure_positive_id(contact_id)

    logger.info("Deleting contact with ID: %d", contact_id)
    if not await service.delete(contact_id):
        raise _not_found(contact_id)

    logger.info("Deleted contact with ID: %d", contact_id)
    return ApiResponse[None].success_result(None, "Contact deleted successfully")
