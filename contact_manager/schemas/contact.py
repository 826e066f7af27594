"""
Contact Manager Backend — Pydantic Request/Response Schemas
=============================================================

What:  Pydantic models defining the API contract between the browser client
       and the backend.
How:   FastAPI binds request bodies and query strings to the request models,
       serializes responses through the envelope, and generates OpenAPI docs.
Who:   Used by route handlers, the validation module, and the contact service.

Wire format:
    JSON keys are camelCase (firstName, lastName, ...). Models accept either
    the camelCase alias or the snake_case field name on input.

Binding vs. validation:
    Request fields are declared Optional[str] so that missing or empty values
    reach the domain validation rules (contact_manager.validation), which
    produce the user-facing messages. Pydantic itself only rejects payloads
    that are structurally wrong (not an object, non-string values).
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from contact_manager.models.contact import Contact

T = TypeVar("T")

_CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class CreateContactRequest(BaseModel):
    """
    What:  Body of POST /contacts.
    Rules: see contact_manager.validation.CONTACT_RULES.
    """
    first_name: Optional[str] = Field(default=None, description="Given name (1-64 characters)")
    last_name: Optional[str] = Field(default=None, description="Family name (1-64 characters)")
    email: Optional[str] = Field(default=None, description="Email address (max 256 characters)")
    phone: Optional[str] = Field(default=None, description="Phone number (10-256 characters)")

    model_config = _CAMEL_CONFIG

    def to_contact(self) -> Contact:
        """Builds a transient Contact (no id) from the validated request."""
        return Contact(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
        )


class UpdateContactRequest(CreateContactRequest):
    """
    What:  Body of PUT /contacts/{id}.
    The id always comes from the path; an `id` key in the body is ignored.
    """

    def to_contact(self, contact_id: Optional[int] = None) -> Contact:
        contact = super().to_contact()
        if contact_id is not None:
            contact.id = contact_id
        return contact


class SearchContactRequest(BaseModel):
    """
    What:  Query string of GET /contacts/search.
    An absent or blank query means "no filter" (full listing).
    """
    query: Optional[str] = Field(default=None, description="Free-text search (3-100 characters)")

    def safe_query(self) -> str:
        """The trimmed query; empty string when absent."""
        return (self.query or "").strip()


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class ContactResponse(BaseModel):
    """
    What:  Public representation of a persisted contact.
    Who:   Returned (inside the envelope) by every contact endpoint.
    """
    id: int = Field(description="Server-assigned contact identifier")
    first_name: str = Field(description="Given name")
    last_name: str = Field(description="Family name")
    email: str = Field(description="Email address (lower-cased)")
    phone: str = Field(description="Phone number")

    model_config = {**_CAMEL_CONFIG, "from_attributes": True}

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactResponse":
        return cls.model_validate(contact)

    @classmethod
    def from_contacts(cls, contacts: List[Contact]) -> List["ContactResponse"]:
        return [cls.from_contact(contact) for contact in contacts]


class ApiResponse(BaseModel, Generic[T]):
    """
    What:  Uniform envelope around every JSON response.

    Fields:
        success: True for 2xx outcomes, False otherwise
        data:    Payload (contact, list of contacts) or null
        message: Single human-readable message (success text, not-found, bad id)
        errors:  List of validation messages, null when not a validation failure

    Example (validation failure):
        {
            "success": false,
            "data": null,
            "message": "Validation failed",
            "errors": ["Please provide a valid email address"]
        }
    """
    success: bool = Field(description="Whether the request succeeded")
    data: Optional[T] = Field(default=None, description="Response payload")
    message: Optional[str] = Field(default=None, description="Human-readable message")
    errors: Optional[List[str]] = Field(default=None, description="Validation error messages")

    @classmethod
    def success_result(cls, data: Optional[T], message: Optional[str] = None) -> "ApiResponse[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def error_result(cls, message: str, errors: Optional[List[str]] = None) -> "ApiResponse[T]":
        return cls(success=False, message=message, errors=errors)

    @classmethod
    def validation_error_result(cls, errors: List[str]) -> "ApiResponse[T]":
        return cls(success=False, message="Validation failed", errors=errors)


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health for monitoring and container probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

    model_config = _CAMEL_CONFIG
