"""
Contact Manager Backend — Custom Exception Hierarchy
======================================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the standard response envelope with the matching status code.
Who:   Raised by routes and services; caught by global handlers.
When:  During request processing when an expected failure occurs.

Exception Hierarchy:
    ContactManagerError (base)  → 500 Internal Server Error
    ├── ValidationError         → 400 Bad Request (errors list)
    ├── InvalidIdError          → 400 Bad Request (fixed message)
    ├── NotFoundError           → 404 Not Found
    └── DatabaseError           → 500 Internal Server Error (context logged only)
"""

from typing import Any, Dict, List, Optional


class ContactManagerError(Exception):
    """
    Base exception for all Contact Manager application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ContactManagerError):
    """
    Raised when a request payload violates declared field constraints.

    HTTP:    400 Bad Request

    Example response:
        {
            "success": false,
            "data": null,
            "message": "Validation failed",
            "errors": ["First name is required"]
        }
    """

    def __init__(
        self,
        errors: List[str],
        message: str = "Validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.errors = list(errors)


class InvalidIdError(ContactManagerError):
    """
    Raised when a non-positive contact ID is supplied.

    HTTP:    400 Bad Request
    Checked before any store access.
    """

    def __init__(
        self,
        contact_id: int,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["contact_id"] = contact_id
        super().__init__(message="Contact ID must be a positive integer", context=ctx)
        self.contact_id = contact_id


class NotFoundError(ContactManagerError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found
    The service layer signals absence with None/False; routes convert that
    into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(ContactManagerError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always a caller-safe summary
        of the failed operation. Driver errors, SQL and connection details
        go into `context` and are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
