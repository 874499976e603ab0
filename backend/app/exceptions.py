"""
Notes API - Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the error scenarios the API knows about.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right HTTP status.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    NotesAPIError (base)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error

Request body shape errors are not in this hierarchy: FastAPI rejects them
with 422 before any service code runs.
"""

from typing import Any, Dict, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API errors.

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


class NotFoundError(NotesAPIError):
    """
    Raised when a requested resource does not exist.

    When:  GET, PUT or DELETE /notes/{id} with an id that has no row.
    HTTP:  404 Not Found

    SQLAlchemy returns None for missing records; the service layer converts
    that None into this exception so routes never check for it.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(NotesAPIError):
    """
    Raised when a database operation fails unexpectedly.

    When:  Connection lost mid-query, constraint violation, locked database.
    HTTP:  500 Internal Server Error

    The message returned to the client is always generic. The underlying
    driver error is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
