"""
Notes API - Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract between clients and backend.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and describe them in the OpenAPI document.
Who:   Used by route handlers as request/response types and by NoteService
       as its return type.

Schemas are separate from SQLAlchemy models: the API contract controls
exactly which fields a client may send or will receive.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models - What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    What:  Body of POST /notes.
    Who:   Passed to NoteService.create_note().
    """
    title: str = Field(min_length=1, max_length=255, description="Note title")
    content: Optional[str] = Field(default=None, description="Free-form note body")


class NoteUpdate(BaseModel):
    """
    What:  Body of PUT /notes/{id}.
    How:   Every field is optional. The service applies only the keys the
           client actually sent (model_dump(exclude_unset=True)), so a field
           left out keeps its stored value.

    Sending `"content": null` clears the body. Sending `"title": null` is
    rejected because every note must keep a title.
    """
    title: Optional[str] = Field(
        default=None, min_length=1, max_length=255, description="New title"
    )
    content: Optional[str] = Field(default=None, description="New body (null clears it)")

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        """Rejects an explicit null title; omitted titles never reach this validator."""
        if v is None:
            raise ValueError("title may be omitted but cannot be null")
        return v


class NoteFilter(BaseModel):
    """
    What:  Optional filter for GET /notes.
    How:   A non-empty `title` restricts the list to notes whose title
           contains it as a substring. Empty or missing means no filter.
    """
    title: Optional[str] = Field(default=None, description="Substring to match in the title")


# ══════════════════════════════════════════════════════════════════════════
# Response Models - What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """Full representation of a stored note."""
    id: int = Field(description="Store-assigned note identifier")
    title: str = Field(description="Note title")
    content: Optional[str] = Field(default=None, description="Note body")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the note was last modified (UTC ISO 8601)")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "not_found", "server_error")
        message: Human-readable description
        details: Optional extra context
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "not_found",
            "message": "Note with ID '42' was not found",
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
