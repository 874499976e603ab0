"""
Notes API - Notes Route Handlers
=================================

What:  Maps the five /notes routes onto NoteService methods.
How:   Extracts path/query/body parameters, delegates to NoteService, and
       sets the status code. No business logic lives here.
Who:   Called by any HTTP client of the API.

Routes:
    GET    /notes          list (optional ?title= substring filter)
    GET    /notes/{id}     read one
    POST   /notes          create → 201
    PUT    /notes/{id}     merge update
    DELETE /notes/{id}     delete → 204
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.note import (
    ErrorResponse,
    NoteCreate,
    NoteFilter,
    NoteResponse,
    NoteUpdate,
)
from app.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])

_NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[NoteResponse],
    summary="List notes",
)
async def list_notes(
    title: str | None = Query(
        default=None,
        description="Only return notes whose title contains this text",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    return await note_service.list_notes(db, NoteFilter(title=title))


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses=_NOT_FOUND,
    summary="Get a single note by ID",
)
async def get_note(
    note_id: int = Path(description="Note ID"),
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.get_note(db, note_id)


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """The store assigns the id; the created note is returned with it."""
    return await note_service.create_note(db, payload)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses=_NOT_FOUND,
    summary="Update a note",
    description=(
        "Partial update with merge semantics: fields present in the body "
        "overwrite the stored values, fields left out are kept."
    ),
)
async def update_note(
    payload: NoteUpdate,
    note_id: int = Path(description="Note ID"),
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.update_note(db, note_id, payload)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Delete a note",
)
async def delete_note(
    note_id: int = Path(description="Note ID"),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.delete_note(db, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
