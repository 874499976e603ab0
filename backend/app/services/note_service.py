"""
Notes API - Note Service (Business Logic)
==========================================

What:  CRUD operations on notes, independent of HTTP concerns.
How:   Each method performs one ORM round trip (plus an existence check for
       update/delete) against the session it is given.
Who:   Called by route handlers in app/routes/notes.py.

Operations:
    list_notes   SELECT ... [WHERE title LIKE '%<title>%'] ORDER BY id
    get_note     SELECT ... WHERE id = :id        → NotFoundError if absent
    create_note  INSERT                           → returns row with its id
    update_note  get → merge sent keys → UPDATE   → NotFoundError if absent
    delete_note  get → DELETE                     → NotFoundError if absent

Concurrency:
    update_note is a read-modify-write without optimistic locking. Two
    clients updating the same note concurrently race, and the last flush
    wins. Nothing here detects that.

NoteService is stateless: it receives the request's AsyncSession on every
call and never commits. The session dependency (get_db_session) owns the
transaction boundary.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError
from app.models.note import Note
from app.schemas.note import NoteCreate, NoteFilter, NoteResponse, NoteUpdate

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Error Handling Strategy:
        A missing row becomes NotFoundError. SQLAlchemy failures are logged
        with their original type and re-raised as DatabaseError, which the
        global handler turns into a generic 500.
    """

    async def list_notes(
        self,
        db: AsyncSession,
        filters: Optional[NoteFilter] = None,
    ) -> List[NoteResponse]:
        """
        List all notes, optionally restricted by a title substring.

        Args:
            db: Async database session
            filters: Optional filter; a non-empty `title` keeps only notes
                     whose title contains it. LIKE wildcards in the input are
                     escaped, so "50%" matches the literal text "50%".

        Returns:
            Notes in id order. No pagination.
        """
        query = select(Note).order_by(Note.id)
        if filters is not None and filters.title:
            query = query.where(Note.title.contains(filters.title, autoescape=True))

        try:
            result = await db.execute(query)
            notes = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        logger.debug("Listed %d notes (filter=%r)", len(notes), filters)
        return [NoteResponse.model_validate(note) for note in notes]

    async def get_note(self, db: AsyncSession, note_id: int) -> NoteResponse:
        """
        Retrieve a single note by ID.

        Raises:
            NotFoundError: Note with given ID does not exist (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        note = await self._get_or_404(db, note_id)
        return NoteResponse.model_validate(note)

    async def create_note(self, db: AsyncSession, data: NoteCreate) -> NoteResponse:
        """
        Persist a new note built from the caller's attributes.

        The flush assigns the id without committing; the commit happens in
        get_db_session once the response is ready.
        """
        note = Note(**data.model_dump())
        try:
            db.add(note)
            await db.flush()
            await db.refresh(note)
        except SQLAlchemyError as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the note. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Note created: %s", note.id)
        return NoteResponse.model_validate(note)

    async def update_note(
        self,
        db: AsyncSession,
        note_id: int,
        data: NoteUpdate,
    ) -> NoteResponse:
        """
        Merge the sent fields over an existing note.

        Only keys present in the request body are applied; everything else
        keeps its stored value. An empty body leaves the note unchanged.

        Raises:
            NotFoundError: Note with given ID does not exist (→ 404)
        """
        note = await self._get_or_404(db, note_id)

        changes = data.model_dump(exclude_unset=True)
        if not changes:
            return NoteResponse.model_validate(note)

        for field, value in changes.items():
            setattr(note, field, value)

        try:
            await db.flush()
            await db.refresh(note)
        except SQLAlchemyError as e:
            logger.error("Database error updating note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            ) from e

        logger.info("Note %s updated: %s", note_id, ", ".join(sorted(changes)))
        return NoteResponse.model_validate(note)

    async def delete_note(self, db: AsyncSession, note_id: int) -> None:
        """
        Delete a note by ID.

        Raises:
            NotFoundError: Note with given ID does not exist (→ 404)
        """
        note = await self._get_or_404(db, note_id)
        try:
            await db.delete(note)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            ) from e

        logger.info("Note deleted: %s", note_id)

    async def _get_or_404(self, db: AsyncSession, note_id: int) -> Note:
        """Fetch the ORM row or raise NotFoundError."""
        try:
            result = await db.execute(select(Note).where(Note.id == note_id))
            note = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": note_id},
            ) from e

        if note is None:
            raise NotFoundError(resource="Note", resource_id=str(note_id))
        return note


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
