"""
Notes API - Note Service Tests
===============================

What:  Tests for NoteService business logic (list, get, create, update, delete).
How:   Unit tests use a mock session; integration tests run against an
       in-memory SQLite database.

What we test:
    ✅ Missing ids raise NotFoundError for get, update and delete
    ✅ Driver errors surface as DatabaseError
    ✅ Create assigns an id and round-trips through get
    ✅ Update merges only the fields that were sent
    ✅ Delete is durable
    ✅ Title filter returns exactly the matching subset
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.exceptions import DatabaseError, NotFoundError
from app.schemas.note import NoteCreate, NoteFilter, NoteUpdate
from app.services.note_service import NoteService


def _result_with(note):
    result = MagicMock()
    result.scalar_one_or_none.return_value = note
    return result


class TestNoteServiceUnit:
    """NoteService against a mocked session."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_get_note_found(self, mock_db_session):
        """Existing note should come back as a NoteResponse."""
        now = datetime.now(timezone.utc)
        mock_note = MagicMock()
        mock_note.id = 7
        mock_note.title = "groceries"
        mock_note.content = "milk"
        mock_note.created_at = now
        mock_note.updated_at = now
        mock_db_session.execute.return_value = _result_with(mock_note)

        result = await self.service.get_note(mock_db_session, 7)

        assert result.id == 7
        assert result.title == "groceries"
        assert result.content == "milk"

    @pytest.mark.asyncio
    async def test_get_note_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError, match="Note with ID '99' was not found"):
            await self.service.get_note(mock_db_session, 99)

    @pytest.mark.asyncio
    async def test_update_note_not_found_does_not_flush(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError):
            await self.service.update_note(mock_db_session, 3, NoteUpdate(title="x"))

        mock_db_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_note_not_found_does_not_delete(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError):
            await self.service.delete_note(mock_db_session, 3)

        mock_db_session.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_list_notes_database_failure(self, mock_db_session):
        """Driver errors are wrapped so the client never sees SQL details."""
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT ...", {}, Exception("database is locked"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_notes(mock_db_session)

        assert exc_info.value.context["error_type"] == "OperationalError"

    @pytest.mark.asyncio
    async def test_create_note_flush_failure(self, mock_db_session):
        mock_db_session.flush = AsyncMock(
            side_effect=OperationalError("INSERT ...", {}, Exception("disk I/O error"))
        )

        with pytest.raises(DatabaseError):
            await self.service.create_note(mock_db_session, NoteCreate(title="t"))


class TestNoteServiceIntegration:
    """NoteService against a real in-memory SQLite database."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_create_then_get(self, db_session):
        created = await self.service.create_note(
            db_session, NoteCreate(title="shopping", content="eggs")
        )

        assert created.id is not None
        assert created.created_at.tzinfo is not None
        assert created.created_at.utcoffset().total_seconds() == 0
        fetched = await self.service.get_note(db_session, created.id)
        assert fetched.id == created.id
        assert fetched.title == "shopping"
        assert fetched.content == "eggs"

    @pytest.mark.asyncio
    async def test_create_assigns_distinct_ids(self, db_session):
        first = await self.service.create_note(db_session, NoteCreate(title="a"))
        second = await self.service.create_note(db_session, NoteCreate(title="b"))

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_update_merges_sent_fields(self, db_session):
        created = await self.service.create_note(
            db_session, NoteCreate(title="draft", content="body")
        )

        updated = await self.service.update_note(
            db_session, created.id, NoteUpdate(title="final")
        )

        assert updated.title == "final"
        assert updated.content == "body"
        fetched = await self.service.get_note(db_session, created.id)
        assert fetched.title == "final"
        assert fetched.content == "body"

    @pytest.mark.asyncio
    async def test_update_can_clear_content(self, db_session):
        created = await self.service.create_note(
            db_session, NoteCreate(title="keep", content="remove me")
        )

        updated = await self.service.update_note(
            db_session, created.id, NoteUpdate(content=None)
        )

        assert updated.title == "keep"
        assert updated.content is None

    @pytest.mark.asyncio
    async def test_update_with_empty_payload_is_noop(self, db_session):
        created = await self.service.create_note(
            db_session, NoteCreate(title="same", content="same")
        )

        updated = await self.service.update_note(db_session, created.id, NoteUpdate())

        assert updated.title == "same"
        assert updated.content == "same"

    @pytest.mark.asyncio
    async def test_missing_id_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.get_note(db_session, 12345)
        with pytest.raises(NotFoundError):
            await self.service.update_note(db_session, 12345, NoteUpdate(title="x"))
        with pytest.raises(NotFoundError):
            await self.service.delete_note(db_session, 12345)

    @pytest.mark.asyncio
    async def test_delete_is_durable(self, db_session):
        created = await self.service.create_note(db_session, NoteCreate(title="gone"))

        await self.service.delete_note(db_session, created.id)

        with pytest.raises(NotFoundError):
            await self.service.get_note(db_session, created.id)
        assert await self.service.list_notes(db_session) == []

    @pytest.mark.asyncio
    async def test_list_without_filter_returns_all(self, db_session):
        for title in ("one", "two", "three"):
            await self.service.create_note(db_session, NoteCreate(title=title))

        notes = await self.service.list_notes(db_session)

        assert [n.title for n in notes] == ["one", "two", "three"]

    @pytest.mark.asyncio
    async def test_list_with_title_filter(self, db_session):
        for title in ("shopping", "workshop", "reading list"):
            await self.service.create_note(db_session, NoteCreate(title=title))

        notes = await self.service.list_notes(db_session, NoteFilter(title="shop"))

        assert sorted(n.title for n in notes) == ["shopping", "workshop"]

    @pytest.mark.asyncio
    async def test_list_with_empty_filter_returns_all(self, db_session):
        for title in ("a", "b"):
            await self.service.create_note(db_session, NoteCreate(title=title))

        notes = await self.service.list_notes(db_session, NoteFilter(title=""))

        assert len(notes) == 2

    @pytest.mark.asyncio
    async def test_list_filter_treats_wildcards_literally(self, db_session):
        for title in ("50% off", "500 items"):
            await self.service.create_note(db_session, NoteCreate(title=title))

        notes = await self.service.list_notes(db_session, NoteFilter(title="0%"))

        assert [n.title for n in notes] == ["50% off"]
