"""
Notes API - Note SQLAlchemy Model
==================================

What:  ORM model representing the `notes` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by NoteService for CRUD operations and by Alembic for schema management.

Table Design:
    - id: Integer primary key assigned by the store on insert, never changed
    - title: Short heading, target of the substring filter on GET /notes
    - content: Free-form body, optional
    - created_at / updated_at: UTC timestamps maintained by the ORM
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, Text, text
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp that always reads back in UTC.

    SQLite has no timezone storage and returns naive datetimes; those are
    stored as UTC, so the offset is attached on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Note(Base):
    """
    A single note record.

    Lifecycle:
        1. Created from caller-supplied attributes (id assigned on flush)
        2. Updated by fetch → merge → flush (updated_at refreshed)
        3. Deleted by id after an existence check
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    content: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    # Python-side defaults keep behaviour identical on SQLite and PostgreSQL;
    # server defaults cover rows inserted outside the ORM
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_notes_title", "title"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
