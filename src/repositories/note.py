"""Data access for the note table.

Every statement filters on the owning user and skips soft-deleted rows.
Caller values are bound as parameters; the table name comes from the model.
"""

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import ColumnElement, Executable, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.database import SessionLocal
from src.exceptions import standard_error
from src.models.note import Note
from src.schemas.note import NoteRecord, WriteResult

logger = logging.getLogger(__name__)

note_table = Note.__table__

# Identifiers arrive either as ints or in their textual form and are bound as-is
NoteID = int | str


class NoteRepository:
    """CRUD operations on notes, scoped to the owning user."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _standard_errors(
        self,
        operation: str,
        note_id: NoteID | None = None,
        user_id: NoteID | None = None,
    ) -> Iterator[None]:
        """Route storage errors through standard_error before they reach the caller."""
        try:
            yield
        except SQLAlchemyError as e:
            err = standard_error(e, note_id, user_id)
            if err is e:
                self.db.rollback()
                logger.error(f"Note {operation} failed (id={note_id}, user={user_id}): {e}")
                raise
            logger.warning(f"Note {note_id} not found for user {user_id}")
            raise err from e

    def _owned(self, note_id: NoteID, user_id: NoteID) -> tuple[ColumnElement[bool], ...]:
        return (
            note_table.c.id == note_id,
            note_table.c.user_id == user_id,
            Note.active(),
        )

    def _write(
        self,
        operation: str,
        stmt: Executable,
        note_id: NoteID | None = None,
        user_id: NoteID | None = None,
    ) -> WriteResult:
        with self._standard_errors(operation, note_id, user_id):
            result = self.db.execute(stmt)
            write_result = WriteResult(
                rows_affected=result.rowcount,
                last_insert_id=result.inserted_primary_key[0] if result.is_insert else None,
            )
            self.db.commit()

        logger.debug(f"Note {operation}: {write_result.rows_affected} row(s) affected")
        return write_result

    def by_id(self, note_id: NoteID, user_id: NoteID) -> NoteRecord:
        """Get an active note by id.

        Raises:
            NoteNotFoundError: No active note with this id belongs to the user.
        """
        stmt = select(note_table).where(*self._owned(note_id, user_id)).limit(1)
        with self._standard_errors("by_id", note_id, user_id):
            row = self.db.execute(stmt).mappings().one()
        return NoteRecord.model_validate(dict(row))

    def by_owner(self, user_id: NoteID) -> list[NoteRecord]:
        """Get all active notes of a user, oldest id first."""
        stmt = (
            select(note_table)
            .where(note_table.c.user_id == user_id, Note.active())
            .order_by(note_table.c.id)
        )
        with self._standard_errors("by_owner", user_id=user_id):
            rows = self.db.execute(stmt).mappings().all()
        return [NoteRecord.model_validate(dict(row)) for row in rows]

    def create(self, name: str, user_id: NoteID) -> WriteResult:
        """Insert a note. Timestamps are filled in by the database."""
        stmt = insert(note_table).values(name=name, user_id=user_id)
        return self._write("create", stmt, user_id=user_id)

    def update(self, name: str, note_id: NoteID, user_id: NoteID) -> WriteResult:
        """Rename an active note."""
        stmt = update(note_table).where(*self._owned(note_id, user_id)).values(name=name)
        return self._write("update", stmt, note_id, user_id)

    def delete_soft(self, note_id: NoteID, user_id: NoteID) -> WriteResult:
        """Mark an active note as deleted.

        Already deleted notes are not matched, so deleted_at keeps the time of
        the first call.
        """
        stmt = (
            update(note_table)
            .where(*self._owned(note_id, user_id))
            .values(deleted_at=func.now())
        )
        return self._write("delete_soft", stmt, note_id, user_id)

    def delete_hard(self, note_id: NoteID, user_id: NoteID) -> WriteResult:
        """Remove an active note from the table.

        Soft-deleted notes are not matched and report zero rows affected.
        """
        stmt = delete(note_table).where(*self._owned(note_id, user_id))
        return self._write("delete_hard", stmt, note_id, user_id)


def get_note_repository() -> Generator[NoteRepository, None, None]:
    """Dependency that provides a repository on its own session."""
    db = SessionLocal()
    try:
        yield NoteRepository(db)
    finally:
        db.close()
