"""Note schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NoteRecord(BaseModel):
    """A row of the note table."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    user_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        """Check if the record is soft-deleted."""
        return self.deleted_at is not None


class WriteResult(BaseModel):
    """Summary of an INSERT, UPDATE or DELETE statement.

    A statement matching no row is not an error: callers check ``noop``
    (or ``rows_affected``) to tell whether anything changed.
    """

    model_config = ConfigDict(frozen=True)

    rows_affected: int
    last_insert_id: int | None = None

    @property
    def noop(self) -> bool:
        """True when the statement matched no row."""
        return self.rows_affected == 0
