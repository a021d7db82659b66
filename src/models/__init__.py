"""SQLAlchemy models."""

from src.models.note import NOTE_TABLE, Note

__all__ = [
    "NOTE_TABLE",
    "Note",
]
