"""Pydantic schemas for repository results."""

from src.schemas.note import NoteRecord, WriteResult

__all__ = [
    "NoteRecord",
    "WriteResult",
]
