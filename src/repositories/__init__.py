"""Repositories wrapping table access."""

from src.repositories.note import NoteRepository, get_note_repository

__all__ = ["NoteRepository", "get_note_repository"]
