"""Errors raised by the repositories and the normalizer that produces them."""

from sqlalchemy.exc import NoResultFound

__all__ = ["RepositoryError", "NoteNotFoundError", "standard_error"]


class RepositoryError(Exception):
    """Base exception for repository errors."""


class NoteNotFoundError(RepositoryError):
    """No active note matched the id and owner."""

    def __init__(self, note_id: int | str | None = None, user_id: int | str | None = None):
        self.note_id = note_id
        self.user_id = user_id
        super().__init__(f"Note {note_id} not found for user {user_id}")


def standard_error(
    exc: BaseException, note_id: int | str | None = None, user_id: int | str | None = None
) -> BaseException:
    """Map a "no rows" storage error to NoteNotFoundError.

    Any other exception is returned unchanged.
    """
    if isinstance(exc, NoResultFound):
        return NoteNotFoundError(note_id, user_id)
    return exc
