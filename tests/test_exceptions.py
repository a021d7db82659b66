"""Error normalization tests."""

from sqlalchemy.exc import NoResultFound, OperationalError

from src.exceptions import NoteNotFoundError, RepositoryError, standard_error


def test_no_result_becomes_not_found():
    """Test that a no-rows error maps to NoteNotFoundError."""
    err = standard_error(NoResultFound("No row was found"), 5, 42)
    assert isinstance(err, NoteNotFoundError)
    assert isinstance(err, RepositoryError)
    assert err.note_id == 5
    assert err.user_id == 42
    assert "5" in str(err)


def test_other_errors_unchanged():
    """Test that other errors are returned as they are."""
    original = OperationalError("SELECT 1", {}, Exception("connection refused"))
    assert standard_error(original) is original

    value_error = ValueError("boom")
    assert standard_error(value_error) is value_error
