"""Mixins for SQLAlchemy models."""

from sqlalchemy import Column, DateTime, func


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=True,
    )


class SoftDeleteMixin:
    """Mixin to add a deleted_at marker column.

    Rows with a non-null deleted_at are logically removed and must be filtered
    out by every query that touches the table.
    """

    deleted_at = Column(DateTime(timezone=True), nullable=True)

    @classmethod
    def active(cls):
        """SQL predicate matching rows that have not been soft-deleted."""
        return cls.deleted_at.is_(None)
