"""Note model."""

from sqlalchemy import Column, Integer, String

from src.database import Base
from src.models.mixins import SoftDeleteMixin, TimestampMixin

NOTE_TABLE = "note"


class Note(Base, TimestampMixin, SoftDeleteMixin):
    """A named note owned by a single user."""

    __tablename__ = NOTE_TABLE

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    user_id = Column(Integer, nullable=False, index=True)  # ownership filter, not a foreign key
