"""
StoredEntry model for SQLAlchemy ORM.
Represents the stored_entries table: the wizard's local string-keyed store.
"""

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from database.base import Base


class StoredEntry(Base):
    """
    One persisted key/value pair.

    Attributes:
        key (str): Primary key, e.g. "theme" or "academicOutreachHistory"
        value (str): Serialized value, written and read back verbatim
        updated_at (datetime): Timestamp of the last write
    """

    __tablename__ = "stored_entries"

    key = Column(
        String(255),
        primary_key=True,
        nullable=False,
        comment="Entry key"
    )

    value = Column(
        Text,
        nullable=False,
        comment="Serialized entry value"
    )

    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
        comment="Timestamp of the last write"
    )

    def __repr__(self) -> str:
        return f"<StoredEntry(key={self.key!r}, length={len(self.value or '')})>"
