"""
String-keyed persistent storage.

The wizard keeps two entries outside process memory (the theme preference and
the dispatch history). Both go through the KeyValueStore interface so the
stores that own them never touch the database directly.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

import logfire
from sqlalchemy.orm import Session

from database.session import get_db_context
from models.stored_entry import StoredEntry


class KeyValueStore(ABC):
    """Minimal get/set/remove interface over string keys and string values."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Create or overwrite the value stored under key."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key if present."""


class DatabaseKeyValueStore(KeyValueStore):
    """KeyValueStore backed by the stored_entries table."""

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        """
        Args:
            session_factory: Session factory to use (defaults to SessionLocal)
        """
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        with get_db_context(self.session_factory) as db:
            entry = db.get(StoredEntry, key)
            return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        with get_db_context(self.session_factory) as db:
            db.merge(StoredEntry(key=key, value=value))
            db.commit()

        logfire.debug("Stored entry written", key=key, length=len(value))

    def remove(self, key: str) -> None:
        with get_db_context(self.session_factory) as db:
            entry = db.get(StoredEntry, key)
            if entry is not None:
                db.delete(entry)
                db.commit()
                logfire.debug("Stored entry removed", key=key)
