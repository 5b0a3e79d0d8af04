"""
Database session management utilities.
Provides context managers for database sessions.
"""

from contextlib import contextmanager
from typing import Callable, Generator, Optional

from sqlalchemy.orm import Session

from database.base import SessionLocal


@contextmanager
def get_db_context(
    session_factory: Optional[Callable[[], Session]] = None,
) -> Generator[Session, None, None]:
    """
    Database session context manager.

    Usage (read-only):
        with get_db_context() as db:
            entry = db.get(StoredEntry, "theme")

    Usage (with write):
        with get_db_context() as db:
            db.merge(entry)
            db.commit()
    """
    db = (session_factory or SessionLocal)()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
