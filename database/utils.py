"""
Database health helpers for the local key/value store.
"""

from typing import Optional

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError

from database.base import engine as default_engine


def check_db_connection(bind: Optional[Engine] = None) -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection is successful, False otherwise
    """
    try:
        with (bind or default_engine).connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except OperationalError:
        return False


def describe_location(bind: Optional[Engine] = None) -> str:
    """Where the store lives: the SQLite file path, or host/database otherwise."""
    url = (bind or default_engine).url
    if url.get_backend_name() == "sqlite":
        return url.database or ":memory:"
    return f"{url.host or 'localhost'}/{url.database or ''}"


def get_db_info(bind: Optional[Engine] = None) -> dict:
    """
    Get store status for startup logs and /health.

    Returns:
        dict: connection status, backend, location and whether the
        stored_entries table exists
    """
    bind = bind or default_engine
    is_connected = check_db_connection(bind)

    from models.stored_entry import StoredEntry

    table_ready = False
    if is_connected:
        table_ready = inspect(bind).has_table(StoredEntry.__tablename__)

    return {
        "status": "connected" if is_connected else "disconnected",
        "backend": bind.url.get_backend_name(),
        "location": describe_location(bind),
        "table_ready": table_ready,
    }
