"""
Database module initialization.
Exports database components for use throughout the application.
"""

from database.base import Base, engine, SessionLocal, init_db
from database.session import get_db_context
from database.utils import (
    check_db_connection,
    get_db_info,
)

__all__ = [
    # Base components
    "Base",
    "engine",
    "SessionLocal",
    "init_db",
    # Session management
    "get_db_context",
    # Utilities
    "check_db_connection",
    "get_db_info",
]
