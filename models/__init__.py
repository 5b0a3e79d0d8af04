"""
Models module initialization.
Imports all SQLAlchemy models so they register on Base.metadata.
"""

from models.stored_entry import StoredEntry

__all__ = [
    "StoredEntry",
]
