#!/usr/bin/env python3
"""
Clear the sent-email history from the local database.
Useful when the stored history was written by an older version and you want
to start fresh without deleting the whole database file.
"""

import sys
from pathlib import Path

# Add project root to path so we can import from database, services, etc.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from database import init_db
from services.history_store import HistoryStore
from services.storage import DatabaseKeyValueStore


def clear_history():
    """Delete every history record after confirmation."""
    init_db()
    history = HistoryStore(DatabaseKeyValueStore())

    if not len(history):
        print("✓ History is already empty")
        return

    print(f"Found {len(history)} history records:")
    for record in history.records[:10]:
        print(f"  - {record.date_sent:%Y-%m-%d %H:%M} {record.to}: {record.subject}")
    if len(history) > 10:
        print(f"  ... and {len(history) - 10} more")

    # Ask for confirmation
    response = input(f"\nDelete all {len(history)} history records? (yes/no): ")
    if not history.clear(confirmed=response.lower() == 'yes'):
        print("Cancelled")
        return

    print("✓ History cleared")


if __name__ == "__main__":
    clear_history()
