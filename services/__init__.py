"""
Services module: local persistence and the mail client handoff.
"""

from services.storage import KeyValueStore, DatabaseKeyValueStore
from services.history_store import HistoryStore
from services.preferences import ThemePreference
from services.mail_client import (
    MailClientLauncher,
    build_mailto_link,
    create_mail_launcher,
)

__all__ = [
    "KeyValueStore",
    "DatabaseKeyValueStore",
    "HistoryStore",
    "ThemePreference",
    "MailClientLauncher",
    "build_mailto_link",
    "create_mail_launcher",
]
