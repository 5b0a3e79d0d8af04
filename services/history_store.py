"""
History Store.

An append-only, user-clearable log of emails handed to the mail client,
persisted through a KeyValueStore. Loaded once on construction; corrupt
stored data is discarded rather than raised.
"""

import json
from typing import Iterable, List, Optional

import logfire
from pydantic import TypeAdapter, ValidationError

from config.settings import settings
from schemas.history import HistoryRecord
from services.storage import KeyValueStore

_records_adapter = TypeAdapter(List[HistoryRecord])


class HistoryStore:
    """
    Owns the persisted history list.

    New batches are prepended (most recent batch first) and the whole list
    is rewritten on every change.
    """

    def __init__(self, storage: KeyValueStore, storage_key: Optional[str] = None):
        self.storage = storage
        self.storage_key = storage_key or settings.history_storage_key
        self._records: List[HistoryRecord] = self._load()

    @property
    def records(self) -> List[HistoryRecord]:
        """Copy of the current history, most recent batch first."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def _load(self) -> List[HistoryRecord]:
        raw = self.storage.get(self.storage_key)
        if raw is None:
            return []

        try:
            records = _records_adapter.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logfire.warning(
                "Discarding corrupt stored history",
                key=self.storage_key,
                error=str(e),
                error_type=type(e).__name__
            )
            self.storage.remove(self.storage_key)
            return []

        logfire.info("History loaded", key=self.storage_key, count=len(records))
        return records

    def _persist(self) -> None:
        payload = _records_adapter.dump_json(self._records, by_alias=True).decode("utf-8")
        self.storage.set(self.storage_key, payload)

    def prepend(self, records: Iterable[HistoryRecord]) -> int:
        """
        Add a dispatched batch ahead of existing history and persist.

        The batch keeps its own order. Returns the number of records added.
        """
        batch = list(records)
        if not batch:
            return 0

        self._records = batch + self._records
        self._persist()

        logfire.info("History updated", added=len(batch), total=len(self._records))
        return len(batch)

    def clear(self, confirmed: bool) -> bool:
        """
        Delete all history, but only after explicit confirmation.

        Returns:
            True if history was cleared, False if the request was declined
        """
        if not confirmed:
            logfire.info("History clear declined", total=len(self._records))
            return False

        self._records = []
        self.storage.remove(self.storage_key)

        logfire.info("History cleared", key=self.storage_key)
        return True
