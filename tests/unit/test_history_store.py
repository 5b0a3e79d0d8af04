"""Tests for the persisted sent-email history."""

import json
from datetime import datetime, timezone

import pytest

from schemas.history import HistoryRecord
from services.history_store import HistoryStore

KEY = "academicOutreachHistory"


def record(to, minute=0):
    return HistoryRecord(
        to=to,
        subject=f"Hello {to}",
        body="Dear Professor,",
        date_sent=datetime(2025, 1, 13, 10, minute, tzinfo=timezone.utc),
    )


@pytest.mark.unit
def test_empty_when_nothing_stored(storage):
    history = HistoryStore(storage, KEY)

    assert history.records == []
    assert len(history) == 0


@pytest.mark.unit
def test_prepend_persists_with_camel_case_keys(storage):
    history = HistoryStore(storage, KEY)

    added = history.prepend([record("a@uni.edu"), record("b@uni.edu", 1)])

    stored = json.loads(storage.get(KEY))
    assert added == 2
    assert [item["to"] for item in stored] == ["a@uni.edu", "b@uni.edu"]
    assert "dateSent" in stored[0]
    assert "date_sent" not in stored[0]


@pytest.mark.unit
def test_new_batch_goes_before_older_batches(storage):
    history = HistoryStore(storage, KEY)
    history.prepend([record("old1@uni.edu"), record("old2@uni.edu")])

    history.prepend([record("new1@uni.edu"), record("new2@uni.edu")])

    assert [r.to for r in history.records] == [
        "new1@uni.edu", "new2@uni.edu", "old1@uni.edu", "old2@uni.edu"
    ]


@pytest.mark.unit
def test_history_survives_reload(storage):
    HistoryStore(storage, KEY).prepend([record("a@uni.edu")])

    reloaded = HistoryStore(storage, KEY)

    assert reloaded.records == [record("a@uni.edu")]


@pytest.mark.unit
def test_empty_batch_writes_nothing(storage):
    history = HistoryStore(storage, KEY)

    assert history.prepend([]) == 0
    assert storage.get(KEY) is None


@pytest.mark.unit
@pytest.mark.parametrize("raw", [
    "not json",
    '{"to": "a@uni.edu"}',
    '[{"to": "a@uni.edu"}]',
])
def test_corrupt_history_is_discarded(storage, raw):
    storage.set(KEY, raw)

    history = HistoryStore(storage, KEY)

    assert history.records == []
    assert storage.get(KEY) is None


@pytest.mark.unit
def test_clear_requires_confirmation(storage):
    history = HistoryStore(storage, KEY)
    history.prepend([record("a@uni.edu")])

    assert history.clear(confirmed=False) is False
    assert len(history) == 1

    assert history.clear(confirmed=True) is True
    assert len(history) == 0
    assert storage.get(KEY) is None


@pytest.mark.unit
def test_records_returns_a_copy(storage):
    history = HistoryStore(storage, KEY)
    history.prepend([record("a@uni.edu")])

    history.records.clear()

    assert len(history) == 1
