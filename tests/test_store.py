"""Unit tests for RecordStore."""

import threading

import pytest

from booking_manager_api.app.core.store import RecordStore, parse_record_id
from booking_manager_api.app.schemas.reservation import Reservation


def make(record_id, customer="A"):
    return Reservation(id=record_id, customer=customer, activity="x", date="d", time="t", guide="g")


def test_add_uses_max_id_plus_one():
    store = RecordStore("test", [make(1), make(5), make(2)])
    record = store.add(lambda new_id: make(new_id))
    assert record.id == 6
    assert [r.id for r in store.all()] == [1, 5, 2, 6]


def test_add_to_empty_store_starts_at_one():
    store = RecordStore("test")
    assert store.add(make).id == 1


def test_update_ignores_id_and_keeps_position():
    store = RecordStore("test", [make(1), make(2)])
    updated = store.update(2, {"id": 10, "customer": "B"})
    assert updated.id == 2
    assert updated.customer == "B"
    assert store.all()[1] is updated
    assert store.update(3, {"customer": "C"}) is None


def test_remove_returns_record_or_none():
    store = RecordStore("test", [make(1), make(2)])
    assert store.remove(1).id == 1
    assert store.remove(1) is None
    assert [r.id for r in store.all()] == [2]


def test_concurrent_adds_never_duplicate_ids():
    store = RecordStore("test")

    def worker():
        for _ in range(50):
            store.add(make)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [r.id for r in store.all()]
    assert len(ids) == 400
    assert len(set(ids)) == 400


@pytest.mark.parametrize(
    "raw_id, expected",
    [("3", 3), ("3.0", 3), (" 3 ", 3), ("1e2", 100), ("abc", None), ("1.5", None), ("", None), ("nan", None)],
)
def test_parse_record_id(raw_id, expected):
    assert parse_record_id(raw_id) == expected
