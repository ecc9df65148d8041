"""
In‑memory record stores and seed data.

Reservations and customers live in process memory for the lifetime of
the process; nothing is persisted.  Each collection is a
``RecordStore``: an ordered list of Pydantic records with integer ids.
New ids are ``max(existing ids) + 1`` (``1`` for an empty store), so
the id of a deleted record can be handed out again if it was the
highest one.

``init_store`` replaces the contents of both stores with the seed
records.  It is called on application startup and by the test suite.
"""

import logging
import threading
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

from ..schemas.customer import Customer
from ..schemas.reservation import Reservation


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordStore(Generic[RecordT]):
    """Ordered collection of records keyed by an integer ``id`` attribute.

    All operations hold a lock, so id assignment and list mutation stay
    consistent when the store is used from several threads.
    """

    def __init__(self, name: str, records: Iterable[RecordT] = ()) -> None:
        self.name = name
        self._records: List[RecordT] = list(records)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def all(self) -> List[RecordT]:
        """Return a snapshot of all records in insertion order."""
        with self._lock:
            return list(self._records)

    def add(self, build: Callable[[int], RecordT]) -> RecordT:
        """Assign the next id, build the record with it and append it.

        ``build`` receives the new id and returns the record to store.
        Id assignment and the append happen under the same lock.
        """
        with self._lock:
            new_id = max((record.id for record in self._records), default=0) + 1
            record = build(new_id)
            self._records.append(record)
            return record

    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[RecordT]:
        """Apply ``changes`` to the record with ``record_id`` in place.

        ``changes`` maps attribute names to new values; an ``id`` key is
        ignored.  Returns the updated record or ``None`` if the id is
        unknown.
        """
        changes = {key: value for key, value in changes.items() if key != "id"}
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                return None
            updated = self._records[index].model_copy(update=changes)
            self._records[index] = updated
            return updated

    def remove(self, record_id: int) -> Optional[RecordT]:
        """Remove and return the record with ``record_id`` (``None`` if absent)."""
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                return None
            return self._records.pop(index)

    def reset(self, records: Iterable[RecordT]) -> None:
        with self._lock:
            self._records = list(records)

    def _index_of(self, record_id: int) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None


def parse_record_id(raw_id: str) -> Optional[int]:
    """Convert a path segment to a record id.

    Accepts anything that reads as a whole number (``"2"``, ``"2.0"``,
    ``" 2 "``).  Returns ``None`` for other input, which then matches no
    record.
    """
    try:
        value = float(raw_id)
    except ValueError:
        return None
    if not value.is_integer():
        return None
    return int(value)


def seed_reservations() -> List[Reservation]:
    return [
        Reservation(
            id=1,
            customer="John Smith",
            activity="Kayak Tour",
            date="2024-01-15",
            time="10:00 AM",
            status="confirmed",
            guide="Harry Weaver",
        ),
        Reservation(
            id=2,
            customer="Sarah Johnson",
            activity="Jet Ski Rental",
            date="2024-01-16",
            time="2:00 PM",
            status="pending",
            guide="Shawn Weaver",
        ),
        Reservation(
            id=3,
            customer="Mike Davis",
            activity="Fishing Charter",
            date="2024-01-17",
            time="6:00 AM",
            status="confirmed",
            guide="Harry Weaver",
        ),
    ]


def seed_customers() -> List[Customer]:
    return [
        Customer(
            id=1,
            name="John Smith",
            email="john@email.com",
            phone="555-0123",
            total_bookings=5,
            last_visit="2024-01-10",
        ),
        Customer(
            id=2,
            name="Sarah Johnson",
            email="sarah@email.com",
            phone="555-0456",
            total_bookings=2,
            last_visit="2024-01-12",
        ),
        Customer(
            id=3,
            name="Mike Davis",
            email="mike@email.com",
            phone="555-0789",
            total_bookings=8,
            last_visit="2024-01-14",
        ),
    ]


reservations_store: RecordStore[Reservation] = RecordStore("reservations", seed_reservations())
customers_store: RecordStore[Customer] = RecordStore("customers", seed_customers())


def init_store() -> None:
    """Reset both stores to the seed records."""
    for store, records in (
        (reservations_store, seed_reservations()),
        (customers_store, seed_customers()),
    ):
        store.reset(records)
        logger.info("Seeded %s store with %d records", store.name, len(store))
