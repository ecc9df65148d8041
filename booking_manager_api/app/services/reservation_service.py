"""
Business logic for reservations.

The ``ReservationService`` validates incoming payloads and performs
list, create, update and delete operations on the in‑memory
reservation store.  Errors are reported through ``ValidationError``
and ``NotFoundError``, which the application translates into 400 and
404 responses.
"""

import logging
from typing import List

from ..core.errors import NotFoundError, ValidationError
from ..core.store import parse_record_id, reservations_store
from ..schemas.reservation import Reservation, ReservationCreate, ReservationUpdate


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("customer", "activity", "date", "time", "guide")


class ReservationService:
    """Service for managing reservations."""

    @classmethod
    async def list_reservations(cls) -> List[Reservation]:
        """Return all reservations in insertion order."""
        return reservations_store.all()

    @classmethod
    async def create_reservation(cls, data: ReservationCreate) -> Reservation:
        """Create a new reservation.

        All of ``customer``, ``activity``, ``date``, ``time`` and
        ``guide`` must be non‑empty, otherwise ``ValidationError`` is
        raised and the store is left untouched.  New reservations always
        start in the ``pending`` status.
        """
        missing = [field for field in REQUIRED_FIELDS if not getattr(data, field)]
        if missing:
            logger.info("Rejected reservation, missing fields: %s", ", ".join(missing))
            raise ValidationError("Missing required reservation fields.")

        reservation = reservations_store.add(
            lambda new_id: Reservation(
                id=new_id,
                customer=data.customer,
                activity=data.activity,
                date=data.date,
                time=data.time,
                guide=data.guide,
                notes=data.notes or "",
                status="pending",
            )
        )
        logger.info(
            "Created reservation %s: %s for %s on %s",
            reservation.id,
            reservation.activity,
            reservation.customer,
            reservation.date,
        )
        return reservation

    @classmethod
    async def update_reservation(cls, reservation_id: str, update: ReservationUpdate) -> Reservation:
        """Apply the supplied fields to an existing reservation.

        Fields omitted from the payload (or sent as ``null``) keep their
        current values.  Raises ``NotFoundError`` for an unknown id,
        including one that is not a number.
        """
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        record_id = parse_record_id(reservation_id)
        reservation = None if record_id is None else reservations_store.update(record_id, changes)
        if reservation is None:
            raise NotFoundError(f"Reservation {reservation_id} not found.")
        logger.info("Updated reservation %s: %s", record_id, ", ".join(sorted(changes)) or "no changes")
        return reservation

    @classmethod
    async def delete_reservation(cls, reservation_id: str) -> Reservation:
        """Remove a reservation and return it."""
        record_id = parse_record_id(reservation_id)
        reservation = None if record_id is None else reservations_store.remove(record_id)
        if reservation is None:
            raise NotFoundError(f"Reservation {reservation_id} not found.")
        logger.info("Deleted reservation %s", record_id)
        return reservation
