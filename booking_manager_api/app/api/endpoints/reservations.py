"""
Reservation endpoints.

These routes list, create, update and delete reservations.  They rely
on ``ReservationService`` for validation and store access; domain
errors raised there are turned into 400/404 responses by the
application's exception handlers.
"""

from typing import List

from fastapi import APIRouter, Path, status

from booking_manager_api.app.schemas.reservation import (
    Reservation,
    ReservationCreate,
    ReservationUpdate,
)
from booking_manager_api.app.services.reservation_service import ReservationService


router = APIRouter()


@router.get("/reservations", response_model=List[Reservation])
async def list_reservations() -> List[Reservation]:
    """Return every reservation in the order it was created."""
    return await ReservationService.list_reservations()


@router.post(
    "/reservations",
    response_model=Reservation,
    status_code=status.HTTP_201_CREATED,
)
async def create_reservation(reservation: ReservationCreate | None = None) -> Reservation:
    """Create a reservation.

    Returns HTTP 400 if any of ``customer``, ``activity``, ``date``,
    ``time`` or ``guide`` is missing.  The new reservation is assigned
    the next free id and starts as ``pending``.
    """
    return await ReservationService.create_reservation(reservation or ReservationCreate())


@router.put(
    "/reservations/{reservation_id}",
    response_model=Reservation,
    summary="Update an existing reservation",
)
async def update_reservation(
    reservation_id: str = Path(..., description="ID of the reservation"),
    update: ReservationUpdate | None = None,
) -> Reservation:
    """Merge the supplied fields into a reservation.

    The id cannot be changed.  A 404 error is returned if the
    reservation does not exist.  An empty body returns the reservation
    unchanged.
    """
    return await ReservationService.update_reservation(reservation_id, update or ReservationUpdate())


@router.delete(
    "/reservations/{reservation_id}",
    response_model=Reservation,
    summary="Delete a reservation",
)
async def delete_reservation(
    reservation_id: str = Path(..., description="ID of the reservation"),
) -> Reservation:
    """Delete a reservation and return the removed record."""
    return await ReservationService.delete_reservation(reservation_id)
