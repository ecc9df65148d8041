"""
Pydantic models for reservations.

A reservation links a customer to an activity, a date/time slot and a
guide.  Request models declare every field optional: presence of the
required fields is checked by ``ReservationService`` so that a missing
field is reported with the service's own message instead of a schema
error.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .common import scalar_to_str


class ReservationCreate(BaseModel):
    """Schema for creating a reservation.

    ``customer``, ``activity``, ``date``, ``time`` and ``guide`` are
    required and must be non‑empty.  ``notes`` defaults to an empty
    string.  Any ``id`` or ``status`` sent by the client is ignored.
    """

    customer: Optional[str] = Field(None, example="John Smith")
    activity: Optional[str] = Field(None, example="Kayak Tour")
    date: Optional[str] = Field(None, example="2024-01-15")
    time: Optional[str] = Field(None, example="10:00 AM")
    guide: Optional[str] = Field(None, example="Harry Weaver")
    notes: Optional[str] = Field(None, example="Bring sunscreen")


class ReservationUpdate(BaseModel):
    """Schema for updating a reservation.

    Every field is optional; only fields present in the request body
    are applied.  ``id`` is not part of the model, so an id in the body
    is dropped and the stored id never changes.
    """

    customer: Optional[str] = None
    activity: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    # Usually ``pending`` or ``confirmed``; other values are accepted as is.
    status: Optional[str] = None
    guide: Optional[str] = None
    notes: Optional[str] = None

    @field_validator(
        "customer", "activity", "date", "time", "status", "guide", "notes", mode="before"
    )
    @classmethod
    def scalars_as_text(cls, value):
        return scalar_to_str(value)


class Reservation(BaseModel):
    id: int
    customer: str
    activity: str
    date: str
    time: str
    status: str = "pending"
    guide: str
    notes: str = ""
