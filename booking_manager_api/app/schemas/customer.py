"""
Pydantic models for customers.

Customers are contact records with aggregate booking statistics.  The
JSON representation uses camelCase for ``totalBookings`` and
``lastVisit``; the models expose snake_case attributes and accept
either spelling on input.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .common import scalar_to_str


class CustomerCreate(BaseModel):
    """Schema for creating a customer.

    ``name``, ``email`` and ``phone`` are required; ``address`` is
    optional.  Booking statistics are managed by the server.
    """

    name: Optional[str] = Field(None, example="John Smith")
    email: Optional[str] = Field(None, example="john@email.com")
    phone: Optional[str] = Field(None, example="555-0123")
    address: Optional[str] = Field(None, example="12 Harbour Road")


class CustomerUpdate(BaseModel):
    """Schema for updating a customer; only supplied fields are applied."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    total_bookings: Optional[int] = Field(None, alias="totalBookings")
    last_visit: Optional[str] = Field(None, alias="lastVisit")

    @field_validator(
        "name", "email", "phone", "address", "last_visit", mode="before"
    )
    @classmethod
    def scalars_as_text(cls, value):
        return scalar_to_str(value)

    model_config = {
        "populate_by_name": True,
    }


class Customer(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    address: str = ""
    total_bookings: int = Field(0, alias="totalBookings")
    last_visit: str = Field(..., alias="lastVisit")

    model_config = {
        "populate_by_name": True,
    }
