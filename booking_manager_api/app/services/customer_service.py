"""
Business logic for customers.

Customers can be listed, created and updated; there is no delete
operation.  New customers start with no bookings and today's date as
their last visit.
"""

import logging
from datetime import datetime, timezone
from typing import List

from ..core.errors import NotFoundError, ValidationError
from ..core.store import customers_store, parse_record_id
from ..schemas.customer import Customer, CustomerCreate, CustomerUpdate


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "phone")


def _today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


class CustomerService:
    """Service for managing customer records."""

    @classmethod
    async def list_customers(cls) -> List[Customer]:
        return customers_store.all()

    @classmethod
    async def create_customer(cls, data: CustomerCreate) -> Customer:
        """Create a customer.

        ``name``, ``email`` and ``phone`` must be non‑empty.  The address
        defaults to an empty string, ``totalBookings`` to ``0`` and
        ``lastVisit`` to the current UTC date.
        """
        missing = [field for field in REQUIRED_FIELDS if not getattr(data, field)]
        if missing:
            logger.info("Rejected customer, missing fields: %s", ", ".join(missing))
            raise ValidationError("Missing required customer fields.")

        last_visit = _today()
        customer = customers_store.add(
            lambda new_id: Customer(
                id=new_id,
                name=data.name,
                email=data.email,
                phone=data.phone,
                address=data.address or "",
                total_bookings=0,
                last_visit=last_visit,
            )
        )
        logger.info("Created customer %s (%s)", customer.id, customer.email)
        return customer

    @classmethod
    async def update_customer(cls, customer_id: str, update: CustomerUpdate) -> Customer:
        """Apply the supplied fields to an existing customer.

        Raises ``NotFoundError`` if no customer has ``customer_id``.
        """
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        record_id = parse_record_id(customer_id)
        customer = None if record_id is None else customers_store.update(record_id, changes)
        if customer is None:
            raise NotFoundError(f"Customer {customer_id} not found.")
        logger.info("Updated customer %s: %s", record_id, ", ".join(sorted(changes)) or "no changes")
        return customer
