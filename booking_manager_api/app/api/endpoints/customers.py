"""
Customer endpoints.

Customers can be listed, created and updated.  There is no delete
route.
"""

from typing import List

from fastapi import APIRouter, Path, status

from booking_manager_api.app.schemas.customer import Customer, CustomerCreate, CustomerUpdate
from booking_manager_api.app.services.customer_service import CustomerService


router = APIRouter()


@router.get("/customers", response_model=List[Customer])
async def list_customers() -> List[Customer]:
    return await CustomerService.list_customers()


@router.post(
    "/customers",
    response_model=Customer,
    status_code=status.HTTP_201_CREATED,
)
async def create_customer(customer: CustomerCreate | None = None) -> Customer:
    """Create a customer.

    ``name``, ``email`` and ``phone`` are required; a 400 error is
    returned otherwise.
    """
    return await CustomerService.create_customer(customer or CustomerCreate())


@router.put(
    "/customers/{customer_id}",
    response_model=Customer,
    summary="Update an existing customer",
)
async def update_customer(
    customer_id: str = Path(..., description="ID of the customer"),
    update: CustomerUpdate | None = None,
) -> Customer:
    """Merge the supplied fields into a customer record (404 if unknown)."""
    return await CustomerService.update_customer(customer_id, update or CustomerUpdate())
