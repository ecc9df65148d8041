"""
Top‑level API router.

This router aggregates the domain routers under a unified prefix.  When
new domains are introduced, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import analytics, auth, customers, reservations

router = APIRouter()

# The reservation and customer routers define their collection paths
# internally (``/reservations``, ``/customers``), so they are included
# without a prefix.
router.include_router(reservations.router, tags=["reservations"])
router.include_router(customers.router, tags=["customers"])
router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
