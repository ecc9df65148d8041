"""
Analytics endpoint.

Returns the dashboard figures computed from the current reservations
and customers.
"""

from fastapi import APIRouter

from booking_manager_api.app.schemas.analytics import AnalyticsRead
from booking_manager_api.app.services.analytics_service import AnalyticsService


router = APIRouter()


@router.get("", response_model=AnalyticsRead)
async def get_analytics() -> AnalyticsRead:
    """Return total reservations, mock revenue, customer count and occupancy rate."""
    return await AnalyticsService.summary()
