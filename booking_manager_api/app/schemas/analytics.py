"""Pydantic model for the analytics summary."""

from pydantic import BaseModel, Field


class AnalyticsRead(BaseModel):
    total_reservations: int = Field(..., alias="totalReservations")
    total_revenue: int = Field(..., alias="totalRevenue")
    active_customers: int = Field(..., alias="activeCustomers")
    # Percentage of reservations with status ``confirmed`` (0‑100).
    occupancy_rate: int = Field(..., alias="occupancyRate")

    model_config = {
        "populate_by_name": True,
    }
