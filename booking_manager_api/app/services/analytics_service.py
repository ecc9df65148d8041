"""
Service layer for the dashboard analytics.

The figures are recomputed from the in‑memory stores on every call.
Revenue is a mock value: the number of reservations multiplied by a
fixed ticket price from the settings.
"""

from __future__ import annotations

import math

from ..core.config import settings
from ..core.store import customers_store, reservations_store
from ..schemas.analytics import AnalyticsRead


def occupancy_rate(confirmed: int, total: int) -> int:
    """Return the confirmed share of ``total`` as a whole percentage.

    Halves round up (``0.5`` becomes ``1``).  An empty store yields ``0``.
    """
    if not total:
        return 0
    return int(math.floor(confirmed / total * 100 + 0.5))


class AnalyticsService:
    """Service providing aggregated booking figures."""

    @classmethod
    async def summary(cls) -> AnalyticsRead:
        reservations = reservations_store.all()
        total_reservations = len(reservations)
        confirmed_count = sum(1 for reservation in reservations if reservation.status == "confirmed")
        return AnalyticsRead(
            total_reservations=total_reservations,
            total_revenue=total_reservations * settings.unit_price,
            active_customers=len(customers_store),
            occupancy_rate=occupancy_rate(confirmed_count, total_reservations),
        )
