"""
Liveness probe.

Mounted at the application root (``/health``) rather than under
``/api``.
"""

import time

from fastapi import APIRouter, Request

from booking_manager_api.app.schemas.health import HealthRead


router = APIRouter()


@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthRead)
async def health(request: Request) -> HealthRead:
    uptime = time.monotonic() - request.app.state.started_at
    return HealthRead(status="ok", uptime=uptime)
