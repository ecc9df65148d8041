"""Pydantic model for the liveness probe."""

from pydantic import BaseModel


class HealthRead(BaseModel):
    status: str
    # Seconds since the application was created.
    uptime: float
