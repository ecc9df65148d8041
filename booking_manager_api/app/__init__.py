"""
Application package initializer.

The service is organised into logical pieces: ``core`` holds
configuration, logging, errors and the in‑memory record stores,
``schemas`` the Pydantic request/response models, ``services`` the
business logic and ``api`` the FastAPI routers.  Each domain
(reservations, customers, analytics, auth) exposes a router defined in
``api/endpoints``.
"""

from .main import app  # noqa: F401
