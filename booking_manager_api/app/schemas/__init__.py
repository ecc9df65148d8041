"""
Pydantic schema definitions for API payloads.

Each domain (reservations, customers, analytics, auth) defines its own
Pydantic models for request and response bodies.  Create and update
payloads are separate models so that server‑managed fields such as
``id`` can never be supplied by clients.
"""
