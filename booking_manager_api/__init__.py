"""
Top‑level package for the Booking Manager API.

This file makes ``booking_manager_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``booking_manager_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
