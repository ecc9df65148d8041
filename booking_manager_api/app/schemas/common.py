"""Helpers shared by the request schemas."""

from typing import Any


def scalar_to_str(value: Any) -> Any:
    """Turn JSON numbers and booleans into text; leave anything else alone.

    Text fields such as a reservation's ``status`` are free‑form, so a
    client sending ``5`` or ``true`` gets ``"5"`` or ``"true"`` stored
    instead of a validation error.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value
