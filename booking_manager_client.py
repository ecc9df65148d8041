"""Booking Manager API client.

This module defines a simple client wrapper around the Booking Manager
REST API.  The client uses the ``requests`` library internally to make
HTTP calls and exposes one method per API operation:

* :meth:`health` – liveness probe and server uptime.
* :meth:`list_reservations` / :meth:`create_reservation` /
  :meth:`update_reservation` / :meth:`delete_reservation`.
* :meth:`list_customers` / :meth:`create_customer` /
  :meth:`update_customer`.
* :meth:`get_analytics` – dashboard figures.
* :meth:`login` / :meth:`signup` – demo authentication.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list for list
operations) and ``error`` is a dictionary with keys ``status_code`` and
``message``.  Methods never raise for HTTP or network failures.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header.  To enable this behaviour,
initialise the client with ``api_key='<your token>'``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class BookingManagerAPI:
    """Client for interacting with the Booking Manager API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/customers``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    @staticmethod
    def _error_message(response: Any) -> str:
        """Extract a human readable message from an error response."""
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        if isinstance(body, dict):
            for key in ("message", "error", "detail"):
                if body.get(key):
                    return str(body[key])
        return str(body)

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Service
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/health")

    # ------------------------------------------------------------------
    # Reservation operations
    # ------------------------------------------------------------------
    def list_reservations(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all reservations.

        Returns:
            A tuple ``(reservations, error)``.  ``reservations`` is empty
            on failure.
        """
        return self._list("/api/reservations")

    def create_reservation(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a reservation.

        Args:
            payload: ``customer``, ``activity``, ``date``, ``time``,
                ``guide`` and optionally ``notes``.
        Returns:
            A tuple ``(reservation, error)``.
        """
        return self._request("POST", "/api/reservations", json_body=payload)

    def update_reservation(
        self, reservation_id: int, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/api/reservations/{reservation_id}", json_body=changes)

    def delete_reservation(self, reservation_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a reservation.

        Returns:
            A tuple ``(deleted_reservation, error)``.
        """
        return self._request("DELETE", f"/api/reservations/{reservation_id}")

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/customers")

    def create_customer(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/api/customers", json_body=payload)

    def update_customer(
        self, customer_id: int, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/api/customers/{customer_id}", json_body=changes)

    # ------------------------------------------------------------------
    # Analytics and auth
    # ------------------------------------------------------------------
    def get_analytics(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/api/analytics")

    def login(self, email: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log in and remember the returned token as the API key."""
        data, error = self._request("POST", "/api/auth/login", json_body={"email": email, "password": password})
        if data and data.get("token"):
            self.api_key = data["token"]
        return data, error

    def signup(self, name: str, email: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST",
            "/api/auth/signup",
            json_body={"name": name, "email": email, "password": password},
        )
