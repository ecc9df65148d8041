"""
Domain errors raised by the service layer.

Each error carries the HTTP status code it should be answered with and
a client‑facing message.  Exception handlers registered in ``main``
translate them into JSON responses of the form ``{"message": ...}``.
"""


class BookingManagerError(Exception):
    """Base class for errors that are reported to the client."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BookingManagerError):
    """A required field is missing or empty."""

    status_code = 400


class NotFoundError(BookingManagerError):
    """No record with the requested id exists."""

    status_code = 404
