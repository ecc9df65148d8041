"""Entry point for the Booking Manager API.

Starts the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Host, port and log level come from the ``HOST``, ``PORT`` and
``LOG_LEVEL`` environment variables (defaults ``0.0.0.0``, ``3000``
and ``INFO``).

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from booking_manager_api.app.core.config import settings
from booking_manager_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server running on http://localhost:%s", settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
