"""Allow ``python -m booking_manager_api`` to start the server."""

from uvicorn import Config, Server

from booking_manager_api.app.core.config import settings
from booking_manager_api.app.main import app


if __name__ == "__main__":
    Server(Config(app=app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())).run()
