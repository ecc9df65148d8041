import pytest
from fastapi.testclient import TestClient

from booking_manager_api.app.core.store import init_store
from booking_manager_api.app.main import create_app


@pytest.fixture
def app():
    init_store()
    return create_app()


@pytest.fixture
def client(app):
    """A test client; the context manager runs the startup hook."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_reservation():
    return {
        "customer": "Ana Lopez",
        "activity": "Paddle Board",
        "date": "2024-02-01",
        "time": "9:00 AM",
        "guide": "Harry Weaver",
    }


@pytest.fixture
def sample_customer():
    return {"name": "Ana Lopez", "email": "ana@email.com", "phone": "555-0999"}
