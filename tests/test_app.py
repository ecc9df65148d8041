"""Application level behaviour: health, unknown routes, errors, CORS."""

import logging

from fastapi.testclient import TestClient


def test_health_reports_uptime(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["uptime"] >= 0


def test_health_answers_head_requests(client):
    resp = client.head("/health")
    assert resp.status_code == 200


def test_unknown_route_returns_not_found(client):
    resp = client.get("/api/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}


def test_unsupported_method_returns_not_found(client):
    resp = client.patch("/api/reservations/1", json={"status": "confirmed"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}


def test_unhandled_error_is_hidden_from_client(app):
    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret detail")

    with TestClient(app, raise_server_exceptions=False) as c:
        resp = c.get("/boom")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
    assert "secret" not in resp.text


def test_unhandled_error_is_written_to_request_log(app, caplog):
    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret detail")

    caplog.set_level(logging.INFO, logger="booking_manager_api.app.main")
    with TestClient(app, raise_server_exceptions=False) as c:
        c.get("/boom")
    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("GET /boom 500 ") for message in messages)


def test_cors_headers_are_sent(client):
    resp = client.get("/api/reservations", headers={"Origin": "http://example.com"})
    assert resp.headers["access-control-allow-origin"] == "*"


def test_startup_reseeds_stores(app, sample_reservation):
    with TestClient(app) as c:
        c.post("/api/reservations", json=sample_reservation)
        assert len(c.get("/api/reservations").json()) == 4
    with TestClient(app) as c:
        assert len(c.get("/api/reservations").json()) == 3


def test_startup_logs_seeded_stores(app, caplog):
    caplog.set_level(logging.INFO, logger="booking_manager_api.app.core.store")
    with TestClient(app):
        pass
    messages = [record.getMessage() for record in caplog.records]
    assert "Seeded reservations store with 3 records" in messages
    assert "Seeded customers store with 3 records" in messages
