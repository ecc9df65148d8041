"""Tests for the /api/customers endpoints."""

from datetime import datetime, timezone

import pytest


def test_list_uses_camel_case_fields(client):
    resp = client.get("/api/customers")
    assert resp.status_code == 200
    first = resp.json()[0]
    assert first == {
        "id": 1,
        "name": "John Smith",
        "email": "john@email.com",
        "phone": "555-0123",
        "address": "",
        "totalBookings": 5,
        "lastVisit": "2024-01-10",
    }


def test_create_customer_defaults(client, sample_customer):
    resp = client.post("/api/customers", json=dict(sample_customer, totalBookings=12))
    assert resp.status_code == 201
    data = resp.json()
    assert data["id"] == 4
    assert data["address"] == ""
    assert data["totalBookings"] == 0
    assert data["lastVisit"] == datetime.now(timezone.utc).date().isoformat()


def test_create_customer_keeps_address(client, sample_customer):
    data = client.post("/api/customers", json=dict(sample_customer, address="1 Pier St")).json()
    assert data["address"] == "1 Pier St"


@pytest.mark.parametrize("field", ["name", "email", "phone"])
@pytest.mark.parametrize("absent", [False, True], ids=["empty", "absent"])
def test_create_customer_missing_field(client, sample_customer, field, absent):
    payload = dict(sample_customer)
    if absent:
        del payload[field]
    else:
        payload[field] = ""
    resp = client.post("/api/customers", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Missing required customer fields."}
    assert len(client.get("/api/customers").json()) == 3


def test_update_customer_merges_fields(client):
    resp = client.put("/api/customers/3", json={"totalBookings": 9, "phone": "555-1111", "id": 7})
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == 3
    assert data["totalBookings"] == 9
    assert data["phone"] == "555-1111"
    assert data["name"] == "Mike Davis"
    assert data["lastVisit"] == "2024-01-14"


def test_update_unknown_customer_returns_404(client):
    resp = client.put("/api/customers/9999", json={"name": "Nobody"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Customer 9999 not found."}


def test_update_customer_with_non_integer_id_is_not_found(client):
    resp = client.put("/api/customers/1.5", json={"name": "Nobody"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Customer 1.5 not found."}
    assert client.get("/api/customers").json()[0]["name"] == "John Smith"


def test_update_customer_accepts_numeric_phone(client):
    resp = client.put("/api/customers/2", json={"phone": 5550000})
    assert resp.status_code == 200
    assert resp.json()["phone"] == "5550000"


def test_customers_cannot_be_deleted(client):
    resp = client.delete("/api/customers/1")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}
    assert len(client.get("/api/customers").json()) == 3
