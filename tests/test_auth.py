"""Tests for the demo login and signup endpoints."""

import pytest


def test_login_accepts_any_credentials(client):
    resp = client.post("/api/auth/login", json={"email": "who@ever.com", "password": "wrong"})
    assert resp.status_code == 200
    assert resp.json() == {
        "message": "Login successful",
        "user": {"id": 1, "name": "Demo User", "email": "who@ever.com"},
        "token": "demo-token",
    }


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "who@ever.com", "password": ""},
        {"email": "who@ever.com"},
        {"password": "pw"},
        {"email": "", "password": "pw"},
    ],
    ids=["empty-password", "no-password", "no-email", "empty-email"],
)
def test_login_with_missing_credentials_is_rejected(client, payload):
    resp = client.post("/api/auth/login", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Email and password are required."}


def test_login_without_body_is_rejected(client):
    assert client.post("/api/auth/login").status_code == 400


def test_signup_echoes_name_and_email(client):
    resp = client.post(
        "/api/auth/signup",
        json={"name": "Jane Doe", "email": "jane@email.com", "password": "pw"},
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["message"] == "Account created successfully"
    assert data["user"] == {"id": 1, "name": "Jane Doe", "email": "jane@email.com"}
    assert data["token"] == "demo-token"


@pytest.mark.parametrize("field", ["name", "email", "password"])
@pytest.mark.parametrize("absent", [False, True], ids=["empty", "absent"])
def test_signup_missing_field_is_rejected(client, field, absent):
    payload = {"name": "Jane Doe", "email": "jane@email.com", "password": "pw"}
    if absent:
        del payload[field]
    else:
        payload[field] = ""
    resp = client.post("/api/auth/signup", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Name, email, and password are required."}

