"""Tests for GET /api/health and the root liveness route."""


def test_health_returns_ok(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["success"] is True
    assert data["data"]["status"] == "ok"
    assert data["data"]["version"]


def test_root_is_plain_text(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"running" in resp.data


def test_security_headers(client):
    resp = client.get("/api/health")
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
