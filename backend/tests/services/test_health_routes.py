"""Health Routes — welcome, liveness and readiness probes."""

import app.infrastructure.database as db_module


async def test_welcome(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Welcome to the Superheroes API!"
    assert body["version"]


async def test_liveness(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "OK"
    assert body["service"] == "Superheroes API"


async def test_readiness_with_database(client):
    resp = await client.get("/health/ready")
    assert resp.status_code == 200
    assert resp.json() == {
        "status": "ready",
        "checks": {"database": "healthy", "dialect": "sqlite"},
    }


async def test_readiness_without_manager(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    resp = await client.get("/health/ready")
    assert resp.status_code == 503
    assert resp.json()["reason"] == "database_unavailable"
