"""Health & Readiness — liveness always 200, readiness tracks DB availability."""

import user_service.infrastructure.database as db_module


async def test_liveness(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"database": "healthy"}


async def test_readiness_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
