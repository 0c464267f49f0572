"""Health checks - liveness always 200, readiness follows store ping."""

from pymongo.errors import ServerSelectionTimeoutError

from object_service import __version__


async def test_liveness_returns_healthy(client):
    res = await client.get("/health/")

    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy",
        "service": "object-service",
        "version": __version__,
    }


async def test_readiness_ok_when_store_answers_ping(client, collection):
    res = await client.get("/health/ready")

    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}
    assert collection.database.client.commands == ["ping"]


async def test_readiness_503_when_store_unreachable(client, collection):
    collection.database.client.ping_failure = ServerSelectionTimeoutError("no servers")

    res = await client.get("/health/ready")

    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "database_unavailable"}
