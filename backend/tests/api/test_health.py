"""Health probe — liveness endpoint."""

from bazinga import __version__


async def test_health_returns_200(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy",
        "service": "bazinga-api",
        "version": __version__,
    }
