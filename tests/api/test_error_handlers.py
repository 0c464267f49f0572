"""Error Handlers - every failure leaves the API as {"error": "<message>"}.

Tests:
    - Domain errors keep their status and message
    - Unknown routes and wrong methods are JSON, not the framework default
    - Unhandled exceptions become a generic 500 without internals
"""

import logging

from httpx import ASGITransport, AsyncClient

from object_service.main import create_app


class _ExplodingRepository:
    async def list_all(self):
        raise RuntimeError("secret connection string leaked")


async def test_unknown_route_returns_json_404(client):
    res = await client.get("/nothing-here")

    assert res.status_code == 404
    assert res.json() == {"error": "not found"}


async def test_wrong_method_returns_json_405_with_allow_header(client):
    res = await client.patch("/objects/abc", json={})

    assert res.status_code == 405
    assert res.json() == {"error": "method not allowed"}
    assert "allow" in res.headers


async def test_unhandled_exception_returns_generic_500(settings):
    app = create_app(settings, repository=_ExplodingRepository())
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/objects/")

    assert res.status_code == 500
    assert res.json() == {"error": "internal server error"}
    assert "secret" not in res.text


async def test_domain_error_log_carries_request_context(client, caplog):
    with caplog.at_level(logging.WARNING, logger="object_service.api.error_handlers"):
        await client.delete("/objects/missing")

    record = next(r for r in caplog.records if r.name == "object_service.api.error_handlers")
    assert record.method == "DELETE"
    assert record.path == "/objects/missing"
    assert record.status_code == 404
    assert record.object_id == "missing"
    assert record.error_code == "OBJECT_NOT_FOUND"
