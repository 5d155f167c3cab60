"""
Comportamiento transversal: health, request id, handlers de error.
"""
import logging

import pytest
from httpx import ASGITransport, AsyncClient
from pymongo.errors import ServerSelectionTimeoutError

pytestmark = pytest.mark.asyncio


async def test_ping(test_client):
    res = await test_client.get("/api/ping")
    assert res.status_code == 200
    assert res.json() == {"message": "pong"}


async def test_health_reports_db(test_client):
    res = await test_client.get("/api/health")
    assert res.json() == {"ok": True, "db": True}


async def test_request_id_is_echoed(test_client):
    res = await test_client.get("/api/ping", headers={"X-Request-Id": "abc123"})
    assert res.headers["x-request-id"] == "abc123"


async def test_request_id_generated_and_in_error_body(test_client):
    res = await test_client.get("/api/folders/bad")
    rid = res.headers["x-request-id"]
    assert rid
    assert res.json()["request_id"] == rid


async def test_unknown_route_is_generic_404(test_client):
    res = await test_client.get("/api/notes")
    assert res.status_code == 404
    assert res.json()["message"] == "Not Found"


async def test_wrong_body_type_is_422(test_client):
    res = await test_client.post("/api/folders", json={"name": ["Work"]})
    assert res.status_code == 422
    assert res.json()["message"] == "Validation error"


async def test_store_failure_is_opaque_500(fake_db, caplog):
    caplog.set_level(logging.INFO, logger="folders.request")
    from app.main import app
    from app.infrastructure.db.mongo_async import get_async_db

    async def boom(*args, **kwargs):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    fake_db["folders"].find_one = boom
    app.dependency_overrides[get_async_db] = lambda: fake_db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            res = await client.get("/api/folders/507f1f77bcf86cd799439011")
    finally:
        app.dependency_overrides.clear()
    assert res.status_code == 500
    assert res.json()["message"] == "Internal server error"
    assert "27017" not in res.text
    request_lines = [r.getMessage() for r in caplog.records if r.name == "folders.request"]
    assert any("status=500" in line for line in request_lines)
