"""Health endpoint smoke test."""

import pytest
from httpx import ASGITransport, AsyncClient

from clinic_portal.main import app


@pytest.mark.asyncio
async def test_healthcheck_returns_ok() -> None:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["service"] == "Clinic Portal"
    assert payload["backend"] == "http://backend.test"
    assert "x-request-id" in response.headers
    assert response.headers.get("x-content-type-options") == "nosniff"
