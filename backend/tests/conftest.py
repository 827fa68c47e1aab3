"""Test fixtures for the clinic portal."""
from __future__ import annotations

import json
import os
import uuid
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("BACKEND_API_URL", "http://backend.test")
os.environ.setdefault("CLINIC_TIMEZONE", "America/Sao_Paulo")
os.environ.setdefault("APP_ENV", "test")

from clinic_portal.api import deps
from clinic_portal.integrations.backend_client import BackendClient
from clinic_portal.main import app

TOKEN = "test-token"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeBackend:
    """Programmable stand-in for the clinic REST backend."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        *,
        status_code: int = 200,
        json: Any = None,
        handler: Handler | None = None,
    ) -> None:
        if handler is None:
            def handler(_: httpx.Request) -> httpx.Response:
                if json is None:
                    return httpx.Response(status_code)
                return httpx.Response(status_code, json=json)

        self.routes[(method.upper(), path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        return handler(request)

    def last(self, method: str, path: str) -> httpx.Request:
        for request in reversed(self.requests):
            if request.method == method.upper() and request.url.path == path:
                return request
        raise AssertionError(f"no {method} {path} request was sent")

    def last_json(self, method: str, path: str) -> Any:
        return json.loads(self.last(method, path).content)


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend()


@pytest_asyncio.fixture()
async def backend_client(backend: FakeBackend) -> AsyncIterator[BackendClient]:
    client = BackendClient(
        httpx.AsyncClient(
            transport=httpx.MockTransport(backend), base_url="http://backend.test"
        )
    )
    yield client
    await client.aclose()


@pytest_asyncio.fixture()
async def anon_client(backend_client: BackendClient) -> AsyncIterator[AsyncClient]:
    """API client without the token cookie."""
    app.dependency_overrides[deps.get_backend_client] = lambda: backend_client
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture()
async def api_client(backend_client: BackendClient) -> AsyncIterator[AsyncClient]:
    """API client carrying a token cookie."""
    app.dependency_overrides[deps.get_backend_client] = lambda: backend_client
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Cookie": f"ppe_access_token={TOKEN}"},
    ) as client:
        yield client
    app.dependency_overrides.clear()


def build_session(
    cycle_id: str,
    *,
    weight_kg: str = "90.00",
    fat_percentage: str = "32.50",
    session_date: str = "2024-03-01T12:00:00Z",
    with_composition: bool = True,
) -> dict[str, Any]:
    session_id = str(uuid.uuid4())
    medication_id = str(uuid.uuid4())
    composition = None
    if with_composition:
        composition = {
            "id": str(uuid.uuid4()),
            "patient_id": str(uuid.uuid4()),
            "session_id": session_id,
            "weight_kg": weight_kg,
            "fat_percentage": fat_percentage,
            "fat_kg": "29.25",
            "muscle_mass_percentage": "35.0",
            "h2o_percentage": "50.0",
            "metabolic_age": 45,
            "visceral_fat": 12,
            "created_at": session_date,
        }
    return {
        "id": session_id,
        "cycle_id": cycle_id,
        "medication_id": medication_id,
        "activator_id": None,
        "dosage_mg": 2.5,
        "session_date": session_date,
        "notes": None,
        "created_at": session_date,
        "medication": {
            "id": medication_id,
            "name": "Semaglutide",
            "created_at": "2024-01-01T00:00:00Z",
        },
        "activator": None,
        "body_composition": composition,
    }


def build_cycle(
    patient_id: str,
    *,
    max_sessions: int = 8,
    weights: list[str] | None = None,
) -> dict[str, Any]:
    cycle_id = str(uuid.uuid4())
    sessions = [
        build_session(cycle_id, weight_kg=weight, session_date=f"2024-03-{index + 1:02d}T12:00:00Z")
        for index, weight in enumerate(weights or [])
    ]
    return {
        "id": cycle_id,
        "patient_id": patient_id,
        "max_sessions": max_sessions,
        "periodicity": "weekly",
        "type": "normal",
        "cycle_date": "2024-03-01T09:00:00Z",
        "created_at": "2024-03-01T09:00:00Z",
        "sessions": sessions,
    }


@pytest.fixture()
def make_cycle() -> Callable[..., dict[str, Any]]:
    return build_cycle


@pytest.fixture()
def make_session() -> Callable[..., dict[str, Any]]:
    return build_session
