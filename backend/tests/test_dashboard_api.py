"""Dashboard reporting endpoints."""

from __future__ import annotations

import uuid

import pytest

pytestmark = pytest.mark.asyncio


async def test_stats(api_client, backend) -> None:
    stats = {
        "total_patients": 42,
        "sessions_last_30_days": 17,
        "total_weight_lost_kg": 310.5,
        "average_age": 44.2,
        "activators_usage": [{"name": "Mix A", "count": 5}],
        "medications_preference": [{"name": "Semaglutide", "count": 30}],
        "gender_distribution": [{"gender": "female", "count": 30}],
        "treatment_location_distribution": [{"location": "clinic", "count": 40}],
    }
    backend.add("GET", "/dashboard/stats", json=stats)

    response = await api_client.get("/api/dashboard/stats")

    assert response.status_code == 200
    assert response.json() == stats


async def test_weight_loss_ranking_forwards_date_range(api_client, backend) -> None:
    patient_id = str(uuid.uuid4())
    backend.add(
        "GET",
        "/dashboard/weight-loss-ranking",
        json={
            "start_date": "2024-01-01",
            "end_date": "2024-03-31",
            "items": [
                {
                    "rank": 1,
                    "patient_id": patient_id,
                    "patient_name": "Maria",
                    "weight_loss_kg": 12.5,
                    "initial_weight_kg": 100.0,
                    "final_weight_kg": 87.5,
                    "sessions_count": 8,
                }
            ],
        },
    )

    response = await api_client.get(
        "/api/dashboard/weight-loss-ranking",
        params={"start_date": "2024-01-01", "end_date": "2024-03-31"},
    )

    assert response.status_code == 200
    assert response.json()["items"][0]["patient_id"] == patient_id
    upstream = backend.last("GET", "/dashboard/weight-loss-ranking")
    assert dict(upstream.url.params) == {"start_date": "2024-01-01", "end_date": "2024-03-31"}


async def test_weight_gain_ranking_without_range(api_client, backend) -> None:
    backend.add("GET", "/dashboard/weight-gain-ranking", json={"items": []})

    response = await api_client.get("/api/dashboard/weight-gain-ranking")

    assert response.status_code == 200
    assert response.json() == {"start_date": None, "end_date": None, "items": []}
    assert not backend.last("GET", "/dashboard/weight-gain-ranking").url.params


async def test_medication_dosage(api_client, backend) -> None:
    backend.add(
        "GET",
        "/dashboard/medication-dosage",
        json={
            "items": [
                {"medication_name": "Semaglutide", "dosage_mg": 0.5, "patients_count": 12}
            ]
        },
    )

    response = await api_client.get(
        "/api/dashboard/medication-dosage", params={"start_date": "2024-02-01"}
    )

    assert response.status_code == 200
    assert response.json()["items"][0]["patients_count"] == 12
    assert dict(backend.last("GET", "/dashboard/medication-dosage").url.params) == {
        "start_date": "2024-02-01"
    }


async def test_invalid_date_is_rejected(api_client, backend) -> None:
    response = await api_client.get(
        "/api/dashboard/weight-loss-ranking", params={"start_date": "31/01/2024"}
    )

    assert response.status_code == 422
    assert backend.requests == []
