"""Cycle and session endpoints."""

from __future__ import annotations

import re
import uuid

import pytest

pytestmark = pytest.mark.asyncio


def _session_form(**overrides) -> dict:
    form = {
        "session_date": "2024-03-15T09:30",
        "medication_id": str(uuid.uuid4()),
        "activator_id": "",
        "dosage_mg": "",
        "notes": "",
        "body_composition": {
            "weight_kg": "88,5",
            "fat_percentage": "31,2",
            "fat_kg": "27.6",
            "muscle_mass_percentage": "35",
            "h2o_percentage": "49,9",
            "metabolic_age": "47",
            "visceral_fat": "11",
        },
    }
    form.update(overrides)
    return form


async def test_create_cycle_anchors_date(api_client, backend) -> None:
    patient_id = str(uuid.uuid4())
    created = {"id": str(uuid.uuid4())}
    backend.add("POST", f"/patients/{patient_id}/cycles", status_code=201, json=created)

    response = await api_client.post(
        f"/api/patients/{patient_id}/cycles",
        json={"cycle_date": "2024-03-15", "max_sessions": 6, "periodicity": "biweekly"},
    )

    assert response.status_code == 201
    assert response.json() == created
    assert backend.last_json("POST", f"/patients/{patient_id}/cycles") == {
        "cycle_date": "2024-03-15T09:00:00.000Z",
        "max_sessions": 6,
        "periodicity": "biweekly",
        "type": "normal",
    }


async def test_create_cycle_limits_sessions(api_client, backend) -> None:
    patient_id = str(uuid.uuid4())

    response = await api_client.post(
        f"/api/patients/{patient_id}/cycles",
        json={"cycle_date": "2024-03-15", "max_sessions": 20},
    )

    assert response.status_code == 422
    assert backend.requests == []


async def test_cycles_include_planned_slots_and_trends(api_client, backend, make_cycle) -> None:
    patient_id = str(uuid.uuid4())
    cycle = make_cycle(patient_id, max_sessions=8, weights=["90.00", "88.50", "88.50"])
    backend.add("GET", f"/patients/{patient_id}/cycles", json=[cycle])

    response = await api_client.get(f"/api/patients/{patient_id}/cycles")

    assert response.status_code == 200
    [view] = response.json()
    assert view["completed_sessions"] == 3
    assert view["remaining_sessions"] == 5
    assert view["is_complete"] is False
    assert [slot["number"] for slot in view["planned_slots"]] == [4, 5, 6, 7, 8]
    assert view["planned_slots"][0]["label"] == "Session 4"
    assert re.fullmatch(
        r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}", view["planned_slots"][0]["default_session_date"]
    )

    sessions = view["sessions"]
    assert [session["number"] for session in sessions] == [1, 2, 3]
    assert all(trend is None for trend in sessions[0]["trends"].values())
    assert sessions[1]["trends"]["weight_kg"] == {
        "difference": -1.5,
        "direction": "down",
        "display": "-1,5",
    }
    assert sessions[2]["trends"]["weight_kg"]["direction"] == "equal"
    assert sessions[2]["trends"]["weight_kg"]["display"] is None


async def test_session_without_composition_has_no_trends(
    api_client, backend, make_cycle, make_session
) -> None:
    patient_id = str(uuid.uuid4())
    cycle = make_cycle(patient_id, max_sessions=3, weights=["90.00"])
    cycle["sessions"].append(make_session(cycle["id"], with_composition=False))
    backend.add("GET", f"/patients/{patient_id}/cycles", json=[cycle])

    response = await api_client.get(f"/api/patients/{patient_id}/cycles")

    [view] = response.json()
    assert view["sessions"][1]["body_composition"] is None
    assert all(trend is None for trend in view["sessions"][1]["trends"].values())
    assert [slot["number"] for slot in view["planned_slots"]] == [3]


async def test_overbooked_cycle_has_no_planned_slots(api_client, backend, make_cycle) -> None:
    patient_id = str(uuid.uuid4())
    cycle = make_cycle(patient_id, max_sessions=2, weights=["90", "89", "88"])
    backend.add("GET", f"/patients/{patient_id}/cycles", json=[cycle])

    response = await api_client.get(f"/api/patients/{patient_id}/cycles")

    [view] = response.json()
    assert view["completed_sessions"] == 3
    assert view["remaining_sessions"] == 0
    assert view["is_complete"] is True
    assert view["planned_slots"] == []


async def test_create_session_builds_backend_payload(api_client, backend) -> None:
    cycle_id = str(uuid.uuid4())
    medication_id = str(uuid.uuid4())
    created = {"id": str(uuid.uuid4()), "cycle_id": cycle_id}
    backend.add("POST", f"/cycles/{cycle_id}/sessions", status_code=201, json=created)

    response = await api_client.post(
        f"/api/cycles/{cycle_id}/sessions", json=_session_form(medication_id=medication_id)
    )

    assert response.status_code == 201
    assert response.json() == created
    assert backend.last_json("POST", f"/cycles/{cycle_id}/sessions") == {
        "cycle_id": cycle_id,
        "session_date": "2024-03-15T12:30:00.000Z",
        "notes": None,
        "medication_id": medication_id,
        "activator_id": None,
        "dosage_mg": None,
        "body_composition": {
            "weight_kg": 88.5,
            "fat_percentage": 31.2,
            "fat_kg": 27.6,
            "muscle_mass_percentage": 35.0,
            "h2o_percentage": 49.9,
            "metabolic_age": 47,
            "visceral_fat": 11,
        },
    }


async def test_create_session_with_dosage_and_notes(api_client, backend) -> None:
    cycle_id = str(uuid.uuid4())
    activator_id = str(uuid.uuid4())
    backend.add("POST", f"/cycles/{cycle_id}/sessions", status_code=201, json={})

    response = await api_client.post(
        f"/api/cycles/{cycle_id}/sessions",
        json=_session_form(
            medication_id=str(uuid.uuid4()),
            activator_id=activator_id,
            dosage_mg="0,25",
            notes="Tolerated",
        ),
    )

    assert response.status_code == 201
    payload = backend.last_json("POST", f"/cycles/{cycle_id}/sessions")
    assert payload["activator_id"] == activator_id
    assert payload["dosage_mg"] == 0.25
    assert payload["notes"] == "Tolerated"


@pytest.mark.parametrize(
    "overrides",
    [
        {"session_date": ""},
        {"medication_id": ""},
        {"dosage_mg": "0"},
        {"notes": "x" * 501},
        {
            "body_composition": {
                "weight_kg": "88,5",
                "fat_percentage": "90",
                "fat_kg": "27.6",
                "muscle_mass_percentage": "35",
                "h2o_percentage": "49,9",
                "metabolic_age": "47",
                "visceral_fat": "11",
            }
        },
    ],
)
async def test_invalid_session_form_is_rejected(api_client, backend, overrides) -> None:
    cycle_id = str(uuid.uuid4())

    response = await api_client.post(
        f"/api/cycles/{cycle_id}/sessions",
        json=_session_form(**overrides),
    )

    assert response.status_code == 422
    assert backend.requests == []


async def test_backend_validation_errors_are_relayed(api_client, backend) -> None:
    cycle_id = str(uuid.uuid4())
    errors = {"detail": [{"loc": ["body", "medication_id"], "msg": "not found"}]}
    backend.add("POST", f"/cycles/{cycle_id}/sessions", status_code=422, json=errors)

    response = await api_client.post(
        f"/api/cycles/{cycle_id}/sessions", json=_session_form()
    )

    assert response.status_code == 422
    assert response.json() == errors


async def test_delete_cycle(api_client, backend) -> None:
    cycle_id = str(uuid.uuid4())
    backend.add("DELETE", f"/cycles/{cycle_id}", status_code=204)

    response = await api_client.delete(f"/api/cycles/{cycle_id}")

    assert response.status_code == 200
    assert response.json() == {"success": True}


async def test_delete_session_returns_no_content(api_client, backend) -> None:
    session_id = str(uuid.uuid4())
    backend.add("DELETE", f"/sessions/{session_id}", status_code=204)

    response = await api_client.delete(f"/api/sessions/{session_id}")

    assert response.status_code == 204
    assert response.content == b""
    assert backend.last("DELETE", f"/sessions/{session_id}").headers["authorization"] == (
        "Bearer test-token"
    )


async def test_delete_session_failure_is_relayed(api_client, backend) -> None:
    session_id = str(uuid.uuid4())
    backend.add("DELETE", f"/sessions/{session_id}", status_code=404)

    response = await api_client.delete(f"/api/sessions/{session_id}")

    assert response.status_code == 404
    assert response.json() == {"detail": "Could not delete the session."}
