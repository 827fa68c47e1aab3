"""Activators, medications and substances held by the backend."""

from __future__ import annotations

import uuid
from typing import Any

from clinic_portal.integrations.backend_client import BackendClient
from clinic_portal.schemas.activator import ActivatorCreate, ActivatorRead, ActivatorUpdate
from clinic_portal.schemas.medication import MedicationCreate, MedicationRead, MedicationUpdate
from clinic_portal.schemas.substance import SubstanceCreate, SubstanceRead, SubstanceUpdate


async def list_activators(client: BackendClient, *, token: str) -> list[ActivatorRead]:
    data = await client.get(
        "/activators",
        token=token,
        error_detail="Could not load the metabolic activators.",
        unavailable_detail="Could not connect to the activators server. Try again.",
    )
    return [ActivatorRead.model_validate(item) for item in data or []]


async def create_activator(
    client: BackendClient, *, token: str, payload: ActivatorCreate
) -> Any:
    return await client.post(
        "/activators",
        token=token,
        json=payload.model_dump(mode="json"),
        error_detail="Could not create the activator.",
        unavailable_detail="Could not connect to the activators server. Try again.",
    )


async def update_activator(
    client: BackendClient, *, token: str, activator_id: uuid.UUID, payload: ActivatorUpdate
) -> Any:
    return await client.put(
        f"/activators/{activator_id}",
        token=token,
        json=payload.model_dump(mode="json"),
        error_detail="Could not update the activator.",
        unavailable_detail="Could not connect to the activators server. Try again.",
    )


async def delete_activator(client: BackendClient, *, token: str, activator_id: uuid.UUID) -> Any:
    return await client.delete(
        f"/activators/{activator_id}",
        token=token,
        error_detail="Could not remove the activator.",
        unavailable_detail="Could not connect to the activators server. Try again.",
    )


async def list_medications(client: BackendClient, *, token: str) -> list[MedicationRead]:
    data = await client.get(
        "/medications",
        token=token,
        error_detail="Could not load the medications.",
        unavailable_detail="Could not connect to the medications server. Try again.",
    )
    return [MedicationRead.model_validate(item) for item in data or []]


async def create_medication(
    client: BackendClient, *, token: str, payload: MedicationCreate
) -> Any:
    return await client.post(
        "/medications",
        token=token,
        json=payload.model_dump(mode="json"),
        error_detail="Could not create the medication.",
        unavailable_detail="Could not connect to the medications server. Try again.",
    )


async def update_medication(
    client: BackendClient, *, token: str, medication_id: uuid.UUID, payload: MedicationUpdate
) -> Any:
    return await client.put(
        f"/medications/{medication_id}",
        token=token,
        json=payload.model_dump(mode="json"),
        error_detail="Could not update the medication.",
        unavailable_detail="Could not connect to the medications server. Try again.",
    )


async def delete_medication(
    client: BackendClient, *, token: str, medication_id: uuid.UUID
) -> Any:
    return await client.delete(
        f"/medications/{medication_id}",
        token=token,
        error_detail="Could not remove the medication.",
        unavailable_detail="Could not connect to the medications server. Try again.",
    )


async def list_substances(client: BackendClient, *, token: str) -> list[SubstanceRead]:
    data = await client.get(
        "/substances",
        token=token,
        error_detail="Could not load the substances.",
        unavailable_detail="Could not connect to the substances server. Try again.",
    )
    return [SubstanceRead.model_validate(item) for item in data or []]


async def create_substance(
    client: BackendClient, *, token: str, payload: SubstanceCreate
) -> Any:
    return await client.post(
        "/substances",
        token=token,
        json=payload.model_dump(mode="json"),
        error_detail="Could not create the substance.",
        unavailable_detail="Could not connect to the substances server. Try again.",
    )


async def update_substance(
    client: BackendClient, *, token: str, substance_id: uuid.UUID, payload: SubstanceUpdate
) -> Any:
    return await client.put(
        f"/substances/{substance_id}",
        token=token,
        json=payload.model_dump(mode="json"),
        error_detail="Could not update the substance.",
        unavailable_detail="Could not connect to the substances server. Try again.",
    )


async def delete_substance(
    client: BackendClient, *, token: str, substance_id: uuid.UUID
) -> Any:
    return await client.delete(
        f"/substances/{substance_id}",
        token=token,
        error_detail="Could not remove the substance.",
        unavailable_detail="Could not connect to the substances server. Try again.",
    )
