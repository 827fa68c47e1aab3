"""Activator, medication and substance endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status

from clinic_portal.api import deps
from clinic_portal.integrations.backend_client import BackendClient
from clinic_portal.schemas.activator import ActivatorCreate, ActivatorRead, ActivatorUpdate
from clinic_portal.schemas.common import SuccessResponse
from clinic_portal.schemas.medication import MedicationCreate, MedicationRead, MedicationUpdate
from clinic_portal.schemas.substance import SubstanceCreate, SubstanceRead, SubstanceUpdate
from clinic_portal.services import catalog_service

router = APIRouter()


def _ack(data: Any) -> Any:
    return data if data is not None else SuccessResponse()


# Activators


@router.get(
    "/activators",
    response_model=list[ActivatorRead],
    tags=["activators"],
    summary="List activators",
)
async def list_activators(
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> list[ActivatorRead]:
    return await catalog_service.list_activators(client, token=token)


@router.post(
    "/activators",
    status_code=status.HTTP_201_CREATED,
    tags=["activators"],
    summary="Create activator",
)
async def create_activator(
    payload: ActivatorCreate,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    return await catalog_service.create_activator(client, token=token, payload=payload)


@router.patch("/activators/{activator_id}", tags=["activators"], summary="Update activator")
async def update_activator(
    activator_id: uuid.UUID,
    payload: ActivatorUpdate,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    return _ack(
        await catalog_service.update_activator(
            client, token=token, activator_id=activator_id, payload=payload
        )
    )


@router.delete("/activators/{activator_id}", tags=["activators"], summary="Remove activator")
async def delete_activator(
    activator_id: uuid.UUID,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    return _ack(
        await catalog_service.delete_activator(client, token=token, activator_id=activator_id)
    )


# Medications


@router.get(
    "/medications",
    response_model=list[MedicationRead],
    tags=["medications"],
    summary="List medications",
)
async def list_medications(
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> list[MedicationRead]:
    return await catalog_service.list_medications(client, token=token)


@router.post(
    "/medications",
    status_code=status.HTTP_201_CREATED,
    tags=["medications"],
    summary="Create medication",
)
async def create_medication(
    payload: MedicationCreate,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    return await catalog_service.create_medication(client, token=token, payload=payload)


@router.patch("/medications/{medication_id}", tags=["medications"], summary="Update medication")
async def update_medication(
    medication_id: uuid.UUID,
    payload: MedicationUpdate,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    return _ack(
        await catalog_service.update_medication(
            client, token=token, medication_id=medication_id, payload=payload
        )
    )


@router.delete("/medications/{medication_id}", tags=["medications"], summary="Remove medication")
async def delete_medication(
    medication_id: uuid.UUID,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    return _ack(
        await catalog_service.delete_medication(client, token=token, medication_id=medication_id)
    )


# Substances


@router.get(
    "/substances",
    response_model=list[SubstanceRead],
    tags=["substances"],
    summary="List substances",
)
async def list_substances(
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> list[SubstanceRead]:
    return await catalog_service.list_substances(client, token=token)


@router.post(
    "/substances",
    status_code=status.HTTP_201_CREATED,
    tags=["substances"],
    summary="Create substance",
)
async def create_substance(
    payload: SubstanceCreate,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    return await catalog_service.create_substance(client, token=token, payload=payload)


@router.patch("/substances/{substance_id}", tags=["substances"], summary="Update substance")
async def update_substance(
    substance_id: uuid.UUID,
    payload: SubstanceUpdate,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    return _ack(
        await catalog_service.update_substance(
            client, token=token, substance_id=substance_id, payload=payload
        )
    )


@router.delete("/substances/{substance_id}", tags=["substances"], summary="Remove substance")
async def delete_substance(
    substance_id: uuid.UUID,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    return _ack(
        await catalog_service.delete_substance(client, token=token, substance_id=substance_id)
    )
