"""Patient API endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated, Any
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query, status

from clinic_portal.api import deps
from clinic_portal.integrations.backend_client import BackendClient
from clinic_portal.schemas.common import SuccessResponse
from clinic_portal.schemas.cycle import CycleForm, CycleView
from clinic_portal.schemas.patient import (
    PatientCreate,
    PatientsListResponse,
    PatientSummary,
    PatientUpdate,
)
from clinic_portal.services import cycle_service, patient_service

router = APIRouter()


@router.get("", response_model=PatientsListResponse, summary="List patients")
async def list_patients(
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
    search: str | None = None,
    page: Annotated[int | None, Query(ge=1)] = None,
    page_size: Annotated[int | None, Query(ge=1, le=100)] = None,
) -> PatientsListResponse:
    return await patient_service.list_patients(
        client, token=token, search=search, page=page, page_size=page_size
    )


@router.post("", status_code=status.HTTP_201_CREATED, summary="Register patient")
async def create_patient(
    payload: PatientCreate,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    return await patient_service.create_patient(client, token=token, payload=payload)


@router.put("/{patient_id}", summary="Update patient")
async def update_patient(
    patient_id: uuid.UUID,
    payload: PatientUpdate,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    data = await patient_service.update_patient(
        client, token=token, patient_id=patient_id, payload=payload
    )
    return data if data is not None else SuccessResponse()


@router.delete("/{patient_id}", summary="Remove patient")
async def delete_patient(
    patient_id: uuid.UUID,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    data = await patient_service.delete_patient(client, token=token, patient_id=patient_id)
    return data if data is not None else SuccessResponse()


@router.get(
    "/{patient_id}/summary",
    response_model=PatientSummary,
    summary="Patient summary with cycles",
)
async def get_patient_summary(
    patient_id: uuid.UUID,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
    tz: Annotated[ZoneInfo, Depends(deps.get_clinic_timezone)],
) -> PatientSummary:
    return await patient_service.get_patient_summary(
        client, token=token, patient_id=patient_id, tz=tz
    )


@router.get(
    "/{patient_id}/cycles",
    response_model=list[CycleView],
    summary="List patient cycles with planned slots",
)
async def list_patient_cycles(
    patient_id: uuid.UUID,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
    tz: Annotated[ZoneInfo, Depends(deps.get_clinic_timezone)],
) -> list[CycleView]:
    cycles = await cycle_service.list_cycles(client, token=token, patient_id=patient_id)
    return cycle_service.build_cycle_views(cycles, tz=tz)


@router.post(
    "/{patient_id}/cycles",
    status_code=status.HTTP_201_CREATED,
    summary="Create cycle",
)
async def create_cycle(
    patient_id: uuid.UUID,
    form: CycleForm,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    return await cycle_service.create_cycle(
        client, token=token, patient_id=patient_id, form=form
    )
