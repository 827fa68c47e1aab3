"""Cycle and session API endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated, Any
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Response, status

from clinic_portal.api import deps
from clinic_portal.integrations.backend_client import BackendClient
from clinic_portal.schemas.common import SuccessResponse
from clinic_portal.schemas.session import SessionForm
from clinic_portal.services import cycle_service

router = APIRouter()


@router.delete("/cycles/{cycle_id}", summary="Remove cycle")
async def delete_cycle(
    cycle_id: uuid.UUID,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Any:
    data = await cycle_service.delete_cycle(client, token=token, cycle_id=cycle_id)
    return data if data is not None else SuccessResponse()


@router.post(
    "/cycles/{cycle_id}/sessions",
    status_code=status.HTTP_201_CREATED,
    summary="Register session",
)
async def create_session(
    cycle_id: uuid.UUID,
    form: SessionForm,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
    tz: Annotated[ZoneInfo, Depends(deps.get_clinic_timezone)],
) -> Any:
    """Convert the form values and forward them to the backend."""
    return await cycle_service.create_session(
        client, token=token, cycle_id=cycle_id, form=form, tz=tz
    )


@router.delete(
    "/sessions/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete session",
)
async def delete_session(
    session_id: uuid.UUID,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> Response:
    await cycle_service.delete_session(client, token=token, session_id=session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
