"""Patient records held by the backend."""

from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import date, datetime, tzinfo
from typing import Any

from clinic_portal.integrations.backend_client import BackendClient, BackendClientError
from clinic_portal.schemas.cycle import CycleRead
from clinic_portal.schemas.patient import (
    PatientCreate,
    PatientsListResponse,
    PatientSummary,
    PatientSummaryBase,
    PatientUpdate,
)
from clinic_portal.services import cycle_service
from clinic_portal.services.composition_trends import summary_trends
from clinic_portal.services.formatting import calculate_age, format_date_pt, get_initials

logger = logging.getLogger(__name__)

_UNAVAILABLE = "Could not connect to the patients server. Try again."


async def list_patients(
    client: BackendClient,
    *,
    token: str,
    search: str | None = None,
    page: int | None = None,
    page_size: int | None = None,
) -> PatientsListResponse:
    """Return one page of the patient listing."""
    data = await client.get(
        "/patients/listing",
        token=token,
        params={"search": search, "page": page, "page_size": page_size},
        error_detail="Could not load the patients.",
        unavailable_detail=_UNAVAILABLE,
    )
    return PatientsListResponse.model_validate(data)


async def create_patient(client: BackendClient, *, token: str, payload: PatientCreate) -> Any:
    return await client.post(
        "/patients",
        token=token,
        json=payload.model_dump(mode="json"),
        error_detail="Could not create the patient.",
        unavailable_detail="Could not connect to the server. Try again.",
    )


async def update_patient(
    client: BackendClient, *, token: str, patient_id: uuid.UUID, payload: PatientUpdate
) -> Any:
    return await client.put(
        f"/patients/{patient_id}",
        token=token,
        json=payload.model_dump(mode="json", exclude_unset=True),
        error_detail="Could not update the patient.",
        unavailable_detail=_UNAVAILABLE,
    )


async def delete_patient(client: BackendClient, *, token: str, patient_id: uuid.UUID) -> Any:
    return await client.delete(
        f"/patients/{patient_id}",
        token=token,
        error_detail="Could not remove the patient.",
        unavailable_detail=_UNAVAILABLE,
    )


async def _cycles_or_empty(
    client: BackendClient, *, token: str, patient_id: uuid.UUID
) -> list[CycleRead]:
    # A patient page still renders without its cycles.
    try:
        return await cycle_service.list_cycles(client, token=token, patient_id=patient_id)
    except BackendClientError:
        logger.warning("Failed to load cycles for patient %s", patient_id)
        return []


def _date_label(moment: datetime | None, tz: tzinfo) -> str | None:
    if moment is None:
        return None
    if moment.tzinfo is not None:
        moment = moment.astimezone(tz)
    return format_date_pt(moment)


async def get_patient_summary(
    client: BackendClient,
    *,
    token: str,
    patient_id: uuid.UUID,
    tz: tzinfo,
    today: date | None = None,
) -> PatientSummary:
    """Merge the backend summary with the patient's cycles and derived values.

    Cycles are fetched while the summary loads; a failed summary cancels that
    fetch before the error propagates.
    """
    cycles_task = asyncio.create_task(
        _cycles_or_empty(client, token=token, patient_id=patient_id)
    )
    try:
        summary_data = await client.get(
            f"/patients/{patient_id}/summary",
            token=token,
            error_detail="Could not load the patient summary.",
            unavailable_detail=_UNAVAILABLE,
        )
    except BaseException:
        cycles_task.cancel()
        raise
    cycles = await cycles_task

    base = PatientSummaryBase.model_validate(summary_data)
    trends = summary_trends(base.body_composition_initial, base.body_composition_latest)
    return PatientSummary(
        **base.model_dump(),
        cycles=cycle_service.build_cycle_views(cycles, tz=tz),
        age=calculate_age(base.birth_date, today=today),
        initials=get_initials(base.name),
        first_session_label=_date_label(base.first_session_date, tz),
        last_session_label=_date_label(base.last_session_date, tz),
        composition_trends={
            name: cycle_service.trend_read(trend, name)
            for name, trend in trends.items()
        },
    )
