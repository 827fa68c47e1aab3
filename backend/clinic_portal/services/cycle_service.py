"""Treatment cycles and their sessions."""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from datetime import datetime, tzinfo
from typing import Any

from clinic_portal.integrations.backend_client import BackendClient
from clinic_portal.schemas.cycle import (
    CycleForm,
    CycleRead,
    CycleView,
    MetricTrendRead,
    PlannedSlotRead,
    SessionView,
)
from clinic_portal.schemas.session import SessionForm
from clinic_portal.services.composition_trends import MetricTrend, TrendDirection, session_trends
from clinic_portal.services.cycle_planner import CycleSessionPlanner
from clinic_portal.services.formatting import datetime_local_value, format_number_pt
from clinic_portal.services.session_payload import build_cycle_payload, build_session_payload


# Whole-number metrics are shown without decimals.
_WHOLE_METRICS = frozenset({"metabolic_age", "visceral_fat"})


def trend_read(trend: MetricTrend | None, metric: str = "") -> MetricTrendRead | None:
    """Serialize a trend with a signed ``pt`` delta; equal values carry no display."""
    if trend is None:
        return None
    display = None
    if trend.direction is not TrendDirection.EQUAL:
        digits = 0 if metric in _WHOLE_METRICS else 1
        sign = "+" if trend.difference > 0 else "-"
        display = f"{sign}{format_number_pt(abs(trend.difference), digits, digits)}"
    return MetricTrendRead(
        difference=trend.difference, direction=trend.direction, display=display
    )


def build_cycle_view(
    cycle: CycleRead, *, tz: tzinfo, now: datetime | None = None
) -> CycleView:
    """Attach progress, planned slots and per-session trends to a cycle."""
    planner = CycleSessionPlanner(cycle.max_sessions, cycle.sessions)
    trends = session_trends([session.body_composition for session in cycle.sessions])
    default_date = datetime_local_value(now, tz=tz)

    sessions = [
        SessionView(
            **session.model_dump(),
            number=index + 1,
            trends={
                name: trend_read(trend, name) for name, trend in session_trend.items()
            },
        )
        for index, (session, session_trend) in enumerate(zip(cycle.sessions, trends))
    ]
    planned = [
        PlannedSlotRead(
            number=slot.number,
            label=slot.label,
            default_session_date=default_date,
        )
        for slot in planner.planned_slots()
    ]
    return CycleView(
        id=cycle.id,
        patient_id=cycle.patient_id,
        max_sessions=cycle.max_sessions,
        periodicity=cycle.periodicity,
        type=cycle.type,
        cycle_date=cycle.cycle_date,
        created_at=cycle.created_at,
        completed_sessions=planner.completed_count,
        remaining_sessions=planner.remaining_slots(),
        is_complete=planner.is_complete(),
        sessions=sessions,
        planned_slots=planned,
    )


def build_cycle_views(
    cycles: Sequence[CycleRead], *, tz: tzinfo, now: datetime | None = None
) -> list[CycleView]:
    return [build_cycle_view(cycle, tz=tz, now=now) for cycle in cycles]


async def list_cycles(
    client: BackendClient, *, token: str, patient_id: uuid.UUID
) -> list[CycleRead]:
    """Return the patient's cycles, each with sessions in backend order."""
    data = await client.get(
        f"/patients/{patient_id}/cycles",
        token=token,
        error_detail="Could not load the patient's cycles.",
        unavailable_detail="Could not connect to the cycles server. Try again.",
    )
    return [CycleRead.model_validate(item) for item in data or []]


async def create_cycle(
    client: BackendClient, *, token: str, patient_id: uuid.UUID, form: CycleForm
) -> Any:
    return await client.post(
        f"/patients/{patient_id}/cycles",
        token=token,
        json=build_cycle_payload(form),
        error_detail="Could not create the cycle.",
        unavailable_detail="Could not connect to the cycles server. Try again.",
    )


async def delete_cycle(client: BackendClient, *, token: str, cycle_id: uuid.UUID) -> Any:
    return await client.delete(
        f"/cycles/{cycle_id}",
        token=token,
        error_detail="Could not remove the cycle.",
        unavailable_detail="Could not connect to the cycles server. Try again.",
    )


async def create_session(
    client: BackendClient,
    *,
    token: str,
    cycle_id: uuid.UUID,
    form: SessionForm,
    tz: tzinfo,
) -> Any:
    return await client.post(
        f"/cycles/{cycle_id}/sessions",
        token=token,
        json=build_session_payload(str(cycle_id), form, tz=tz),
        error_detail="Could not create the session.",
        unavailable_detail="Could not connect to the sessions server. Try again in a moment.",
    )


async def delete_session(client: BackendClient, *, token: str, session_id: uuid.UUID) -> None:
    await client.delete(
        f"/sessions/{session_id}",
        token=token,
        error_detail="Could not delete the session.",
        unavailable_detail="Could not connect to the sessions server. Try again.",
    )
