"""Dashboard reporting endpoints."""

from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends

from clinic_portal.api import deps
from clinic_portal.integrations.backend_client import BackendClient
from clinic_portal.schemas.dashboard import (
    DashboardStats,
    MedicationDosageReport,
    WeightGainRanking,
    WeightLossRanking,
)
from clinic_portal.services import dashboard_service

router = APIRouter()


@router.get("/stats", response_model=DashboardStats, summary="Dashboard statistics")
async def get_stats(
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
) -> DashboardStats:
    return await dashboard_service.get_stats(client, token=token)


@router.get(
    "/weight-loss-ranking",
    response_model=WeightLossRanking,
    summary="Patients ranked by weight lost",
)
async def get_weight_loss_ranking(
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
    start_date: date | None = None,
    end_date: date | None = None,
) -> WeightLossRanking:
    return await dashboard_service.get_weight_loss_ranking(
        client, token=token, start_date=start_date, end_date=end_date
    )


@router.get(
    "/weight-gain-ranking",
    response_model=WeightGainRanking,
    summary="Patients ranked by weight gained",
)
async def get_weight_gain_ranking(
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
    start_date: date | None = None,
    end_date: date | None = None,
) -> WeightGainRanking:
    return await dashboard_service.get_weight_gain_ranking(
        client, token=token, start_date=start_date, end_date=end_date
    )


@router.get(
    "/medication-dosage",
    response_model=MedicationDosageReport,
    summary="Patients per medication dosage",
)
async def get_medication_dosage(
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    token: Annotated[str, Depends(deps.get_access_token)],
    start_date: date | None = None,
    end_date: date | None = None,
) -> MedicationDosageReport:
    return await dashboard_service.get_medication_dosage(
        client, token=token, start_date=start_date, end_date=end_date
    )
