"""Dashboard figures aggregated by the backend."""

from __future__ import annotations

from datetime import date

from clinic_portal.integrations.backend_client import BackendClient
from clinic_portal.schemas.dashboard import (
    DashboardStats,
    MedicationDosageReport,
    WeightGainRanking,
    WeightLossRanking,
)

_UNAVAILABLE = "Could not connect to the server. Try again."


def _date_range(start_date: date | None, end_date: date | None) -> dict[str, str | None]:
    return {
        "start_date": start_date.isoformat() if start_date else None,
        "end_date": end_date.isoformat() if end_date else None,
    }


async def get_stats(client: BackendClient, *, token: str) -> DashboardStats:
    data = await client.get(
        "/dashboard/stats",
        token=token,
        error_detail="Could not load the dashboard statistics.",
        unavailable_detail=_UNAVAILABLE,
    )
    return DashboardStats.model_validate(data)


async def get_weight_loss_ranking(
    client: BackendClient,
    *,
    token: str,
    start_date: date | None = None,
    end_date: date | None = None,
) -> WeightLossRanking:
    data = await client.get(
        "/dashboard/weight-loss-ranking",
        token=token,
        params=_date_range(start_date, end_date),
        error_detail="Could not load the weight loss ranking.",
        unavailable_detail=_UNAVAILABLE,
    )
    return WeightLossRanking.model_validate(data)


async def get_weight_gain_ranking(
    client: BackendClient,
    *,
    token: str,
    start_date: date | None = None,
    end_date: date | None = None,
) -> WeightGainRanking:
    data = await client.get(
        "/dashboard/weight-gain-ranking",
        token=token,
        params=_date_range(start_date, end_date),
        error_detail="Could not load the weight gain ranking.",
        unavailable_detail=_UNAVAILABLE,
    )
    return WeightGainRanking.model_validate(data)


async def get_medication_dosage(
    client: BackendClient,
    *,
    token: str,
    start_date: date | None = None,
    end_date: date | None = None,
) -> MedicationDosageReport:
    data = await client.get(
        "/dashboard/medication-dosage",
        token=token,
        params=_date_range(start_date, end_date),
        error_detail="Could not load the medication dosage report.",
        unavailable_detail=_UNAVAILABLE,
    )
    return MedicationDosageReport.model_validate(data)
