"""Dashboard reporting schemas."""

from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel, Field


class ActivatorUsageItem(BaseModel):
    name: str
    count: int


class MedicationPreferenceItem(BaseModel):
    name: str
    count: int


class GenderDistributionItem(BaseModel):
    gender: str
    count: int


class TreatmentLocationDistributionItem(BaseModel):
    location: str
    count: int


class DashboardStats(BaseModel):
    """Headline figures for the dashboard landing page."""

    total_patients: int
    sessions_last_30_days: int
    total_weight_lost_kg: float
    average_age: float | None = None
    activators_usage: list[ActivatorUsageItem] = Field(default_factory=list)
    medications_preference: list[MedicationPreferenceItem] = Field(default_factory=list)
    gender_distribution: list[GenderDistributionItem] = Field(default_factory=list)
    treatment_location_distribution: list[TreatmentLocationDistributionItem] = Field(
        default_factory=list
    )


class WeightLossRankingItem(BaseModel):
    rank: int
    patient_id: uuid.UUID
    patient_name: str
    weight_loss_kg: float
    initial_weight_kg: float
    final_weight_kg: float
    sessions_count: int


class WeightGainRankingItem(BaseModel):
    rank: int
    patient_id: uuid.UUID
    patient_name: str
    weight_gain_kg: float
    initial_weight_kg: float
    final_weight_kg: float
    sessions_count: int


class MedicationDosageItem(BaseModel):
    medication_name: str
    dosage_mg: float
    patients_count: int


class DateRangeResponse(BaseModel):
    start_date: date | None = None
    end_date: date | None = None


class WeightLossRanking(DateRangeResponse):
    items: list[WeightLossRankingItem] = Field(default_factory=list)


class WeightGainRanking(DateRangeResponse):
    items: list[WeightGainRankingItem] = Field(default_factory=list)


class MedicationDosageReport(DateRangeResponse):
    items: list[MedicationDosageItem] = Field(default_factory=list)
