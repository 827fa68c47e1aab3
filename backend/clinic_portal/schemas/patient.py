"""Patient schemas."""

from __future__ import annotations

import enum
import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clinic_portal.schemas.cycle import CycleView, MetricTrendRead
from clinic_portal.schemas.medication import MedicationRead
from clinic_portal.services.formatting import parse_date_pt


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"


class TreatmentLocation(str, enum.Enum):
    CLINIC = "clinic"
    HOME = "home"


class PatientStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    COMPLETED = "completed"


def _coerce_birth_date(value: Any) -> Any:
    # The form sends dd/mm/yyyy; ISO dates pass through to pydantic.
    if isinstance(value, str) and "/" in value:
        parsed = parse_date_pt(value)
        if parsed is None:
            raise ValueError("Invalid date. Use the dd/mm/yyyy format")
        return parsed
    return value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and (not value.strip() or value == "none"):
        return None
    return value


class PatientCreate(BaseModel):
    """Payload for registering a patient."""

    name: str = Field(min_length=1)
    gender: Gender
    birth_date: date
    process_number: str | None = None
    treatment_location: TreatmentLocation
    preferred_medication_id: uuid.UUID | None = None

    @field_validator("birth_date", mode="before")
    @classmethod
    def _parse_birth_date(cls, value: Any) -> Any:
        return _coerce_birth_date(value)

    @field_validator("process_number", "preferred_medication_id", mode="before")
    @classmethod
    def _blank_optional(cls, value: Any) -> Any:
        return _blank_to_none(value)


class PatientUpdate(BaseModel):
    """Mutable patient fields."""

    name: str | None = Field(default=None, min_length=1)
    gender: Gender | None = None
    birth_date: date | None = None
    process_number: str | None = None
    treatment_location: TreatmentLocation | None = None
    preferred_medication_id: uuid.UUID | None = None
    status: PatientStatus | None = None

    @field_validator("birth_date", mode="before")
    @classmethod
    def _parse_birth_date(cls, value: Any) -> Any:
        return _coerce_birth_date(value)

    @field_validator("process_number", "preferred_medication_id", mode="before")
    @classmethod
    def _blank_optional(cls, value: Any) -> Any:
        return _blank_to_none(value)


class PatientListItem(BaseModel):
    id: uuid.UUID
    name: str
    process_number: str | None = None
    gender: Gender
    age: int
    current_cycle_number: int
    last_session_date: datetime | None = None
    created_at: datetime


class PatientsListResponse(BaseModel):
    """Paginated patient listing."""

    items: list[PatientListItem]
    page: int
    page_size: int
    total: int
    has_next: bool


class BodyCompositionSnapshot(BaseModel):
    """Measurements taken at a given moment, used for initial/latest comparison."""

    registered_at: datetime
    weight_kg: Decimal
    fat_percentage: Decimal
    fat_kg: Decimal
    muscle_mass_percentage: Decimal
    h2o_percentage: Decimal
    metabolic_age: int
    visceral_fat: int


class PatientSummaryBase(BaseModel):
    id: uuid.UUID
    name: str
    process_number: str | None = None
    gender: Gender
    birth_date: date
    treatment_location: TreatmentLocation
    status: PatientStatus
    preferred_medication: MedicationRead | None = None
    created_at: datetime
    first_session_date: datetime | None = None
    last_session_date: datetime | None = None
    body_composition_initial: BodyCompositionSnapshot | None = None
    body_composition_latest: BodyCompositionSnapshot | None = None

    model_config = ConfigDict(from_attributes=True)


class PatientSummary(PatientSummaryBase):
    """Patient summary merged with cycles and derived display values."""

    cycles: list[CycleView] = Field(default_factory=list)
    age: int | None = None
    initials: str = ""
    first_session_label: str | None = None
    last_session_label: str | None = None
    composition_trends: dict[str, MetricTrendRead | None] = Field(default_factory=dict)
