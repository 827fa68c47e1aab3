"""Session and body-composition schemas."""

from __future__ import annotations

import math
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from clinic_portal.schemas.activator import ActivatorRead
from clinic_portal.schemas.medication import MedicationRead
from clinic_portal.services.session_payload import parse_decimal


def _decimal_field(
    label: str,
    *,
    minimum: float | None = None,
    maximum: float | None = None,
    integer: bool = False,
) -> AfterValidator:
    def _validate(value: str) -> str:
        if not value.strip():
            raise ValueError(f"{label} is required")
        number = parse_decimal(value)
        if math.isnan(number):
            raise ValueError(f"{label} is invalid")
        if integer and not number.is_integer():
            raise ValueError(f"{label} must be a whole number")
        if minimum is not None and number < minimum:
            raise ValueError(f"Minimum value is {minimum:g}")
        if maximum is not None and number > maximum:
            raise ValueError(f"Maximum value is {maximum:g}")
        return value

    return AfterValidator(_validate)


class BodyCompositionBase(BaseModel):
    weight_kg: Decimal
    fat_percentage: Decimal
    fat_kg: Decimal
    muscle_mass_percentage: Decimal
    h2o_percentage: Decimal
    metabolic_age: int
    visceral_fat: int


class BodyCompositionRead(BodyCompositionBase):
    """Measurements recorded at a session."""

    id: uuid.UUID | None = None
    patient_id: uuid.UUID | None = None
    session_id: uuid.UUID | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class SessionRead(BaseModel):
    """Serialized session as returned inside a cycle."""

    id: uuid.UUID
    cycle_id: uuid.UUID
    medication_id: uuid.UUID
    activator_id: uuid.UUID | None = None
    dosage_mg: float | None = None
    session_date: datetime
    notes: str | None = None
    created_at: datetime
    medication: MedicationRead | None = None
    activator: ActivatorRead | None = None
    body_composition: BodyCompositionRead | None = None

    model_config = ConfigDict(from_attributes=True)


class BodyCompositionForm(BaseModel):
    """Raw measurement strings; either comma or dot decimals are accepted."""

    weight_kg: Annotated[str, _decimal_field("Weight (kg)", minimum=1)]
    fat_percentage: Annotated[str, _decimal_field("Fat (%)", minimum=1, maximum=80)]
    fat_kg: Annotated[str, _decimal_field("Fat (kg)", minimum=1)]
    muscle_mass_percentage: Annotated[
        str, _decimal_field("Muscle mass (%)", minimum=1, maximum=100)
    ]
    h2o_percentage: Annotated[str, _decimal_field("H2O (%)", minimum=1, maximum=80)]
    metabolic_age: Annotated[
        str, _decimal_field("Metabolic age", minimum=10, maximum=120, integer=True)
    ]
    visceral_fat: Annotated[
        str, _decimal_field("Visceral fat", minimum=1, maximum=40, integer=True)
    ]


class SessionForm(BaseModel):
    """Values submitted by the session registration form."""

    session_date: str = Field(min_length=1)
    medication_id: str = Field(min_length=1)
    activator_id: str | None = None
    dosage_mg: str | None = None
    notes: str | None = Field(default=None, max_length=500)
    body_composition: BodyCompositionForm

    @field_validator("session_date")
    @classmethod
    def _validate_session_date(cls, value: str) -> str:
        try:
            datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValueError("Enter the session date and time") from exc
        return value

    @field_validator("dosage_mg")
    @classmethod
    def _validate_dosage(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return value
        number = parse_decimal(value)
        if math.isnan(number) or number <= 0:
            raise ValueError("Dosage must be a positive number")
        return value
