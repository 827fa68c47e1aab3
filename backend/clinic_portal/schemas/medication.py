"""Medication schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MedicationBase(BaseModel):
    """Shared medication fields."""

    name: str = Field(min_length=1)


class MedicationCreate(MedicationBase):
    """Payload for creating a medication."""


class MedicationUpdate(MedicationBase):
    """Payload for renaming a medication."""


class MedicationRead(MedicationBase):
    """Serialized medication."""

    id: uuid.UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
