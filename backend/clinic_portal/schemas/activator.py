"""Metabolic activator schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ActivatorCompositionCreate(BaseModel):
    """Volume of one substance inside an activator."""

    substance_id: uuid.UUID
    volume_ml: float = Field(gt=0)


class ActivatorCompositionRead(BaseModel):
    substance_id: uuid.UUID
    substance_name: str | None = None
    volume_ml: float


class ActivatorCreate(BaseModel):
    """Payload for creating or replacing an activator."""

    name: str = Field(min_length=1)
    compositions: list[ActivatorCompositionCreate] = Field(min_length=1)


class ActivatorUpdate(ActivatorCreate):
    """Activators are replaced wholesale on update."""


class ActivatorRead(BaseModel):
    """Serialized activator with its substance mix."""

    id: uuid.UUID
    name: str
    created_at: datetime
    compositions: list[ActivatorCompositionRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
