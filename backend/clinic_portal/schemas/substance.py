"""Substance schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SubstanceBase(BaseModel):
    name: str = Field(min_length=1)


class SubstanceCreate(SubstanceBase):
    """Payload for creating a substance."""


class SubstanceUpdate(SubstanceBase):
    """Payload for renaming a substance."""


class SubstanceRead(SubstanceBase):
    """Serialized substance."""

    id: uuid.UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
