"""Treatment cycle schemas."""

from __future__ import annotations

import enum
import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from clinic_portal.schemas.session import SessionRead
from clinic_portal.services.composition_trends import TrendDirection


class Periodicity(str, enum.Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class CycleType(str, enum.Enum):
    NORMAL = "normal"
    MAINTENANCE = "maintenance"


class CycleBase(BaseModel):
    """Shared cycle fields."""

    max_sessions: int
    periodicity: Periodicity
    type: CycleType


class CycleRead(CycleBase):
    """Serialized cycle with its sessions in backend order."""

    id: uuid.UUID
    patient_id: uuid.UUID
    cycle_date: datetime | date
    created_at: datetime
    sessions: list[SessionRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class CycleForm(BaseModel):
    """Values submitted by the new-cycle form."""

    cycle_date: date
    max_sessions: int = Field(default=8, ge=1, le=12)
    periodicity: Periodicity = Periodicity.WEEKLY
    type: CycleType = CycleType.NORMAL


class MetricTrendRead(BaseModel):
    """Change of one metric against the previous measurement."""

    difference: float
    direction: TrendDirection
    display: str | None = None


class SessionView(SessionRead):
    """Recorded session enriched with its position and metric trends."""

    number: int
    trends: dict[str, MetricTrendRead | None] = Field(default_factory=dict)


class PlannedSlotRead(BaseModel):
    """Placeholder for a session that is still to be registered."""

    number: int
    label: str
    default_session_date: str


class CycleView(CycleBase):
    """Cycle as shown on the patient page."""

    id: uuid.UUID
    patient_id: uuid.UUID
    cycle_date: datetime | date
    created_at: datetime
    completed_sessions: int
    remaining_sessions: int
    is_complete: bool = False
    sessions: list[SessionView] = Field(default_factory=list)
    planned_slots: list[PlannedSlotRead] = Field(default_factory=list)
