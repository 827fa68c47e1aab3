"""Conversion of session and cycle form values into backend payloads."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, time, tzinfo
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from clinic_portal.schemas.cycle import CycleForm
    from clinic_portal.schemas.session import SessionForm

CYCLE_ANCHOR_TIME = time(9, 0)


def parse_decimal(value: Any) -> float:
    """Parse a comma- or dot-separated decimal; NaN when blank or unparseable."""
    if not isinstance(value, str):
        return math.nan
    normalized = value.replace(",", ".", 1).strip()
    if not normalized or "_" in normalized:
        return math.nan
    try:
        parsed = float(normalized)
    except ValueError:
        return math.nan
    return parsed if math.isfinite(parsed) else math.nan


def format_decimal(value: float, separator: str = ",") -> str:
    """Render a float so that :func:`parse_decimal` gives the same value back."""
    return repr(float(value)).replace(".", separator, 1)


def to_iso_utc(moment: datetime) -> str:
    """Format an aware datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def local_datetime_to_iso(value: str, tz: tzinfo) -> str:
    """Interpret a ``datetime-local`` string in ``tz`` and return it in UTC."""
    moment = datetime.fromisoformat(value.strip())
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=tz)
    return to_iso_utc(moment)


def cycle_date_iso(value: date | str, *, now: datetime | None = None) -> str:
    """Anchor a calendar date at 09:00 UTC; unparseable input falls back to now."""
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value.strip())
        except ValueError:
            return to_iso_utc(now or datetime.now(UTC))
    return to_iso_utc(datetime.combine(value, CYCLE_ANCHOR_TIME, tzinfo=UTC))


def _integral(value: float) -> float | int:
    return int(value) if value.is_integer() else value


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def build_session_payload(cycle_id: str, form: SessionForm, *, tz: tzinfo) -> dict[str, Any]:
    """Build the body of ``POST /cycles/{cycle_id}/sessions``."""
    composition = form.body_composition
    dosage = _blank_to_none(form.dosage_mg)
    return {
        "cycle_id": str(cycle_id),
        "session_date": local_datetime_to_iso(form.session_date, tz),
        "notes": _blank_to_none(form.notes),
        "medication_id": form.medication_id,
        "activator_id": _blank_to_none(form.activator_id),
        "dosage_mg": parse_decimal(dosage) if dosage is not None else None,
        "body_composition": {
            "weight_kg": parse_decimal(composition.weight_kg),
            "fat_percentage": parse_decimal(composition.fat_percentage),
            "fat_kg": parse_decimal(composition.fat_kg),
            "muscle_mass_percentage": parse_decimal(composition.muscle_mass_percentage),
            "h2o_percentage": parse_decimal(composition.h2o_percentage),
            "metabolic_age": _integral(parse_decimal(composition.metabolic_age)),
            "visceral_fat": _integral(parse_decimal(composition.visceral_fat)),
        },
    }


def build_cycle_payload(form: CycleForm) -> dict[str, Any]:
    """Build the body of ``POST /patients/{patient_id}/cycles``."""
    return {
        "cycle_date": cycle_date_iso(form.cycle_date),
        "max_sessions": form.max_sessions,
        "periodicity": form.periodicity.value,
        "type": form.type.value,
    }


__all__ = [
    "build_cycle_payload",
    "build_session_payload",
    "cycle_date_iso",
    "format_decimal",
    "local_datetime_to_iso",
    "parse_decimal",
    "to_iso_utc",
]
