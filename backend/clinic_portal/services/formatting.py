"""Display helpers shared by the patient and dashboard views."""

from __future__ import annotations

from datetime import UTC, date, datetime, tzinfo
from decimal import Decimal

_PT_MONTHS = (
    "jan.",
    "fev.",
    "mar.",
    "abr.",
    "mai.",
    "jun.",
    "jul.",
    "ago.",
    "set.",
    "out.",
    "nov.",
    "dez.",
)


def _to_date(value: str | date | datetime | None) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
    except ValueError:
        return None


def calculate_age(
    birth_date: str | date | datetime | None, *, today: date | None = None
) -> int | None:
    """Return completed years since ``birth_date``, never negative."""
    born = _to_date(birth_date)
    if born is None:
        return None
    today = today or datetime.now(UTC).date()
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return max(age, 0)


def get_initials(full_name: str) -> str:
    parts = [part for part in full_name.split(" ") if part]
    return "".join(part[0].upper() for part in parts[:2])


def format_date_pt(value: str | date | datetime | None) -> str | None:
    """Format as ``15 mar. 2024``."""
    day = _to_date(value)
    if day is None:
        return None
    return f"{day.day:02d} {_PT_MONTHS[day.month - 1]} {day.year}"


def parse_date_pt(value: str) -> date | None:
    """Parse a ``dd/mm/yyyy`` date typed by the user; ``None`` when invalid."""
    parts = value.strip().split("/")
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        return None
    day, month, year = parts
    if len(year) != 4:
        return None
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def format_number_pt(
    value: str | int | float | Decimal | None,
    minimum_fraction_digits: int = 1,
    maximum_fraction_digits: int = 1,
) -> str | None:
    """Format with a decimal comma, e.g. ``88,5``."""
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number != number:
        return None
    text = f"{number:.{maximum_fraction_digits}f}"
    if maximum_fraction_digits > minimum_fraction_digits and "." in text:
        whole, fraction = text.split(".")
        fraction = fraction.rstrip("0").ljust(minimum_fraction_digits, "0")
        text = f"{whole}.{fraction}" if fraction else whole
    return text.replace(".", ",")


def datetime_local_value(moment: datetime | None = None, *, tz: tzinfo | None = None) -> str:
    """Value for an ``<input type="datetime-local">`` in the clinic timezone."""
    moment = moment or datetime.now(UTC)
    if tz is not None and moment.tzinfo is not None:
        moment = moment.astimezone(tz)
    return moment.strftime("%Y-%m-%dT%H:%M")


__all__ = [
    "calculate_age",
    "datetime_local_value",
    "format_date_pt",
    "format_number_pt",
    "get_initials",
    "parse_date_pt",
]
