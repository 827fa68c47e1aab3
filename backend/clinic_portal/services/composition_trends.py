"""Body-composition deltas between consecutive measurements."""

from __future__ import annotations

import enum
import math
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

METRICS: tuple[str, ...] = (
    "weight_kg",
    "fat_percentage",
    "fat_kg",
    "muscle_mass_percentage",
    "h2o_percentage",
    "metabolic_age",
    "visceral_fat",
)

MetricValue = str | int | float | Decimal | None


class TrendDirection(str, enum.Enum):
    """Direction of change between two measurements."""

    UP = "up"
    DOWN = "down"
    EQUAL = "equal"


@dataclass(frozen=True, slots=True)
class MetricTrend:
    """Signed change of a single metric."""

    difference: float
    direction: TrendDirection


def to_number(value: MetricValue) -> float | None:
    """Parse a metric value, returning ``None`` when it is absent or not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def compare(previous: MetricValue, current: MetricValue) -> MetricTrend | None:
    """Classify the change from ``previous`` to ``current``.

    Returns ``None`` when either side is missing so callers render no trend.
    """
    before = to_number(previous)
    after = to_number(current)
    if before is None or after is None:
        return None
    difference = after - before
    if abs(difference) < sys.float_info.epsilon:
        return MetricTrend(difference=difference, direction=TrendDirection.EQUAL)
    direction = TrendDirection.UP if difference > 0 else TrendDirection.DOWN
    return MetricTrend(difference=difference, direction=direction)


def _metric(snapshot: Any, name: str) -> MetricValue:
    if snapshot is None:
        return None
    if isinstance(snapshot, Mapping):
        return snapshot.get(name)
    return getattr(snapshot, name, None)


def compare_snapshots(
    previous: Any, current: Any, metrics: Sequence[str] = METRICS
) -> dict[str, MetricTrend | None]:
    """Compare every tracked metric between two body-composition snapshots."""
    return {
        name: compare(_metric(previous, name), _metric(current, name))
        for name in metrics
    }


def session_trends(
    compositions: Sequence[Any], metrics: Sequence[str] = METRICS
) -> list[dict[str, MetricTrend | None]]:
    """Return per-metric trends for each snapshot against the one before it.

    The first entry never has a predecessor, so all its trends are ``None``.
    """
    trends: list[dict[str, MetricTrend | None]] = []
    for index, current in enumerate(compositions):
        previous = compositions[index - 1] if index > 0 else None
        trends.append(compare_snapshots(previous, current, metrics))
    return trends


def summary_trends(initial: Any, latest: Any) -> dict[str, MetricTrend | None]:
    """Initial versus latest comparison used by the patient summary."""
    return session_trends([initial, latest])[1]


__all__ = [
    "METRICS",
    "MetricTrend",
    "TrendDirection",
    "compare",
    "compare_snapshots",
    "session_trends",
    "summary_trends",
    "to_number",
]
