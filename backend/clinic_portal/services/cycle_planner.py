"""Session slot planning for treatment cycles."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PlannedSlot:
    """A session position in a cycle that has not been recorded yet."""

    number: int

    @property
    def label(self) -> str:
        return f"Session {self.number}"


class CycleSessionPlanner:
    """Reconcile a cycle's capacity against its recorded sessions.

    Recording past ``max_sessions`` is not prevented here; the planner only
    stops offering new slots once the cycle is full.
    """

    def __init__(self, max_sessions: int, sessions: Sequence[Any]) -> None:
        self.max_sessions = max_sessions
        self.sessions = sessions

    @property
    def completed_count(self) -> int:
        return len(self.sessions)

    def remaining_slots(self) -> int:
        """Return how many sessions can still be registered."""
        return max(self.max_sessions - self.completed_count, 0)

    def planned_slot_numbers(self) -> Iterator[int]:
        """Yield the 1-based numbers of the slots still awaiting a session."""
        return iter(range(self.completed_count + 1, self.max_sessions + 1))

    def planned_slots(self) -> list[PlannedSlot]:
        return [PlannedSlot(number) for number in self.planned_slot_numbers()]

    def is_complete(self) -> bool:
        return self.remaining_slots() == 0


__all__ = ["CycleSessionPlanner", "PlannedSlot"]
