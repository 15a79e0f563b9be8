"""Achievement models: badges, user statistics, parsed workout history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from training_engine.models.enums import BadgeCategory, BadgeTier, ConditionType


@dataclass(frozen=True)
class AchievementBadge:
    """Static badge definition.

    ``qualifier`` narrows the condition: an activity group label for
    type counts (``"strength"``), a window name for time-of-day badges
    (``"morning"``).
    """

    badge_id: str
    name: str
    description: str
    tier: BadgeTier
    category: BadgeCategory
    condition: ConditionType
    threshold: float
    qualifier: str | None = None
    icon: str = ""


@dataclass(frozen=True)
class UserStats:
    """Aggregate counters maintained by the persistence layer.

    These counters can drift from the history (double increments are a
    known failure), so predicates treat them as hints. Only the volume
    total is read from here.
    """

    total_workouts: int = 0
    total_volume: float = 0.0
    current_streak: int = 0
    longest_streak: int = 0
    total_time_s: float = 0.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> UserStats:
        """Build from the camelCase stats record; missing or bad values read as 0."""
        data = data or {}

        def num(key: str) -> float:
            value = data.get(key)
            try:
                return float(value) if value is not None else 0.0
            except (TypeError, ValueError):
                return 0.0

        return cls(
            total_workouts=int(num("totalWorkouts")),
            total_volume=num("totalVolume"),
            current_streak=int(num("currentStreak")),
            longest_streak=int(num("longestStreak")),
            total_time_s=num("totalTime"),
        )


@dataclass(frozen=True)
class WorkoutRecord:
    """One parsed entry of the workout history.

    ``index`` is the entry's position in the most-recent-first history
    sequence it was parsed from.
    """

    index: int
    performed_at: datetime  # naive local time
    type_label: str
    duration_s: float = 0.0
    exercises: Mapping[str, Any] = field(default_factory=dict)

    @property
    def volume(self) -> float:
        """Sum of weight x reps over every logged set."""
        total = 0.0
        for exercise in self.exercises.values():
            if not isinstance(exercise, Mapping):
                continue
            for logged_set in exercise.get("sets") or ():
                if not isinstance(logged_set, Mapping):
                    continue
                try:
                    total += float(logged_set.get("weight") or 0) * float(
                        logged_set.get("reps") or 0
                    )
                except (TypeError, ValueError):
                    continue
        return total


@dataclass(frozen=True)
class BadgeProgress:
    """Progress towards the next locked badge of a category."""

    badge: AchievementBadge
    current: float
    target: float

    @property
    def percent(self) -> float:
        if self.target <= 0:
            return 100.0
        return min(self.current / self.target * 100.0, 100.0)


@dataclass(frozen=True)
class UserLevel:
    """Level derived from accumulated badge points."""

    level: int
    total_points: int
    current_points: int  # points earned within the current level
    points_to_next: int
