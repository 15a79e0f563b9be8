"""Special predicates: time of day, weekends, back-to-back sessions, variety."""

from __future__ import annotations

from training_engine.achievements.predicates.base import BadgePredicate
from training_engine.achievements.snapshot import HistorySnapshot
from training_engine.math.streaks import longest_chain
from training_engine.models.achievement import AchievementBadge
from training_engine.models.enums import (
    BACK_TO_BACK_WINDOW_S,
    TIME_OF_DAY_WINDOWS,
    VARIETY_TYPE_LABELS,
    ConditionType,
)


class TimeOfDayPredicate(BadgePredicate):
    """Entries started inside the qualifier's local-time hour window."""

    condition = ConditionType.TIME_OF_DAY

    def measure(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> float:
        start, end = TIME_OF_DAY_WINDOWS[badge.qualifier or ""]
        return sum(1 for t in snapshot.timestamps if start <= t.hour < end)


class WeekendWorkoutsPredicate(BadgePredicate):
    """Entries logged on a Saturday or Sunday."""

    condition = ConditionType.WEEKEND_WORKOUTS

    def measure(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> float:
        return sum(1 for t in snapshot.timestamps if t.weekday() >= 5)


class BackToBackPredicate(BadgePredicate):
    """Longest chain of workouts each starting within an hour of the previous."""

    condition = ConditionType.BACK_TO_BACK

    def measure(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> float:
        return longest_chain(snapshot.timestamps, BACK_TO_BACK_WINDOW_S)


class FocusVarietyPredicate(BadgePredicate):
    """Distinct workout focus labels logged (full, upper, lower, push, pull, legs)."""

    condition = ConditionType.FOCUS_VARIETY

    def measure(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> float:
        logged = {r.type_label for r in snapshot.records}
        return sum(1 for label in VARIETY_TYPE_LABELS if label in logged)
