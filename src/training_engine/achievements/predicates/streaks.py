"""Streak predicates: consecutive qualifying weeks and consecutive days."""

from __future__ import annotations

from training_engine.achievements.predicates.base import BadgePredicate
from training_engine.achievements.snapshot import HistorySnapshot
from training_engine.math.streaks import (
    longest_day_streak,
    longest_weekly_run,
    qualifying_week_starts,
)
from training_engine.models.achievement import AchievementBadge
from training_engine.models.enums import (
    STRENGTH_TYPE_LABELS,
    STRENGTH_WEEK_MIN_SESSIONS,
    ConditionType,
)


class StrengthWeekStreakPredicate(BadgePredicate):
    """Longest run of consecutive Monday-anchored weeks with 3+ strength entries."""

    condition = ConditionType.STRENGTH_WEEK_STREAK

    def measure(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> float:
        strength = snapshot.records_with_types(STRENGTH_TYPE_LABELS)
        weeks = qualifying_week_starts(
            (r.performed_at for r in strength), STRENGTH_WEEK_MIN_SESSIONS
        )
        return longest_weekly_run(weeks)


class DayStreakPredicate(BadgePredicate):
    """Longest run of consecutive calendar days with any workout."""

    condition = ConditionType.DAY_STREAK

    def measure(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> float:
        return longest_day_streak(snapshot.timestamps)
