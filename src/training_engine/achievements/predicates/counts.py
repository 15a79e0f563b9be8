"""Count predicates. Counts are always recomputed from history, never from stats."""

from __future__ import annotations

from training_engine.achievements.predicates.base import BadgePredicate
from training_engine.achievements.snapshot import HistorySnapshot
from training_engine.models.achievement import AchievementBadge
from training_engine.models.enums import (
    ACTIVITY_GROUP_TYPE_LABELS,
    ACTIVITY_TYPE_LABELS,
    ConditionType,
    parse_label,
)


class TotalWorkoutsPredicate(BadgePredicate):
    """Number of valid history entries."""

    condition = ConditionType.TOTAL_WORKOUTS

    def measure(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> float:
        return len(snapshot.records)


class TypeCountPredicate(BadgePredicate):
    """Number of history entries belonging to an activity group.

    The badge qualifier names the group (``strength``, ``cardio``, ``yoga``);
    a strength group entry may be labelled by goal or focus
    (``hypertrophy``, ``push``, ``legs``, ...).
    """

    condition = ConditionType.TYPE_COUNT

    def measure(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> float:
        group = parse_label(ACTIVITY_TYPE_LABELS, badge.qualifier or "")
        return len(snapshot.records_with_types(ACTIVITY_GROUP_TYPE_LABELS[group]))
