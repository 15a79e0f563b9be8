"""Cumulative total predicates: lifted volume and training time."""

from __future__ import annotations

from training_engine.achievements.predicates.base import BadgePredicate
from training_engine.achievements.snapshot import HistorySnapshot
from training_engine.models.achievement import AchievementBadge
from training_engine.models.enums import ConditionType


class TotalVolumePredicate(BadgePredicate):
    """Lifted volume, read from the stats hint.

    History entries do not reliably carry every logged set, so the
    aggregate counter is the only volume source.
    """

    condition = ConditionType.TOTAL_VOLUME

    def measure(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> float:
        return snapshot.stats.total_volume


class TotalTimePredicate(BadgePredicate):
    """Summed workout duration in seconds, recomputed from history."""

    condition = ConditionType.TOTAL_TIME

    def measure(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> float:
        return sum(r.duration_s for r in snapshot.records)
