"""Abstract base class for badge unlock predicates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from training_engine.models.achievement import AchievementBadge
from training_engine.models.enums import ConditionType

if TYPE_CHECKING:
    from training_engine.achievements.snapshot import HistorySnapshot


class BadgePredicate(ABC):
    """Base class for all badge unlock predicates.

    Each predicate handles one ConditionType. It reduces a history snapshot
    to a single number (``measure``) that is compared with the badge's
    threshold. Predicates are discovered automatically by the
    PredicateRegistry.

    Subclasses must define:
        condition: the ConditionType handled
        measure(): the snapshot reduction
    """

    condition: ConditionType

    @abstractmethod
    def measure(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> float:
        """Current progress value for *badge* in *snapshot*."""
        ...

    def is_satisfied(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> bool:
        return self.measure(badge, snapshot) >= badge.threshold
