"""AchievementEvaluator: decides which badges the latest workout unlocked.

A badge is newly unlocked iff its predicate is false one workout ago and
true now. The previously-unlocked id set the caller keeps is a cache that
can fall out of sync, so it never decides the normal result; it only
filters catch-up (retroactive) awards.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence, Union

from training_engine.achievements.catalog import ACHIEVEMENT_BADGES, badges_in_category
from training_engine.achievements.registry import PredicateRegistry
from training_engine.achievements.snapshot import HistorySnapshot
from training_engine.models.achievement import AchievementBadge, BadgeProgress, UserStats
from training_engine.models.enums import BadgeCategory

StatsInput = Union[UserStats, Mapping[str, Any], None]


class AchievementEvaluator:
    """Evaluates badge predicates over workout history.

    Usage:
        evaluator = AchievementEvaluator()
        new_badges = evaluator.evaluate(stats, history, previously_unlocked)

    ``history`` is the most-recent-first sequence of raw workout records
    (``date``, ``type``, ``duration``, ``exercises``) as handed over by the
    persistence layer. ``stats`` is its aggregate counter record.
    """

    def __init__(
        self,
        badges: Sequence[AchievementBadge] | None = None,
        registry: PredicateRegistry | None = None,
    ) -> None:
        self.badges = tuple(badges) if badges is not None else ACHIEVEMENT_BADGES
        self.registry = registry or PredicateRegistry()

        # Auto-discover predicates if using default registry
        if registry is None:
            self.registry.discover_predicates()

    def evaluate(
        self,
        stats: StatsInput,
        history: Iterable[Any] | None,
        previously_unlocked: Iterable[str] = (),
        *,
        retroactive: bool = False,
    ) -> list[AchievementBadge]:
        """Badges newly unlocked by the most recent history entry.

        Args:
            stats: Aggregate stats record (hint only).
            history: Most-recent-first workout records, latest included.
            previously_unlocked: Badge ids the caller believes are unlocked.
                Read, never mutated.
            retroactive: Return every currently satisfied badge whose id is
                missing from *previously_unlocked* instead (catch-up mode).

        Returns:
            Newly unlocked badges in catalog order.
        """
        snapshot = HistorySnapshot.from_inputs(stats, history)
        known = frozenset(previously_unlocked)
        if retroactive:
            return [
                b for b in self.badges
                if b.badge_id not in known and self._satisfied(b, snapshot)
            ]

        before = snapshot.without_latest()
        newly: list[AchievementBadge] = []
        for badge in self.badges:
            # Not satisfied now -> cannot be new; skip the "before" pass
            if not self._satisfied(badge, snapshot):
                continue
            if self._satisfied(badge, before):
                continue
            newly.append(badge)
        return newly

    def award_retroactive(
        self,
        stats: StatsInput,
        history: Iterable[Any] | None,
        previously_unlocked: Iterable[str] = (),
    ) -> list[AchievementBadge]:
        """Satisfied badges the caller has not recorded yet."""
        return self.evaluate(stats, history, previously_unlocked, retroactive=True)

    def unlocked(
        self, stats: StatsInput, history: Iterable[Any] | None
    ) -> list[AchievementBadge]:
        """Every badge satisfied by the full history."""
        snapshot = HistorySnapshot.from_inputs(stats, history)
        return [b for b in self.badges if self._satisfied(b, snapshot)]

    def is_unlocked(
        self,
        badge: AchievementBadge,
        stats: StatsInput,
        history: Iterable[Any] | None,
    ) -> bool:
        return self._satisfied(badge, HistorySnapshot.from_inputs(stats, history))

    def next_progress(
        self,
        category: BadgeCategory,
        stats: StatsInput,
        history: Iterable[Any] | None,
    ) -> BadgeProgress | None:
        """Progress towards the easiest locked badge of a category.

        Returns:
            BadgeProgress, or None when every badge of the category is unlocked.
        """
        snapshot = HistorySnapshot.from_inputs(stats, history)
        for badge in badges_in_category(category, self.badges):
            predicate = self.registry.predicate_for(badge)
            current = predicate.measure(badge, snapshot)
            if current < badge.threshold:
                return BadgeProgress(badge=badge, current=current, target=badge.threshold)
        return None

    def _satisfied(self, badge: AchievementBadge, snapshot: HistorySnapshot) -> bool:
        return self.registry.predicate_for(badge).is_satisfied(badge, snapshot)
