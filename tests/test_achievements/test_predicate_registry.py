"""Tests for PredicateRegistry: auto-discovery and lookup."""

from __future__ import annotations

import pytest

from training_engine.achievements.catalog import ACHIEVEMENT_BADGES, get_badge
from training_engine.achievements.evaluator import AchievementEvaluator
from training_engine.achievements.predicates.base import BadgePredicate
from training_engine.achievements.predicates.counts import TotalWorkoutsPredicate
from training_engine.achievements.registry import PredicateRegistry
from training_engine.models.enums import ConditionType


class AlwaysMetPredicate(BadgePredicate):
    condition = ConditionType.TOTAL_WORKOUTS

    def measure(self, badge, snapshot) -> float:
        return badge.threshold


class TestPredicateRegistry:
    def test_discovers_every_condition(self) -> None:
        registry = PredicateRegistry()
        registry.discover_predicates()
        assert registry.conditions == sorted(ConditionType)

    def test_every_badge_has_a_predicate(self) -> None:
        registry = PredicateRegistry()
        registry.discover_predicates()
        for badge in ACHIEVEMENT_BADGES:
            assert registry.predicate_for(badge).condition == badge.condition

    def test_get(self) -> None:
        registry = PredicateRegistry()
        registry.discover_predicates()
        assert isinstance(registry.get(ConditionType.TOTAL_WORKOUTS), TotalWorkoutsPredicate)

    def test_missing_predicate(self) -> None:
        registry = PredicateRegistry()
        assert registry.get(ConditionType.DAY_STREAK) is None
        with pytest.raises(KeyError):
            registry.predicate_for(get_badge("streak-3"))

    def test_register_replaces(self) -> None:
        registry = PredicateRegistry()
        registry.discover_predicates()
        registry.register(AlwaysMetPredicate())
        evaluator = AchievementEvaluator(badges=[get_badge("dedicated-500")], registry=registry)
        assert evaluator.unlocked(None, []) == [get_badge("dedicated-500")]
