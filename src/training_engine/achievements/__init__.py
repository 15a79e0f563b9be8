"""Achievement badges: catalog, history snapshots, predicates, evaluator."""

from training_engine.achievements.catalog import (
    ACHIEVEMENT_BADGES,
    calculate_level,
    calculate_points,
    get_badge,
)
from training_engine.achievements.evaluator import AchievementEvaluator
from training_engine.achievements.registry import PredicateRegistry
from training_engine.achievements.snapshot import HistorySnapshot

__all__ = [
    "ACHIEVEMENT_BADGES",
    "AchievementEvaluator",
    "HistorySnapshot",
    "PredicateRegistry",
    "calculate_level",
    "calculate_points",
    "get_badge",
]
