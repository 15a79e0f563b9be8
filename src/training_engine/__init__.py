"""Training engine: periodized plan generation and achievement evaluation."""

from training_engine.achievements.evaluator import AchievementEvaluator
from training_engine.exceptions import (
    CatalogExhaustedError,
    PlanValidationError,
    TrainingEngineError,
)
from training_engine.planner import PeriodizationPlanner, generate_plan

__all__ = [
    "AchievementEvaluator",
    "CatalogExhaustedError",
    "PeriodizationPlanner",
    "PlanValidationError",
    "TrainingEngineError",
    "generate_plan",
]
