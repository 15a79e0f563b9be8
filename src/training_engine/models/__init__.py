"""Data models for the training engine."""

from training_engine.models.achievement import (
    AchievementBadge,
    BadgeProgress,
    UserLevel,
    UserStats,
    WorkoutRecord,
)
from training_engine.models.enums import (
    ActivityType,
    BadgeCategory,
    BadgeTier,
    ConditionType,
    ExperienceLevel,
    FocusLabel,
    Goal,
    Intensity,
    MovementType,
    SessionType,
    SplitStyle,
)
from training_engine.models.exercise import Exercise, ExerciseAssignment
from training_engine.models.plan import Activity, PlanParameters, Session, TrainingPlan

__all__ = [
    "AchievementBadge",
    "Activity",
    "ActivityType",
    "BadgeCategory",
    "BadgeProgress",
    "BadgeTier",
    "ConditionType",
    "Exercise",
    "ExerciseAssignment",
    "ExperienceLevel",
    "FocusLabel",
    "Goal",
    "Intensity",
    "MovementType",
    "PlanParameters",
    "Session",
    "SessionType",
    "SplitStyle",
    "TrainingPlan",
    "UserLevel",
    "UserStats",
    "WorkoutRecord",
]
