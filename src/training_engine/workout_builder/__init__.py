"""Exercise assignment: focus rotation, exercise selection, session assembly."""

from training_engine.workout_builder.builder import SessionBuilder
from training_engine.workout_builder.exercise_selector import (
    scale_for_deload,
    select_exercises,
)
from training_engine.workout_builder.focus import assign_focus
from training_engine.workout_builder.validator import validate_plan, validate_workout

__all__ = [
    "SessionBuilder",
    "assign_focus",
    "scale_for_deload",
    "select_exercises",
    "validate_plan",
    "validate_workout",
]
