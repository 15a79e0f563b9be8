"""Exercise selection: fill a strength day's muscle slots from the catalog.

Selection is deterministic. Each focus label maps to an ordered list of
muscle-group slots; every slot is filled from the catalog in catalog order,
compound movements first. ``variation`` rotates the candidate order so a
new training block can pick different exercises without randomness.

References:
    Schoenfeld (2010), The mechanisms of muscle hypertrophy and their
        application to resistance training. J Strength Cond Res 24(10).
"""

from __future__ import annotations

import dataclasses
from typing import Mapping, Sequence

from training_engine.exceptions import CatalogExhaustedError
from training_engine.math.training_params import (
    REP_RANGES,
    TrainingParams,
    deload_sets,
    deload_weight,
    get_training_params,
    prescribe,
)
from training_engine.models.enums import (
    FOCUS_LABELS,
    ExperienceLevel,
    FocusLabel,
    Goal,
)
from training_engine.models.exercise import Exercise, ExerciseAssignment
from training_engine.workout_builder.supersets import assign_supersets

# Exercises per session by experience level and focus
TARGET_EXERCISE_COUNT: dict[ExperienceLevel, dict[FocusLabel, int]] = {
    ExperienceLevel.BEGINNER: {
        FocusLabel.FULL: 6,
        FocusLabel.UPPER: 6,
        FocusLabel.LOWER: 6,
        FocusLabel.PUSH: 7,
        FocusLabel.PULL: 7,
        FocusLabel.LEGS: 7,
    },
    ExperienceLevel.INTERMEDIATE: {focus: 8 for focus in FocusLabel},
    ExperienceLevel.ADVANCED: {
        FocusLabel.FULL: 9,
        FocusLabel.UPPER: 10,
        FocusLabel.LOWER: 10,
        FocusLabel.PUSH: 10,
        FocusLabel.PULL: 10,
        FocusLabel.LEGS: 10,
    },
}

# Fixed slot layouts; lower and full scale with the target count
_FIXED_SLOTS: dict[FocusLabel, tuple[tuple[str, int], ...]] = {
    FocusLabel.PUSH: (("Chest", 3), ("Shoulders", 2), ("Triceps", 3)),
    FocusLabel.PULL: (("Lats", 4), ("Biceps", 3), ("Traps", 1)),
    FocusLabel.LEGS: (("Quads", 3), ("Hamstrings", 3), ("Glutes", 1), ("Calves", 1)),
    FocusLabel.UPPER: (("Chest", 3), ("Lats", 3), ("Biceps", 1), ("Triceps", 1)),
}

# Equipment filters that name the equipment differently from the catalog
_EQUIPMENT_ALIASES = {
    "cable machine": "cable",
    "dumbbells": "dumbbell",
}

DELOAD_NOTE = "Deload: reduced sets and load"


def target_exercise_count(level: ExperienceLevel, focus: FocusLabel) -> int:
    return TARGET_EXERCISE_COUNT[level][focus]


def muscle_slots(focus: FocusLabel, target: int) -> list[tuple[str, int]]:
    """Ordered (muscle group, exercise count) slots for a focus.

    Slot counts are truncated so their sum never exceeds *target*.
    """
    if focus == FocusLabel.LOWER:
        quads = min(4, int(target * 0.4))
        hamstrings = min(3, int(target * 0.3))
        core = max(1, target - quads - hamstrings - 1)
        raw = [("Quads", quads), ("Hamstrings", hamstrings), ("Glutes", 1), ("Core", core)]
    elif focus == FocusLabel.FULL:
        per_muscle = target // 4
        raw = [(m, per_muscle) for m in ("Chest", "Lats", "Quads", "Hamstrings")]
        raw.append(("Core", target - 4 * per_muscle))
    else:
        raw = list(_FIXED_SLOTS[focus])

    slots: list[tuple[str, int]] = []
    remaining = target
    for muscle, count in raw:
        count = min(count, remaining)
        if count > 0:
            slots.append((muscle, count))
            remaining -= count
    return slots


def filter_by_equipment(
    catalog: Sequence[Exercise], equipment: Sequence[str] = ()
) -> list[Exercise]:
    """Keep exercises whose equipment matches any filter (substring, case-insensitive).

    An empty filter, or one containing ``"all"``, keeps everything.
    """
    filters = [e.strip().lower() for e in equipment if e]
    if not filters or "all" in filters:
        return list(catalog)
    needles = [_EQUIPMENT_ALIASES.get(f, f) for f in filters]
    return [
        ex for ex in catalog
        if any(needle in ex.equipment.lower() for needle in needles)
    ]


def rank_candidates(candidates: Sequence[Exercise], variation: int = 0) -> list[Exercise]:
    """Compounds before isolations, each group rotated left by *variation*."""
    ranked: list[Exercise] = []
    for group in (
        [c for c in candidates if c.is_compound],
        [c for c in candidates if not c.is_compound],
    ):
        if group:
            shift = variation % len(group)
            ranked.extend(group[shift:] + group[:shift])
    return ranked


def build_assignment(
    exercise: Exercise,
    base: TrainingParams,
    goal: Goal,
    starting_weights: Mapping[str, float] | None = None,
) -> ExerciseAssignment:
    """Prescribe a loading-week assignment for one catalog exercise."""
    params = prescribe(base, exercise.is_compound)
    weight = (starting_weights or {}).get(exercise.name)
    return ExerciseAssignment(
        name=exercise.name,
        primary_muscle=exercise.primary_muscle,
        sets=params.sets,
        reps=params.reps,
        rep_range=REP_RANGES[goal],
        rest_seconds=params.rest_seconds,
        is_compound=exercise.is_compound,
        equipment=exercise.equipment,
        weight=float(weight) if weight is not None else None,
    )


def scale_for_deload(assignment: ExerciseAssignment) -> ExerciseAssignment:
    """Deload copy of a loading-week assignment: half the sets, 60% of the weight."""
    return dataclasses.replace(
        assignment,
        sets=deload_sets(assignment.sets),
        weight=deload_weight(assignment.weight),
        notes=DELOAD_NOTE,
    )


def pick_exercises(
    focus: FocusLabel,
    level: ExperienceLevel,
    catalog: Sequence[Exercise],
    equipment: Sequence[str] = (),
    variation: int = 0,
) -> list[Exercise]:
    """Choose catalog exercises for a focus, slot by slot.

    Slots that cannot be filled are topped up from the remaining
    exercises of the focus's muscle groups.

    Raises:
        CatalogExhaustedError: If no exercise matches the focus at all.
    """
    pool = filter_by_equipment(catalog, equipment)
    target = target_exercise_count(level, focus)
    slots = muscle_slots(focus, target)

    chosen: list[Exercise] = []
    used: set[str] = set()
    for muscle, count in slots:
        candidates = [
            ex for ex in pool if ex.muscle_group == muscle and ex.name not in used
        ]
        for ex in rank_candidates(candidates, variation)[:count]:
            chosen.append(ex)
            used.add(ex.name)

    if len(chosen) < target:
        focus_muscles = {muscle for muscle, _ in slots}
        extras = [
            ex for ex in pool if ex.muscle_group in focus_muscles and ex.name not in used
        ]
        chosen.extend(rank_candidates(extras, variation)[: target - len(chosen)])

    if not chosen:
        raise CatalogExhaustedError(FOCUS_LABELS[focus], tuple(equipment))
    return chosen


def select_exercises(
    focus: FocusLabel,
    experience_level: ExperienceLevel,
    goal: Goal,
    is_deload: bool,
    catalog: Sequence[Exercise],
    *,
    equipment: Sequence[str] = (),
    starting_weights: Mapping[str, float] | None = None,
    variation: int = 0,
) -> list[ExerciseAssignment]:
    """Resolve the exercise list for one strength day.

    Algorithm:
    1. Pick exercises per muscle slot (compounds first, rotated by variation)
    2. Apply the goal x experience prescription, adjusted per movement type
    3. On deload days scale every assignment down (deload always wins)
    4. Pair agonist/antagonist exercises into supersets

    Args:
        focus: Focus label of the strength day.
        experience_level: Lifter experience.
        goal: Training goal.
        is_deload: Whether the day falls in a deload week.
        catalog: Exercise catalog, never mutated.
        equipment: Optional equipment filter.
        starting_weights: Optional working weight per exercise name.
        variation: Candidate rotation, usually the 0-based block index.

    Returns:
        Ordered assignments, superset partners adjacent.

    Raises:
        CatalogExhaustedError: If the focus matches no catalog exercise.
    """
    exercises = pick_exercises(focus, experience_level, catalog, equipment, variation)
    base = get_training_params(goal, experience_level)
    assignments = [build_assignment(ex, base, goal, starting_weights) for ex in exercises]
    if is_deload:
        assignments = [scale_for_deload(a) for a in assignments]
    return assign_supersets(assignments)
