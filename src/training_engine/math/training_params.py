"""Resistance-training prescription tables and the deload scaling law.

Base sets, reps and rest come from a goal x experience lookup table.
Compound movements keep the base rep target and get extra rest; isolation
movements get a couple of extra reps (capped) at the base rest. Deload
weeks halve the set count (rounded up) and drop the working weight to 60%.

References:
    ACSM (2009), Progression models in resistance training for healthy
        adults. Med Sci Sports Exerc 41(3):687-708.
    de Salles et al. (2009), Rest interval between sets in strength
        training. Sports Med 39(9):765-777.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from training_engine.models.enums import (
    COMPOUND_EXTRA_REST_S,
    DELOAD_SET_FRACTION,
    DELOAD_WEIGHT_FRACTION,
    ISOLATION_EXTRA_REPS,
    MAX_ISOLATION_REPS,
    ExperienceLevel,
    Goal,
)


@dataclass(frozen=True)
class TrainingParams:
    """Base prescription for one goal/experience combination."""

    sets: int
    reps: int
    rest_seconds: int


_B = ExperienceLevel.BEGINNER
_I = ExperienceLevel.INTERMEDIATE
_A = ExperienceLevel.ADVANCED

TRAINING_PARAMETERS: dict[Goal, dict[ExperienceLevel, TrainingParams]] = {
    Goal.STRENGTH: {
        _B: TrainingParams(sets=3, reps=6, rest_seconds=180),
        _I: TrainingParams(sets=4, reps=5, rest_seconds=210),
        _A: TrainingParams(sets=5, reps=5, rest_seconds=240),
    },
    Goal.HYPERTROPHY: {
        _B: TrainingParams(sets=3, reps=10, rest_seconds=90),
        _I: TrainingParams(sets=4, reps=10, rest_seconds=90),
        _A: TrainingParams(sets=4, reps=12, rest_seconds=60),
    },
    # Higher density work: short rest, moderate-high reps
    Goal.FAT_LOSS: {
        _B: TrainingParams(sets=3, reps=12, rest_seconds=60),
        _I: TrainingParams(sets=3, reps=15, rest_seconds=45),
        _A: TrainingParams(sets=4, reps=15, rest_seconds=45),
    },
    Goal.GENERAL_FITNESS: {
        _B: TrainingParams(sets=3, reps=10, rest_seconds=90),
        _I: TrainingParams(sets=3, reps=10, rest_seconds=90),
        _A: TrainingParams(sets=4, reps=12, rest_seconds=75),
    },
}

REP_RANGES: dict[Goal, str] = {
    Goal.STRENGTH: "4-6",
    Goal.HYPERTROPHY: "8-12",
    Goal.FAT_LOSS: "12-15",
    Goal.GENERAL_FITNESS: "8-12",
}


def get_training_params(goal: Goal, level: ExperienceLevel) -> TrainingParams:
    """Look up the base prescription for a goal and experience level."""
    return TRAINING_PARAMETERS[goal][level]


def prescribe(base: TrainingParams, is_compound: bool) -> TrainingParams:
    """Adjust a base prescription for the movement type.

    Compound: base reps, base rest + 30 s.
    Isolation: base reps + 2 (capped at 15), base rest.
    """
    if is_compound:
        return TrainingParams(
            sets=base.sets,
            reps=base.reps,
            rest_seconds=base.rest_seconds + COMPOUND_EXTRA_REST_S,
        )
    return TrainingParams(
        sets=base.sets,
        reps=min(base.reps + ISOLATION_EXTRA_REPS, MAX_ISOLATION_REPS),
        rest_seconds=base.rest_seconds,
    )


def deload_sets(sets: int) -> int:
    """Deload set count: half the loading-week sets, rounded up."""
    return math.ceil(sets * DELOAD_SET_FRACTION)


def deload_weight(weight: float | None) -> float | None:
    """Deload working weight: 60% of the loading-week weight, rounded."""
    if weight is None:
        return None
    return float(round(weight * DELOAD_WEIGHT_FRACTION))
