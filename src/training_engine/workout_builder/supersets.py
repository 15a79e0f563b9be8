"""Agonist/antagonist superset pairing.

Exercises are paired greedily in order: each exercise takes the first
remaining partner that trains the opposing muscle group, otherwise the
first partner training a different group, otherwise the next exercise.
An odd exercise out is left without a group tag.

References:
    Robbins et al. (2010), Agonist-antagonist paired set resistance training:
        a brief review. J Strength Cond Res 24(10):2873-2882.
"""

from __future__ import annotations

import dataclasses
import string
from typing import Sequence

from training_engine.models.exercise import ExerciseAssignment

OPPOSING_MUSCLES: dict[str, str] = {
    "Chest": "Lats",
    "Lats": "Chest",
    "Quads": "Hamstrings",
    "Hamstrings": "Quads",
    "Biceps": "Triceps",
    "Triceps": "Biceps",
    "Shoulders": "Lats",
}


def superset_tag(index: int) -> str:
    """Group tag for the n-th superset: A, B, ..., Z, AA, AB, ..."""
    letters = string.ascii_uppercase
    tag = ""
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, len(letters))
        tag = letters[rem] + tag
    return tag


def _find_partner(first: ExerciseAssignment, remaining: list[ExerciseAssignment]) -> int:
    opposing = OPPOSING_MUSCLES.get(first.muscle_group)
    if opposing is not None:
        for i, candidate in enumerate(remaining):
            if candidate.muscle_group == opposing:
                return i
    for i, candidate in enumerate(remaining):
        if candidate.muscle_group != first.muscle_group:
            return i
    return 0


def assign_supersets(assignments: Sequence[ExerciseAssignment]) -> list[ExerciseAssignment]:
    """Reorder assignments into tagged pairs.

    Returns:
        New list with partners adjacent and sharing a superset tag.
    """
    remaining = list(assignments)
    paired: list[ExerciseAssignment] = []
    group = 0
    while len(remaining) >= 2:
        first = remaining.pop(0)
        second = remaining.pop(_find_partner(first, remaining))
        tag = superset_tag(group)
        paired.append(dataclasses.replace(first, superset_group=tag))
        paired.append(dataclasses.replace(second, superset_group=tag))
        group += 1
    paired.extend(remaining)
    return paired
