"""Exercise catalog records and per-session exercise prescriptions."""

from __future__ import annotations

from dataclasses import dataclass

from training_engine.models.enums import MovementType


@dataclass(frozen=True)
class Exercise:
    """One entry of the static exercise catalog.

    ``primary_muscle`` keeps the catalog's raw value, which may carry a
    parenthesised qualifier such as ``"Chest (Upper)"``.
    """

    name: str
    primary_muscle: str
    equipment: str
    movement_type: MovementType
    video_link: str | None = None

    @property
    def muscle_group(self) -> str:
        """Primary muscle without its qualifier: ``"Chest (Upper)"`` -> ``"Chest"``."""
        return self.primary_muscle.split("(")[0].strip()

    @property
    def is_compound(self) -> bool:
        return self.movement_type == MovementType.COMPOUND


@dataclass(frozen=True)
class ExerciseAssignment:
    """A concrete exercise prescribed inside a strength activity."""

    name: str
    primary_muscle: str
    sets: int
    reps: int
    rep_range: str
    rest_seconds: int
    is_compound: bool
    equipment: str = ""
    weight: float | None = None
    superset_group: str | None = None
    notes: str = ""

    @property
    def muscle_group(self) -> str:
        return self.primary_muscle.split("(")[0].strip()

    @property
    def total_reps(self) -> int:
        return self.sets * self.reps
