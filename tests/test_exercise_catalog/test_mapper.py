"""Tests for raw catalog row mapping."""

from __future__ import annotations

import math

from exercise_catalog.mapper import map_exercise_record, map_exercise_records
from training_engine.models.enums import MovementType


def _row(**overrides) -> dict:
    row = {
        "Exercise Name": "Barbell Row",
        "Primary Muscle": "Lats (Mid Back)",
        "Equipment": "Barbell",
        "Type": "Compound",
        "Video Link": None,
    }
    row.update(overrides)
    return row


class TestMapExerciseRecord:
    def test_maps_row(self) -> None:
        exercise = map_exercise_record(_row())
        assert exercise.name == "Barbell Row"
        assert exercise.muscle_group == "Lats"
        assert exercise.movement_type == MovementType.COMPOUND

    def test_strips_whitespace(self) -> None:
        exercise = map_exercise_record(_row(**{"Exercise Name": "  Barbell Row "}))
        assert exercise.name == "Barbell Row"

    def test_nan_and_blank_fields(self) -> None:
        assert map_exercise_record(_row(**{"Equipment": math.nan})) is None
        assert map_exercise_record(_row(**{"Primary Muscle": "   "})) is None

    def test_unknown_type(self) -> None:
        assert map_exercise_record(_row(Type="Cardio")) is None


class TestMapExerciseRecords:
    def test_first_duplicate_wins(self) -> None:
        exercises = map_exercise_records(
            [_row(), _row(Equipment="Dumbbell"), _row(**{"Exercise Name": "T-Bar Row"})]
        )
        assert [(e.name, e.equipment) for e in exercises] == [
            ("Barbell Row", "Barbell"),
            ("T-Bar Row", "Barbell"),
        ]
