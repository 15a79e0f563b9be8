"""Tests for tabular plan summaries."""

from __future__ import annotations

from datetime import datetime

import pytest

from training_engine.ids import SequentialIdGenerator
from training_engine.math.plan_metrics import (
    SUMMARY_COLUMNS,
    muscle_set_volume,
    weekly_muscle_volume,
    weekly_summary,
)
from training_engine.models.exercise import ExerciseAssignment
from training_engine.models.plan import TrainingPlan
from training_engine.planner import PeriodizationPlanner


@pytest.fixture
def full_body_plan(catalog, params_factory, wednesday: datetime) -> TrainingPlan:
    planner = PeriodizationPlanner(catalog, id_generator=SequentialIdGenerator())
    return planner.generate(params_factory(), now=wednesday)


def _assignment(name: str, muscle: str, sets: int) -> ExerciseAssignment:
    return ExerciseAssignment(
        name=name,
        primary_muscle=muscle,
        sets=sets,
        reps=10,
        rep_range="8-12",
        rest_seconds=90,
        is_compound=True,
    )


class TestWeeklySummary:
    def test_one_row_per_week(self, full_body_plan: TrainingPlan) -> None:
        summary = weekly_summary(full_body_plan)
        assert list(summary.columns) == SUMMARY_COLUMNS
        assert summary["week"].tolist() == [1, 2, 3, 4]

    def test_day_counts(self, full_body_plan: TrainingPlan) -> None:
        summary = weekly_summary(full_body_plan)
        assert summary["strength_days"].tolist() == [3, 3, 3, 3]
        assert summary["recovery_days"].tolist() == [4, 4, 4, 0]
        assert summary["rest_days"].tolist() == [0, 0, 0, 4]
        assert summary["is_deload"].tolist() == [False, False, False, True]

    def test_sets_and_minutes(self, full_body_plan: TrainingPlan) -> None:
        summary = weekly_summary(full_body_plan)
        # 8 exercises x 4 sets x 3 days; deload halves the sets
        assert summary["total_sets"].tolist() == [96, 96, 96, 48]
        assert summary["cardio_min"].tolist() == [210, 210, 210, 60]
        assert summary["yoga_min"].tolist() == [105, 105, 105, 60]


class TestMuscleVolume:
    def test_groups_by_muscle_without_qualifier(self) -> None:
        volume = muscle_set_volume(
            [
                _assignment("Bench Press", "Chest", 4),
                _assignment("Incline Press", "Chest (Upper)", 3),
                _assignment("Row", "Lats", 4),
            ]
        )
        assert volume == {"Chest": 7, "Lats": 4}
        assert list(volume) == ["Chest", "Lats"]

    def test_empty(self) -> None:
        assert muscle_set_volume([]) == {}

    def test_weekly_muscle_volume(self, full_body_plan: TrainingPlan) -> None:
        volume = weekly_muscle_volume(full_body_plan, 1)
        assert volume == {"Chest": 24, "Hamstrings": 24, "Lats": 24, "Quads": 24}
        assert weekly_muscle_volume(full_body_plan, 4)["Chest"] == 12
