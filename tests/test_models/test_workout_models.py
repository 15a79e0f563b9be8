"""Tests for exercise, stats and history record models."""

from __future__ import annotations

from datetime import datetime

import pytest

from training_engine.achievements.catalog import get_badge
from training_engine.models.achievement import BadgeProgress, UserStats, WorkoutRecord
from training_engine.models.enums import MovementType
from training_engine.models.exercise import Exercise, ExerciseAssignment


class TestExercise:
    def test_muscle_group_strips_qualifier(self) -> None:
        ex = Exercise("Incline Press", "Chest (Upper)", "Dumbbell", MovementType.COMPOUND)
        assert ex.muscle_group == "Chest"
        assert ex.is_compound

    def test_assignment_total_reps(self) -> None:
        assignment = ExerciseAssignment(
            name="Curl",
            primary_muscle="Biceps (Brachialis)",
            sets=3,
            reps=12,
            rep_range="8-12",
            rest_seconds=90,
            is_compound=False,
        )
        assert assignment.total_reps == 36
        assert assignment.muscle_group == "Biceps"


class TestUserStats:
    def test_from_mapping(self) -> None:
        stats = UserStats.from_mapping(
            {"totalWorkouts": 5, "totalVolume": 10001, "totalTime": "7200"}
        )
        assert stats.total_workouts == 5
        assert stats.total_volume == 10001.0
        assert stats.total_time_s == 7200.0
        assert stats.current_streak == 0

    def test_bad_values_read_as_zero(self) -> None:
        stats = UserStats.from_mapping({"totalWorkouts": "lots", "totalVolume": None})
        assert stats == UserStats()

    def test_none_mapping(self) -> None:
        assert UserStats.from_mapping(None) == UserStats()


class TestWorkoutRecord:
    def test_volume_sums_weight_times_reps(self) -> None:
        record = WorkoutRecord(
            index=0,
            performed_at=datetime(2025, 1, 6, 18),
            type_label="strength",
            exercises={
                "Back Squat": {"sets": [{"weight": 100, "reps": 5}, {"weight": 100, "reps": 5}]},
                "Plank": {"sets": [{"reps": 1}]},
                "Broken": "not a mapping",
            },
        )
        assert record.volume == 1000.0

    def test_no_exercises(self) -> None:
        record = WorkoutRecord(index=0, performed_at=datetime(2025, 1, 6), type_label="yoga")
        assert record.volume == 0.0


class TestBadgeProgress:
    def test_percent(self) -> None:
        progress = BadgeProgress(badge=get_badge("dedicated-10"), current=4, target=10)
        assert progress.percent == pytest.approx(40.0)

    def test_percent_capped(self) -> None:
        progress = BadgeProgress(badge=get_badge("dedicated-10"), current=12, target=10)
        assert progress.percent == 100.0
