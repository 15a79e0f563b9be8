"""Shared test fixtures: exercise catalogs, plan parameters, workout history."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Callable

import pytest

from exercise_catalog import load_catalog
from training_engine.ids import SequentialIdGenerator
from training_engine.models.enums import (
    ExperienceLevel,
    Goal,
    MovementType,
    SplitStyle,
)
from training_engine.models.exercise import Exercise
from training_engine.models.plan import PlanParameters


@pytest.fixture(scope="session")
def catalog() -> tuple[Exercise, ...]:
    """The bundled exercise catalog (56 exercises)."""
    return load_catalog()


@pytest.fixture
def exercise_factory() -> Callable[..., Exercise]:
    """Factory fixture for catalog entries.

    Usage:
        ex = exercise_factory("Cable Fly", "Chest", compound=False)
    """

    def factory(
        name: str,
        muscle: str,
        compound: bool = True,
        equipment: str = "Barbell",
    ) -> Exercise:
        return Exercise(
            name=name,
            primary_muscle=muscle,
            equipment=equipment,
            movement_type=MovementType.COMPOUND if compound else MovementType.ISOLATION,
        )

    return factory


@pytest.fixture
def small_catalog(exercise_factory: Callable[..., Exercise]) -> tuple[Exercise, ...]:
    """Two exercises per push muscle: one compound, one isolation."""
    return (
        exercise_factory("Bench Press", "Chest"),
        exercise_factory("Cable Fly", "Chest", compound=False, equipment="Cable"),
        exercise_factory("Overhead Press", "Shoulders (Front)"),
        exercise_factory("Lateral Raise", "Shoulders (Side)", compound=False, equipment="Dumbbell"),
        exercise_factory("Close-Grip Bench Press", "Triceps"),
        exercise_factory("Tricep Pushdown", "Triceps", compound=False, equipment="Cable"),
    )


@pytest.fixture
def params_factory() -> Callable[..., PlanParameters]:
    """Factory fixture for PlanParameters with a 4-week full-body default.

    Usage:
        params = params_factory(split_style=SplitStyle.PPL, days_per_week=5)
    """

    def factory(**overrides: Any) -> PlanParameters:
        defaults: dict[str, Any] = dict(
            duration_weeks=4,
            split_style=SplitStyle.FULL_BODY,
            days_per_week=3,
            goal=Goal.HYPERTROPHY,
            experience_level=ExperienceLevel.INTERMEDIATE,
        )
        defaults.update(overrides)
        return PlanParameters(**defaults)

    return factory


@pytest.fixture
def wednesday() -> datetime:
    """Wednesday 8 January 2025, mid-morning; the next Sunday is 12 January."""
    return datetime(2025, 1, 8, 10, 30, 15, 123456)


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def workout_factory() -> Callable[..., dict]:
    """Factory fixture for raw history entries as the persistence layer stores them.

    Usage:
        entry = workout_factory(datetime(2025, 1, 6, 18), "strength")
    """

    def factory(
        when: datetime,
        workout_type: str = "strength",
        duration_s: float = 3600.0,
        exercises: dict | None = None,
    ) -> dict:
        return {
            "date": when.isoformat(),
            "type": workout_type,
            "duration": duration_s,
            "exercises": exercises or {},
        }

    return factory


@pytest.fixture
def history_factory(workout_factory: Callable[..., dict]) -> Callable[..., list[dict]]:
    """Most-recent-first history built from oldest-first datetimes."""

    def factory(times: list[datetime], workout_type: str = "strength") -> list[dict]:
        return [workout_factory(t, workout_type) for t in reversed(times)]

    return factory


@pytest.fixture
def strength_week_times() -> Callable[..., list[datetime]]:
    """Mon/Wed/Fri 18:00 sessions for each given week offset, oldest first.

    Usage:
        times = strength_week_times(datetime(2025, 1, 6), [0, 1, 2])
    """

    def factory(first_monday: datetime, weeks: list[int]) -> list[datetime]:
        times: list[datetime] = []
        for week in weeks:
            monday = first_monday + timedelta(weeks=week)
            times.extend(monday + timedelta(days=d, hours=18) for d in (0, 2, 4))
        return times

    return factory
