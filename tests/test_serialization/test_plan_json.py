"""Tests for plan and badge record serialization."""

from __future__ import annotations

import json
from datetime import datetime

import pytest

from training_engine.achievements.catalog import get_badge
from training_engine.ids import SequentialIdGenerator
from training_engine.models.enums import SplitStyle
from training_engine.models.plan import TrainingPlan
from training_engine.planner import PeriodizationPlanner
from training_engine.serialization import badge_to_dict, to_plan_dict, to_plan_json_string


@pytest.fixture
def plan(catalog, params_factory, wednesday: datetime) -> TrainingPlan:
    planner = PeriodizationPlanner(catalog, id_generator=SequentialIdGenerator())
    params = params_factory(split_style=SplitStyle.PPL, days_per_week=3, equipment=("Barbell",))
    return planner.generate(params, now=wednesday)


class TestPlanRecord:
    def test_top_level_fields(self, plan: TrainingPlan) -> None:
        record = to_plan_dict(plan)
        assert record["id"] == "plan_1"
        assert record["startDate"] == "2025-01-12"
        assert record["endDate"] == "2025-02-08"
        assert record["duration"] == 28
        assert record["isActive"] is True
        assert record["createdAt"] == "2025-01-08T10:30:15"
        assert record["deloadWeeks"] == [4]
        assert record["parameters"] == {
            "duration": 4,
            "splitStyle": "ppl",
            "daysPerWeek": 3,
            "goal": "hypertrophy",
            "experienceLevel": "intermediate",
            "equipment": ["Barbell"],
        }

    def test_strength_session(self, plan: TrainingPlan) -> None:
        session = to_plan_dict(plan)["sessions"][0]
        assert session["type"] == "strength"
        assert session["focus"] == "push"
        assert session["weekNumber"] == 1
        assert session["isDeload"] is False
        assert [a["type"] for a in session["activities"]] == ["strength", "yoga", "cardio"]
        exercise = session["exercises"][0]
        assert set(exercise) == {
            "name",
            "primaryMuscle",
            "equipment",
            "sets",
            "reps",
            "repRange",
            "restSeconds",
            "weight",
            "supersetGroup",
            "isCompound",
            "notes",
        }
        assert exercise["equipment"] == "Barbell"

    def test_exercises_null_without_strength(self, plan: TrainingPlan) -> None:
        sessions = to_plan_dict(plan)["sessions"]
        recovery = sessions[1]
        rest = sessions[22]
        assert recovery["type"] == "active_recovery"
        assert recovery["exercises"] is None
        assert recovery["focus"] is None
        assert rest["type"] == "rest"
        assert rest["exercises"] is None
        assert rest["activities"] == []

    def test_json_string_round_trips(self, plan: TrainingPlan) -> None:
        assert json.loads(to_plan_json_string(plan)) == to_plan_dict(plan)

    def test_equipment_defaults_to_all(self, catalog, params_factory, wednesday) -> None:
        planner = PeriodizationPlanner(catalog, id_generator=SequentialIdGenerator())
        record = to_plan_dict(planner.generate(params_factory(), now=wednesday))
        assert record["parameters"]["equipment"] == "all"


class TestBadgeRecord:
    def test_badge_to_dict(self) -> None:
        record = badge_to_dict(get_badge("strength-week-3"))
        assert record["id"] == "strength-week-3"
        assert record["tier"] == "silver"
        assert record["category"] == "streak"
        assert record["threshold"] == 3
