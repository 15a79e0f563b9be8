"""Plan models: generation parameters, sessions, activities, and the plan itself."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Mapping

from training_engine.exceptions import PlanValidationError
from training_engine.models.enums import (
    EXPERIENCE_LEVEL_LABELS,
    GOAL_LABELS,
    SPLIT_STYLE_LABELS,
    ActivityType,
    ExperienceLevel,
    FocusLabel,
    Goal,
    Intensity,
    SessionType,
    SplitStyle,
    parse_label,
)
from training_engine.models.exercise import ExerciseAssignment


@dataclass(frozen=True)
class PlanParameters:
    """User choices collected by the plan wizard.

    Only exists for the duration of a generate call; never persisted on its
    own (a copy is embedded in the generated plan for reference).
    """

    duration_weeks: int
    split_style: SplitStyle
    days_per_week: int
    goal: Goal
    experience_level: ExperienceLevel
    equipment: tuple[str, ...] = ()
    starting_weights: Mapping[str, float] = field(default_factory=dict)
    name: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PlanParameters:
        """Build parameters from the camelCase wizard record.

        Expected keys: ``duration`` (weeks), ``splitStyle``, ``daysPerWeek``,
        ``goal``, ``experienceLevel``; optional ``equipment`` (string or
        list, ``"all"`` meaning no filter), ``startingWeights`` and ``name``.

        Raises:
            PlanValidationError: On a missing key, a non-integer count, or
                an unknown label.
        """
        try:
            split_style = parse_label(SPLIT_STYLE_LABELS, data["splitStyle"])
            goal = parse_label(GOAL_LABELS, data["goal"])
            level = parse_label(EXPERIENCE_LEVEL_LABELS, data["experienceLevel"])
            duration_weeks = int(data["duration"])
            days_per_week = int(data["daysPerWeek"])
        except KeyError as exc:
            raise PlanValidationError(
                f"Missing plan parameter: {exc.args[0]}", field=str(exc.args[0])
            ) from exc
        except (TypeError, ValueError) as exc:
            raise PlanValidationError(f"Invalid plan parameter: {exc}") from exc

        raw_equipment = data.get("equipment") or ()
        if isinstance(raw_equipment, str):
            raw_equipment = () if raw_equipment == "all" else (raw_equipment,)
        equipment = tuple(str(e) for e in raw_equipment if str(e) != "all")

        weights: dict[str, float] = {}
        for exercise_name, weight in (data.get("startingWeights") or {}).items():
            if weight is None:
                continue
            try:
                weights[str(exercise_name)] = float(weight)
            except (TypeError, ValueError) as exc:
                raise PlanValidationError(
                    f"Invalid starting weight for {exercise_name}: {weight!r}",
                    field="startingWeights",
                ) from exc

        name = data.get("name")
        return cls(
            duration_weeks=duration_weeks,
            split_style=split_style,
            days_per_week=days_per_week,
            goal=goal,
            experience_level=level,
            equipment=equipment,
            starting_weights=weights,
            name=str(name).strip() if name else None,
        )

    @property
    def display_name(self) -> str:
        """User-supplied name, or a descriptive default."""
        if self.name:
            return self.name
        split = SPLIT_STYLE_LABELS[self.split_style].replace("-", " ").title()
        if self.split_style == SplitStyle.PPL:
            split = "Push/Pull/Legs"
        goal = GOAL_LABELS[self.goal].replace("_", " ").title()
        return f"{self.duration_weeks}-Week {split} {goal} Plan"


@dataclass(frozen=True)
class Activity:
    """One block of work within a session."""

    activity_type: ActivityType
    duration_min: float
    intensity: Intensity = Intensity.MODERATE
    description: str = ""
    exercises: tuple[ExerciseAssignment, ...] = field(default_factory=tuple)

    @property
    def total_sets(self) -> int:
        return sum(e.sets for e in self.exercises)


@dataclass(frozen=True)
class Session:
    """A single calendar day of a training plan."""

    session_id: str
    date: date
    week_number: int  # 1-based
    block_number: int  # 1-based, ceil(week_number / 4)
    is_deload: bool
    session_type: SessionType
    activities: tuple[Activity, ...] = field(default_factory=tuple)
    focus: FocusLabel | None = None
    status: str = "planned"

    @property
    def strength_activity(self) -> Activity | None:
        for activity in self.activities:
            if activity.activity_type == ActivityType.STRENGTH:
                return activity
        return None

    @property
    def exercises(self) -> tuple[ExerciseAssignment, ...] | None:
        """Strength prescriptions, or None for days without strength work."""
        activity = self.strength_activity
        return activity.exercises if activity is not None else None

    def activity(self, activity_type: ActivityType) -> Activity | None:
        for activity in self.activities:
            if activity.activity_type == activity_type:
                return activity
        return None


@dataclass(frozen=True)
class TrainingPlan:
    """Fully materialized multi-week plan, ready for the plan store."""

    plan_id: str
    name: str
    start_date: date
    duration_days: int
    sessions: tuple[Session, ...]
    parameters: PlanParameters
    created_at: datetime
    updated_at: datetime
    is_active: bool = True
    deload_weeks: tuple[int, ...] = field(default_factory=tuple)
    validation_warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def end_date(self) -> date:
        return self.start_date + timedelta(days=self.duration_days - 1)

    @property
    def weeks(self) -> int:
        return self.duration_days // 7

    @property
    def strength_sessions(self) -> tuple[Session, ...]:
        return tuple(
            s for s in self.sessions if s.session_type == SessionType.STRENGTH
        )

    def sessions_in_week(self, week_number: int) -> tuple[Session, ...]:
        """Sessions belonging to a 1-based week number."""
        return tuple(s for s in self.sessions if s.week_number == week_number)

    @property
    def is_compliant(self) -> bool:
        return not self.validation_warnings
