"""SessionBuilder: assembles one plan day from its activities.

Usage::

    builder = SessionBuilder()
    session = builder.build(
        session_id="plan_1_w1_d1",
        day=date(2025, 1, 5),
        week_index=0,
        focus=FocusLabel.PUSH,
        exercises=assignments,
    )
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from training_engine.math.periodization import block_number, is_deload_week
from training_engine.models.enums import (
    FOCUS_LABELS,
    ActivityType,
    FocusLabel,
    Intensity,
    SessionType,
)
from training_engine.models.exercise import ExerciseAssignment
from training_engine.models.plan import Activity, Session
from training_engine.workout_builder.activity_templates import get_template

# Rough time under tension per set, used for the strength block estimate
_SET_WORK_S = 40


class SessionBuilder:
    """Builds Session records for individual plan days."""

    def build(
        self,
        session_id: str,
        day: date,
        week_index: int,
        focus: FocusLabel | None = None,
        exercises: Sequence[ExerciseAssignment] = (),
    ) -> Session:
        """Build the session for one calendar day.

        A day is a strength day when *focus* is given. Algorithm:
        1. Deload week and no strength work -> true rest, no activities
        2. Strength day -> strength block from *exercises*
        3. Every non-rest day -> yoga + cardio from the activity templates

        Args:
            session_id: Identifier for the session.
            day: Calendar date.
            week_index: 0-based plan week.
            focus: Focus label for strength days, None otherwise.
            exercises: Resolved assignments for the strength block.

        Returns:
            A frozen Session.

        Raises:
            ValueError: If a strength day has no exercises.
        """
        deload = is_deload_week(week_index)
        common = {
            "session_id": session_id,
            "date": day,
            "week_number": week_index + 1,
            "block_number": block_number(week_index),
            "is_deload": deload,
        }

        if focus is None and deload:
            return Session(session_type=SessionType.REST, **common)

        activities: list[Activity] = []
        if focus is not None:
            if not exercises:
                raise ValueError(f"Strength day {day.isoformat()} has no exercises")
            activities.append(self.strength_activity(focus, exercises, deload))
        activities.append(self.conditioning_activity(ActivityType.YOGA, deload))
        activities.append(self.conditioning_activity(ActivityType.CARDIO, deload))

        return Session(
            session_type=(
                SessionType.STRENGTH if focus is not None else SessionType.ACTIVE_RECOVERY
            ),
            activities=tuple(activities),
            focus=focus,
            **common,
        )

    def strength_activity(
        self,
        focus: FocusLabel,
        exercises: Sequence[ExerciseAssignment],
        is_deload: bool,
    ) -> Activity:
        """Strength block with an estimated duration from sets and rest."""
        seconds = sum(a.sets * (_SET_WORK_S + a.rest_seconds) for a in exercises)
        label = FOCUS_LABELS[focus].title()
        description = f"{label} strength: {len(exercises)} exercises"
        if is_deload:
            description += " (deload)"
        return Activity(
            activity_type=ActivityType.STRENGTH,
            duration_min=round(seconds / 60),
            intensity=Intensity.LIGHT if is_deload else Intensity.MODERATE,
            description=description,
            exercises=tuple(exercises),
        )

    def conditioning_activity(self, activity_type: ActivityType, is_deload: bool) -> Activity:
        template = get_template(activity_type, is_deload)
        return Activity(
            activity_type=activity_type,
            duration_min=template.duration_min,
            intensity=template.intensity,
            description=template.description,
        )
