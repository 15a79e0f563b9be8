"""Tabular plan summaries: per-week load and per-muscle set volume."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from training_engine.models.enums import ActivityType, SessionType
from training_engine.models.exercise import ExerciseAssignment
from training_engine.models.plan import TrainingPlan

SUMMARY_COLUMNS = [
    "week",
    "block",
    "is_deload",
    "strength_days",
    "recovery_days",
    "rest_days",
    "total_sets",
    "cardio_min",
    "yoga_min",
]


def weekly_summary(plan: TrainingPlan) -> pd.DataFrame:
    """One row per plan week with session counts and training minutes.

    Returns:
        DataFrame with SUMMARY_COLUMNS, indexed 0..weeks-1.
    """
    rows = []
    for session in plan.sessions:
        cardio = session.activity(ActivityType.CARDIO)
        yoga = session.activity(ActivityType.YOGA)
        strength = session.strength_activity
        rows.append(
            {
                "week": session.week_number,
                "block": session.block_number,
                "is_deload": session.is_deload,
                "strength_days": int(session.session_type == SessionType.STRENGTH),
                "recovery_days": int(
                    session.session_type == SessionType.ACTIVE_RECOVERY
                ),
                "rest_days": int(session.session_type == SessionType.REST),
                "total_sets": strength.total_sets if strength else 0,
                "cardio_min": cardio.duration_min if cardio else 0.0,
                "yoga_min": yoga.duration_min if yoga else 0.0,
            }
        )
    if not rows:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    df = pd.DataFrame(rows)
    summary = df.groupby("week", as_index=False).agg(
        block=("block", "first"),
        is_deload=("is_deload", "first"),
        strength_days=("strength_days", "sum"),
        recovery_days=("recovery_days", "sum"),
        rest_days=("rest_days", "sum"),
        total_sets=("total_sets", "sum"),
        cardio_min=("cardio_min", "sum"),
        yoga_min=("yoga_min", "sum"),
    )
    return summary[SUMMARY_COLUMNS]


def muscle_set_volume(assignments: Iterable[ExerciseAssignment]) -> dict[str, int]:
    """Total prescribed sets per muscle group, largest first."""
    frame = pd.DataFrame(
        [{"muscle": a.muscle_group, "sets": a.sets} for a in assignments],
        columns=["muscle", "sets"],
    )
    if frame.empty:
        return {}
    totals = frame.groupby("muscle")["sets"].sum().sort_values(ascending=False)
    return {str(muscle): int(sets) for muscle, sets in totals.items()}


def weekly_muscle_volume(plan: TrainingPlan, week_number: int) -> dict[str, int]:
    """Sets per muscle group across every strength session of one week."""
    assignments: list[ExerciseAssignment] = []
    for session in plan.sessions_in_week(week_number):
        if session.exercises:
            assignments.extend(session.exercises)
    return muscle_set_volume(assignments)
