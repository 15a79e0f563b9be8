"""Plan record serialization for the plan store and UI.

Converts TrainingPlan and AchievementBadge objects into the camelCase
records the surrounding application persists and renders. Sessions
without strength work carry ``exercises: null``.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from training_engine.models.achievement import AchievementBadge
from training_engine.models.enums import (
    ACTIVITY_TYPE_LABELS,
    BADGE_CATEGORY_LABELS,
    BADGE_TIER_LABELS,
    EXPERIENCE_LEVEL_LABELS,
    FOCUS_LABELS,
    GOAL_LABELS,
    INTENSITY_LABELS,
    SESSION_TYPE_LABELS,
    SPLIT_STYLE_LABELS,
)
from training_engine.models.exercise import ExerciseAssignment
from training_engine.models.plan import Activity, PlanParameters, Session, TrainingPlan


def to_plan_dict(plan: TrainingPlan) -> dict:
    """Convert a TrainingPlan to its persisted record."""
    return {
        "id": plan.plan_id,
        "name": plan.name,
        "startDate": plan.start_date.isoformat(),
        "endDate": plan.end_date.isoformat(),
        "duration": plan.duration_days,
        "isActive": plan.is_active,
        "createdAt": plan.created_at.isoformat(),
        "updatedAt": plan.updated_at.isoformat(),
        "parameters": _convert_parameters(plan.parameters),
        "deloadWeeks": list(plan.deload_weeks),
        "validationWarnings": list(plan.validation_warnings),
        "sessions": [_convert_session(s) for s in plan.sessions],
    }


def to_plan_json_string(plan: TrainingPlan, indent: int = 2) -> str:
    """Convert a TrainingPlan to a formatted JSON string."""
    return json.dumps(to_plan_dict(plan), indent=indent)


def badge_to_dict(badge: AchievementBadge) -> dict:
    """Convert a badge to the record shown by the unlock dialog."""
    return {
        "id": badge.badge_id,
        "name": badge.name,
        "description": badge.description,
        "icon": badge.icon,
        "tier": BADGE_TIER_LABELS[badge.tier],
        "category": BADGE_CATEGORY_LABELS[badge.category],
        "threshold": badge.threshold,
    }


def _convert_parameters(params: PlanParameters) -> dict:
    return {
        "duration": params.duration_weeks,
        "splitStyle": SPLIT_STYLE_LABELS[params.split_style],
        "daysPerWeek": params.days_per_week,
        "goal": GOAL_LABELS[params.goal],
        "experienceLevel": EXPERIENCE_LEVEL_LABELS[params.experience_level],
        "equipment": list(params.equipment) or "all",
    }


def _convert_session(session: Session) -> dict:
    exercises = session.exercises
    return {
        "id": session.session_id,
        "date": session.date.isoformat(),
        "weekNumber": session.week_number,
        "blockNumber": session.block_number,
        "isDeload": session.is_deload,
        "type": SESSION_TYPE_LABELS[session.session_type],
        "focus": FOCUS_LABELS[session.focus] if session.focus is not None else None,
        "status": session.status,
        "activities": [_convert_activity(a) for a in session.activities],
        "exercises": (
            [_convert_exercise(e) for e in exercises] if exercises is not None else None
        ),
    }


def _convert_activity(activity: Activity) -> dict:
    return {
        "type": ACTIVITY_TYPE_LABELS[activity.activity_type],
        "duration": activity.duration_min,
        "intensity": INTENSITY_LABELS[activity.intensity],
        "description": activity.description,
    }


def _convert_exercise(assignment: ExerciseAssignment) -> dict:
    return {
        "name": assignment.name,
        "primaryMuscle": assignment.primary_muscle,
        "equipment": assignment.equipment,
        "sets": assignment.sets,
        "reps": assignment.reps,
        "repRange": assignment.rep_range,
        "restSeconds": assignment.rest_seconds,
        "weight": assignment.weight,
        "supersetGroup": assignment.superset_group,
        "isCompound": assignment.is_compound,
        "notes": assignment.notes,
    }
