"""Periodization math: calendar anchoring, deload cadence, strength-day spacing.

Plans are built from 4-week blocks of three loading weeks followed by one
deload week. Strength days are spread as evenly as integer spacing allows
across a Sunday-anchored 7-day week.

References:
    Issurin (2010), New horizons for the methodology and physiology of
        training periodization. Sports Med 40(3):189-206.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from training_engine.exceptions import PlanValidationError
from training_engine.models.enums import DAYS_PER_WEEK, DELOAD_INTERVAL_WEEKS
from training_engine.models.plan import PlanParameters


def anchor_start_date(now: datetime | date) -> date:
    """Return the plan start: today if Sunday, otherwise the next Sunday.

    The time of day is discarded so every session date compares by
    calendar day.

    Args:
        now: Current local date or datetime.

    Returns:
        The anchoring Sunday as a date.
    """
    today = now.date() if isinstance(now, datetime) else now
    # weekday(): Monday=0 ... Sunday=6
    days_ahead = (6 - today.weekday()) % DAYS_PER_WEEK
    return today + timedelta(days=days_ahead)


def validate_parameters(params: PlanParameters) -> None:
    """Reject parameters the planner cannot expand.

    Raises:
        PlanValidationError: If days_per_week is outside 1-7 or the
            duration is not a positive multiple of 4 weeks.
    """
    if not 1 <= params.days_per_week <= DAYS_PER_WEEK:
        raise PlanValidationError(
            f"daysPerWeek must be between 1 and {DAYS_PER_WEEK}, "
            f"got {params.days_per_week}",
            field="daysPerWeek",
        )
    if params.duration_weeks <= 0 or params.duration_weeks % DELOAD_INTERVAL_WEEKS:
        raise PlanValidationError(
            f"duration must be a positive multiple of {DELOAD_INTERVAL_WEEKS} "
            f"weeks, got {params.duration_weeks}",
            field="duration",
        )


def is_deload_week(week_index: int) -> bool:
    """True for every 4th week. *week_index* is 0-based."""
    return (week_index + 1) % DELOAD_INTERVAL_WEEKS == 0


def block_number(week_index: int) -> int:
    """1-based block containing a 0-based week index."""
    return week_index // DELOAD_INTERVAL_WEEKS + 1


def deload_weeks(total_weeks: int) -> list[int]:
    """1-based week numbers of every deload week in a plan."""
    return [w + 1 for w in range(total_weeks) if is_deload_week(w)]


def strength_day_indices(days_per_week: int) -> list[int]:
    """Spread strength days across the 7 day slots of a week.

    Uses integer spacing ``7 // days_per_week`` starting from day 0,
    clamping any overflow to the last slot (index 6).

    Args:
        days_per_week: Number of strength days, 1-7.

    Returns:
        Sorted 0-based day indices.

    Raises:
        ValueError: If days_per_week is outside 1-7.
    """
    if not 1 <= days_per_week <= DAYS_PER_WEEK:
        raise ValueError(
            f"days_per_week must be between 1 and {DAYS_PER_WEEK}, got {days_per_week}"
        )
    spacing = DAYS_PER_WEEK // days_per_week
    return [min(i * spacing, DAYS_PER_WEEK - 1) for i in range(days_per_week)]


def session_date(start: date, week_index: int, day_index: int) -> date:
    """Calendar date of a 0-based (week, day) slot."""
    return start + timedelta(days=week_index * DAYS_PER_WEEK + day_index)
