"""Post-hoc compliance checks for strength sessions.

Violations are reported, never corrected: the planner attaches the
warnings to the plan and leaves the prescriptions untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from training_engine.models.enums import MAX_SESSION_SETS, MIN_COMPOUND_RATIO
from training_engine.models.exercise import ExerciseAssignment
from training_engine.models.plan import Session


@dataclass(frozen=True)
class WorkoutValidation:
    """Result of validating one strength session."""

    compound_ratio: float
    total_sets: int
    issues: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.issues


@dataclass(frozen=True)
class PlanCompliance:
    """Result of validating every strength session of a plan."""

    sessions_checked: int
    non_compliant_session_ids: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_compliant(self) -> bool:
        return not self.non_compliant_session_ids


def validate_workout(assignments: Sequence[ExerciseAssignment]) -> WorkoutValidation:
    """Check compound ratio (>= 60%) and total set count (<= 30)."""
    if not assignments:
        return WorkoutValidation(
            compound_ratio=0.0, total_sets=0, issues=("Workout has no exercises",)
        )

    compound_count = sum(1 for a in assignments if a.is_compound)
    ratio = compound_count / len(assignments)
    total_sets = sum(a.sets for a in assignments)

    issues: list[str] = []
    if ratio < MIN_COMPOUND_RATIO:
        issues.append(
            f"Compound ratio {ratio:.0%} is below the {MIN_COMPOUND_RATIO:.0%} minimum"
        )
    if total_sets > MAX_SESSION_SETS:
        issues.append(
            f"Total volume of {total_sets} sets exceeds {MAX_SESSION_SETS}"
        )
    return WorkoutValidation(
        compound_ratio=ratio, total_sets=total_sets, issues=tuple(issues)
    )


def validate_plan(sessions: Iterable[Session]) -> PlanCompliance:
    """Validate every session carrying strength work.

    Returns:
        PlanCompliance listing offending session ids and one warning per
        issue, prefixed with the session date.
    """
    checked = 0
    offending: list[str] = []
    warnings: list[str] = []
    for session in sessions:
        exercises = session.exercises
        if exercises is None:
            continue
        checked += 1
        result = validate_workout(exercises)
        if result.is_valid:
            continue
        offending.append(session.session_id)
        warnings.extend(f"{session.date.isoformat()}: {issue}" for issue in result.issues)
    return PlanCompliance(
        sessions_checked=checked,
        non_compliant_session_ids=tuple(offending),
        warnings=tuple(warnings),
    )
