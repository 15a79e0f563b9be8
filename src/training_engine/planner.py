"""PeriodizationPlanner: expands plan parameters into a dated training calendar."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Sequence

from training_engine.ids import IdGenerator, TimestampIdGenerator
from training_engine.math.periodization import (
    anchor_start_date,
    block_number,
    deload_weeks,
    is_deload_week,
    session_date,
    strength_day_indices,
    validate_parameters,
)
from training_engine.models.enums import DAYS_PER_WEEK, FocusLabel
from training_engine.models.exercise import Exercise, ExerciseAssignment
from training_engine.models.plan import PlanParameters, Session, TrainingPlan
from training_engine.workout_builder.builder import SessionBuilder
from training_engine.workout_builder.exercise_selector import (
    scale_for_deload,
    select_exercises,
)
from training_engine.workout_builder.focus import assign_focus
from training_engine.workout_builder.validator import validate_plan


class PeriodizationPlanner:
    """Builds fully materialized multi-week plans.

    Usage:
        planner = PeriodizationPlanner(catalog)
        plan = planner.generate(params)

    Exercises are resolved once per (focus, block): every session of a
    block with the same focus shares the same exercises, and the deload
    week reuses them scaled down.
    """

    def __init__(
        self,
        catalog: Sequence[Exercise],
        id_generator: IdGenerator | None = None,
        clock: Callable[[], datetime] | None = None,
        session_builder: SessionBuilder | None = None,
    ) -> None:
        self.catalog = tuple(catalog)
        self.id_generator = id_generator or TimestampIdGenerator()
        self.clock = clock or datetime.now
        self.session_builder = session_builder or SessionBuilder()

    def generate(self, params: PlanParameters, now: datetime | None = None) -> TrainingPlan:
        """Generate a plan anchored on the next Sunday.

        Algorithm:
        1. Validate parameters and anchor the start date
        2. For each week: deload flag, block number, strength-day slots
        3. For each day: resolve focus and exercises, build the session
        4. Validate strength sessions and attach warnings
        5. Attach plan metadata (id, name, timestamps, active flag)

        Args:
            params: Plan parameters from the wizard.
            now: Current local time; defaults to the planner clock.

        Returns:
            The generated TrainingPlan.

        Raises:
            PlanValidationError: If the parameters are out of range.
            CatalogExhaustedError: If a focus matches no catalog exercise.
        """
        validate_parameters(params)
        now = now or self.clock()
        start = anchor_start_date(now)
        plan_id = f"plan_{self.id_generator.next()}"
        strength_days = strength_day_indices(params.days_per_week)
        block_exercises: dict[tuple[FocusLabel, int], list[ExerciseAssignment]] = {}

        sessions: list[Session] = []
        for week_index in range(params.duration_weeks):
            for day_index in range(DAYS_PER_WEEK):
                focus: FocusLabel | None = None
                exercises: list[ExerciseAssignment] = []
                if day_index in strength_days:
                    # Ordinal restarts each week so the rotation repeats weekly
                    focus = assign_focus(params.split_style, strength_days.index(day_index))
                    exercises = self._exercises_for(
                        params, focus, week_index, block_exercises
                    )
                sessions.append(
                    self.session_builder.build(
                        session_id=f"{plan_id}_w{week_index + 1}_d{day_index + 1}",
                        day=session_date(start, week_index, day_index),
                        week_index=week_index,
                        focus=focus,
                        exercises=exercises,
                    )
                )

        compliance = validate_plan(sessions)
        created = now.replace(microsecond=0)
        return TrainingPlan(
            plan_id=plan_id,
            name=params.display_name,
            start_date=start,
            duration_days=params.duration_weeks * DAYS_PER_WEEK,
            sessions=tuple(sessions),
            parameters=params,
            created_at=created,
            updated_at=created,
            is_active=True,
            deload_weeks=tuple(deload_weeks(params.duration_weeks)),
            validation_warnings=compliance.warnings,
        )

    def _exercises_for(
        self,
        params: PlanParameters,
        focus: FocusLabel,
        week_index: int,
        cache: dict[tuple[FocusLabel, int], list[ExerciseAssignment]],
    ) -> list[ExerciseAssignment]:
        block = block_number(week_index)
        key = (focus, block)
        if key not in cache:
            cache[key] = select_exercises(
                focus,
                params.experience_level,
                params.goal,
                False,
                self.catalog,
                equipment=params.equipment,
                starting_weights=params.starting_weights,
                variation=block - 1,
            )
        loading = cache[key]
        if is_deload_week(week_index):
            return [scale_for_deload(a) for a in loading]
        return list(loading)


def generate_plan(
    params: PlanParameters,
    catalog: Sequence[Exercise],
    *,
    now: datetime | None = None,
    id_generator: IdGenerator | None = None,
) -> TrainingPlan:
    """Convenience wrapper: one-off planner call."""
    return PeriodizationPlanner(catalog, id_generator=id_generator).generate(params, now=now)
