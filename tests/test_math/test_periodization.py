"""Tests for periodization math: anchoring, deload cadence, strength-day spacing."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from training_engine.exceptions import PlanValidationError
from training_engine.math.periodization import (
    anchor_start_date,
    block_number,
    deload_weeks,
    is_deload_week,
    session_date,
    strength_day_indices,
    validate_parameters,
)


class TestAnchorStartDate:
    def test_midweek_moves_to_next_sunday(self, wednesday: datetime) -> None:
        assert anchor_start_date(wednesday) == date(2025, 1, 12)

    def test_sunday_is_kept(self) -> None:
        assert anchor_start_date(datetime(2025, 1, 12, 23, 59)) == date(2025, 1, 12)

    def test_saturday_moves_one_day(self) -> None:
        assert anchor_start_date(date(2025, 1, 11)) == date(2025, 1, 12)

    def test_monday_moves_six_days(self) -> None:
        assert anchor_start_date(date(2025, 1, 13)) == date(2025, 1, 19)

    def test_result_is_always_sunday(self) -> None:
        for day in range(1, 32):
            assert anchor_start_date(date(2025, 3, day)).weekday() == 6


class TestDeloadCadence:
    def test_every_fourth_week(self) -> None:
        flags = [is_deload_week(w) for w in range(12)]
        assert flags == [False, False, False, True] * 3

    def test_deload_week_numbers(self) -> None:
        assert deload_weeks(4) == [4]
        assert deload_weeks(12) == [4, 8, 12]

    def test_block_numbers(self) -> None:
        assert [block_number(w) for w in range(8)] == [1, 1, 1, 1, 2, 2, 2, 2]


class TestStrengthDayIndices:
    @pytest.mark.parametrize(
        "days, expected",
        [
            (1, [0]),
            (2, [0, 3]),
            (3, [0, 2, 4]),
            (4, [0, 1, 2, 3]),
            (5, [0, 1, 2, 3, 4]),
            (7, [0, 1, 2, 3, 4, 5, 6]),
        ],
    )
    def test_spacing(self, days: int, expected: list[int]) -> None:
        assert strength_day_indices(days) == expected

    def test_indices_unique_and_in_range(self) -> None:
        for days in range(1, 8):
            indices = strength_day_indices(days)
            assert len(set(indices)) == days
            assert all(0 <= i <= 6 for i in indices)

    @pytest.mark.parametrize("days", [0, 8, -1])
    def test_out_of_range_rejected(self, days: int) -> None:
        with pytest.raises(ValueError):
            strength_day_indices(days)


class TestSessionDate:
    def test_offsets_by_week_and_day(self) -> None:
        start = date(2025, 1, 12)
        assert session_date(start, 0, 0) == start
        assert session_date(start, 1, 2) == date(2025, 1, 21)


class TestValidateParameters:
    def test_valid_parameters_pass(self, params_factory) -> None:
        validate_parameters(params_factory(duration_weeks=12, days_per_week=7))

    @pytest.mark.parametrize("days", [0, 8])
    def test_days_per_week_out_of_range(self, params_factory, days: int) -> None:
        with pytest.raises(PlanValidationError) as excinfo:
            validate_parameters(params_factory(days_per_week=days))
        assert excinfo.value.field == "daysPerWeek"

    @pytest.mark.parametrize("weeks", [0, 3, 6, -4])
    def test_duration_not_multiple_of_four(self, params_factory, weeks: int) -> None:
        with pytest.raises(PlanValidationError) as excinfo:
            validate_parameters(params_factory(duration_weeks=weeks))
        assert excinfo.value.field == "duration"

    def test_validation_error_is_value_error(self, params_factory) -> None:
        with pytest.raises(ValueError):
            validate_parameters(params_factory(duration_weeks=5))
