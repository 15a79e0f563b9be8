"""Streak arithmetic over workout timestamps.

All functions take naive local datetimes and are order-independent.
Weeks are calendar weeks anchored on Monday (ISO 8601).
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Sequence

import numpy as np
import pandas as pd


def longest_run(values: Sequence[int], step: int = 1) -> int:
    """Length of the longest arithmetic run in a set of integers.

    Duplicates are ignored. ``longest_run([1, 2, 3, 5, 6]) == 3``.

    Args:
        values: Integers in any order.
        step: Exact difference between neighbouring members of a run.

    Returns:
        Run length, 0 for empty input.
    """
    if len(values) == 0:
        return 0
    arr = np.unique(np.asarray(values, dtype=np.int64))
    breaks = np.flatnonzero(np.diff(arr) != step)
    edges = np.concatenate(([-1], breaks, [arr.size - 1]))
    return int(np.diff(edges).max())


def week_start(day: date) -> date:
    """Monday of the calendar week containing *day*."""
    return day - timedelta(days=day.weekday())


def qualifying_week_starts(
    timestamps: Iterable[datetime], min_count: int
) -> list[date]:
    """Mondays of the weeks holding at least *min_count* timestamps.

    Args:
        timestamps: Workout times.
        min_count: Minimum entries for a week to qualify.

    Returns:
        Sorted week-start dates.
    """
    series = pd.Series(pd.to_datetime(list(timestamps)), dtype="datetime64[ns]")
    if series.empty:
        return []
    days = series.dt.normalize()
    starts = days - pd.to_timedelta(days.dt.weekday, unit="D")
    counts = starts.value_counts()
    return sorted(ts.date() for ts, n in counts.items() if n >= min_count)


def longest_weekly_run(week_starts: Iterable[date]) -> int:
    """Longest run of week starts exactly 7 days apart."""
    return longest_run([d.toordinal() for d in week_starts], step=7)


def longest_day_streak(timestamps: Iterable[datetime]) -> int:
    """Longest run of consecutive calendar days with at least one workout."""
    return longest_run([t.date().toordinal() for t in timestamps], step=1)


def longest_chain(timestamps: Iterable[datetime], window_s: float) -> int:
    """Longest sequence of workouts each starting within *window_s* of the previous.

    A lone workout is a chain of length 1.
    """
    ordered = np.sort(np.array(list(timestamps), dtype="datetime64[s]"))
    if ordered.size == 0:
        return 0
    within = np.diff(ordered) <= np.timedelta64(int(window_s), "s")
    linked = np.flatnonzero(within)
    if linked.size == 0:
        return 1
    return longest_run(linked.tolist(), step=1) + 1
