"""History snapshots: parsed workout history plus the stats hint.

Malformed history entries (not a mapping, missing or unparseable ``date``,
missing ``type``) are skipped rather than raised: achievement evaluation is
best effort and one corrupt record must not sink the whole pass.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Iterable, Mapping

from training_engine.models.achievement import UserStats, WorkoutRecord


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a history ``date`` into a naive local datetime.

    Accepts epoch milliseconds, ISO 8601 strings (a trailing ``Z`` is
    understood), datetimes and dates. Aware values are converted to local
    time before the zone is dropped.

    Returns:
        The parsed datetime, or None when the value is unusable.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime.combine(value, time())
    elif isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_record(raw: Any, index: int) -> WorkoutRecord | None:
    """Parse one raw history entry, or return None if it is malformed."""
    if isinstance(raw, WorkoutRecord):
        return dataclasses.replace(raw, index=index)
    if not isinstance(raw, Mapping):
        return None

    performed_at = parse_timestamp(raw.get("date"))
    type_label = raw.get("type")
    if performed_at is None or not isinstance(type_label, str) or not type_label.strip():
        return None

    try:
        duration_s = float(raw.get("duration") or 0)
    except (TypeError, ValueError):
        duration_s = 0.0
    exercises = raw.get("exercises")

    return WorkoutRecord(
        index=index,
        performed_at=performed_at,
        type_label=type_label.strip().lower(),
        duration_s=max(duration_s, 0.0),
        exercises=exercises if isinstance(exercises, Mapping) else {},
    )


def parse_history(history: Iterable[Any] | None) -> tuple[tuple[WorkoutRecord, ...], int]:
    """Parse a most-recent-first history.

    Returns:
        (records in input order, number of skipped entries)
    """
    records: list[WorkoutRecord] = []
    skipped = 0
    for index, raw in enumerate(history or ()):
        record = parse_record(raw, index)
        if record is None:
            skipped += 1
            continue
        records.append(record)
    return tuple(records), skipped


@dataclass(frozen=True)
class HistorySnapshot:
    """Everything a badge predicate may look at, as of one point in time."""

    records: tuple[WorkoutRecord, ...] = field(default_factory=tuple)
    stats: UserStats = field(default_factory=UserStats)
    skipped: int = 0

    @classmethod
    def from_inputs(
        cls,
        stats: UserStats | Mapping[str, Any] | None,
        history: Iterable[Any] | None,
    ) -> HistorySnapshot:
        if not isinstance(stats, UserStats):
            stats = UserStats.from_mapping(stats)
        records, skipped = parse_history(history)
        return cls(records=records, stats=stats, skipped=skipped)

    @property
    def latest(self) -> WorkoutRecord | None:
        """The most recent history entry (position 0), or None if it was skipped."""
        if self.records and self.records[0].index == 0:
            return self.records[0]
        return None

    def without_latest(self) -> HistorySnapshot:
        """Snapshot as it stood one workout ago.

        The latest entry is dropped and its set volume removed from the
        stats volume hint (clamped at zero). A malformed latest entry
        contributes nothing, so the snapshot is returned unchanged.
        """
        latest = self.latest
        if latest is None:
            return self
        stats = dataclasses.replace(
            self.stats,
            total_volume=max(0.0, self.stats.total_volume - latest.volume),
        )
        return HistorySnapshot(
            records=self.records[1:],
            stats=stats,
            skipped=self.skipped,
        )

    @property
    def timestamps(self) -> list[datetime]:
        return [r.performed_at for r in self.records]

    def records_with_types(self, type_labels: Iterable[str]) -> list[WorkoutRecord]:
        wanted = frozenset(type_labels)
        return [r for r in self.records if r.type_label in wanted]
