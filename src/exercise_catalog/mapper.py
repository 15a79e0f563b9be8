"""Pure functions mapping raw catalog records to Exercise models.

No I/O: takes the row dicts produced by the loader and returns frozen
Exercise objects. Rows missing a required field, or carrying an unknown
movement type, are dropped.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from training_engine.models.enums import MOVEMENT_TYPE_LABELS, MovementType, parse_label
from training_engine.models.exercise import Exercise

REQUIRED_COLUMNS = ("Exercise Name", "Primary Muscle", "Equipment", "Type")
OPTIONAL_COLUMNS = ("Video Link",)


def map_exercise_records(records: Iterable[Mapping[str, Any]]) -> tuple[Exercise, ...]:
    """Map raw catalog rows to Exercises, dropping unusable rows.

    Names are unique in the result; the first occurrence wins.
    """
    exercises: list[Exercise] = []
    seen: set[str] = set()
    for raw in records:
        exercise = map_exercise_record(raw)
        if exercise is None or exercise.name in seen:
            continue
        seen.add(exercise.name)
        exercises.append(exercise)
    return tuple(exercises)


def map_exercise_record(raw: Mapping[str, Any]) -> Exercise | None:
    """Map one raw row, or return None if a required field is unusable."""
    name = _extract_text(raw.get("Exercise Name"))
    muscle = _extract_text(raw.get("Primary Muscle"))
    equipment = _extract_text(raw.get("Equipment"))
    movement = _extract_movement_type(raw.get("Type"))
    if name is None or muscle is None or equipment is None or movement is None:
        return None
    return Exercise(
        name=name,
        primary_muscle=muscle,
        equipment=equipment,
        movement_type=movement,
        video_link=_extract_text(raw.get("Video Link")),
    )


# ---------------------------------------------------------------------------
# Internal extractors: each handles None input gracefully
# ---------------------------------------------------------------------------


def _extract_text(value: Any) -> Optional[str]:
    """Stripped string, or None for missing, NaN, or blank values."""
    if value is None or (isinstance(value, float) and value != value):
        return None
    text = str(value).strip()
    return text or None


def _extract_movement_type(value: Any) -> Optional[MovementType]:
    text = _extract_text(value)
    if text is None:
        return None
    try:
        return parse_label(MOVEMENT_TYPE_LABELS, text)
    except ValueError:
        return None
