"""Activity templates for the conditioning blocks of a session.

Yoga and cardio are attached to every non-rest day. Deload weeks swap the
yoga flow for a longer restorative session and shorten the cardio while
dropping it to a light effort.
"""

from __future__ import annotations

from dataclasses import dataclass

from training_engine.models.enums import (
    CARDIO_DURATION_MIN,
    DELOAD_CARDIO_DURATION_MIN,
    DELOAD_YOGA_DURATION_MIN,
    YOGA_DURATION_MIN,
    ActivityType,
    Intensity,
)


@dataclass(frozen=True)
class ActivityTemplate:
    """Duration, intensity and description of a conditioning block."""

    duration_min: float
    intensity: Intensity
    description: str


# (ActivityType, is_deload) -> template
ACTIVITY_TEMPLATES: dict[tuple[ActivityType, bool], ActivityTemplate] = {
    (ActivityType.YOGA, False): ActivityTemplate(
        duration_min=YOGA_DURATION_MIN,
        intensity=Intensity.MODERATE,
        description="Mobility flow: hips, thoracic spine, hamstrings.",
    ),
    # Deload yoga is longer on purpose; the effort is what drops
    (ActivityType.YOGA, True): ActivityTemplate(
        duration_min=DELOAD_YOGA_DURATION_MIN,
        intensity=Intensity.LIGHT,
        description="Restorative yoga: long supported holds, slow breathing.",
    ),
    (ActivityType.CARDIO, False): ActivityTemplate(
        duration_min=CARDIO_DURATION_MIN,
        intensity=Intensity.MODERATE,
        description="Steady cardio at conversational effort. RPE 5-6/10.",
    ),
    (ActivityType.CARDIO, True): ActivityTemplate(
        duration_min=DELOAD_CARDIO_DURATION_MIN,
        intensity=Intensity.LIGHT,
        description="Easy walk or cycle. RPE 3-4/10.",
    ),
}


def get_template(activity_type: ActivityType, is_deload: bool) -> ActivityTemplate:
    """Look up the conditioning template for an activity type and week kind.

    Raises:
        KeyError: If the activity type has no conditioning template
            (strength blocks are built from exercise assignments).
    """
    return ACTIVITY_TEMPLATES[(activity_type, is_deload)]
