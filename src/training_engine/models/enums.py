"""Enumerations and programming constants for the training engine.

Wire labels (the strings exchanged with the UI and the plan store) live in
``*_LABELS`` tables next to their enum. Programming constants cite a
source where one exists.
"""

from enum import IntEnum, auto
from typing import Mapping, TypeVar


class SplitStyle(IntEnum):
    """Muscle-group rotation pattern for strength days."""

    FULL_BODY = auto()
    UPPER_LOWER = auto()
    PPL = auto()


class Goal(IntEnum):
    """Primary training goal selected by the user."""

    STRENGTH = auto()
    HYPERTROPHY = auto()
    FAT_LOSS = auto()
    GENERAL_FITNESS = auto()


class ExperienceLevel(IntEnum):
    """Self-reported lifting experience."""

    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()


class SessionType(IntEnum):
    """Daily session classification within a plan."""

    STRENGTH = auto()
    ACTIVE_RECOVERY = auto()
    REST = auto()


class ActivityType(IntEnum):
    """Activity kinds that make up a session."""

    STRENGTH = auto()
    CARDIO = auto()
    YOGA = auto()


class FocusLabel(IntEnum):
    """Muscle-group focus assigned to a strength day."""

    FULL = auto()
    UPPER = auto()
    LOWER = auto()
    PUSH = auto()
    PULL = auto()
    LEGS = auto()


class MovementType(IntEnum):
    """Catalog movement classification."""

    COMPOUND = auto()
    ISOLATION = auto()


class Intensity(IntEnum):
    """Conditioning intensity for yoga and cardio activities."""

    LIGHT = auto()
    MODERATE = auto()


class BadgeTier(IntEnum):
    """Achievement tiers, ordered by prestige."""

    BRONZE = auto()
    SILVER = auto()
    GOLD = auto()
    PLATINUM = auto()


class BadgeCategory(IntEnum):
    """Grouping used for progress tracking in the achievements view."""

    COUNT = auto()
    STREAK = auto()
    VOLUME = auto()
    TIME = auto()
    SPECIAL = auto()


class ConditionType(IntEnum):
    """Unlock predicate families. Each maps to exactly one BadgePredicate."""

    TOTAL_WORKOUTS = auto()
    TYPE_COUNT = auto()
    STRENGTH_WEEK_STREAK = auto()
    DAY_STREAK = auto()
    TOTAL_VOLUME = auto()
    TOTAL_TIME = auto()
    TIME_OF_DAY = auto()
    WEEKEND_WORKOUTS = auto()
    BACK_TO_BACK = auto()
    FOCUS_VARIETY = auto()


# ---------------------------------------------------------------------------
# Wire labels
# ---------------------------------------------------------------------------

SPLIT_STYLE_LABELS = {
    SplitStyle.FULL_BODY: "full-body",
    SplitStyle.UPPER_LOWER: "upper-lower",
    SplitStyle.PPL: "ppl",
}

GOAL_LABELS = {
    Goal.STRENGTH: "strength",
    Goal.HYPERTROPHY: "hypertrophy",
    Goal.FAT_LOSS: "fat_loss",
    Goal.GENERAL_FITNESS: "general_fitness",
}

EXPERIENCE_LEVEL_LABELS = {
    ExperienceLevel.BEGINNER: "beginner",
    ExperienceLevel.INTERMEDIATE: "intermediate",
    ExperienceLevel.ADVANCED: "advanced",
}

SESSION_TYPE_LABELS = {
    SessionType.STRENGTH: "strength",
    SessionType.ACTIVE_RECOVERY: "active_recovery",
    SessionType.REST: "rest",
}

ACTIVITY_TYPE_LABELS = {
    ActivityType.STRENGTH: "strength",
    ActivityType.CARDIO: "cardio",
    ActivityType.YOGA: "yoga",
}

FOCUS_LABELS = {
    FocusLabel.FULL: "full",
    FocusLabel.UPPER: "upper",
    FocusLabel.LOWER: "lower",
    FocusLabel.PUSH: "push",
    FocusLabel.PULL: "pull",
    FocusLabel.LEGS: "legs",
}

MOVEMENT_TYPE_LABELS = {
    MovementType.COMPOUND: "Compound",
    MovementType.ISOLATION: "Isolation",
}

INTENSITY_LABELS = {
    Intensity.LIGHT: "light",
    Intensity.MODERATE: "moderate",
}

BADGE_TIER_LABELS = {
    BadgeTier.BRONZE: "bronze",
    BadgeTier.SILVER: "silver",
    BadgeTier.GOLD: "gold",
    BadgeTier.PLATINUM: "platinum",
}

BADGE_CATEGORY_LABELS = {
    BadgeCategory.COUNT: "count",
    BadgeCategory.STREAK: "streak",
    BadgeCategory.VOLUME: "volume",
    BadgeCategory.TIME: "time",
    BadgeCategory.SPECIAL: "special",
}

_E = TypeVar("_E", bound=IntEnum)


def parse_label(labels: Mapping[_E, str], value: str) -> _E:
    """Look up the enum member whose wire label matches *value*.

    Matching ignores case and surrounding whitespace.

    Raises:
        ValueError: If no member carries that label.
    """
    wanted = str(value).strip().lower()
    for member, label in labels.items():
        if label.lower() == wanted:
            return member
    allowed = ", ".join(labels.values())
    raise ValueError(f"Unknown label '{value}' (expected one of: {allowed})")


# ---------------------------------------------------------------------------
# Periodization constants
# ---------------------------------------------------------------------------
# Block length: three loading weeks followed by one deload week
DELOAD_INTERVAL_WEEKS = 4
DAYS_PER_WEEK = 7

# Deload prescription relative to the same exercise in a loading week
DELOAD_SET_FRACTION = 0.5
DELOAD_WEIGHT_FRACTION = 0.6

# ---------------------------------------------------------------------------
# Exercise prescription constants
# ---------------------------------------------------------------------------
# Compound lifts get longer rest. de Salles et al. (2009), Sports Med 39(9).
COMPOUND_EXTRA_REST_S = 30

# Isolation work is prescribed slightly higher in the rep range
ISOLATION_EXTRA_REPS = 2
MAX_ISOLATION_REPS = 15

# Session composition: compound lifts carry most of the session volume
MIN_COMPOUND_RATIO = 0.6
MAX_SESSION_SETS = 30

# ---------------------------------------------------------------------------
# Conditioning activity defaults (minutes)
# ---------------------------------------------------------------------------
YOGA_DURATION_MIN = 15
DELOAD_YOGA_DURATION_MIN = 20  # Longer but restorative on deload weeks
CARDIO_DURATION_MIN = 30
DELOAD_CARDIO_DURATION_MIN = 20

# ---------------------------------------------------------------------------
# Achievement constants
# ---------------------------------------------------------------------------
# A strength week needs this many strength sessions between Monday and Sunday
STRENGTH_WEEK_MIN_SESSIONS = 3

# Back-to-back workouts start within this many seconds of the previous one
BACK_TO_BACK_WINDOW_S = 3600

# Local-time hour windows [start, end) for time-of-day badges
TIME_OF_DAY_WINDOWS = {
    "early_morning": (0, 7),
    "morning": (7, 12),
    "afternoon": (12, 17),
    "evening": (17, 22),
    "late_night": (22, 24),
}

TIER_POINTS = {
    BadgeTier.BRONZE: 10,
    BadgeTier.SILVER: 25,
    BadgeTier.GOLD: 50,
    BadgeTier.PLATINUM: 100,
}
POINTS_PER_LEVEL = 100

# Workout type labels counted towards each activity group
STRENGTH_TYPE_LABELS = frozenset(
    {"strength", "hypertrophy", "full", "upper", "lower", "push", "pull", "legs"}
)
CARDIO_TYPE_LABELS = frozenset({"cardio", "hiit"})
YOGA_TYPE_LABELS = frozenset({"yoga"})

ACTIVITY_GROUP_TYPE_LABELS = {
    ActivityType.STRENGTH: STRENGTH_TYPE_LABELS,
    ActivityType.CARDIO: CARDIO_TYPE_LABELS,
    ActivityType.YOGA: YOGA_TYPE_LABELS,
}

# Focus labels a user must log at least once for the variety badge
VARIETY_TYPE_LABELS = ("full", "upper", "lower", "push", "pull", "legs")
