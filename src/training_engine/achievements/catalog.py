"""Static achievement badge catalog, tier points and user levels."""

from __future__ import annotations

from typing import Iterable

from training_engine.models.achievement import AchievementBadge, UserLevel
from training_engine.models.enums import (
    POINTS_PER_LEVEL,
    TIER_POINTS,
    BadgeCategory,
    BadgeTier,
    ConditionType,
)

_BRONZE = BadgeTier.BRONZE
_SILVER = BadgeTier.SILVER
_GOLD = BadgeTier.GOLD
_PLATINUM = BadgeTier.PLATINUM


def _series(
    prefix: str,
    category: BadgeCategory,
    condition: ConditionType,
    steps: Iterable[tuple[str, str, float, BadgeTier, str]],
    qualifier: str | None = None,
) -> tuple[AchievementBadge, ...]:
    return tuple(
        AchievementBadge(
            badge_id=f"{prefix}-{suffix}",
            name=name,
            description=description,
            tier=tier,
            category=category,
            condition=condition,
            threshold=threshold,
            qualifier=qualifier,
        )
        for suffix, name, threshold, tier, description in steps
    )


_FIRST_SESSION = AchievementBadge(
    badge_id="first-session",
    name="First Steps",
    description="Complete your first workout",
    tier=_BRONZE,
    category=BadgeCategory.COUNT,
    condition=ConditionType.TOTAL_WORKOUTS,
    threshold=1,
)

_DEDICATION = _series(
    "dedicated",
    BadgeCategory.COUNT,
    ConditionType.TOTAL_WORKOUTS,
    (
        ("5", "Getting Started", 5, _BRONZE, "Complete 5 workouts"),
        ("10", "Committed", 10, _SILVER, "Complete 10 workouts"),
        ("25", "Athlete", 25, _SILVER, "Complete 25 workouts"),
        ("50", "Beast Mode", 50, _GOLD, "Complete 50 workouts"),
        ("100", "Centurion", 100, _GOLD, "Complete 100 workouts"),
        ("150", "Elite Athlete", 150, _GOLD, "Complete 150 workouts"),
        ("200", "Relentless", 200, _PLATINUM, "Complete 200 workouts"),
        ("250", "Iron Legend", 250, _PLATINUM, "Complete 250 workouts"),
        ("500", "Hall of Fame", 500, _PLATINUM, "Complete 500 workouts"),
    ),
)

_STRENGTH_COUNT = _series(
    "strength",
    BadgeCategory.COUNT,
    ConditionType.TYPE_COUNT,
    (
        ("10", "Iron Initiate", 10, _BRONZE, "Complete 10 strength workouts"),
        ("50", "Barbell Regular", 50, _SILVER, "Complete 50 strength workouts"),
        ("100", "Strength Veteran", 100, _GOLD, "Complete 100 strength workouts"),
    ),
    qualifier="strength",
)

_CARDIO_COUNT = _series(
    "cardio",
    BadgeCategory.COUNT,
    ConditionType.TYPE_COUNT,
    (
        ("10", "Heart Starter", 10, _BRONZE, "Complete 10 cardio workouts"),
        ("50", "Engine Builder", 50, _SILVER, "Complete 50 cardio workouts"),
    ),
    qualifier="cardio",
)

_YOGA_COUNT = _series(
    "yoga",
    BadgeCategory.COUNT,
    ConditionType.TYPE_COUNT,
    (
        ("10", "Flow Finder", 10, _BRONZE, "Complete 10 yoga sessions"),
        ("50", "Mindful Mover", 50, _SILVER, "Complete 50 yoga sessions"),
    ),
    qualifier="yoga",
)

_STRENGTH_WEEKS = _series(
    "strength-week",
    BadgeCategory.STREAK,
    ConditionType.STRENGTH_WEEK_STREAK,
    (
        ("1", "Three-a-Week", 1, _BRONZE,
         "Log 3 strength workouts in one calendar week"),
        ("3", "Locked In", 3, _SILVER,
         "Log 3 strength workouts a week for 3 consecutive weeks"),
        ("8", "Habit Formed", 8, _GOLD,
         "Log 3 strength workouts a week for 8 consecutive weeks"),
    ),
)

_DAY_STREAKS = _series(
    "streak",
    BadgeCategory.STREAK,
    ConditionType.DAY_STREAK,
    (
        ("3", "Consistency", 3, _BRONZE, "Work out 3 days in a row"),
        ("7", "Week Warrior", 7, _SILVER, "Work out 7 days in a row"),
        ("14", "Fortnight Fighter", 14, _SILVER, "Work out 14 days in a row"),
        ("30", "Monthly Master", 30, _GOLD, "Work out 30 days in a row"),
        ("60", "Unbreakable", 60, _GOLD, "Work out 60 days in a row"),
        ("100", "Iron Will", 100, _PLATINUM, "Work out 100 days in a row"),
    ),
)

_VOLUME = _series(
    "volume",
    BadgeCategory.VOLUME,
    ConditionType.TOTAL_VOLUME,
    (
        ("10k", "Moving Iron", 10_000, _BRONZE, "Lift 10,000 total volume"),
        ("50k", "Heavy Lifter", 50_000, _SILVER, "Lift 50,000 total volume"),
        ("100k", "Tonnage Master", 100_000, _GOLD, "Lift 100,000 total volume"),
        ("250k", "Moving Mountains", 250_000, _PLATINUM, "Lift 250,000 total volume"),
    ),
)

_TIME = _series(
    "time",
    BadgeCategory.TIME,
    ConditionType.TOTAL_TIME,
    (
        ("1h", "First Hour", 3_600, _BRONZE, "Train for 1 hour in total"),
        ("10h", "Time Investment", 36_000, _SILVER, "Train for 10 hours in total"),
        ("50h", "Dedicated", 180_000, _GOLD, "Train for 50 hours in total"),
        ("100h", "Time Master", 360_000, _PLATINUM, "Train for 100 hours in total"),
    ),
)


def _special(
    badge_id: str,
    name: str,
    description: str,
    tier: BadgeTier,
    condition: ConditionType,
    threshold: float,
    qualifier: str | None = None,
) -> AchievementBadge:
    return AchievementBadge(
        badge_id=badge_id,
        name=name,
        description=description,
        tier=tier,
        category=BadgeCategory.SPECIAL,
        condition=condition,
        threshold=threshold,
        qualifier=qualifier,
    )


_SPECIAL = (
    _special("early-bird", "Early Bird", "Complete a workout before 7 AM",
             _BRONZE, ConditionType.TIME_OF_DAY, 1, "early_morning"),
    _special("morning-person", "Morning Person",
             "Complete 10 workouts in the morning (7 AM - 12 PM)",
             _SILVER, ConditionType.TIME_OF_DAY, 10, "morning"),
    _special("afternoon-warrior", "Afternoon Warrior",
             "Complete 10 workouts in the afternoon (12 PM - 5 PM)",
             _SILVER, ConditionType.TIME_OF_DAY, 10, "afternoon"),
    _special("evening-grinder", "Evening Grinder",
             "Complete 10 workouts in the evening (5 PM - 10 PM)",
             _SILVER, ConditionType.TIME_OF_DAY, 10, "evening"),
    _special("night-owl", "Night Owl", "Complete a workout after 10 PM",
             _BRONZE, ConditionType.TIME_OF_DAY, 1, "late_night"),
    _special("consecutive-3", "Back to Back",
             "Complete 3 workouts each starting within an hour of the last",
             _BRONZE, ConditionType.BACK_TO_BACK, 3),
    _special("consecutive-5", "Chain Reaction",
             "Complete 5 workouts each starting within an hour of the last",
             _SILVER, ConditionType.BACK_TO_BACK, 5),
    _special("consecutive-10", "Unstoppable",
             "Complete 10 workouts each starting within an hour of the last",
             _GOLD, ConditionType.BACK_TO_BACK, 10),
    _special("weekend-warrior", "Weekend Warrior", "Complete 10 weekend workouts",
             _SILVER, ConditionType.WEEKEND_WORKOUTS, 10),
    _special("variety-seeker", "Variety Seeker",
             "Complete every workout focus (Full Body, Upper, Lower, Push, Pull, Legs)",
             _GOLD, ConditionType.FOCUS_VARIETY, 6),
)

ACHIEVEMENT_BADGES: tuple[AchievementBadge, ...] = (
    (_FIRST_SESSION,)
    + _DEDICATION
    + _STRENGTH_COUNT
    + _CARDIO_COUNT
    + _YOGA_COUNT
    + _STRENGTH_WEEKS
    + _DAY_STREAKS
    + _VOLUME
    + _TIME
    + _SPECIAL
)

BADGES_BY_ID: dict[str, AchievementBadge] = {b.badge_id: b for b in ACHIEVEMENT_BADGES}


def get_badge(badge_id: str) -> AchievementBadge:
    """Look up a badge by id.

    Raises:
        KeyError: If the id is not in the catalog.
    """
    return BADGES_BY_ID[badge_id]


def badges_in_category(
    category: BadgeCategory,
    badges: Iterable[AchievementBadge] = ACHIEVEMENT_BADGES,
) -> list[AchievementBadge]:
    """Badges of one category, easiest threshold first."""
    return sorted(
        (b for b in badges if b.category == category),
        key=lambda b: (b.condition, b.threshold),
    )


def calculate_points(badges: Iterable[AchievementBadge]) -> int:
    """Total tier points: bronze 10, silver 25, gold 50, platinum 100."""
    return sum(TIER_POINTS[b.tier] for b in badges)


def calculate_level(points: int) -> UserLevel:
    """Level from points; every level takes 100 points, starting at level 1."""
    points = max(0, int(points))
    current = points % POINTS_PER_LEVEL
    return UserLevel(
        level=points // POINTS_PER_LEVEL + 1,
        total_points=points,
        current_points=current,
        points_to_next=POINTS_PER_LEVEL - current,
    )
