"""Focus-label rotation for strength days."""

from __future__ import annotations

from training_engine.models.enums import FocusLabel, SplitStyle

FOCUS_ROTATION: dict[SplitStyle, tuple[FocusLabel, ...]] = {
    SplitStyle.FULL_BODY: (FocusLabel.FULL,),
    SplitStyle.UPPER_LOWER: (FocusLabel.UPPER, FocusLabel.LOWER),
    SplitStyle.PPL: (FocusLabel.PUSH, FocusLabel.PULL, FocusLabel.LEGS),
}


def assign_focus(split_style: SplitStyle, strength_day_ordinal: int) -> FocusLabel:
    """Focus for the n-th (0-based) strength day under a split style.

    full-body -> always ``full``; upper-lower alternates by parity; ppl
    cycles push, pull, legs.

    Raises:
        ValueError: If the ordinal is negative.
    """
    if strength_day_ordinal < 0:
        raise ValueError(f"strength_day_ordinal must be >= 0, got {strength_day_ordinal}")
    rotation = FOCUS_ROTATION[split_style]
    return rotation[strength_day_ordinal % len(rotation)]
