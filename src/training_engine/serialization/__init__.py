"""Serialization module: export plans and badges to persisted records."""

from training_engine.serialization.plan_json import (
    badge_to_dict,
    to_plan_dict,
    to_plan_json_string,
)

__all__ = ["badge_to_dict", "to_plan_dict", "to_plan_json_string"]
