"""Exception hierarchy for the training engine core."""

from __future__ import annotations


class TrainingEngineError(Exception):
    """Base exception for all training_engine errors."""


class PlanValidationError(TrainingEngineError, ValueError):
    """Plan parameters were rejected before generation started."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class CatalogExhaustedError(TrainingEngineError):
    """A focus label matched no exercise in the catalog."""

    def __init__(self, focus: str, equipment: tuple[str, ...] = ()) -> None:
        detail = f" with equipment {', '.join(equipment)}" if equipment else ""
        super().__init__(f"No catalog exercises available for focus '{focus}'{detail}")
        self.focus = focus
        self.equipment = equipment
