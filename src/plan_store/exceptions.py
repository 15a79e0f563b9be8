"""Custom exception hierarchy for the plan store."""

from __future__ import annotations


class PlanStoreError(Exception):
    """Base exception for all plan_store errors."""


class PlanNotFoundError(PlanStoreError, KeyError):
    """No stored plan has the requested id."""

    def __init__(self, plan_id: str) -> None:
        super().__init__(f"No plan with id '{plan_id}'")
        self.plan_id = plan_id

    def __str__(self) -> str:
        return str(self.args[0])


class PlanRecordError(PlanStoreError):
    """A plan record is malformed (e.g. has no id) or unreadable on disk."""
