"""Plan persistence: save, list, activate and delete generated plans."""

from plan_store.exceptions import PlanNotFoundError, PlanRecordError, PlanStoreError
from plan_store.store import PlanStore

__all__ = ["PlanNotFoundError", "PlanRecordError", "PlanStore", "PlanStoreError"]
