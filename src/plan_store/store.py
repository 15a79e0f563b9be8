"""Plan persistence: JSON files on disk, or an in-memory dict.

Enforces the one invariant the planner leaves to persistence: at most one
stored plan is active at any time.
"""

from __future__ import annotations

import copy
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Mapping

from plan_store.exceptions import PlanNotFoundError, PlanRecordError
from training_engine.models.plan import TrainingPlan
from training_engine.serialization import to_plan_dict

logger = logging.getLogger(__name__)


def _plan_file_name(plan_id: str) -> str:
    # Sanitise filename
    safe = "".join(c if c.isalnum() or c in "-_" else "_" for c in plan_id)
    return f"{safe}.json"


class PlanStore:
    """Stores plan records keyed by plan id.

    Usage::

        store = PlanStore(Path("~/.goodlift/plans").expanduser())
        store.save(plan)
        active = store.get_active()

    With ``directory=None`` records live only in memory.
    """

    def __init__(
        self,
        directory: Path | str | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._directory = Path(directory) if directory is not None else None
        self._memory: dict[str, dict] = {}
        self._clock = clock or datetime.now

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def save(self, plan: TrainingPlan | Mapping[str, Any]) -> dict:
        """Insert or replace a plan. Saving an active plan deactivates the rest.

        Raises:
            PlanRecordError: If the record has no id.
        """
        record = to_plan_dict(plan) if isinstance(plan, TrainingPlan) else copy.deepcopy(dict(plan))
        plan_id = record.get("id")
        if not plan_id:
            raise PlanRecordError("Plan record has no 'id'")
        record.setdefault("isActive", False)

        if record["isActive"]:
            self._deactivate_all(except_id=plan_id)
        self._write(record)
        logger.info("Saved plan %s (active=%s)", plan_id, record["isActive"])
        return copy.deepcopy(record)

    def list(self) -> list[dict]:
        """Every stored plan, oldest first."""
        records = self._read_all()
        return sorted(records, key=lambda r: (str(r.get("createdAt", "")), str(r["id"])))

    def get(self, plan_id: str) -> dict:
        """Raises PlanNotFoundError if the id is unknown."""
        for record in self._read_all():
            if record["id"] == plan_id:
                return record
        raise PlanNotFoundError(plan_id)

    def get_active(self) -> dict | None:
        for record in self.list():
            if record.get("isActive"):
                return record
        return None

    def set_active(self, plan_id: str) -> dict:
        """Activate one plan and deactivate every other.

        Raises:
            PlanNotFoundError: If the id is unknown.
        """
        record = self.get(plan_id)
        self._deactivate_all(except_id=plan_id)
        if not record.get("isActive"):
            record["isActive"] = True
            record["updatedAt"] = self._now()
            self._write(record)
        logger.info("Activated plan %s", plan_id)
        return record

    def delete(self, plan_id: str) -> None:
        """Raises PlanNotFoundError if the id is unknown."""
        self.get(plan_id)
        if self._directory is None:
            del self._memory[plan_id]
        else:
            (self._directory / _plan_file_name(plan_id)).unlink()
        logger.info("Deleted plan %s", plan_id)

    # ------------------------------------------------------------------
    # Storage helpers
    # ------------------------------------------------------------------

    def _deactivate_all(self, except_id: str) -> None:
        for other in self._read_all():
            if other["id"] != except_id and other.get("isActive"):
                other["isActive"] = False
                other["updatedAt"] = self._now()
                self._write(other)
                logger.info("Deactivated plan %s", other["id"])

    def _now(self) -> str:
        return self._clock().replace(microsecond=0).isoformat()

    def _write(self, record: dict) -> None:
        if self._directory is None:
            self._memory[record["id"]] = copy.deepcopy(record)
            return
        self._directory.mkdir(parents=True, exist_ok=True)
        with open(self._directory / _plan_file_name(record["id"]), "w") as f:
            json.dump(record, f, indent=2)

    def _read_all(self) -> list[dict]:
        if self._directory is None:
            return [copy.deepcopy(r) for r in self._memory.values()]
        if not self._directory.is_dir():
            return []
        records = []
        for path in sorted(self._directory.glob("*.json")):
            try:
                with open(path) as f:
                    record = json.load(f)
            except (OSError, ValueError) as exc:
                raise PlanRecordError(f"Could not read plan file {path}: {exc}") from exc
            if not isinstance(record, dict) or "id" not in record:
                raise PlanRecordError(f"Plan file {path} holds no plan record")
            records.append(record)
        return records
