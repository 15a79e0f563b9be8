"""Tests for PlanStore: persistence and the single-active-plan rule."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

from plan_store import PlanNotFoundError, PlanRecordError, PlanStore
from training_engine.ids import SequentialIdGenerator
from training_engine.models.plan import TrainingPlan
from training_engine.planner import PeriodizationPlanner

LATER = datetime(2025, 1, 9, 8, 0, 0, 500)


@pytest.fixture
def plans(catalog, params_factory, wednesday: datetime) -> list[TrainingPlan]:
    planner = PeriodizationPlanner(catalog, id_generator=SequentialIdGenerator())
    return [planner.generate(params_factory(), now=wednesday) for _ in range(3)]


@pytest.fixture(params=["memory", "disk"])
def store(request, tmp_path: Path) -> PlanStore:
    directory = tmp_path / "plans" if request.param == "disk" else None
    return PlanStore(directory, clock=lambda: LATER)


class TestPlanStore:
    def test_save_and_get(self, store: PlanStore, plans) -> None:
        store.save(plans[0])
        record = store.get("plan_1")
        assert record["name"] == "4-Week Full Body Hypertrophy Plan"
        assert len(record["sessions"]) == 28

    def test_one_active_plan(self, store: PlanStore, plans) -> None:
        for plan in plans:
            store.save(plan)
        active = [r["id"] for r in store.list() if r["isActive"]]
        assert active == ["plan_3"]
        assert store.get_active()["id"] == "plan_3"
        assert store.get("plan_1")["updatedAt"] == "2025-01-09T08:00:00"

    def test_set_active(self, store: PlanStore, plans) -> None:
        for plan in plans:
            store.save(plan)
        store.set_active("plan_1")
        assert store.get_active()["id"] == "plan_1"
        assert not store.get("plan_3")["isActive"]

    def test_save_inactive_record(self, store: PlanStore, plans) -> None:
        store.save(plans[0])
        store.save({"id": "imported", "name": "Imported", "createdAt": "2024-12-01T00:00:00"})
        assert store.get_active()["id"] == "plan_1"
        assert [r["id"] for r in store.list()] == ["imported", "plan_1"]

    def test_delete(self, store: PlanStore, plans) -> None:
        store.save(plans[0])
        store.delete("plan_1")
        assert store.list() == []
        assert store.get_active() is None

    def test_not_found(self, store: PlanStore) -> None:
        with pytest.raises(PlanNotFoundError) as excinfo:
            store.get("missing")
        assert excinfo.value.plan_id == "missing"
        assert str(excinfo.value) == "No plan with id 'missing'"
        with pytest.raises(KeyError):
            store.delete("missing")
        with pytest.raises(PlanNotFoundError):
            store.set_active("missing")

    def test_record_without_id(self, store: PlanStore) -> None:
        with pytest.raises(PlanRecordError):
            store.save({"name": "No id"})

    def test_returned_records_are_copies(self, store: PlanStore, plans) -> None:
        store.save(plans[0])
        store.get("plan_1")["name"] = "Changed"
        assert store.get("plan_1")["name"] != "Changed"


class TestFileStore:
    def test_one_file_per_plan(self, tmp_path: Path, plans) -> None:
        store = PlanStore(tmp_path)
        store.save(plans[0])
        store.save({"id": "odd/id", "isActive": False})
        assert sorted(p.name for p in tmp_path.glob("*.json")) == ["odd_id.json", "plan_1.json"]
        assert json.loads((tmp_path / "plan_1.json").read_text())["id"] == "plan_1"

    def test_delete_removes_sanitised_file(self, tmp_path: Path) -> None:
        store = PlanStore(tmp_path)
        store.save({"id": "odd/id", "isActive": False})
        store.delete("odd/id")
        assert list(tmp_path.glob("*.json")) == []

    def test_survives_reopen(self, tmp_path: Path, plans) -> None:
        PlanStore(tmp_path).save(plans[0])
        assert PlanStore(tmp_path).get_active()["id"] == "plan_1"

    def test_corrupt_file(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text("{")
        with pytest.raises(PlanRecordError):
            PlanStore(tmp_path).list()

    def test_missing_directory_is_empty(self, tmp_path: Path) -> None:
        assert PlanStore(tmp_path / "absent").list() == []
