"""Tests for the plan generator CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from plan_store import PlanStore
from planner_cli.generate import (
    EXIT_CATALOG_ERROR,
    EXIT_INVALID_PARAMETERS,
    build_parser,
    main,
)


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert (args.weeks, args.split, args.days) == (4, "full-body", 3)
        assert (args.goal, args.level) == ("hypertrophy", "intermediate")
        assert args.equipment == []


class TestMain:
    def test_generates_and_stores(self, tmp_path: Path) -> None:
        code = main(
            ["--weeks", "8", "--split", "ppl", "--days", "5", "--store", str(tmp_path)]
        )
        assert code == 0
        active = PlanStore(tmp_path).get_active()
        assert active["name"] == "8-Week Push/Pull/Legs Hypertrophy Plan"
        assert len(active["sessions"]) == 56
        assert active["deloadWeeks"] == [4, 8]

    def test_logs_plan_overview(self, tmp_path: Path, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="planner_cli.generate"):
            assert main(["--weeks", "8", "--dry-run", "--store", str(tmp_path)]) == 0
        assert "8 weeks, 56 sessions" in caplog.text

    def test_dry_run_prints_json(self, tmp_path: Path, capsys) -> None:
        code = main(["--dry-run", "--json", "--name", "Test Plan", "--store", str(tmp_path)])
        assert code == 0
        record = json.loads(capsys.readouterr().out)
        assert record["name"] == "Test Plan"
        assert list(tmp_path.iterdir()) == []

    def test_invalid_duration(self, tmp_path: Path) -> None:
        assert main(["--weeks", "6", "--store", str(tmp_path)]) == EXIT_INVALID_PARAMETERS
        assert list(tmp_path.iterdir()) == []

    def test_invalid_days(self, tmp_path: Path) -> None:
        assert main(["--days", "9", "--store", str(tmp_path)]) == EXIT_INVALID_PARAMETERS

    def test_unusable_equipment(self, tmp_path: Path) -> None:
        code = main(["--equipment", "kettlebell", "--store", str(tmp_path)])
        assert code == EXIT_CATALOG_ERROR

    def test_missing_catalog(self, tmp_path: Path) -> None:
        code = main(["--catalog", str(tmp_path / "none.json"), "--store", str(tmp_path)])
        assert code == EXIT_CATALOG_ERROR
