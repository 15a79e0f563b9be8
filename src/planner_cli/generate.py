"""Plan generator: builds a periodized plan and stores it as the active plan.

Usage:
    python -m planner_cli.generate --weeks 8 --split ppl --days 5 \
        --goal hypertrophy --level intermediate
    python -m planner_cli.generate ... --dry-run --json   # print, do not store
"""

from __future__ import annotations

import argparse
import logging
import sys

from exercise_catalog import CatalogError, get_catalog
from plan_store import PlanStore
from training_engine.exceptions import CatalogExhaustedError, PlanValidationError
from training_engine.math.plan_metrics import weekly_summary
from training_engine.models.enums import (
    EXPERIENCE_LEVEL_LABELS,
    GOAL_LABELS,
    SPLIT_STYLE_LABELS,
)
from training_engine.models.plan import PlanParameters
from training_engine.planner import PeriodizationPlanner
from training_engine.serialization import to_plan_json_string

from planner_cli.config import CATALOG_PATH, CATALOG_VERSION, LOG_LEVEL, PLAN_STORE_DIR

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

EXIT_INVALID_PARAMETERS = 2
EXIT_CATALOG_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GoodLift periodized plan generator")
    parser.add_argument("--weeks", type=int, default=4, help="Plan length in weeks (multiple of 4)")
    parser.add_argument(
        "--split", choices=sorted(SPLIT_STYLE_LABELS.values()), default="full-body"
    )
    parser.add_argument("--days", type=int, default=3, help="Strength days per week (1-7)")
    parser.add_argument("--goal", choices=sorted(GOAL_LABELS.values()), default="hypertrophy")
    parser.add_argument(
        "--level", choices=sorted(EXPERIENCE_LEVEL_LABELS.values()), default="intermediate"
    )
    parser.add_argument(
        "--equipment", nargs="*", default=[], help="Equipment filter, e.g. barbell dumbbells"
    )
    parser.add_argument("--name", default=None, help="Plan name")
    parser.add_argument("--catalog", default=None, help="Catalog file (JSON or CSV)")
    parser.add_argument("--store", default=None, help="Plan store directory")
    parser.add_argument("--dry-run", action="store_true", help="Do not store the plan")
    parser.add_argument("--json", action="store_true", help="Print the plan record as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        params = PlanParameters.from_mapping(
            {
                "duration": args.weeks,
                "splitStyle": args.split,
                "daysPerWeek": args.days,
                "goal": args.goal,
                "experienceLevel": args.level,
                "equipment": args.equipment,
                "name": args.name,
            }
        )
    except PlanValidationError as exc:
        logger.error("Invalid plan parameters: %s", exc)
        return EXIT_INVALID_PARAMETERS

    try:
        catalog = get_catalog(
            path=args.catalog or CATALOG_PATH, version=CATALOG_VERSION or None
        )
    except CatalogError as exc:
        logger.error("Failed to load exercise catalog: %s", exc)
        return EXIT_CATALOG_ERROR

    try:
        plan = PeriodizationPlanner(catalog).generate(params)
    except PlanValidationError as exc:
        logger.error("Invalid plan parameters: %s", exc)
        return EXIT_INVALID_PARAMETERS
    except CatalogExhaustedError as exc:
        logger.error("Catalog cannot fill the plan: %s", exc)
        return EXIT_CATALOG_ERROR

    logger.info(
        "Generated %s: %d weeks, %d sessions from %s to %s, deload weeks %s",
        plan.name,
        plan.weeks,
        len(plan.sessions),
        plan.start_date.isoformat(),
        plan.end_date.isoformat(),
        list(plan.deload_weeks),
    )
    logger.info("Weekly summary:\n%s", weekly_summary(plan).to_string(index=False))
    for warning in plan.validation_warnings:
        logger.warning("Compliance: %s", warning)

    if not args.dry_run:
        store = PlanStore(args.store or PLAN_STORE_DIR)
        store.save(plan)
        logger.info("Stored plan %s as the active plan", plan.plan_id)

    if args.json:
        print(to_plan_json_string(plan))
    return 0


if __name__ == "__main__":
    sys.exit(main())
