"""Environment-variable-based configuration for the plan generator CLI."""

from __future__ import annotations

import os
from pathlib import Path

_catalog = os.environ.get("GOODLIFT_CATALOG_PATH", "")
CATALOG_PATH: Path | None = Path(_catalog).expanduser() if _catalog else None
CATALOG_VERSION: str = os.environ.get("GOODLIFT_CATALOG_VERSION", "")
PLAN_STORE_DIR: Path = Path(
    os.environ.get("GOODLIFT_PLAN_STORE", "~/.goodlift/plans")
).expanduser()
LOG_LEVEL: str = os.environ.get("GOODLIFT_LOG_LEVEL", "INFO").upper()
