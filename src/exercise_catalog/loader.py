"""Catalog file loading: JSON or CSV into Exercise tuples.

All exercise catalog file I/O lives here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from exercise_catalog.exceptions import CatalogFormatError, CatalogLoadError
from exercise_catalog.mapper import OPTIONAL_COLUMNS, REQUIRED_COLUMNS, map_exercise_records
from training_engine.models.exercise import Exercise

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


def default_catalog_path() -> Path:
    """Path of the catalog bundled with the package."""
    return _DATA_DIR / "exercises.json"


def read_catalog_frame(path: Path | str) -> pd.DataFrame:
    """Read a catalog file into a DataFrame with the catalog columns.

    JSON files may hold a list of records or ``{"exercises": [...]}``.

    Raises:
        CatalogLoadError: If the file is missing or cannot be parsed.
        CatalogFormatError: If required columns are absent.
    """
    path = Path(path)
    if not path.is_file():
        raise CatalogLoadError(f"Catalog file not found: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            frame = pd.read_csv(path, dtype=str, keep_default_na=False)
        elif suffix == ".json":
            frame = pd.DataFrame.from_records(_json_records(path))
        else:
            raise CatalogLoadError(f"Unsupported catalog format: {suffix or path.name}")
    except (OSError, ValueError) as exc:
        raise CatalogLoadError(f"Could not read catalog {path}: {exc}") from exc

    missing = tuple(c for c in REQUIRED_COLUMNS if c not in frame.columns)
    if missing:
        raise CatalogFormatError(
            f"Catalog {path.name} is missing columns: {', '.join(missing)}",
            missing_columns=missing,
        )
    for column in OPTIONAL_COLUMNS:
        if column not in frame.columns:
            frame[column] = None

    frame = frame[list(REQUIRED_COLUMNS + OPTIONAL_COLUMNS)]
    return frame.astype(object).where(frame.notna(), None)


def load_catalog(path: Path | str | None = None) -> tuple[Exercise, ...]:
    """Load and map a catalog file (the bundled one by default)."""
    path = Path(path) if path is not None else default_catalog_path()
    frame = read_catalog_frame(path)
    exercises = map_exercise_records(frame.to_dict(orient="records"))
    dropped = len(frame) - len(exercises)
    if dropped:
        logger.warning("Dropped %d unusable catalog rows from %s", dropped, path)
    logger.info("Loaded %d exercises from %s", len(exercises), path)
    return exercises


def read_catalog_version(path: Path | str | None = None) -> str:
    """Catalog version: the JSON ``version`` field, else the file mtime."""
    path = Path(path) if path is not None else default_catalog_path()
    if path.suffix.lower() == ".json":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise CatalogLoadError(f"Could not read catalog {path}: {exc}") from exc
        if isinstance(data, dict) and data.get("version"):
            return str(data["version"])
    try:
        return str(int(path.stat().st_mtime))
    except OSError as exc:
        raise CatalogLoadError(f"Catalog file not found: {path}") from exc


def _json_records(path: Path) -> list[dict[str, Any]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("exercises")
    if not isinstance(data, list):
        raise CatalogFormatError(
            f"Catalog {path.name} must hold a list of exercises or an 'exercises' list"
        )
    return [r for r in data if isinstance(r, dict)]
