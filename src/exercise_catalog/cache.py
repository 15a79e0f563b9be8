"""Process-wide exercise catalog cache keyed by catalog version.

The cache is owned by the data-loading side. The planner only ever sees
the resolved tuple it is handed; it never reaches into this module.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence

from exercise_catalog.loader import default_catalog_path, load_catalog, read_catalog_version
from training_engine.models.exercise import Exercise

logger = logging.getLogger(__name__)

CatalogLoader = Callable[[], Sequence[Exercise]]


class CatalogCache:
    """Holds one loaded catalog and reloads when the version changes.

    Usage::

        cache = CatalogCache()
        catalog = cache.get("2025.1", lambda: load_catalog(path))
        cache.invalidate()  # force a reload on the next get()
    """

    def __init__(self) -> None:
        self._version: str | None = None
        self._exercises: tuple[Exercise, ...] = ()
        self.loads = 0

    @property
    def version(self) -> str | None:
        return self._version

    def get(self, version: str, loader: CatalogLoader) -> tuple[Exercise, ...]:
        """Cached catalog for *version*, calling *loader* on a miss."""
        if self._version == version:
            return self._exercises
        if self._version is not None:
            logger.info("Catalog version changed %s -> %s, reloading", self._version, version)
        self._exercises = tuple(loader())
        self._version = version
        self.loads += 1
        return self._exercises

    def invalidate(self) -> None:
        """Drop the cached catalog."""
        if self._version is not None:
            logger.info("Invalidating catalog cache (version %s)", self._version)
        self._version = None
        self._exercises = ()


_default_cache = CatalogCache()


def get_catalog(
    path: Path | str | None = None,
    version: str | None = None,
    cache: CatalogCache | None = None,
) -> tuple[Exercise, ...]:
    """Load a catalog through the process-wide cache.

    Args:
        path: Catalog file; the bundled catalog by default.
        version: Version key; read from the file when omitted.
        cache: Cache to use instead of the process-wide one.
    """
    path = Path(path) if path is not None else default_catalog_path()
    version = version or f"{path.resolve()}@{read_catalog_version(path)}"
    return (cache or _default_cache).get(version, lambda: load_catalog(path))


def invalidate_catalog_cache() -> None:
    """Invalidate the process-wide cache."""
    _default_cache.invalidate()
