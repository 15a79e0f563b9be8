"""Exercise catalog loading: all catalog file I/O and caching lives here."""

from exercise_catalog.cache import CatalogCache, get_catalog, invalidate_catalog_cache
from exercise_catalog.exceptions import CatalogError, CatalogFormatError, CatalogLoadError
from exercise_catalog.loader import default_catalog_path, load_catalog
from exercise_catalog.mapper import map_exercise_records

__all__ = [
    "CatalogCache",
    "CatalogError",
    "CatalogFormatError",
    "CatalogLoadError",
    "default_catalog_path",
    "get_catalog",
    "invalidate_catalog_cache",
    "load_catalog",
    "map_exercise_records",
]
