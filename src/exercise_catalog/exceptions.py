"""Custom exception hierarchy for the exercise catalog loader."""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for all exercise_catalog errors."""


class CatalogLoadError(CatalogError):
    """The catalog file could not be found or read."""


class CatalogFormatError(CatalogError):
    """The catalog file was read but its structure is unusable."""

    def __init__(self, message: str, missing_columns: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing_columns = missing_columns
