"""Predicate registry with auto-discovery of BadgePredicate subclasses."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path

from training_engine.achievements.predicates.base import BadgePredicate
from training_engine.models.achievement import AchievementBadge
from training_engine.models.enums import ConditionType


class PredicateRegistry:
    """Discovers and manages all BadgePredicate implementations.

    Auto-discovers predicates by scanning the predicates/ package for
    concrete subclasses of BadgePredicate. A new condition family is added
    by dropping a module into that package.
    """

    def __init__(self) -> None:
        self._predicates: dict[ConditionType, BadgePredicate] = {}

    def discover_predicates(self) -> None:
        """Scan the predicates package and register every BadgePredicate subclass."""
        import training_engine.achievements.predicates as predicates_pkg

        predicates_path = Path(predicates_pkg.__file__).parent  # type: ignore[arg-type]
        self._scan_package(predicates_pkg.__name__, str(predicates_path))

    def _scan_package(self, package_name: str, package_path: str) -> None:
        """Import all modules under a package and register predicates."""
        for _, module_name, _ in pkgutil.walk_packages(
            [package_path], prefix=package_name + "."
        ):
            module = importlib.import_module(module_name)
            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, BadgePredicate)
                    and attr is not BadgePredicate
                    and not getattr(attr, "__abstractmethods__", set())
                    and attr.condition not in self._predicates
                ):
                    self.register(attr())

    def register(self, predicate: BadgePredicate) -> None:
        """Register a predicate instance for its condition type."""
        self._predicates[predicate.condition] = predicate

    def get(self, condition: ConditionType) -> BadgePredicate | None:
        return self._predicates.get(condition)

    def predicate_for(self, badge: AchievementBadge) -> BadgePredicate:
        """Predicate handling a badge's condition.

        Raises:
            KeyError: If no predicate is registered for the condition.
        """
        predicate = self._predicates.get(badge.condition)
        if predicate is None:
            raise KeyError(f"No predicate registered for {badge.condition.name}")
        return predicate

    @property
    def conditions(self) -> list[ConditionType]:
        return sorted(self._predicates)
