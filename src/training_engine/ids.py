"""Identifier generation for plans.

The planner takes an IdGenerator so tests can pin identifiers while
production code keeps time-based ids.
"""

from __future__ import annotations

import itertools
import random
import string
import time
from typing import Protocol


class IdGenerator(Protocol):
    """Anything that hands out a fresh identifier string per call."""

    def next(self) -> str: ...


class SequentialIdGenerator:
    """Deterministic ids: ``"1"``, ``"2"``, ... (optionally prefixed)."""

    def __init__(self, start: int = 1, prefix: str = "") -> None:
        self._counter = itertools.count(start)
        self._prefix = prefix

    def next(self) -> str:
        return f"{self._prefix}{next(self._counter)}"


class TimestampIdGenerator:
    """Wall-clock milliseconds plus a short random suffix."""

    _ALPHABET = string.ascii_lowercase + string.digits

    def __init__(self, suffix_length: int = 6, rng: random.Random | None = None) -> None:
        self._suffix_length = suffix_length
        self._rng = rng or random.Random()

    def next(self) -> str:
        millis = int(time.time() * 1000)
        suffix = "".join(self._rng.choices(self._ALPHABET, k=self._suffix_length))
        return f"{millis}_{suffix}"
