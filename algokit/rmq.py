"""Range minimum queries over a sparse table."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any


def floor_log(n: int) -> int:
    """Largest p with ``2 ** p <= n`` (0 for n below 2)."""
    p = 0
    while (1 << (p + 1)) <= n:
        p += 1
    return p


def ceil_log(n: int) -> int:
    """Smallest p with ``2 ** p >= n``."""
    p = 0
    while (1 << p) < n:
        p += 1
    return p


class SparseTable:
    """Minimum over any range in O(1) after O(n log n) preparation.

    The minimum of an empty range is ``empty``.
    """

    def __init__(self, values: Sequence[Any], empty: Any = math.inf) -> None:
        self._empty = empty
        self._n = len(values)
        self._levels: list[list[Any]] = []
        if not values:
            return
        self._levels.append(list(values))
        p = 1
        while (1 << p) <= self._n:
            half = 1 << (p - 1)
            prev = self._levels[-1]
            self._levels.append(
                [min(prev[i], prev[i + half]) for i in range(self._n - (1 << p) + 1)]
            )
            p += 1

    def query(self, start: int, stop: int) -> Any:
        """Minimum over ``[start, stop)``."""
        if not 0 <= start <= stop <= self._n:
            raise IndexError(f"range [{start}, {stop}) out of bounds")
        if start == stop:
            return self._empty
        level = floor_log(stop - start)
        window = 1 << level
        row = self._levels[level]
        return min(row[start], row[stop - window])

    def __len__(self) -> int:
        return self._n