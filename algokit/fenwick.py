"""Fenwick (binary indexed) tree for prefix sums."""

from typing import Any


class Fenwick:
    """Point additions and range sums over ``size`` elements, all starting at zero."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._tree: list[Any] = [0] * size

    def add(self, index: int, value: Any) -> None:
        """Add ``value`` to the element at ``index``."""
        if not 0 <= index < len(self._tree):
            raise IndexError(f"index {index} out of range")
        while index < len(self._tree):
            self._tree[index] += value
            index |= index + 1

    def prefix_sum(self, stop: int) -> Any:
        """Sum over ``[0, stop)``."""
        if not 0 <= stop <= len(self._tree):
            raise IndexError(f"stop {stop} out of range")
        result = 0
        while stop:
            stop -= 1
            result += self._tree[stop]
            stop &= stop + 1
        return result

    def range_sum(self, start: int, stop: int) -> Any:
        """Sum over ``[start, stop)``."""
        if start > stop:
            raise ValueError("start must not exceed stop")
        if start == stop:
            return 0
        return self.prefix_sum(stop) - self.prefix_sum(start)

    def __len__(self) -> int:
        return len(self._tree)