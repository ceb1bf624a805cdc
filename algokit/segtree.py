"""Segment trees for range sums."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


def ceil_pow2(n: int) -> int:
    """Smallest power of two not less than ``n`` (1 for n below 2)."""
    p = 1
    while p < n:
        p *= 2
    return p


_NO_COLOR = object()


class SegTree:
    """Range sums with range assignment ("coloring") over ``n`` zero elements."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        size = 2 * ceil_pow2(n)
        self._color: list[Any] = [_NO_COLOR] * size
        self._sum: list[Any] = [0] * size

    def color(self, start: int, stop: int, value: Any) -> None:
        """Assign ``value`` to every element in ``[start, stop)``."""
        self._color_rec(1, 0, self._n, start, stop, value)

    def sum(self, start: int, stop: int) -> Any:
        """Sum over ``[start, stop)``, clipped to the tree."""
        return self._sum_rec(1, 0, self._n, start, stop)

    def _check(self, index: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")

    def __setitem__(self, index: int, value: Any) -> None:
        self._check(index)
        self.color(index, index + 1, value)

    def __getitem__(self, index: int) -> Any:
        self._check(index)
        return self.sum(index, index + 1)

    def __len__(self) -> int:
        return self._n

    def __iter__(self) -> Iterator[Any]:
        for i in range(self._n):
            yield self[i]

    def _color_rec(self, curr: int, left: int, right: int, start: int, stop: int, value: Any) -> None:
        start = max(start, left)
        stop = min(stop, right)
        if start >= stop:
            return
        if start == left and stop == right:
            self._color[curr] = value
            self._sum[curr] = (right - left) * value
            return

        self._propagate(curr, left, right)
        mid = left + (right - left) // 2
        self._color_rec(2 * curr, left, mid, start, stop, value)
        self._color_rec(2 * curr + 1, mid, right, start, stop, value)
        self._color[curr] = _NO_COLOR
        self._sum[curr] = self._sum[2 * curr] + self._sum[2 * curr + 1]

    def _sum_rec(self, curr: int, left: int, right: int, start: int, stop: int) -> Any:
        start = max(start, left)
        stop = min(stop, right)
        if start >= stop:
            return 0
        if start == left and stop == right:
            return self._sum[curr]
        if self._color[curr] is not _NO_COLOR:
            return self._color[curr] * (stop - start)
        mid = left + (right - left) // 2
        return self._sum_rec(2 * curr, left, mid, start, stop) + self._sum_rec(
            2 * curr + 1, mid, right, start, stop
        )

    def _propagate(self, curr: int, left: int, right: int) -> None:
        color = self._color[curr]
        if color is _NO_COLOR:
            return
        mid = left + (right - left) // 2
        self._color_rec(2 * curr, left, mid, left, right, color)
        self._color_rec(2 * curr + 1, mid, right, left, right, color)


class FastSegTree:
    """Bottom-up segment tree with point assignment and range sums.

    Sums are formed left to right, so any associative ``+`` works.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._base = ceil_pow2(n)
        self._n = n
        self._values: list[Any] = [0] * (2 * self._base)

    def _check(self, index: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")

    def __setitem__(self, index: int, value: Any) -> None:
        self._check(index)
        values = self._values
        i = index + self._base
        values[i] = value
        i >>= 1
        while i:
            values[i] = values[2 * i] + values[2 * i + 1]
            i >>= 1

    def __getitem__(self, index: int) -> Any:
        self._check(index)
        return self._values[index + self._base]

    def sum(self, start: int, stop: int) -> Any:
        """Sum over ``[start, stop)``; zero for an empty range."""
        if start >= stop:
            return 0
        if start < 0 or stop > self._n:
            raise IndexError(f"range [{start}, {stop}) out of bounds")

        values = self._values
        lo = self._base + start
        hi = self._base + stop - 1
        if lo == hi:
            return values[lo]

        lo_part = values[lo]
        hi_part = values[hi]
        while True:
            plo = lo >> 1
            phi = hi >> 1
            if plo == phi:
                break
            if lo == 2 * plo:
                lo_part = lo_part + values[2 * plo + 1]
            if hi == 2 * phi + 1:
                hi_part = values[2 * phi] + hi_part
            lo, hi = plo, phi
        return lo_part + hi_part

    def __len__(self) -> int:
        return self._n