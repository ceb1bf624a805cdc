"""Planar points and convex hulls."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Point2D:
    x: Any = 0
    y: Any = 0

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(self.x - other.x, self.y - other.y)


def dot(lhs: Point2D, rhs: Point2D) -> Any:
    return lhs.x * rhs.x + lhs.y * rhs.y


def cross(lhs: Point2D, rhs: Point2D) -> Any:
    return lhs.x * rhs.y - lhs.y * rhs.x


def _turns_clockwise(a: Point2D, b: Point2D, c: Point2D) -> bool:
    return cross(b - a, c - b) < 0


def _turns_counterclockwise(a: Point2D, b: Point2D, c: Point2D) -> bool:
    return cross(b - a, c - b) > 0


def _add_to_hull(
    hull: list[Point2D], p: Point2D, is_good: Callable[[Point2D, Point2D, Point2D], bool]
) -> None:
    while len(hull) >= 2 and not is_good(hull[-2], hull[-1], p):
        hull.pop()
    hull.append(p)


def convex_hull(points: Iterable[Point2D]) -> list[Point2D]:
    """Vertices of the convex hull in counter-clockwise order, starting from the
    leftmost lowest point. Collinear points are dropped."""
    ordered = sorted(points, key=lambda p: (p.x, p.y))
    lower: list[Point2D] = []
    upper: list[Point2D] = []

    for _, column in itertools.groupby(ordered, key=lambda p: p.x):
        column = list(column)
        _add_to_hull(lower, column[0], _turns_counterclockwise)
        _add_to_hull(upper, column[-1], _turns_clockwise)

    if lower and upper and upper[0] == lower[0]:
        upper.pop(0)
    if lower and upper and upper[-1] == lower[-1]:
        upper.pop()

    return lower + upper[::-1]