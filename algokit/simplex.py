"""Simplex method for linear programs in canonical form."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from algokit.matrix import Matrix

EPS = 1e-10


class UnboundedProblemError(ArithmeticError):
    """The target function has no finite maximum."""


@dataclass(frozen=True)
class SimplexSolution:
    target: float
    values: list[float]


def _zap(x: float) -> float:
    return 0.0 if abs(x) < EPS else x


class Simplex:
    """Maximises ``f . x`` subject to ``a x <= b`` and ``x >= 0``, where ``b >= 0``.

    ``a`` is a Matrix or a sequence of rows. Ties between pivot rows are broken
    lexicographically, which rules out cycling.
    """

    eps = EPS

    def __init__(
        self,
        a: Union[Matrix, Sequence[Sequence[float]]],
        b: Sequence[float],
        f: Sequence[float],
        verbose: bool = False,
    ) -> None:
        if isinstance(a, Matrix):
            if a.width != len(f):
                raise ValueError("matrix width does not match the target function")
            rows = [[a[i, j] for j in range(a.width)] for i in range(a.height)]
        else:
            rows = [list(row) for row in a]
        if len(rows) != len(b):
            raise ValueError("number of constraints does not match the right-hand side")
        for row in rows:
            if len(row) != len(f):
                raise ValueError("constraint width does not match the target function")

        m, n = len(rows), len(f)
        self._height = m + 1
        self._width = n + m + 1
        self._table = [[0.0] * self._width for _ in range(self._height)]
        self._trial = [0.0] * self._width
        self._s = 0
        self._brow = [0] * self._width  # basis row for each column
        self._bcol = [0] * self._height  # basis column for each row
        self._verbose = verbose

        for j, fj in enumerate(f):
            self._table[0][m + 1 + j] = -float(fj)
        for i, (row, bi) in enumerate(zip(rows, b)):
            if bi < 0:
                raise ValueError("right-hand side values must be non-negative")
            line = self._table[i + 1]
            line[0] = float(bi)
            line[i + 1] = 1.0
            for j, value in enumerate(row):
                line[m + 1 + j] = float(value)
            self._brow[i + 1] = i + 1
            self._bcol[i + 1] = i + 1

        if verbose:
            print("Initial table:", file=sys.stderr)
            self._display()

    def solve(self) -> SimplexSolution:
        """Optimal value and variables; raises UnboundedProblemError if unbounded."""
        table = self._table
        steps = 0
        changed = True
        while changed:
            steps += 1
            changed = False
            for j in range(self._width - 1, 0, -1):
                if table[0][j] >= 0:
                    continue
                i = self._row_to_pivot(j)
                if i == 0:
                    if self._verbose:
                        print(
                            f"The maximum is infinite, proved after {steps} step(s)",
                            file=sys.stderr,
                        )
                    raise UnboundedProblemError("the maximum is infinite")
                self._pivot(i, j)
                if self._verbose:
                    print(f"After pivoting at ({i}, {j}):", file=sys.stderr)
                    self._display()
                changed = True

        target = table[0][0]
        values = []
        for column in range(self._height, self._width):
            row = self._brow[column]
            values.append(table[row][0] if row != 0 else 0.0)

        if self._verbose:
            print(f"Total steps: {steps}", file=sys.stderr)
            print(f"Target function value: {target:g}", file=sys.stderr)
            print("Variables values: [" + ", ".join(f"{v:g}" for v in values) + "]", file=sys.stderr)

        return SimplexSolution(target, values)

    def _row_to_pivot(self, j: int) -> int:
        """Row i > 0 with positive entry in column j whose row divided by that
        entry is lexicographically smallest; 0 when there is none."""
        table = self._table
        trial = self._trial
        p = 0
        self._s = 0
        for i in range(1, self._height):
            if table[i][j] <= 0:
                continue
            if p == 0:
                p = i
                continue
            for q in range(self._width):
                if q == self._s:
                    trial[q] = table[p][q] / table[p][j]
                    self._s += 1
                z = table[i][q] / table[i][j]
                if trial[q] != z:
                    if trial[q] > z:
                        p = i
                        trial[q] = z
                        self._s = q + 1
                    break
        return p

    def _pivot(self, i: int, j: int) -> None:
        table = self._table
        pivot_row = table[i]
        z = pivot_row[j]
        for q in range(self._s):
            pivot_row[q] = self._trial[q]
        for q in range(self._s, self._width):
            pivot_row[q] /= z
        pivot_row[j] = 1.0

        for p, row in enumerate(table):
            if p == i:
                continue
            factor = row[j]
            for q in range(self._width):
                row[q] = _zap(row[q] - factor * pivot_row[q])
            row[j] = 0.0

        self._brow[self._bcol[i]] = 0
        self._bcol[i] = j
        self._brow[j] = i

    def _display(self) -> None:
        for row in self._table:
            print("".join(f"{value:6.3g}" for value in row), file=sys.stderr)