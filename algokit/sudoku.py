"""Sudoku checking and solving through exact cover."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from algokit.dlx import DimTask, solve_exact_cover

N = 9
FULL_MASK = (1 << N) - 1

_CELL, _ROW, _COL, _BOX = range(4)


def _cells() -> Iterator[tuple[int, int, int]]:
    for r in range(N):
        for c in range(N):
            yield r, c, 3 * (r // 3) + c // 3


def _check_shape(board: Sequence[Sequence[int]]) -> None:
    if len(board) != N or any(len(row) != N for row in board):
        raise ValueError("a sudoku board must be 9 by 9")


def _filled(value: int) -> bool:
    return 1 <= value <= N


def is_valid(board: Sequence[Sequence[int]], complete: bool = True) -> bool:
    """True if no digit repeats in a row, column or box.

    With ``complete`` the board must also be fully filled; otherwise cells
    outside 1..9 count as empty.
    """
    _check_shape(board)
    rows = [0] * N
    cols = [0] * N
    boxes = [0] * N
    good = True
    for r, c, b in _cells():
        value = board[r][c]
        if not _filled(value):
            if complete:
                good = False
            continue
        bit = 1 << (value - 1)
        if rows[r] & bit or cols[c] & bit or boxes[b] & bit:
            good = False
            continue
        rows[r] |= bit
        cols[c] |= bit
        boxes[b] |= bit

    if not good:
        return False
    if not complete:
        return True
    return all(mask == FULL_MASK for mask in (*rows, *cols, *boxes))


def solve_sudoku(board: Sequence[Sequence[int]]) -> Iterator[list[list[int]]]:
    """Every completion of ``board``; cells outside 1..9 are empty."""
    if not is_valid(board, complete=False):
        return

    task = DimTask(N * N, N * N, N * N, N * N)
    for r, c, b in _cells():
        value = board[r][c]
        if _filled(value):
            v = value - 1
            task.set_cover(_CELL, r * N + c)
            task.set_cover(_ROW, r * N + v)
            task.set_cover(_COL, c * N + v)
            task.set_cover(_BOX, b * N + v)
        else:
            for v in range(N):
                task.add_option(r * N + c, r * N + v, c * N + v, b * N + v)

    for chosen in solve_exact_cover(task):
        result = [list(row) for row in board]
        for index in chosen:
            option = task.option(index)
            row_item = option[_ROW][0]
            r = row_item // N
            c = option[_COL][0] // N
            result[r][c] = row_item % N + 1
        yield result