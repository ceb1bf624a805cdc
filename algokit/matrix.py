"""Row-major matrices over flat buffers and matrix transposition."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Optional


class Matrix:
    """A ``height`` x ``width`` matrix stored row by row in a flat buffer.

    When ``buffer`` is given the matrix is a view over it: writes go to the
    buffer. Otherwise a zero-filled buffer of its own is created.
    """

    def __init__(
        self, height: int, width: int, buffer: Optional[MutableSequence[Any]] = None
    ) -> None:
        if height < 0 or width < 0:
            raise ValueError("matrix dimensions must be non-negative")
        size = height * width
        if buffer is None:
            buffer = [0] * size
        elif len(buffer) < size:
            raise ValueError(f"buffer holds {len(buffer)} elements, {size} needed")
        self._height = height
        self._width = width
        self._buffer = buffer

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def __len__(self) -> int:
        return self._height * self._width

    def _offset(self, index: tuple[int, int]) -> int:
        row, col = index
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(f"({row}, {col}) out of range for a {self._height}x{self._width} matrix")
        return row * self._width + col

    def __getitem__(self, index: tuple[int, int]) -> Any:
        return self._buffer[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        self._buffer[self._offset(index)] = value

    def __repr__(self) -> str:
        return f"Matrix({self._height}, {self._width})"


def _check_shapes(source: Matrix, target: Matrix) -> None:
    if source.height != target.width or source.width != target.height:
        raise ValueError(
            f"cannot transpose a {source.height}x{source.width} matrix "
            f"into a {target.height}x{target.width} one"
        )


def transpose(source: Matrix, target: Matrix) -> None:
    """Write the transpose of ``source`` into ``target``."""
    _check_shapes(source, target)
    for row in range(source.height):
        for col in range(source.width):
            target[col, row] = source[row, col]


def cache_oblivious_transpose(source: Matrix, target: Matrix, block: int = 8) -> None:
    """Write the transpose of ``source`` into ``target`` by recursive quartering.

    Sub-matrices no larger than ``block`` in both dimensions are copied directly.
    """
    _check_shapes(source, target)
    block = max(block, 1)

    def go(min_row: int, max_row: int, min_col: int, max_col: int) -> None:
        height = max_row - min_row
        width = max_col - min_col
        if not height or not width:
            return
        if height <= block and width <= block:
            for row in range(min_row, max_row):
                for col in range(min_col, max_col):
                    target[col, row] = source[row, col]
            return
        middle_row = min_row + height // 2
        middle_col = min_col + width // 2
        go(min_row, middle_row, min_col, middle_col)
        go(min_row, middle_row, middle_col, max_col)
        go(middle_row, max_row, min_col, middle_col)
        go(middle_row, max_row, middle_col, max_col)

    go(0, source.height, 0, source.width)