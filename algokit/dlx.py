"""Exact cover by dancing links (Algorithm X)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Optional, Union

INF = 0xFFFFFFFF


class ExactCoverTask:
    """Items ``0..num_items-1`` and options, each a set of items.

    A solution is a set of options covering every primary item exactly once
    and every slack item at most once. Items marked as covered count as
    already covered before the search starts.
    """

    def __init__(self, num_items: int) -> None:
        if num_items < 0:
            raise ValueError("number of items must be non-negative")
        self.num_items = num_items
        self._slack = [False] * num_items
        self._cover = [False] * num_items
        self._options: list[tuple[int, ...]] = []

    def _check(self, item: int) -> None:
        if not 0 <= item < self.num_items:
            raise IndexError(f"item {item} out of range for {self.num_items} items")

    def set_slack(self, item: int) -> None:
        self._check(item)
        self._slack[item] = True

    def set_cover(self, item: int) -> None:
        self._check(item)
        self._cover[item] = True

    def is_slack(self, item: int) -> bool:
        self._check(item)
        return self._slack[item]

    def is_cover(self, item: int) -> bool:
        self._check(item)
        return self._cover[item]

    def add_option(self, option: Iterable[int]) -> int:
        """Add an option and return its index."""
        items = tuple(option)
        for item in items:
            self._check(item)
        self._options.append(items)
        return len(self._options) - 1

    def option(self, index: int) -> tuple[int, ...]:
        return self._options[index]

    @property
    def num_options(self) -> int:
        return len(self._options)


class Dim:
    """A half-open range of integer items ``[start, stop)``; ``Dim(n)`` is ``[0, n)``."""

    def __init__(self, start: int, stop: Optional[int] = None) -> None:
        if stop is None:
            start, stop = 0, start
        if stop < start:
            raise ValueError(f"empty dimension bounds [{start}, {stop})")
        self.start = start
        self.stop = stop

    def __len__(self) -> int:
        return self.stop - self.start

    def __contains__(self, item: int) -> bool:
        return self.start <= item < self.stop

    def offset(self, item: int) -> int:
        """Position of ``item`` within the dimension."""
        if item not in self:
            raise ValueError(f"item {item} outside [{self.start}, {self.stop})")
        return item - self.start

    def __repr__(self) -> str:
        return f"Dim({self.start}, {self.stop})"


class DimTask:
    """An exact cover task whose items are split into named ranges.

    Each argument is a Dim or a size. An option gives, for each dimension
    in turn, either one item or an iterable of items.
    """

    def __init__(self, *args: Union[int, Dim]) -> None:
        self._dims = [arg if isinstance(arg, Dim) else Dim(arg) for arg in args]
        self._slack = [False] * len(self._dims)
        self._cover: list[list[int]] = [[] for _ in self._dims]
        self._options: list[tuple[tuple[int, ...], ...]] = []

    def _check_dim(self, dim: int) -> None:
        if not 0 <= dim < len(self._dims):
            raise IndexError(f"dimension {dim} out of range")

    def set_slack(self, dim: int) -> None:
        """Make every item of ``dim`` a slack item."""
        self._check_dim(dim)
        self._slack[dim] = True

    def set_cover(self, dim: int, item: int) -> None:
        """Mark ``item`` of ``dim`` as already covered."""
        self._check_dim(dim)
        self._dims[dim].offset(item)
        self._cover[dim].append(item)

    def add_option(self, *args: Union[int, Iterable[int]]) -> int:
        """Add an option with items per dimension; missing dimensions get none."""
        if len(args) > len(self._dims):
            raise ValueError(f"option has {len(args)} parts for {len(self._dims)} dimensions")
        parts = []
        for dim, arg in zip(self._dims, args):
            items = (arg,) if isinstance(arg, int) else tuple(arg)
            for item in items:
                dim.offset(item)
            parts.append(items)
        parts.extend(() for _ in range(len(self._dims) - len(args)))
        self._options.append(tuple(parts))
        return len(self._options) - 1

    def option(self, index: int) -> tuple[tuple[int, ...], ...]:
        return self._options[index]

    def convert(self) -> ExactCoverTask:
        """The same task over consecutive plain item numbers."""
        offsets = [0]
        for dim in self._dims:
            offsets.append(offsets[-1] + len(dim))

        task = ExactCoverTask(offsets[-1])
        for d, dim in enumerate(self._dims):
            if self._slack[d]:
                for item in range(offsets[d], offsets[d + 1]):
                    task.set_slack(item)
            for item in self._cover[d]:
                task.set_cover(offsets[d] + dim.offset(item))

        for option in self._options:
            task.add_option(
                offsets[d] + dim.offset(item)
                for d, (dim, items) in enumerate(zip(self._dims, option))
                for item in items
            )
        return task


def _table_line(tag: str, first: bool, tops: Sequence[int], values: Sequence[int], n: int) -> str:
    parts = [tag]
    if first:
        parts.append("\t")
    idx = 0

    def emit() -> None:
        value = values[idx]
        parts.append("\t" + ("⊥" if value == INF else str(value)))

    while idx < len(tops) and tops[idx] == INF:
        emit()
        idx += 1
    for i in range(n):
        if idx < len(tops) and i < tops[idx]:
            parts.append("\t")
            continue
        if idx < len(tops):
            emit()
            idx += 1
    while idx < len(tops) and tops[idx] == INF:
        emit()
        idx += 1
    return "".join(parts) + "\n"


class LinkTable:
    """The node table: one header per item, then options separated by spacers."""

    def __init__(self, task: ExactCoverTask) -> None:
        self.task = task
        n = task.num_items
        self.ulink = list(range(n))
        self.dlink = list(range(n))
        self.top = list(range(n))
        self.options = [INF] * n
        self._append_spacer()

        for index in range(task.num_options):
            option = sorted(set(task.option(index)))
            if not option:
                continue
            prev_spacer = len(self.top) - 1
            for item in option:
                curr = len(self.top)
                up = self.ulink[item]
                self.ulink.append(up)
                self.dlink.append(item)
                self.top.append(item)
                self.dlink[up] = curr
                self.ulink[item] = curr
                self.options.append(index)
            self._append_spacer()
            next_spacer = len(self.top) - 1
            self.dlink[prev_spacer] = next_spacer - 1
            self.ulink[next_spacer] = prev_spacer + 1

    def _append_spacer(self) -> None:
        self.ulink.append(INF)
        self.dlink.append(INF)
        self.top.append(INF)
        self.options.append(INF)

    def _remove(self, curr: int) -> None:
        up, down = self.ulink[curr], self.dlink[curr]
        self.dlink[up] = down
        self.ulink[down] = up

    def _insert(self, curr: int) -> None:
        up, down = self.ulink[curr], self.dlink[curr]
        self.dlink[up] = curr
        self.ulink[down] = curr

    def _right(self, x: int) -> Iterator[int]:
        """Other nodes of the option holding ``x``, left to right, cyclically."""
        y = x + 1
        while y != x:
            if self.top[y] == INF:
                y = self.ulink[y]
                continue
            yield y
            y += 1

    def _left(self, x: int) -> Iterator[int]:
        """Other nodes of the option holding ``x``, right to left, cyclically."""
        y = x - 1
        while y != x:
            if self.top[y] == INF:
                y = self.dlink[y]
                continue
            yield y
            y -= 1

    def _segment(self, lo: int, hi: int, n: int) -> str:
        tops = self.top[lo:hi]
        first = lo == 0
        rows = [
            ("\t", list(range(lo, hi))),
            ("ULINK:", self.ulink[lo:hi]),
            ("DLINK:", self.dlink[lo:hi]),
            ("TOP:", tops),
        ]
        return "".join(_table_line(tag, first, tops, values, n) for tag, values in rows) + "\n"

    def __str__(self) -> str:
        task = self.task
        n = task.num_items
        out = [
            f"Num items: {n}\n",
            "Slack items:" + "".join(f" {i}" for i in range(n) if task.is_slack(i)) + "\n",
            f"Num options: {task.num_options}\n",
            self._segment(0, n, n),
        ]
        start = n
        while start + 1 < len(self.top):
            stop = start + 1
            while self.top[stop] != INF:
                stop += 1
            out.append(self._segment(start, stop + 1, n))
            start = stop
        return "".join(out)


class HeadList:
    """Doubly linked list of the primary items still to cover, with column sizes."""

    def __init__(self, table: LinkTable) -> None:
        self.table = table
        task = table.task
        n = task.num_items
        self.head = n
        self.left = [0] * (n + 1)
        self.right = [0] * (n + 1)
        self.length = [0] * (n + 1)
        self.left[n] = self.right[n] = n

        for i in range(n):
            if task.is_slack(i):
                self.left[i] = self.right[i] = i
            else:
                self.left[i] = self.left[n]
                self.right[i] = n
                self._insert(i)
            count = 0
            curr = table.dlink[i]
            while curr != i:
                count += 1
                curr = table.dlink[curr]
            self.length[i] = count

    def _is_empty(self) -> bool:
        return self.right[self.head] == self.head

    def _remove(self, curr: int) -> None:
        left, right = self.left[curr], self.right[curr]
        self.right[left] = right
        self.left[right] = left

    def _insert(self, curr: int) -> None:
        left, right = self.left[curr], self.right[curr]
        self.right[left] = curr
        self.left[right] = curr

    def _get_min(self) -> int:
        best = self.right[self.head]
        curr = self.right[best]
        while curr != self.head:
            if self.length[curr] < self.length[best]:
                best = curr
            curr = self.right[curr]
        return best

    def _cover(self, x: int) -> None:
        table = self.table
        y = table.dlink[x]
        while y != x:
            for z in table._right(y):
                table._remove(z)
                self.length[table.top[z]] -= 1
            y = table.dlink[y]
        self._remove(x)

    def _uncover(self, x: int) -> None:
        table = self.table
        self._insert(x)
        y = table.ulink[x]
        while y != x:
            for z in table._left(y):
                self.length[table.top[z]] += 1
                table._insert(z)
            y = table.ulink[y]

    def __str__(self) -> str:
        size = len(self.left)
        rows = [
            ("\t", list(range(size))),
            ("LEFT:", self.left),
            ("RIGHT:", self.right),
            ("LEN:", self.length),
        ]
        return "".join(tag + "".join(f"\t{v}" for v in values) + "\n" for tag, values in rows)


def solve_exact_cover(task: Union[ExactCoverTask, DimTask]) -> Iterator[list[int]]:
    """Every exact cover, as the list of chosen option indices."""
    if isinstance(task, DimTask):
        task = task.convert()
    table = LinkTable(task)
    head = HeadList(table)
    for item in range(task.num_items):
        if task.is_cover(item):
            head._cover(item)

    chosen: list[int] = []

    def search() -> Iterator[list[int]]:
        if head._is_empty():
            yield list(chosen)
            return
        best = head._get_min()
        head._cover(best)
        x = table.dlink[best]
        while x != best:
            chosen.append(table.options[x])
            for y in table._right(x):
                head._cover(table.top[y])
            yield from search()
            for y in table._left(x):
                head._uncover(table.top[y])
            chosen.pop()
            x = table.dlink[x]
        head._uncover(best)

    return search()