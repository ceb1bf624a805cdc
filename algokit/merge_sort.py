"""Run-based multiway merge sort."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from algokit.heap import Heap


@dataclass(frozen=True)
class SortOptions:
    """Cache parameters that size the runs and the merge fan-in.

    ``item_size`` is the assumed size of one element in bytes.
    """

    cache_size: int = 6144 * 1024
    cache_line_size: int = 64
    item_size: int = 8


def merge_runs(runs: Sequence[Sequence[Any]]) -> list[Any]:
    """Merge sorted sequences into one sorted list."""
    heap = Heap()
    offsets = [0] * len(runs)
    for index, run in enumerate(runs):
        if run:
            heap.push((run[0], index))

    out = []
    while heap:
        value, index = heap.min()
        out.append(value)
        offsets[index] += 1
        run = runs[index]
        if offsets[index] == len(run):
            heap.pop()
            continue
        following = run[offsets[index]]
        heap[0] = (following, index)
        if not following <= value:
            heap.sift_down(0)
    return out


def merge_sort(data: MutableSequence[Any], options: Optional[SortOptions] = None) -> None:
    """Sort ``data`` in place: sort cache-sized runs, then merge them in groups."""
    if options is None:
        options = SortOptions()
    item_size = max(options.item_size, 1)
    cache_line_size = max(options.cache_line_size, 1)
    cache_size = max(options.cache_size, cache_line_size)

    run_length = max(-(-cache_size // item_size), 1)
    runs_to_merge = max(options.cache_size // (2 * cache_line_size), 2)

    runs = [sorted(data[i : i + run_length]) for i in range(0, len(data), run_length)]
    if not runs:
        return

    while len(runs) > 1:
        runs = [merge_runs(runs[i : i + runs_to_merge]) for i in range(0, len(runs), runs_to_merge)]

    data[:] = runs[0]