"""Langford pairings by backtracking."""

from collections.abc import Iterator


def _pairings(n: int, prune: bool) -> Iterator[list[int]]:
    if n < 0:
        raise ValueError("n must be non-negative")
    size = 2 * n
    xs = [0] * size
    used = [False] * (n + 1)
    remaining = n

    def place(level: int) -> Iterator[list[int]]:
        nonlocal remaining
        if remaining == 0:
            yield list(xs)
            return
        while xs[level] != 0:
            level += 1

        candidates = range(1, n + 1)
        if prune:
            # A number t whose second copy would land on the last slot must
            # take this slot now, or it never fits.
            t = size - 2 - level
            if 1 <= t <= n and not used[t]:
                if xs[level + t + 1] != 0:
                    return
                candidates = range(t, t + 1)

        for k in candidates:
            if used[k]:
                continue
            if level + k + 1 >= size:
                break
            if xs[level + k + 1] != 0:
                continue
            xs[level] = k
            xs[level + k + 1] = -k
            used[k] = True
            remaining -= 1
            yield from place(level + 1)
            remaining += 1
            used[k] = False
            xs[level + k + 1] = 0
        xs[level] = 0

    return place(0)


def langford_pairings(n: int) -> Iterator[list[int]]:
    """All arrangements of 1, 1, ..., n, n with ``k`` numbers between the two ``k``s.

    Each arrangement has ``2n`` entries: ``k`` at the first copy of ``k`` and
    ``-k`` at the second.
    """
    return _pairings(n, prune=True)


def langford_pairings_naive(n: int) -> Iterator[list[int]]:
    """Same arrangements as langford_pairings, in the same order, without pruning."""
    return _pairings(n, prune=False)