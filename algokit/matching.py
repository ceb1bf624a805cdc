"""Maximum bipartite matching by Kuhn's augmenting paths."""

from collections.abc import Iterable, Sequence
from typing import Optional


def max_bipartite_matching(
    adjacency: Sequence[Iterable[int]], start: int, stop: int
) -> list[Optional[int]]:
    """Match vertices ``start..stop-1`` of one part to their neighbours.

    ``adjacency[u]`` lists the targets of vertex ``u``. The result maps each
    vertex to its partner, or to ``None`` when it stays unmatched.
    """
    adjacency = [list(targets) for targets in adjacency]
    n = len(adjacency)
    match: list[Optional[int]] = [None] * n
    colors: list[Optional[int]] = [None] * n

    unmatched = []
    for u in range(start, stop):
        for v in adjacency[u]:
            if match[v] is None:
                match[u] = v
                match[v] = u
                break
        else:
            unmatched.append(u)

    def augment(u: int, color: int) -> bool:
        if colors[u] == color:
            return False
        colors[u] = color
        for v in adjacency[u]:
            w = match[v]
            if w is None or augment(w, color):
                match[u] = v
                match[v] = u
                return True
        return False

    color = 0
    while unmatched:
        remaining = []
        for u in unmatched:
            if not augment(u, color):
                remaining.append(u)
        if len(remaining) == len(unmatched):
            break
        unmatched = remaining
        color += 1

    return match