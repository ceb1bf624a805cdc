"""Prefix function, Knuth-Morris-Pratt search and Z-function."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def prefix_function(pattern: Sequence[Any]) -> list[int]:
    """List of ``len(pattern) + 1`` values: entry ``i`` is the length of the
    longest proper suffix of ``pattern[:i]`` that is also its prefix."""
    size = len(pattern)
    prefix = [0] * (size + 1)
    for i in range(1, size):
        p = prefix[i]
        while p and pattern[p] != pattern[i]:
            p = prefix[p]
        if pattern[p] == pattern[i]:
            p += 1
        prefix[i + 1] = p
    return prefix


def kmp_search(text: Sequence[Any], pattern: Sequence[Any]) -> list[int]:
    """Start positions of every occurrence of ``pattern`` in ``text``."""
    size = len(pattern)
    if not size:
        return list(range(len(text) + 1))

    prefix = prefix_function(pattern)
    matches = []
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = prefix[j]
        if ch == pattern[j]:
            j += 1
        if j == size:
            matches.append(i + 1 - size)
            j = prefix[j]
    return matches


def z_function(text: Sequence[Any]) -> list[int]:
    """Entry ``i`` (for ``i > 0``) is the length of the longest common prefix of
    ``text`` and ``text[i:]``; entry 0 is 0."""
    size = len(text)
    if not size:
        return []
    z = [0] * size

    def extend(i: int, zi: int) -> int:
        while i + zi < size and text[zi] == text[i + zi]:
            zi += 1
        return zi

    s = 0
    for i in range(1, size):
        reach = s + z[s]
        if reach <= i:
            z[i] = extend(i, 0)
            s = i
        elif z[i - s] < reach - i:
            z[i] = z[i - s]
        else:
            z[i] = extend(i, reach - i)
            s = i
    return z