"""Suffix arrays, sorted cyclic shifts and longest common prefixes."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Union

Text = Union[str, bytes, Sequence[int]]


def _codes(s: Text) -> list[int]:
    if isinstance(s, str):
        return [ord(ch) for ch in s]
    codes = list(s)
    if any(c < 0 for c in codes):
        raise ValueError("symbols must be non-negative")
    return codes


def _radix_pass(keys: Sequence[int], key_of: Callable[[int], int], bound: int) -> list[int]:
    """Stable sort of ``keys`` by ``key_of``, whose values lie in ``[0, bound)``."""
    buckets: list[list[int]] = [[] for _ in range(bound)]
    for k in keys:
        buckets[key_of(k)].append(k)
    return [k for bucket in buckets for k in bucket]


def _raw_skew(s: list[int], n: int, max_value: int) -> list[int]:
    """Suffix array of ``s[:n]`` with symbols in ``1..max_value`` and
    ``s[n] == s[n + 1] == s[n + 2] == 0``."""
    if n == 0:
        return []
    if n == 1:
        return [0]

    n0 = (n + 2) // 3
    n1 = (n + 1) // 3
    n2 = n // 3
    n02 = n0 + n2
    fake1 = int(n0 != n1)
    bound = max_value + 1

    # A fake =1 (mod 3) suffix is added when n = 1 (mod 3), so that the
    # =0 (mod 3) suffixes can be sorted by their tails.
    s12 = [i for i in range(n + fake1) if i % 3 != 0]
    sa12 = _radix_pass(s12, lambda i: s[i + 2], bound)
    sa12 = _radix_pass(sa12, lambda i: s[i + 1], bound)
    sa12 = _radix_pass(sa12, lambda i: s[i], bound)

    names = [0] * (n02 + 3)
    name = 0
    previous = None
    for pos in sa12:
        triple = (s[pos], s[pos + 1], s[pos + 2])
        if triple != previous:
            previous = triple
            name += 1
        if pos % 3 == 1:
            names[pos // 3] = name
        else:
            names[pos // 3 + n0] = name

    if name < n02:
        sa12 = _raw_skew(names, n02, name)
        for i, p in enumerate(sa12):
            names[p] = i + 1
    else:
        sa12 = [0] * n02
        for i in range(n02):
            sa12[names[i] - 1] = i

    s0 = [3 * p for p in sa12 if p < n0]
    sa0 = _radix_pass(s0, lambda i: s[i], bound)

    def restore(q: int) -> int:
        return q * 3 + 1 if q < n0 else (q - n0) * 3 + 2

    result = []
    i0 = 0
    i12 = fake1
    while i12 != n02 and i0 != n0:
        p0 = sa0[i0]
        q = sa12[i12]
        p12 = restore(q)
        if q < n0:
            twelve_first = (s[p12], names[q + n0]) <= (s[p0], names[p0 // 3])
        else:
            twelve_first = (s[p12], s[p12 + 1], names[q - n0 + 1]) <= (
                s[p0],
                s[p0 + 1],
                names[p0 // 3 + n0],
            )
        if twelve_first:
            result.append(p12)
            i12 += 1
        else:
            result.append(p0)
            i0 += 1
    result.extend(restore(q) for q in sa12[i12:])
    result.extend(sa0[i0:])
    return result


def skew(s: Text) -> list[int]:
    """Suffix array of ``s``: start positions of its suffixes in sorted order.

    Linear time (the Kärkkäinen-Sanders skew algorithm).
    """
    codes = _codes(s)
    n = len(codes)
    values = [c + 1 for c in codes] + [0, 0, 0]
    return _raw_skew(values, n, max(values[:n], default=1))


def manber_myers(s: Text) -> list[int]:
    """Start positions of the cyclic shifts of ``s`` in sorted order.

    Appending a unique smallest symbol turns this into a suffix array.
    Time O(n log n).
    """
    classes = _codes(s)
    n = len(classes)
    if n == 0:
        return []
    bound = max(n, max(classes) + 1)

    order = _radix_pass(range(n), lambda i: classes[i], bound)
    h = 1
    while h < n:
        shifted = [(p - h) % n for p in order]
        current = classes
        order = _radix_pass(shifted, lambda i: current[i], bound)

        new_classes = [0] * n
        cls = 0
        for prev, cp in zip(order, order[1:]):
            if current[cp] != current[prev] or current[(cp + h) % n] != current[(prev + h) % n]:
                cls += 1
            new_classes[cp] = cls
        classes = new_classes
        h <<= 1
    return order


def kasai(s: Text, pos: Sequence[int]) -> tuple[list[int], list[int]]:
    """Ranks of the suffixes and the longest common prefixes of neighbours.

    ``pos`` is the suffix array of ``s``. Returns ``(rank, lcp)`` where
    ``rank[pos[i]] == i`` and ``lcp[i]`` is the common prefix length of the
    suffixes at ``pos[i]`` and ``pos[i + 1]``. Linear time.
    """
    codes = _codes(s)
    n = len(codes)
    if len(pos) != n:
        raise ValueError("suffix array length does not match the text")
    rank = [0] * n
    for i, p in enumerate(pos):
        rank[p] = i

    lcp = [0] * max(n - 1, 0)
    h = 0
    for i in range(n):
        if rank[i] == 0:
            h = 0
            continue
        j = pos[rank[i] - 1]
        while i + h < n and j + h < n and codes[i + h] == codes[j + h]:
            h += 1
        lcp[rank[i] - 1] = h
        if h:
            h -= 1
    return rank, lcp