"""Order statistics of the union of two sorted sequences."""

from collections.abc import Sequence
from typing import Any


def kth_of_sorted(a: Sequence[Any], b: Sequence[Any], k: int) -> Any:
    """The ``k``-th smallest (from zero) element of two sorted sequences taken together.

    The two sequences must not share values.
    """
    if not 0 <= k < len(a) + len(b):
        raise IndexError(f"k = {k} out of range")

    a_lo, a_hi = 0, len(a)
    b_lo, b_hi = 0, len(b)
    while True:
        len_a = a_hi - a_lo
        len_b = b_hi - b_lo
        if len_a == 0:
            return b[b_lo + k]
        if len_b == 0:
            return a[a_lo + k]

        n = len_a // 2
        m = len_b // 2
        mid_a = a[a_lo + n]
        mid_b = b[b_lo + m]
        if mid_a == mid_b:
            raise ValueError("the sequences must not share values")
        if mid_a > mid_b:
            a, b = b, a
            a_lo, a_hi, b_lo, b_hi = b_lo, b_hi, a_lo, a_hi
            continue
        if k < n + m + 1:
            b_hi = b_lo + m
        else:
            a_lo += n + 1
            k -= n + 1