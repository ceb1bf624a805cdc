"""Radix-2 fast Fourier transform."""

import cmath
import math
from collections.abc import Sequence


def _log2_exact(n: int) -> int:
    if n & (n - 1):
        raise ValueError(f"length {n} is not a power of two")
    return n.bit_length() - 1


def bit_reverse_permutation(values: Sequence[complex]) -> list[complex]:
    """Reorder ``values`` so that element ``j`` comes from the bit-reversed index of ``j``."""
    n = len(values)
    if n == 0:
        return []
    width = _log2_exact(n)
    if width == 0:
        return [values[0]]
    return [values[int(format(j, f"0{width}b")[::-1], 2)] for j in range(n)]


def fft(values: Sequence[complex], forward: bool = True) -> list[complex]:
    """Discrete Fourier transform of a power-of-two length sequence.

    The forward transform uses the root ``exp(2*pi*i/n)``; the inverse one
    uses its conjugate and divides by ``n``.
    """
    n = len(values)
    if n == 0:
        return []
    _log2_exact(n)

    ys = [complex(v) for v in bit_reverse_permutation(values)]
    width, half = 2, 1
    while width <= n:
        mul = cmath.exp(complex(0, 2 * math.pi / width))
        if not forward:
            mul = mul.conjugate()
        for i in range(0, n, width):
            cur = complex(1)
            for j in range(i, i + half):
                a = ys[j] + cur * ys[j + half]
                b = ys[j] - cur * ys[j + half]
                cur *= mul
                ys[j] = a
                ys[j + half] = b
        if not forward:
            ys = [y * 0.5 for y in ys]
        width *= 2
        half *= 2
    return ys