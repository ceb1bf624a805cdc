"""The n-queens problem by bitmask backtracking."""

from collections.abc import Iterator

MAX_N = 32


def _check(n: int) -> None:
    if not 0 <= n <= MAX_N:
        raise ValueError(f"n must be between 0 and {MAX_N}")


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """All placements of ``n`` non-attacking queens, as the column for each row."""
    _check(n)
    full = (1 << n) - 1
    cols = [0] * n

    def place(level: int, a: int, b: int, c: int) -> Iterator[tuple[int, ...]]:
        if level == n:
            yield tuple(cols)
            return
        shift = n - 1 - level
        free = full & ~(a | (b >> shift) | (c >> level))
        while free:
            bit = free & -free
            free ^= bit
            cols[level] = bit.bit_length() - 1
            yield from place(level + 1, a | bit, b | (bit << shift), c | (bit << level))

    return place(0, 0, 0, 0)


def count_n_queens(n: int) -> int:
    """Number of placements of ``n`` non-attacking queens."""
    _check(n)
    full = (1 << n) - 1

    def count(level: int, a: int, b: int, c: int) -> int:
        if level == n:
            return 1
        shift = n - 1 - level
        free = full & ~(a | (b >> shift) | (c >> level))
        total = 0
        while free:
            bit = free & -free
            free ^= bit
            total += count(level + 1, a | bit, b | (bit << shift), c | (bit << level))
        return total

    return count(0, 0, 0, 0)