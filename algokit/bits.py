"""Bit tricks on 64-bit unsigned words."""

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1


def _check_word(x: int) -> None:
    if not 0 <= x <= WORD_MASK:
        raise ValueError(f"{x} does not fit into an unsigned 64-bit word")


def spread_low(k: int) -> int:
    """Ones separated by ``k - 1`` zeroes, starting with a one in the lowest bit."""
    if k <= 0:
        raise ValueError("k must be positive")
    return sum(1 << i for i in range(0, WORD_BITS, k))


def spread_high(k: int) -> int:
    """Ones separated by ``k - 1`` zeroes, starting with ``k - 1`` zeroes in the lowest bits."""
    return (spread_low(k) << (k - 1)) & WORD_MASK


def popcount(x: int) -> int:
    """Number of ones in the binary representation of ``x``."""
    _check_word(x)
    return bin(x).count("1")


def lo_pos(x: int) -> int:
    """Position of the least significant one; 64 when ``x`` is zero."""
    _check_word(x)
    if x == 0:
        return WORD_BITS
    return (x & -x).bit_length() - 1


def hi_pos(x: int) -> int:
    """Position of the most significant one; 0 when ``x`` is zero."""
    _check_word(x)
    if x == 0:
        return 0
    return x.bit_length() - 1


def lowest_bit(x: int) -> int:
    """Mask holding only the least significant one of ``x`` (zero for zero)."""
    _check_word(x)
    return x & -x