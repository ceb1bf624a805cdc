"""Basic number theory."""


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two non-negative integers, not both zero."""
    d = gcd(a, b)
    if d == 0:
        raise ValueError("lcm of two zeroes is undefined")
    return a // d * b


def is_prime(a: int) -> bool:
    """Primality test by trial division."""
    if a < 2:
        return False
    if a % 2 == 0:
        return a == 2
    i = 3
    while i <= a // i:
        if a % i == 0:
            return False
        i += 2
    return True