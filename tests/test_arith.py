import math

import pytest

from algokit.arith import gcd, is_prime, lcm

PAIRS = [(a, b) for a in range(0, 40) for b in range(0, 40)]


@pytest.mark.parametrize("a, b", PAIRS)
def test_gcd_matches_stdlib(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_gcd_with_zero():
    assert gcd(17, 0) == 17
    assert gcd(0, 17) == 17


@pytest.mark.parametrize("a, b", [(a, b) for a, b in PAIRS if a and b])
def test_lcm_invariants(a, b):
    m = lcm(a, b)
    assert m % a == 0 and m % b == 0
    assert m * gcd(a, b) == a * b
    assert m == math.lcm(a, b)


def test_lcm_of_zeroes():
    with pytest.raises(ValueError):
        lcm(0, 0)


def test_small_primes():
    assert {n for n in range(30) if is_prime(n)} == {2, 3, 5, 7, 11, 13, 17, 19, 23, 29}


def test_non_primes():
    assert not is_prime(0)
    assert not is_prime(1)
    assert not is_prime(-7)
    assert not any(is_prime(p * q) for p in range(2, 30) for q in range(2, 30))


def test_primes_have_no_proper_divisors():
    for n in range(2, 500):
        if is_prime(n):
            assert all(gcd(n, d) == 1 for d in range(2, n))