import pytest

from algokit.bits import hi_pos, lo_pos, lowest_bit, popcount, spread_high, spread_low


def test_spread_low():
    assert spread_low(1) == 0xFFFFFFFFFFFFFFFF
    assert spread_low(2) == 0x5555555555555555
    assert spread_low(4) == 0x1111111111111111
    value = spread_low(3)
    assert all(bool(value >> i & 1) == (i % 3 == 0) for i in range(64))
    assert value >> 64 == 0


def test_spread_high():
    assert spread_high(1) == 0xFFFFFFFFFFFFFFFF
    assert spread_high(2) == 0xAAAAAAAAAAAAAAAA
    assert spread_high(3) == 0x4924924924924924
    assert spread_high(4) == 0x8888888888888888


def test_spread_rejects_zero():
    with pytest.raises(ValueError):
        spread_low(0)
    with pytest.raises(ValueError):
        spread_high(0)


def test_popcount():
    assert popcount(0x0) == 0
    assert popcount(0x1) == 1
    assert popcount(0xAAAAAAAA55555555) == 32
    assert popcount(0xFFFFFFFFFFFFFFFF) == 64


def test_lo_pos():
    assert lo_pos(0x0) == 64
    assert lo_pos(0x1) == 0
    assert lo_pos(0x8) == 3
    assert lo_pos(0x8000000000000000) == 63
    assert lo_pos(0x400) == 10


def test_hi_pos():
    assert hi_pos(0x0) == 0
    assert hi_pos(0x1) == 0
    assert hi_pos(0x2) == 1
    assert hi_pos(0x3) == 1
    assert hi_pos(0x4) == 2
    assert hi_pos(0x7F) == 6
    assert hi_pos(0x80) == 7
    assert hi_pos(0xFFFFFFFF) == 31
    assert hi_pos(0xFFFFFFFFFFFFFFFF) == 63


@pytest.mark.parametrize("x", [0x1, 0x8, 0x400, 0x8000000000000000, 0b101100])
def test_lowest_bit(x):
    assert lowest_bit(x) == 1 << lo_pos(x)


def test_lowest_bit_of_zero():
    assert lowest_bit(0) == 0


def test_out_of_range_word():
    with pytest.raises(ValueError):
        popcount(1 << 64)
    with pytest.raises(ValueError):
        hi_pos(-1)