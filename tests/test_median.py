import pytest

from algokit.median import kth_of_sorted


def test_single_element():
    assert kth_of_sorted([100], [], 0) == 100
    assert kth_of_sorted([], [100], 0) == 100


@pytest.mark.parametrize("k", range(8))
def test_interleaved(k):
    a = [2, 4, 7]
    b = [1, 3, 5, 6, 8]
    assert kth_of_sorted(a, b, k) == k + 1
    assert kth_of_sorted(b, a, k) == k + 1


def test_disjoint_ranges():
    a = [10, 20, 30]
    b = [1, 2]
    assert [kth_of_sorted(a, b, k) for k in range(5)] == [1, 2, 10, 20, 30]


def test_out_of_range():
    with pytest.raises(IndexError):
        kth_of_sorted([1, 2], [3], 3)
    with pytest.raises(IndexError):
        kth_of_sorted([], [], 0)