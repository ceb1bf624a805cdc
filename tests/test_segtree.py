import pytest

from algokit.segtree import FastSegTree, SegTree, ceil_pow2


def _check_sums(tree, values):
    for i in range(len(values)):
        assert tree[i] == values[i]
        total = 0
        for j in range(i, len(values)):
            assert tree.sum(i, j) == total
            total += values[j]


@pytest.mark.parametrize("cls", [SegTree, FastSegTree])
def test_simple(cls):
    values = list(range(12))
    tree = cls(12)
    assert len(tree) == 12
    for i, v in enumerate(values):
        tree[i] = v
    _check_sums(tree, values)

    values.reverse()
    for i, v in enumerate(values):
        tree[i] = v
    _check_sums(tree, values)


def test_color():
    tree = SegTree(6)
    tree.color(0, 4, 1)
    assert list(tree) == [1, 1, 1, 1, 0, 0]

    tree.color(3, 6, 2)
    assert list(tree) == [1, 1, 1, 2, 2, 2]

    tree.color(2, 4, 3)
    assert list(tree) == [1, 1, 3, 3, 2, 2]
    assert tree.sum(0, 6) == 12
    assert tree.sum(1, 5) == 9


def test_color_then_set():
    tree = SegTree(5)
    tree.color(0, 5, 4)
    tree[2] = 10
    assert list(tree) == [4, 4, 10, 4, 4]
    assert tree.sum(0, 5) == 26


def test_ceil_pow2():
    assert ceil_pow2(0) == 1
    assert ceil_pow2(1) == 1
    assert ceil_pow2(5) == 8
    assert ceil_pow2(8) == 8
    assert ceil_pow2(9) == 16


@pytest.mark.parametrize("cls", [SegTree, FastSegTree])
def test_index_out_of_range(cls):
    tree = cls(3)
    tree[0] = 5
    with pytest.raises(IndexError):
        _ = tree[3]
    with pytest.raises(IndexError):
        tree[-1] = 1
    assert tree.sum(0, 3) == 5
    assert tree[0] == 5