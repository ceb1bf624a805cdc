import random

import pytest

from algokit.treap import Treap


def _priorities():
    rng = random.Random(0)
    return lambda: rng.randrange(2**31)


def test_smoke():
    rand = _priorities()
    treap = Treap()
    treap.insert(1, rand())
    treap.insert(2, rand())
    treap.insert(3, rand())
    assert len(treap) == 3

    assert 1 in treap
    assert 2 in treap
    assert 3 in treap
    assert 0 not in treap
    assert 4 not in treap

    assert treap.get_node(1).key == 1
    assert treap.get_node(2).key == 2
    assert treap.get_node(3).key == 3

    assert treap.erase(1)
    assert len(treap) == 2
    assert not treap.erase(0)
    assert len(treap) == 2
    assert treap.erase(2)
    assert len(treap) == 1
    assert treap.erase(3)
    assert len(treap) == 0


def test_same_key_replaces_value():
    rand = _priorities()
    treap = Treap()
    assert len(treap) == 0

    treap.insert(1, rand(), 1)
    assert len(treap) == 1
    assert treap.get_node(1).value == 1

    treap.insert(1, rand(), 2)
    assert len(treap) == 1
    assert treap.get_node(1).value == 2

    treap.insert(1, rand(), 3)
    assert len(treap) == 1
    assert treap.get_node(1).value == 3

    assert treap.erase(1)
    assert len(treap) == 0
    assert not treap


def test_key_value():
    rand = _priorities()
    treap = Treap()
    treap.insert(1, rand(), "1")
    treap.insert(2, rand(), "2")
    treap.insert(3, rand(), "3")
    assert treap.get_node(1).value == "1"
    assert treap.get_node(2).value == "2"
    assert treap.get_node(3).value == "3"


def test_many_elements():
    count = 100000
    rand = _priorities()
    treap = Treap()
    for i in range(count):
        treap.insert(i, rand())
    assert len(treap) == count
    for i in range(count):
        assert treap.erase(i)
    assert len(treap) == 0


def test_format():
    treap = Treap()
    treap.insert(2, 1)
    treap.insert(1, 5)
    treap.insert(3, 7)
    assert treap.format() == "\t[3, 7]\n[2, 1]\n\t[1, 5]\n"


def test_format_with_values():
    treap = Treap()
    treap.insert(1, 0, "a")
    assert treap.format() == "[1, a, 0]\n"
    assert Treap().format() == ""


def test_heap_order_by_priority():
    treap = Treap()
    treap.insert(5, 3)
    treap.insert(1, 1)
    treap.insert(9, 2)
    root = treap.get_node(1)
    assert root.right.key == 9
    assert root.right.left.key == 5


def test_get_missing_key():
    with pytest.raises(KeyError):
        Treap().get_node(7)