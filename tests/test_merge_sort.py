import random

from algokit.merge_sort import SortOptions, merge_runs, merge_sort


def test_empty():
    data = []
    merge_sort(data)
    assert data == []


def test_sort_with_tiny_cache():
    data = [6, 0, 8, 1, 2, 4, 5, 3, -1, 15]
    merge_sort(data, SortOptions(cache_size=4, cache_line_size=1, item_size=4))
    assert data == [-1, 0, 1, 2, 3, 4, 5, 6, 8, 15]


def test_sort_default_options():
    data = [3, 1, 2]
    merge_sort(data)
    assert data == [1, 2, 3]


def test_random_many_runs():
    rng = random.Random(1)
    data = [rng.randint(0, 100) for _ in range(500)]
    expected = sorted(data)
    merge_sort(data, SortOptions(cache_size=24, cache_line_size=4, item_size=4))
    assert data == expected


def test_merge_runs():
    assert merge_runs([[1, 4], [2, 3], [], [0]]) == [0, 1, 2, 3, 4]
    assert merge_runs([[1, 1, 2], [1, 3]]) == [1, 1, 1, 2, 3]
    assert merge_runs([]) == []