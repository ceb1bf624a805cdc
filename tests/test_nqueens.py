import pytest

from algokit.nqueens import count_n_queens, n_queens


@pytest.mark.parametrize(
    "n, expected",
    [(0, 1), (1, 1), (2, 0), (3, 0), (4, 2), (5, 10), (6, 4), (7, 40), (8, 92), (9, 352), (10, 724), (11, 2680)],
)
def test_counts(n, expected):
    assert count_n_queens(n) == expected


def test_four():
    assert list(n_queens(4)) == [(1, 3, 0, 2), (2, 0, 3, 1)]


def test_empty_board():
    assert list(n_queens(0)) == [()]


def test_solutions_are_valid():
    solutions = list(n_queens(6))
    assert len(solutions) == 4
    for cols in solutions:
        assert sorted(cols) == list(range(6))
        for i in range(6):
            for j in range(i):
                assert abs(cols[i] - cols[j]) != i - j


def test_generator_matches_count():
    assert len(list(n_queens(8))) == count_n_queens(8)
    assert len(set(n_queens(8))) == 92


@pytest.mark.parametrize("n", [-1, 33])
def test_out_of_range(n):
    with pytest.raises(ValueError):
        count_n_queens(n)