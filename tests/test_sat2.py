import pytest

from algokit.sat2 import Clause, Formula, Literal, solve_2sat

X = Literal


def test_empty_formula():
    assert solve_2sat(Formula()) == []


def test_all_positive_units():
    assert solve_2sat(X(0) & X(1) & X(2)) == [True, True, True]


def test_negated_units():
    assert solve_2sat(~X(0) & ~X(1) & X(2)) == [False, False, True]


def test_chain_of_clauses():
    formula = (X(0) | X(1)) & (X(1) | X(2)) & (X(2) | X(3)) & (~X(0) | ~X(2)) & (~X(1) | ~X(3))
    assert solve_2sat(formula) == [False, True, True, False]


def test_implication():
    assert solve_2sat(X(0) & (X(1) >= ~X(0))) == [True, False]


def test_contradiction():
    assert solve_2sat(X(0) & ~X(0)) is None


def test_mixed():
    assert solve_2sat((X(0) | X(1)) & (X(2) | ~X(3)) & X(4)) == [True, True, True, False, True]


def test_cycle():
    assert solve_2sat((X(0) | ~X(1)) & (X(1) | ~X(2)) & (X(2) | ~X(0))) == [True, True, True]


def test_unsatisfiable_system():
    formula = (
        (X(0) | ~X(1))
        & (X(0) | ~X(2))
        & (X(1) | X(2))
        & (~X(0) | ~X(3))
        & (X(3) | ~X(1))
        & (X(3) | ~X(2))
    )
    assert solve_2sat(formula) is None


def test_formatting():
    assert str(X(3)) == "x3"
    assert str(~X(3)) == "~x3"
    assert str(X(0) | ~X(1)) == "x0 or ~x1"


def test_implication_builds_clause():
    assert (X(1) >= X(2)) == Clause(~X(1), X(2))


def test_formula_building():
    formula = Formula(X(0))
    formula &= X(1) | X(2)
    bigger = formula & ~X(3)
    assert len(formula) == 2
    assert len(bigger) == 3
    assert bigger.clauses[0] == Clause(X(0), X(0))


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        Literal(-1)


def test_bad_item_rejected():
    with pytest.raises(TypeError):
        Formula().add(5)