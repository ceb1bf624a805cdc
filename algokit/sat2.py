"""2-satisfiability of conjunctions of two-literal clauses."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Literal:
    """The variable ``x<index>`` or, when not ``positive``, its negation."""

    index: int
    positive: bool = True

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("variable index must be non-negative")

    def __invert__(self) -> Literal:
        return Literal(self.index, not self.positive)

    def __or__(self, other: Literal) -> Clause:
        return Clause(self, other)

    def __ge__(self, other: Literal) -> Clause:
        """Implication ``self -> other``, i.e. ``~self or other``."""
        return Clause(~self, other)

    def __and__(self, other: Union[Literal, Clause, Formula]) -> Formula:
        return Formula([self, other])

    def __str__(self) -> str:
        return f"{'' if self.positive else '~'}x{self.index}"


@dataclass(frozen=True)
class Clause:
    """The disjunction ``lhs or rhs``."""

    lhs: Literal
    rhs: Literal

    def __and__(self, other: Union[Literal, Clause, Formula]) -> Formula:
        return Formula([self, other])

    def __str__(self) -> str:
        return f"{self.lhs} or {self.rhs}"


_Item = Union[Literal, Clause, "Formula"]


class Formula:
    """A conjunction of clauses; a lone literal counts as the clause ``x or x``."""

    def __init__(self, items: Union[_Item, Iterable[_Item], None] = None) -> None:
        self.clauses: list[Clause] = []
        if items is None:
            return
        if isinstance(items, (Literal, Clause, Formula)):
            self.add(items)
        else:
            for item in items:
                self.add(item)

    def add(self, item: _Item) -> None:
        if isinstance(item, Literal):
            self.clauses.append(Clause(item, item))
        elif isinstance(item, Clause):
            self.clauses.append(item)
        elif isinstance(item, Formula):
            self.clauses.extend(item.clauses)
        else:
            raise TypeError(f"cannot add {type(item).__name__} to a formula")

    def __iand__(self, item: _Item) -> Formula:
        self.add(item)
        return self

    def __and__(self, item: _Item) -> Formula:
        result = Formula(self.clauses)
        result.add(item)
        return result

    def __len__(self) -> int:
        return len(self.clauses)

    def __str__(self) -> str:
        return " and ".join(f"({clause})" for clause in self.clauses)


def _node(x: Literal) -> int:
    return 2 * x.index + (0 if x.positive else 1)


def _strongly_connected_components(adj: Sequence[Sequence[int]]) -> list[list[int]]:
    """Tarjan's algorithm; components come out in reverse topological order."""
    n = len(adj)
    vis: list[Optional[int]] = [None] * n
    low = [0] * n
    on_stack = [False] * n
    stack: list[int] = []
    components: list[list[int]] = []
    counter = 0

    for root in range(n):
        if vis[root] is not None:
            continue
        vis[root] = low[root] = counter
        counter += 1
        stack.append(root)
        on_stack[root] = True
        work = [(root, 0)]
        while work:
            u, i = work[-1]
            if i < len(adj[u]):
                work[-1] = (u, i + 1)
                v = adj[u][i]
                if vis[v] is None:
                    vis[v] = low[v] = counter
                    counter += 1
                    stack.append(v)
                    on_stack[v] = True
                    work.append((v, 0))
                elif on_stack[v]:
                    low[u] = min(low[u], vis[v])
                continue
            work.pop()
            if low[u] == vis[u]:
                component = []
                while True:
                    v = stack.pop()
                    on_stack[v] = False
                    component.append(v)
                    if v == u:
                        break
                components.append(component)
            if work:
                parent = work[-1][0]
                low[parent] = min(low[parent], low[u])
    return components


def solve_2sat(formula: Union[Formula, Literal, Clause]) -> Optional[list[bool]]:
    """A satisfying assignment indexed by variable, or None if there is none."""
    if not isinstance(formula, Formula):
        formula = Formula(formula)
    clauses = formula.clauses
    if not clauses:
        return []

    n = max(max(c.lhs.index, c.rhs.index) for c in clauses) + 1
    adj: list[list[int]] = [[] for _ in range(2 * n)]
    for c in clauses:
        adj[_node(~c.lhs)].append(_node(c.rhs))
        adj[_node(~c.rhs)].append(_node(c.lhs))

    values: list[Optional[bool]] = [None] * (2 * n)
    for component in _strongly_connected_components(adj):
        if values[component[0]] is not None:
            continue
        for u in component:
            if values[u] is not None:
                return None
            values[u] = True
            values[u ^ 1] = False

    return [bool(values[2 * i]) for i in range(n)]