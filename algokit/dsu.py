"""Disjoint-set union with path compression and union by rank."""


class DisjointSets:
    """Partition of ``range(n)`` into disjoint components."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._components = n

    def reset(self) -> None:
        """Put every element back into a component of its own."""
        n = len(self._parent)
        self._parent = list(range(n))
        self._rank = [0] * n
        self._components = n

    def find(self, u: int) -> int:
        """Representative of the component holding ``u``."""
        if not 0 <= u < len(self._parent):
            raise IndexError(f"element {u} out of range")
        parent = self._parent
        root = u
        while parent[root] != root:
            root = parent[root]
        while parent[u] != root:
            parent[u], u = root, parent[u]
        return root

    def union(self, u: int, v: int) -> bool:
        """Join the components of ``u`` and ``v``; False if already joined."""
        u = self.find(u)
        v = self.find(v)
        if u == v:
            return False
        if self._rank[u] < self._rank[v]:
            self._parent[u] = v
        else:
            self._parent[v] = u
            if self._rank[u] == self._rank[v]:
                self._rank[u] += 1
        self._components -= 1
        return True

    @property
    def component_count(self) -> int:
        return self._components