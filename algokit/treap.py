"""Treap: a binary search tree by key that is a min-heap by priority."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreapNode:
    key: Any
    value: Any
    priority: Any
    left: Optional[TreapNode] = None
    right: Optional[TreapNode] = None


def _split(root: Optional[TreapNode], key: Any) -> tuple[Optional[TreapNode], Optional[TreapNode]]:
    """Split into keys less than ``key`` and the rest."""
    if root is None:
        return None, None
    if not root.key < key:
        left, root.left = _split(root.left, key)
        return left, root
    root.right, right = _split(root.right, key)
    return root, right


def _merge(left: Optional[TreapNode], right: Optional[TreapNode]) -> Optional[TreapNode]:
    if left is None:
        return right
    if right is None:
        return left
    if left.priority < right.priority:
        left.right = _merge(left.right, right)
        return left
    right.left = _merge(left, right.left)
    return right


class Treap:
    """A map from keys to values; smaller priorities lie closer to the root."""

    def __init__(self) -> None:
        self._root: Optional[TreapNode] = None
        self._size = 0

    def insert(self, key: Any, priority: Any, value: Any = None) -> None:
        """Insert ``key``, replacing any node already holding it."""
        node = TreapNode(key, value, priority)
        self.erase(key)

        parent: Optional[TreapNode] = None
        cur = self._root
        while cur is not None and not node.priority < cur.priority:
            parent = cur
            cur = cur.left if node.key < cur.key else cur.right
        node.left, node.right = _split(cur, node.key)

        if parent is None:
            self._root = node
        elif node.key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self._size += 1

    def _lookup(self, key: Any) -> tuple[Optional[TreapNode], Optional[TreapNode]]:
        parent: Optional[TreapNode] = None
        node = self._root
        while node is not None and not node.key == key:
            parent = node
            node = node.left if key < node.key else node.right
        return parent, node

    def erase(self, key: Any) -> bool:
        """Remove ``key``; False if it was absent."""
        parent, node = self._lookup(key)
        if node is None:
            return False
        replacement = _merge(node.left, node.right)
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        node.left = node.right = None
        self._size -= 1
        return True

    def __contains__(self, key: Any) -> bool:
        return self._lookup(key)[1] is not None

    def get_node(self, key: Any) -> TreapNode:
        node = self._lookup(key)[1]
        if node is None:
            raise KeyError(key)
        return node

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def format(self) -> str:
        """The tree sideways: right subtree above, one tab per level.

        Nodes print as ``[key, value, priority]``, or ``[key, priority]``
        when they hold no value.
        """
        lines: list[str] = []

        def walk(node: TreapNode, depth: int) -> None:
            if node.right is not None:
                walk(node.right, depth + 1)
            if node.value is None:
                text = f"[{node.key}, {node.priority}]"
            else:
                text = f"[{node.key}, {node.value}, {node.priority}]"
            lines.append("\t" * depth + text)
            if node.left is not None:
                walk(node.left, depth + 1)

        if self._root is not None:
            walk(self._root, 0)
        return "".join(f"{line}\n" for line in lines)