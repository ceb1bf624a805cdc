"""Aho-Corasick automaton for recognising any of a set of words."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class _Node:
    moves: dict[str, _Node] = field(default_factory=dict)
    link: Optional[_Node] = None
    terminal: bool = False


class Matcher:
    """A position in the automaton, advanced one character at a time."""

    def __init__(self, root: _Node) -> None:
        self._root = root
        self._curr = root

    def is_terminal(self) -> bool:
        """True if the text read so far ends with one of the words."""
        return self._curr.terminal

    def move(self, ch: str) -> bool:
        """Read ``ch``; True if the text read so far ends with one of the words."""
        curr = self._curr
        while curr is not self._root and ch not in curr.moves:
            curr = curr.link
        self._curr = curr.moves.get(ch, curr)
        return self.is_terminal()


class AhoCorasick:
    """Add words, call build, then scan text with a cursor."""

    def __init__(self) -> None:
        self._root = _Node()
        self._built = False

    def add(self, word: str) -> None:
        curr = self._root
        for ch in word:
            curr = curr.moves.setdefault(ch, _Node())
        curr.terminal = True
        self._built = False

    def build(self) -> None:
        """Compute the suffix links; needed after the last add."""
        root = self._root
        root.link = root
        queue: deque[_Node] = deque()
        for node in root.moves.values():
            node.link = root
            queue.append(node)

        while queue:
            curr = queue.popleft()
            for ch, nxt in curr.moves.items():
                link = curr.link
                while link is not root and ch not in link.moves:
                    link = link.link
                link = link.moves.get(ch, link)
                nxt.link = link
                nxt.terminal = nxt.terminal or link.terminal
                queue.append(nxt)
        self._built = True

    def cursor(self) -> Matcher:
        """A matcher positioned at the start of a text."""
        if not self._built:
            raise RuntimeError("the automaton must be built before matching")
        return Matcher(self._root)