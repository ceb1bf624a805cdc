"""Word rectangles: grids whose columns and rows are all dictionary words."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator

_ALPHABET = frozenset(string.ascii_lowercase)


def _check_word(word: str, length: int) -> str:
    if len(word) != length:
        raise ValueError(f"word {word!r} should have length {length}")
    if not set(word) <= _ALPHABET:
        raise ValueError(f"word {word!r} must consist of lower-case letters a-z")
    return word


class Trie:
    """Prefix tree over lower-case Latin words. Node 0 is the root."""

    def __init__(self) -> None:
        self._moves: list[dict[str, int]] = [{}]

    def add(self, word: str) -> int:
        """Add ``word`` and return the index of the node it ends in."""
        _check_word(word, len(word))
        curr = 0
        for ch in word:
            nxt = self._moves[curr].get(ch)
            if nxt is None:
                nxt = len(self._moves)
                self._moves.append({})
                self._moves[curr][ch] = nxt
            curr = nxt
        return curr

    def _move(self, node: int, ch: str) -> int | None:
        return self._moves[node].get(ch)

    def __len__(self) -> int:
        return len(self._moves)


def word_rectangles(
    column_words: Iterable[str], row_words: Iterable[str], height: int, width: int
) -> Iterator[tuple[int, ...]]:
    """Every ``height`` x ``width`` grid of letters whose columns are taken from
    ``column_words`` (each of length ``height``) and whose rows all belong to
    ``row_words`` (each of length ``width``).

    A grid is given as the index into ``column_words`` of each column, left to
    right. A column word may be used more than once.
    """
    if height < 0 or width < 0:
        raise ValueError("grid dimensions must be non-negative")
    columns = [_check_word(word, height) for word in column_words]
    trie = Trie()
    for word in row_words:
        trie.add(_check_word(word, width))

    chosen: list[int] = []

    def extend(states: list[int]) -> Iterator[tuple[int, ...]]:
        if len(chosen) == width:
            yield tuple(chosen)
            return
        for index, word in enumerate(columns):
            following = []
            for state, ch in zip(states, word):
                node = trie._move(state, ch)
                if node is None:
                    break
                following.append(node)
            else:
                chosen.append(index)
                yield from extend(following)
                chosen.pop()

    return extend([0] * height)