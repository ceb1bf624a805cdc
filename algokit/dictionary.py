"""Van Emde Boas-like dictionaries of integers built from 64-bit words."""

from __future__ import annotations

from typing import Optional, Union

from algokit.bits import WORD_BITS, WORD_MASK, hi_pos, lo_pos


class DictionaryLeaf:
    """A set of integers in ``[0, 64)`` held in a single word."""

    def __init__(self) -> None:
        self.bits = 0

    @staticmethod
    def _check(i: int) -> None:
        if not 0 <= i < WORD_BITS:
            raise IndexError(f"{i} out of range for a leaf")

    def set(self, i: int) -> None:
        self._check(i)
        self.bits |= 1 << i

    def clear(self, i: int) -> None:
        self._check(i)
        self.bits &= ~(1 << i) & WORD_MASK

    def get(self, i: int) -> bool:
        self._check(i)
        return bool(self.bits >> i & 1)

    def is_empty(self) -> bool:
        return self.bits == 0

    def min(self) -> Optional[int]:
        return None if self.is_empty() else lo_pos(self.bits)

    def max(self) -> Optional[int]:
        return None if self.is_empty() else hi_pos(self.bits)

    def pred(self, i: int) -> Optional[int]:
        """Largest member less than ``i``."""
        self._check(i)
        bits = self.bits & ((1 << i) - 1)
        return None if bits == 0 else hi_pos(bits)

    def succ(self, i: int) -> Optional[int]:
        """Smallest member greater than ``i``."""
        self._check(i)
        bits = self.bits >> (i + 1)
        return None if bits == 0 else lo_pos(bits) + i + 1


class Dictionary:
    """A set of integers in ``[0, 2 ** log_size)`` as a tree of word-sized nodes."""

    def __init__(self, log_size: int) -> None:
        if log_size <= 6:
            raise ValueError("log_size must be greater than 6")
        self.log_size = log_size
        pow_children = log_size % 6 or 6
        self._pow_block = log_size - pow_children
        self._block_size = 1 << self._pow_block
        self._children: list[Union[Dictionary, DictionaryLeaf, None]] = [None] * (1 << pow_children)
        self._aux = DictionaryLeaf()

    @property
    def capacity(self) -> int:
        return 1 << self.log_size

    def _locate(self, i: int) -> tuple[int, int]:
        if not 0 <= i < self.capacity:
            raise IndexError(f"{i} out of range for a dictionary of size {self.capacity}")
        return divmod(i, self._block_size)

    def _new_child(self) -> Union[Dictionary, DictionaryLeaf]:
        if self._pow_block == 6:
            return DictionaryLeaf()
        return Dictionary(self._pow_block)

    def set(self, i: int) -> None:
        block, offset = self._locate(i)
        child = self._children[block]
        if child is None:
            child = self._children[block] = self._new_child()
        child.set(offset)
        self._aux.set(block)

    def clear(self, i: int) -> None:
        block, offset = self._locate(i)
        child = self._children[block]
        if child is None:
            return
        child.clear(offset)
        if child.is_empty():
            self._aux.clear(block)

    def get(self, i: int) -> bool:
        block, offset = self._locate(i)
        child = self._children[block]
        return child is not None and child.get(offset)

    def is_empty(self) -> bool:
        return self._aux.is_empty()

    def min(self) -> Optional[int]:
        block = self._aux.min()
        if block is None:
            return None
        return self._children[block].min() + block * self._block_size

    def max(self) -> Optional[int]:
        block = self._aux.max()
        if block is None:
            return None
        return self._children[block].max() + block * self._block_size

    def pred(self, i: int) -> Optional[int]:
        """Largest member less than ``i``."""
        block, offset = self._locate(i)
        child = self._children[block]
        if child is not None:
            found = child.pred(offset)
            if found is not None:
                return found + block * self._block_size
        prev = self._aux.pred(block)
        if prev is None:
            return None
        return self._children[prev].max() + prev * self._block_size

    def succ(self, i: int) -> Optional[int]:
        """Smallest member greater than ``i``."""
        block, offset = self._locate(i)
        child = self._children[block]
        if child is not None:
            found = child.succ(offset)
            if found is not None:
                return found + block * self._block_size
        nxt = self._aux.succ(block)
        if nxt is None:
            return None
        return self._children[nxt].min() + nxt * self._block_size