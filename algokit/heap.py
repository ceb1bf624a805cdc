"""Binary min-heap with access to positions, using only ``<`` on values."""

from typing import Any


class Heap:
    """A min-heap whose elements may be changed in place and then re-sifted."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        self._items.append(value)
        self.sift_up(len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the smallest element."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        smallest = items.pop()
        if items:
            self.sift_down(0)
        return smallest

    def min(self) -> Any:
        """The smallest element."""
        if not self._items:
            raise IndexError("empty heap has no minimum")
        return self._items[0]

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        """Replace an element; follow with sift_up or sift_down at that position."""
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def _check(self, pos: int) -> None:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} out of range")

    def sift_up(self, pos: int) -> None:
        """Restore order after the element at ``pos`` has decreased."""
        self._check(pos)
        items = self._items
        while pos:
            parent = (pos - 1) // 2
            if not items[pos] < items[parent]:
                break
            items[parent], items[pos] = items[pos], items[parent]
            pos = parent

    def sift_down(self, pos: int) -> None:
        """Restore order after the element at ``pos`` has increased."""
        self._check(pos)
        items = self._items
        n = len(items)
        while True:
            left, right = 2 * pos + 1, 2 * pos + 2
            if left >= n:
                return
            if right >= n:
                if items[left] < items[pos]:
                    items[pos], items[left] = items[left], items[pos]
                return
            if not items[left] < items[pos] and not items[right] < items[pos]:
                return
            if not items[pos] < items[left] and not items[right] < items[left]:
                child = left
            else:
                child = right
            items[pos], items[child] = items[child], items[pos]
            pos = child