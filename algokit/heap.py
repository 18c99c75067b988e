"""A binary heap ordered by a user-supplied comparator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


def _greater(a, b) -> bool:
    return a > b


class Heap(Generic[T]):
    """Binary heap whose top is the element that ``comparator`` prefers.

    ``comparator(a, b)`` returns True when ``a`` belongs above ``b``; the
    default ``a > b`` gives a max-heap.
    """

    def __init__(self, comparator: Callable[[T, T], bool] | None = None) -> None:
        self._items: list[T] = []
        self._above = comparator if comparator is not None else _greater

    def _sift_up(self, node: int) -> None:
        items = self._items
        while node > 0:
            parent = (node - 1) // 2
            if self._above(items[parent], items[node]):
                return
            items[parent], items[node] = items[node], items[parent]
            node = parent

    def insert(self, value: T) -> None:
        """Add ``value`` to the heap."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def top(self) -> T:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def pop(self) -> T:
        """Remove and return the top element."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        value = items[0]
        node = 0
        while True:
            last = len(items) - 1
            if node == last:
                items.pop()
                break
            left = 2 * node + 1
            right = left + 1
            if left > last:
                items[node] = items.pop()
                self._sift_up(node)
                break
            if right > last or self._above(items[left], items[right]):
                child = left
            else:
                child = right
            items[node], items[child] = items[child], items[node]
            node = child
        return value

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)