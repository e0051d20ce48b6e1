"""Multiset supporting a global decrement of every element."""

from __future__ import annotations

from sortedcontainers import SortedList


class VeniceSet:
    """Multiset whose elements can all be decreased at once in O(1)."""

    def __init__(self) -> None:
        self._ice = SortedList()
        self._level = 0

    def __len__(self) -> int:
        return len(self._ice)

    def add(self, x: int) -> None:
        """Insert value ``x``."""
        self._ice.add(x + self._level)

    def remove(self, x: int) -> None:
        """Remove one occurrence of value ``x``; ValueError if absent."""
        self._ice.remove(x + self._level)

    def decrement_all(self, x: int) -> None:
        """Decrease every element by ``x``."""
        self._level += x

    def get_min(self) -> int:
        """Smallest current value."""
        if not self._ice:
            raise IndexError("min of an empty set")
        return self._ice[0] - self._level