"""A set of disjoint half-open integer intervals."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from sortedcontainers import SortedList


class IntervalSet:
    """Disjoint ``[left, right)`` intervals; touching or overlapping ones merge on add."""

    def __init__(self) -> None:
        self._intervals = SortedList()

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    def add(self, left: int, right: int) -> Optional[Tuple[int, int]]:
        """Insert ``[left, right)`` and return the merged interval holding it."""
        if left > right:
            raise ValueError(f"interval [{left}, {right}) is reversed")
        if left == right:
            return None
        items = self._intervals
        i = items.bisect_left((left, right))
        while i < len(items) and items[i][0] <= right:
            right = max(right, items[i][1])
            del items[i]
        if i > 0 and items[i - 1][1] >= left:
            prev_left, prev_right = items[i - 1]
            left = min(left, prev_left)
            right = max(right, prev_right)
            del items[i - 1]
        items.add((left, right))
        return left, right

    def remove(self, left: int, right: int) -> None:
        """Remove ``[left, right)`` from the set, splitting intervals as needed."""
        if left > right:
            raise ValueError(f"interval [{left}, {right}) is reversed")
        if left == right:
            return
        merged_left, merged_right = self.add(left, right)
        self._intervals.remove((merged_left, merged_right))
        if merged_left != left:
            self._intervals.add((merged_left, left))
        if right != merged_right:
            self._intervals.add((right, merged_right))