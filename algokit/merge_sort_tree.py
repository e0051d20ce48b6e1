"""Merge sort tree for order queries on ranges."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class MergeSortTree(Generic[T]):
    """Segment tree whose nodes hold the sorted values of their ranges."""

    def __init__(self, values: Iterable[T]) -> None:
        items = list(values)
        if not items:
            raise ValueError("merge sort tree needs at least one value")
        self._n = len(items)
        self._tree: List[List[T]] = [[] for _ in range(4 * self._n)]
        self._build(1, 0, self._n - 1, items)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, start: int, end: int, items: list) -> None:
        if start == end:
            self._tree[node] = [items[start]]
            return
        mid = (start + end) // 2
        self._build(2 * node, start, mid, items)
        self._build(2 * node + 1, mid + 1, end, items)
        self._tree[node] = list(heapq.merge(self._tree[2 * node], self._tree[2 * node + 1]))

    def _nodes(self, node: int, start: int, end: int, left: int, right: int):
        if start > right or end < left:
            return
        if left <= start and end <= right:
            yield self._tree[node]
            return
        mid = (start + end) // 2
        yield from self._nodes(2 * node, start, mid, left, right)
        yield from self._nodes(2 * node + 1, mid + 1, end, left, right)

    def lower_bound_val(self, left: int, right: int, x: T) -> Optional[T]:
        """Smallest value ``>= x`` among positions ``left .. right``, or None."""
        best: Optional[T] = None
        for values in self._nodes(1, 0, self._n - 1, left, right):
            pos = bisect_left(values, x)
            if pos < len(values) and (best is None or values[pos] < best):
                best = values[pos]
        return best

    def count_less_equal(self, left: int, right: int, x: T) -> int:
        """Number of values ``<= x`` among positions ``left .. right``."""
        return sum(bisect_right(values, x) for values in self._nodes(1, 0, self._n - 1, left, right))