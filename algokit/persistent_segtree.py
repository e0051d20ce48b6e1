"""Persistent sum segment tree with point assignment."""

from __future__ import annotations

from typing import Iterable


class PersistentSegTree:
    """Sum tree over ``n`` positions where every update yields a new root.

    Node ``0`` is the shared empty node with sum zero.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("tree needs at least one position")
        self._n = n
        self._sum = [0]
        self._left = [0]
        self._right = [0]

    def __len__(self) -> int:
        return self._n

    def _new_node(self, total: int, left: int, right: int) -> int:
        self._sum.append(total)
        self._left.append(left)
        self._right.append(right)
        return len(self._sum) - 1

    def _merge(self, left: int, right: int) -> int:
        return self._new_node(self._sum[left] + self._sum[right], left, right)

    def build(self, init: Iterable[int]) -> int:
        """Build a version from ``init`` and return its root."""
        values = list(init)
        if len(values) != self._n:
            raise ValueError(f"expected {self._n} values, got {len(values)}")
        return self._build(0, self._n - 1, values)

    def _build(self, st: int, en: int, init: list) -> int:
        if st == en:
            return self._new_node(init[st], 0, 0)
        md = (st + en) >> 1
        return self._merge(self._build(st, md, init), self._build(md + 1, en, init))

    def update(self, root: int, idx: int, value: int) -> int:
        """Return the root of a new version with position ``idx`` set to ``value``."""
        if not 0 <= idx < self._n:
            raise IndexError(f"position {idx} out of range for size {self._n}")
        return self._update(root, idx, value, 0, self._n - 1)

    def _update(self, root: int, idx: int, value: int, st: int, en: int) -> int:
        if st == en:
            return self._new_node(value, 0, 0)
        md = (st + en) >> 1
        if idx <= md:
            return self._merge(self._update(self._left[root], idx, value, st, md), self._right[root])
        return self._merge(self._left[root], self._update(self._right[root], idx, value, md + 1, en))

    def query(self, root: int, left: int, right: int) -> int:
        """Sum of positions ``left .. right`` inclusive in the version ``root``."""
        return self._query(root, left, right, 0, self._n - 1)

    def _query(self, root: int, left: int, right: int, st: int, en: int) -> int:
        if right < st or en < left:
            return 0
        if left <= st and en <= right:
            return self._sum[root]
        md = (st + en) >> 1
        return self._query(self._left[root], left, right, st, md) + self._query(
            self._right[root], left, right, md + 1, en
        )