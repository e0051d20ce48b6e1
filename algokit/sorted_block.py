"""Sorted block of an array for sqrt-decomposition value lookups."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from typing import List, Optional, Sequence, Tuple


class SortedBlock:
    """Positions ``left .. right`` of an array kept sorted by value, with a pending add."""

    def __init__(self, values: Sequence[int], left: int, right: int) -> None:
        self.left = left
        self.right = right
        self.add = 0
        self._data: List[Tuple[int, int]] = sorted((values[i], i) for i in range(left, right + 1))

    def intersects(self, ql: int, qr: int) -> bool:
        """Whether ``[ql, qr]`` overlaps the block."""
        return min(self.right, qr) >= max(self.left, ql)

    def covered(self, ql: int, qr: int) -> bool:
        """Whether ``[ql, qr]`` contains the whole block."""
        return ql <= self.left and self.right <= qr

    def make_add(self, ql: int, qr: int, delta: int) -> None:
        """Add ``delta`` to every position of the block inside ``[ql, qr]``."""
        if not self.intersects(ql, qr):
            return
        if self.covered(ql, qr):
            self.add += delta
            return
        self._data = sorted(
            (value + delta, idx) if ql <= idx <= qr else (value, idx) for value, idx in self._data
        )

    def first_index(self, x: int) -> Optional[int]:
        """Smallest position in the block holding value ``x``, or None."""
        x -= self.add
        pos = bisect_left(self._data, (x,))
        if pos == len(self._data) or self._data[pos][0] != x:
            return None
        return self._data[pos][1]

    def last_index(self, x: int) -> Optional[int]:
        """Largest position in the block holding value ``x``, or None."""
        x -= self.add
        pos = bisect_right(self._data, (x, math.inf))
        if pos == 0 or self._data[pos - 1][0] != x:
            return None
        return self._data[pos - 1][1]